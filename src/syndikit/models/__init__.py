"""Value objects filled by the dialect adapters."""

from .apml import ApmlApplication, ApmlAuthor, ApmlConcept, ApmlDocument, ApmlHead, ApmlProfile, ApmlSource
from .atom import (
    AtomCategory,
    AtomCommonObject,
    AtomContent,
    AtomEntry,
    AtomFeed,
    AtomGenerator,
    AtomLink,
    AtomPersonConstruct,
    AtomSource,
    AtomTextConstruct,
    AtomTextType,
)
from .base import Extensible
from .blogml import (
    BlogMLApprovalStatus,
    BlogMLAttachment,
    BlogMLAuthor,
    BlogMLCategory,
    BlogMLComment,
    BlogMLContentType,
    BlogMLDocument,
    BlogMLPost,
    BlogMLPostType,
    BlogMLTextConstruct,
    BlogMLTrackback,
)
from .opml import OpmlDocument, OpmlHead, OpmlOutline, OpmlOwner, OpmlWindow
from .publishing import AtomCategoryDocument, AtomMemberResources, AtomServiceDocument, AtomWorkspace
from .rsd import RsdApplicationInterface, RsdDocument
from .rss import (
    RssCategory,
    RssChannel,
    RssCloud,
    RssCloudProtocol,
    RssEnclosure,
    RssFeed,
    RssGuid,
    RssImage,
    RssItem,
    RssSource,
    RssTextInput,
    SkipDay,
)

__all__ = [
    "ApmlApplication",
    "ApmlAuthor",
    "ApmlConcept",
    "ApmlDocument",
    "ApmlHead",
    "ApmlProfile",
    "ApmlSource",
    "AtomCategory",
    "AtomCategoryDocument",
    "AtomCommonObject",
    "AtomContent",
    "AtomEntry",
    "AtomFeed",
    "AtomGenerator",
    "AtomLink",
    "AtomMemberResources",
    "AtomPersonConstruct",
    "AtomServiceDocument",
    "AtomSource",
    "AtomTextConstruct",
    "AtomTextType",
    "AtomWorkspace",
    "BlogMLApprovalStatus",
    "BlogMLAttachment",
    "BlogMLAuthor",
    "BlogMLCategory",
    "BlogMLComment",
    "BlogMLContentType",
    "BlogMLDocument",
    "BlogMLPost",
    "BlogMLPostType",
    "BlogMLTextConstruct",
    "BlogMLTrackback",
    "Extensible",
    "OpmlDocument",
    "OpmlHead",
    "OpmlOutline",
    "OpmlOwner",
    "OpmlWindow",
    "RsdApplicationInterface",
    "RsdDocument",
    "RssCategory",
    "RssChannel",
    "RssCloud",
    "RssCloudProtocol",
    "RssEnclosure",
    "RssFeed",
    "RssGuid",
    "RssImage",
    "RssItem",
    "RssSource",
    "RssTextInput",
    "SkipDay",
]
