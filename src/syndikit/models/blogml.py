"""BlogML 2.0 blog archive documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from syndikit.models.base import Extensible


class BlogMLContentType(Enum):
    BASE64 = "base64"
    HTML = "html"
    TEXT = "text"
    XHTML = "xhtml"


class BlogMLPostType(Enum):
    ARTICLE = "article"
    NORMAL = "normal"


class BlogMLApprovalStatus(Enum):
    APPROVED = "true"
    NOT_APPROVED = "false"


@dataclass(slots=True)
class BlogMLTextConstruct(Extensible):
    content: str | None = None
    content_type: BlogMLContentType = BlogMLContentType.TEXT


@dataclass(slots=True)
class BlogMLCommonObject(Extensible):
    """Identity, timestamps, approval and title shared by most BlogML nodes."""

    id: str | None = None
    created_on: datetime | None = None
    modified_on: datetime | None = None
    approval_status: BlogMLApprovalStatus | None = None
    title: BlogMLTextConstruct | None = None


@dataclass(slots=True)
class BlogMLAuthor(BlogMLCommonObject):
    email_address: str | None = None


@dataclass(slots=True)
class BlogMLCategory(BlogMLCommonObject):
    description: str | None = None
    parent_id: str | None = None


@dataclass(slots=True)
class BlogMLComment(BlogMLCommonObject):
    user_name: str | None = None
    user_email_address: str | None = None
    user_url: str | None = None
    content: BlogMLTextConstruct | None = None


@dataclass(slots=True)
class BlogMLTrackback(BlogMLCommonObject):
    url: str | None = None


@dataclass(slots=True)
class BlogMLAttachment(Extensible):
    is_embedded: bool | None = None
    mime_type: str | None = None
    size: int | None = None
    external_uri: str | None = None
    url: str | None = None
    content: str | None = None


@dataclass(slots=True)
class BlogMLPost(BlogMLCommonObject):
    url: str | None = None
    post_type: BlogMLPostType | None = None
    views: int | None = None
    content: BlogMLTextConstruct | None = None
    name: BlogMLTextConstruct | None = None
    excerpt: BlogMLTextConstruct | None = None
    categories: list[str] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)
    comments: list[BlogMLComment] = field(default_factory=list)
    trackbacks: list[BlogMLTrackback] = field(default_factory=list)
    attachments: list[BlogMLAttachment] = field(default_factory=list)


@dataclass(slots=True)
class BlogMLDocument(Extensible):
    version: tuple[int, ...] | None = None
    created_on: datetime | None = None
    root_url: str | None = None
    title: BlogMLTextConstruct | None = None
    subtitle: BlogMLTextConstruct | None = None
    extended_properties: dict[str, str] = field(default_factory=dict)
    authors: list[BlogMLAuthor] = field(default_factory=list)
    categories: list[BlogMLCategory] = field(default_factory=list)
    posts: list[BlogMLPost] = field(default_factory=list)
