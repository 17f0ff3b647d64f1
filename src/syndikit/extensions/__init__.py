"""Syndication extension contract, registry and bundled extensions."""

from .adapter import ExtensionAdapter, foreign_namespaces
from .base import ExtensionFactory, ExtensionIdentity, SyndicationExtension
from .comments import TrackbackExtension, WellFormedWebExtension
from .dublin_core import DublinCoreExtension
from .geo import BasicGeocodingExtension
from .history import FeedHistoryExtension
from .itunes import ITunesExtension
from .licensing import CreativeCommonsExtension
from .pheed import PheedExtension
from .publishing import PublishingControlExtension
from .rank import FeedRankExtension
from .registry import ExtensionRegistry
from .site_summary import SiteSummaryUpdateExtension, SlashExtension

BUNDLED_EXTENSIONS: tuple[type[SyndicationExtension], ...] = (
    ITunesExtension,
    PublishingControlExtension,
    PheedExtension,
    FeedHistoryExtension,
    FeedRankExtension,
    DublinCoreExtension,
    SlashExtension,
    SiteSummaryUpdateExtension,
    WellFormedWebExtension,
    BasicGeocodingExtension,
    CreativeCommonsExtension,
    TrackbackExtension,
)


def build_default_registry() -> ExtensionRegistry:
    """Return a registry holding one prototype of every bundled extension."""
    return ExtensionRegistry(extension_type() for extension_type in BUNDLED_EXTENSIONS)


__all__ = [
    "BUNDLED_EXTENSIONS",
    "BasicGeocodingExtension",
    "CreativeCommonsExtension",
    "DublinCoreExtension",
    "ExtensionAdapter",
    "ExtensionFactory",
    "ExtensionIdentity",
    "ExtensionRegistry",
    "FeedHistoryExtension",
    "FeedRankExtension",
    "ITunesExtension",
    "PheedExtension",
    "PublishingControlExtension",
    "SiteSummaryUpdateExtension",
    "SlashExtension",
    "SyndicationExtension",
    "TrackbackExtension",
    "WellFormedWebExtension",
    "build_default_registry",
    "foreign_namespaces",
]
