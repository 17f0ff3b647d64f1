"""CLI entrypoint that detects a syndication document and prints a fill summary."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
from pathlib import Path
from typing import Any, Callable

from dotenv import load_dotenv

from syndikit.config import LoadSettings
from syndikit.detection import ContentFormat, detect, format_version
from syndikit.dispatch import ResourceDispatcher
from syndikit.errors import DocumentLoadError, FormatMismatchError
from syndikit.models import (
    ApmlDocument,
    AtomCategoryDocument,
    AtomEntry,
    AtomFeed,
    AtomServiceDocument,
    BlogMLDocument,
    OpmlDocument,
    RsdDocument,
    RssFeed,
)
from syndikit.navigation import load_document

load_dotenv()

logger = logging.getLogger(__name__)

_TARGETS: dict[ContentFormat, Callable[[], Any]] = {
    ContentFormat.ATOM: AtomFeed,
    ContentFormat.RSS: RssFeed,
    ContentFormat.OPML: OpmlDocument,
    ContentFormat.APML: ApmlDocument,
    ContentFormat.BLOGML: BlogMLDocument,
    ContentFormat.RSD: RsdDocument,
    ContentFormat.ATOM_SERVICE_DOCUMENT: AtomServiceDocument,
    ContentFormat.ATOM_CATEGORY_DOCUMENT: AtomCategoryDocument,
}


def _extension_names(node: Any) -> list[str]:
    return [extension.name for extension in getattr(node, "extensions", [])]


def _summarize(target: Any) -> dict[str, object]:
    """Pick the title, the main repeating collection and extension names per top-level node."""

    nodes: dict[str, Any] = {"document": target}
    title: object = None
    items: list[Any] = []

    if isinstance(target, RssFeed):
        nodes["channel"] = target.channel
        title = target.channel.title
        items = target.channel.items
    elif isinstance(target, AtomFeed):
        title = target.title.content if target.title else None
        items = target.entries
    elif isinstance(target, AtomEntry):
        title = target.title.content if target.title else None
    elif isinstance(target, (OpmlDocument, ApmlDocument)):
        nodes["head"] = target.head
        title = target.head.title
        items = target.outlines if isinstance(target, OpmlDocument) else target.profiles
    elif isinstance(target, BlogMLDocument):
        title = target.title.content if target.title else None
        items = target.posts
    elif isinstance(target, RsdDocument):
        title = target.engine_name
        items = target.interfaces
    elif isinstance(target, AtomServiceDocument):
        items = target.workspaces
    elif isinstance(target, AtomCategoryDocument):
        items = target.categories

    return {
        "title": title,
        "item_count": len(items),
        "extensions": {name: _extension_names(node) for name, node in nodes.items()},
    }


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    parser = argparse.ArgumentParser(description="Detect a syndication document and summarize its contents")
    parser.add_argument("--path", required=True, help="Feed or document file to inspect")
    parser.add_argument(
        "--format",
        choices=[item.value for item in _TARGETS],
        default=None,
        help="Declared format; defaults to the detected one",
    )
    parser.add_argument("--retrieval-limit", type=int, default=None, help="Maximum repeating items to load")
    args = parser.parse_args(argv)

    source_path = Path(args.path)
    try:
        settings = LoadSettings.from_env()
        if args.retrieval_limit is not None:
            settings = replace(settings, retrieval_limit=args.retrieval_limit)
        document = load_document(source_path, encoding=settings.character_encoding)
    except (DocumentLoadError, OSError, ValueError) as exc:
        print(json.dumps({"path": str(source_path), "error": str(exc)}, ensure_ascii=True, indent=2))
        return 2

    metadata = detect(document)
    declared = ContentFormat(args.format) if args.format else metadata.format
    payload: dict[str, object] = {
        "path": str(source_path),
        "format": metadata.format.value,
        "version": format_version(metadata.version),
        "filled": False,
    }

    if declared is ContentFormat.NONE:
        logger.warning("Unrecognized document root %r", metadata.root_name)
        print(json.dumps(payload, ensure_ascii=True, indent=2))
        return 1

    target = AtomEntry() if declared is ContentFormat.ATOM and metadata.root_name == "entry" else _TARGETS[declared]()
    try:
        outcome = ResourceDispatcher(document, settings).fill(target, declared)
    except FormatMismatchError as exc:
        payload["error"] = str(exc)
        print(json.dumps(payload, ensure_ascii=True, indent=2))
        return 2

    payload["filled"] = outcome.filled
    if outcome.filled:
        payload.update(_summarize(target))
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0 if outcome.filled else 1


if __name__ == "__main__":
    raise SystemExit(main())
