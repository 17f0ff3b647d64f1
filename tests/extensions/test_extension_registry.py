from __future__ import annotations

import threading

import pytest

from syndikit.extensions import (
    BUNDLED_EXTENSIONS,
    DublinCoreExtension,
    ExtensionRegistry,
    ITunesExtension,
    build_default_registry,
)


def test_default_registry_holds_one_prototype_per_bundled_extension() -> None:
    registry = build_default_registry()

    assert len(registry) == len(BUNDLED_EXTENSIONS)
    for extension_type in BUNDLED_EXTENSIONS:
        assert extension_type in registry


def test_lookup_matches_by_namespace_uri() -> None:
    registry = build_default_registry()

    matches = registry.lookup("http://purl.org/dc/elements/1.1/")

    assert [type(prototype) for prototype in matches] == [DublinCoreExtension]
    assert registry.lookup("urn:x") == ()


def test_register_replaces_prototype_of_same_type() -> None:
    first = DublinCoreExtension()
    second = DublinCoreExtension()
    registry = ExtensionRegistry([first, ITunesExtension()])

    registry.register(second)

    assert len(registry) == 2
    assert registry.snapshot()[0] is second


def test_unregister_reports_whether_anything_was_removed() -> None:
    registry = ExtensionRegistry([DublinCoreExtension()])

    assert registry.unregister(DublinCoreExtension) is True
    assert registry.unregister(DublinCoreExtension) is False
    assert len(registry) == 0


def test_register_rejects_missing_or_foreign_prototypes() -> None:
    registry = ExtensionRegistry()

    with pytest.raises(ValueError, match="cannot be None"):
        registry.register(None)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="matches"):
        registry.register(object())  # type: ignore[arg-type]


def test_snapshot_is_unaffected_by_later_writes() -> None:
    registry = ExtensionRegistry([DublinCoreExtension()])
    snapshot = registry.snapshot()

    registry.register(ITunesExtension())
    registry.unregister(DublinCoreExtension)

    assert [type(prototype) for prototype in snapshot] == [DublinCoreExtension]
    assert [type(prototype) for prototype in registry] == [ITunesExtension]


def test_concurrent_lookups_and_writes_never_see_partial_state() -> None:
    registry = build_default_registry()
    errors: list[BaseException] = []
    stop = threading.Event()

    def reader() -> None:
        try:
            while not stop.is_set():
                found = registry.lookup("http://purl.org/dc/elements/1.1/")
                assert len(found) <= 1
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    def writer() -> None:
        for _ in range(500):
            registry.unregister(DublinCoreExtension)
            registry.register(DublinCoreExtension())

    readers = [threading.Thread(target=reader) for _ in range(4)]
    writers = [threading.Thread(target=writer) for _ in range(2)]
    for thread in readers + writers:
        thread.start()
    for thread in writers:
        thread.join()
    stop.set()
    for thread in readers:
        thread.join()

    assert errors == []
    assert DublinCoreExtension in registry
    assert len(registry) == len(BUNDLED_EXTENSIONS)
