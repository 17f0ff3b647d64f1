from __future__ import annotations

import json
from pathlib import Path

import pytest

from syndikit.cli.inspect_feed import main as inspect_feed_main

_RSS = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example Channel</title>
    <link>http://example.com/</link>
    <description>News</description>
    <dc:publisher>Example Press</dc:publisher>
    <item><title>One</title></item>
    <item><title>Two</title></item>
    <item><title>Three</title></item>
  </channel>
</rss>
"""


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SYNDIKIT_RETRIEVAL_LIMIT",
        "SYNDIKIT_DETECT_EXTENSIONS",
        "SYNDIKIT_RESOLVE_RELATIVE_URIS",
        "SYNDIKIT_CHARACTER_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)


def test_cli_summarizes_detected_feed(tmp_path: Path, capsys: object) -> None:
    path = tmp_path / "feed.xml"
    path.write_text(_RSS, encoding="utf-8")

    exit_code = inspect_feed_main(["--path", str(path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["format"] == "rss"
    assert payload["version"] == "2.0"
    assert payload["filled"] is True
    assert payload["title"] == "Example Channel"
    assert payload["item_count"] == 3
    assert payload["extensions"]["channel"] == ["Dublin Core Metadata Element Set"]
    assert payload["extensions"]["document"] == []


def test_cli_retrieval_limit_caps_items(tmp_path: Path, capsys: object) -> None:
    path = tmp_path / "feed.xml"
    path.write_text(_RSS, encoding="utf-8")

    exit_code = inspect_feed_main(["--path", str(path), "--retrieval-limit", "2"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["item_count"] == 2


def test_cli_reports_declared_format_mismatch(tmp_path: Path, capsys: object) -> None:
    path = tmp_path / "feed.xml"
    path.write_text(_RSS, encoding="utf-8")

    exit_code = inspect_feed_main(["--path", str(path), "--format", "atom"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 2
    assert payload["filled"] is False
    assert payload["error"] == "Declared format atom does not match detected format rss"


def test_cli_returns_one_for_unrecognized_documents(tmp_path: Path, capsys: object) -> None:
    path = tmp_path / "notes.xml"
    path.write_text("<notes><note>hello</note></notes>", encoding="utf-8")

    exit_code = inspect_feed_main(["--path", str(path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["format"] == "none"
    assert payload["filled"] is False


def test_cli_returns_one_for_unsupported_versions(tmp_path: Path, capsys: object) -> None:
    path = tmp_path / "old.xml"
    path.write_text('<rss version="0.93"><channel><title>Old</title></channel></rss>', encoding="utf-8")

    exit_code = inspect_feed_main(["--path", str(path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["version"] == "0.93"
    assert payload["filled"] is False
    assert "title" not in payload


def test_cli_reports_malformed_and_missing_files(tmp_path: Path, capsys: object) -> None:
    broken = tmp_path / "broken.xml"
    broken.write_text("this is not xml", encoding="utf-8")

    assert inspect_feed_main(["--path", str(broken)]) == 2
    payload = json.loads(capsys.readouterr().out)
    assert payload["path"] == str(broken)
    assert "not well-formed" in payload["error"]

    assert inspect_feed_main(["--path", str(tmp_path / "missing.xml")]) == 2
    assert "error" in json.loads(capsys.readouterr().out)


def test_cli_inspects_standalone_atom_entries(tmp_path: Path, capsys: object) -> None:
    path = tmp_path / "entry.xml"
    path.write_text(
        '<entry xmlns="http://www.w3.org/2005/Atom"><id>urn:e</id><title>Solo</title>'
        "<updated>2005-07-31T12:29:29Z</updated></entry>",
        encoding="utf-8",
    )

    exit_code = inspect_feed_main(["--path", str(path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["format"] == "atom"
    assert payload["title"] == "Solo"
    assert payload["item_count"] == 0


def test_cli_honours_codec_alias_from_environment(
    tmp_path: Path, capsys: object, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "latin.xml"
    path.write_bytes('<rss version="2.0"><channel><title>Café</title></channel></rss>'.encode("latin-1"))
    monkeypatch.setenv("SYNDIKIT_CHARACTER_ENCODING", "latin-1")

    exit_code = inspect_feed_main(["--path", str(path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["title"] == "Café"
