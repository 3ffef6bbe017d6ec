from pathlib import Path

from navmap.config import ParserConfig
from navmap.parsers.pdf_parser import PdfParser
from navmap.parsers.registry import (
    UNSUPPORTED_FILE,
    find_parser,
    parse_navigation_bytes,
    parse_navigation_file,
)
from navmap.parsers.text_parser import TextParser


def test_find_parser_by_suffix() -> None:
    assert isinstance(find_parser(Path("map.PDF")), PdfParser)
    for name in ("nav.csv", "nav.tsv", "nav.txt", "nav.md"):
        assert isinstance(find_parser(Path(name)), TextParser)
    assert find_parser(Path("diagram.png")) is None


def test_parse_text_file(tmp_path: Path) -> None:
    path = tmp_path / "nav.csv"
    path.write_text("\ufeffAbout Us,News\nOur Team,Latest\n", encoding="utf-8")
    result = parse_navigation_file(path)
    assert result.error is None
    about, news = result.config.primary_items
    assert about.label == "About Us"
    assert about.href == "/about-us"
    assert [c.label for c in news.children] == ["Latest"]


def test_parser_config_is_applied(tmp_path: Path) -> None:
    path = tmp_path / "nav.md"
    path.write_text("- About Us\n  - Our Team\n", encoding="utf-8")
    result = parse_navigation_file(path, ParserConfig(logo_text="Hospice"))
    assert result.config.logo_text == "Hospice"
    assert [c.label for c in result.config.primary_items[0].children] == ["Our Team"]


def test_images_and_unknown_files_are_unsupported(tmp_path: Path) -> None:
    path = tmp_path / "diagram.png"
    path.write_bytes(b"\x89PNG\r\n")
    result = parse_navigation_file(path)
    assert result.error == UNSUPPORTED_FILE
    assert result.config.primary_items == []


def test_missing_text_file_is_reported(tmp_path: Path) -> None:
    result = parse_navigation_file(tmp_path / "absent.txt")
    assert result.error is not None
    assert result.error.startswith("Could not read absent.txt")


def test_bytes_dispatch_by_filename() -> None:
    result = parse_navigation_bytes(b"About Us\tNews", "menu.tsv")
    assert [i.label for i in result.config.primary_items] == ["About Us", "News"]


def test_bytes_dispatch_by_content_type() -> None:
    result = parse_navigation_bytes(b"About Us\n  Team", "download", content_type="text/plain; charset=utf-8")
    assert [c.label for c in result.config.primary_items[0].children] == ["Team"]

    result = parse_navigation_bytes(b"not a pdf", "", content_type="application/pdf")
    assert result.error is not None
    assert result.error.startswith("Failed to parse PDF")


def test_bytes_unknown_type() -> None:
    result = parse_navigation_bytes(b"GIF89a", "map.gif", content_type="image/gif")
    assert result.error == UNSUPPORTED_FILE
