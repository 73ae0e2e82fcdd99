"""Tests for sitemapkit.paths — file naming and URL <-> path mapping."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitemapkit.paths import (
    chunk_path,
    detect_document_root,
    filesystem_path,
    normalize_file_path,
    origin,
    public_url,
)


class TestNormalizeFilePath:
    """normalize_file_path — .xml / .xml.gz suffixes."""

    @pytest.mark.parametrize(
        ("name", "gzip", "expected"),
        [
            ("sitemap", False, "sitemap.xml"),
            ("sitemap.xml", False, "sitemap.xml"),
            ("sitemap.xml.gz", False, "sitemap.xml"),
            ("sitemap", True, "sitemap.xml.gz"),
            ("sitemap.xml", True, "sitemap.xml.gz"),
            ("sitemap.gz", True, "sitemap.xml.gz"),
            ("sitemap.news", False, "sitemap.news.xml"),
        ],
    )
    def test_suffixes(self, name: str, gzip: bool, expected: str) -> None:
        assert normalize_file_path(Path("/www") / name, gzip) == Path("/www") / expected

    def test_accepts_strings(self) -> None:
        assert normalize_file_path("/www/map", True) == Path("/www/map.xml.gz")

    def test_relative_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert normalize_file_path("www/map") == tmp_path / "www" / "map.xml"


class TestChunkPath:
    """chunk_path — index prefix on the file name."""

    def test_prefix(self) -> None:
        assert chunk_path(Path("/www/sitemap.xml"), 0) == Path("/www/0_sitemap.xml")

    def test_keeps_compound_extension(self) -> None:
        assert chunk_path("/www/sitemap.xml.gz", 12) == Path("/www/12_sitemap.xml.gz")


class TestPublicUrl:
    """public_url — strip the document root, join with the site origin."""

    def test_file_in_root(self) -> None:
        url = public_url("/var/www/0_sitemap.xml", "/var/www", "https://example.com")
        assert url == "https://example.com/0_sitemap.xml"

    def test_trailing_slashes_collapsed(self) -> None:
        url = public_url("/var/www/maps/1_sitemap.xml", "/var/www/", "https://example.com/")
        assert url == "https://example.com/maps/1_sitemap.xml"

    def test_sibling_directory_not_stripped(self) -> None:
        url = public_url("/var/www2/0_sitemap.xml", "/var/www", "https://example.com")
        assert url == "https://example.com/var/www2/0_sitemap.xml"

    def test_no_document_root(self) -> None:
        url = public_url("/srv/0_sitemap.xml", None, "http://example.com:8080")
        assert url == "http://example.com:8080/srv/0_sitemap.xml"

    def test_relative_file_absolute_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        (tmp_path / "www").mkdir()
        monkeypatch.chdir(tmp_path)
        url = public_url("www/0_sitemap.xml", tmp_path / "www", "https://example.com")
        assert url == "https://example.com/0_sitemap.xml"

    def test_parent_segments_resolved(self, tmp_path: Path) -> None:
        (tmp_path / "www" / "maps").mkdir(parents=True)
        url = public_url(
            tmp_path / "www" / "maps" / ".." / "0_sitemap.xml",
            tmp_path / "www",
            "https://example.com",
        )
        assert url == "https://example.com/0_sitemap.xml"

    def test_symlinked_root(self, tmp_path: Path) -> None:
        (tmp_path / "real").mkdir()
        (tmp_path / "www").symlink_to(tmp_path / "real", target_is_directory=True)
        url = public_url(
            tmp_path / "real" / "0_sitemap.xml", tmp_path / "www", "https://example.com",
        )
        assert url == "https://example.com/0_sitemap.xml"


class TestFilesystemPath:
    """filesystem_path — inverse of public_url."""

    def test_round_trip(self) -> None:
        url = public_url("/var/www/maps/0_sitemap.xml", "/var/www", "https://example.com")
        assert filesystem_path(url, "/var/www") == Path("/var/www/maps/0_sitemap.xml")

    def test_repeated_separators(self) -> None:
        assert filesystem_path("https://example.com//a//b.xml", "/var/www/") == Path(
            "/var/www/a/b.xml"
        )

    def test_no_document_root(self) -> None:
        assert filesystem_path("https://example.com/a.xml", None) == Path("/a.xml")


class TestOrigin:
    def test_scheme_and_host(self) -> None:
        assert origin("https://example.com:8443/a/b/?q=1") == "https://example.com:8443"


class TestDetectDocumentRoot:
    """detect_document_root — DOCUMENT_ROOT environment variable."""

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCUMENT_ROOT", "/var/www")
        assert detect_document_root() == "/var/www"

    def test_unset(self) -> None:
        assert detect_document_root() is None

    def test_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCUMENT_ROOT", "")
        assert detect_document_root() is None
