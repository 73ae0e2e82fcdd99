"""Tests for sitemapkit.config and sitemapkit.config_loader."""

from pathlib import Path

import pytest

from sitemapkit._errors import ConfigError
from sitemapkit.config import DEFAULT_MAX_BYTES, DEFAULT_MAX_URLS, SitemapConfig
from sitemapkit.config_loader import load_config


class TestSitemapConfig:
    """SitemapConfig — frozen dataclass with protocol defaults."""

    def test_defaults(self) -> None:
        config = SitemapConfig(path=Path("sitemap.xml"))
        assert config.gzip is False
        assert config.document_root is None
        assert config.read is True
        assert config.max_urls == DEFAULT_MAX_URLS == 50_000
        assert config.max_bytes == DEFAULT_MAX_BYTES == 10_485_760

    def test_frozen(self) -> None:
        config = SitemapConfig(path=Path("sitemap.xml"))
        with pytest.raises(AttributeError):
            config.gzip = True  # type: ignore[misc]

    def test_strings_become_paths(self) -> None:
        config = SitemapConfig(path="sitemap.xml", document_root="/var/www")  # type: ignore[arg-type]
        assert config.path == Path("sitemap.xml")
        assert config.document_root == Path("/var/www")

    @pytest.mark.parametrize("field", ["max_urls", "max_bytes"])
    def test_limits_must_be_positive(self, field: str) -> None:
        with pytest.raises(ConfigError, match=field):
            SitemapConfig(path=Path("sitemap.xml"), **{field: 0})


class TestLoadConfig:
    """load_config — sitemapkit.yaml/.toml merged with overrides."""

    def test_overrides_only(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, path="sitemap.xml")
        assert config.path == tmp_path / "sitemap.xml"
        assert config.gzip is False

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="No sitemap path"):
            load_config(tmp_path)

    def test_yaml_section(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.yaml").write_text(
            "sitemap:\n"
            "  path: public/sitemap\n"
            "  gzip: true\n"
            "  document_root: public\n"
            "  max_urls: 1000\n"
            "unrelated: 1\n"
        )
        config = load_config(tmp_path)
        assert config.path == tmp_path / "public" / "sitemap"
        assert config.gzip is True
        assert config.document_root == tmp_path / "public"
        assert config.max_urls == 1000

    def test_yaml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.yml").write_text("path: /srv/www/sitemap.xml\nread: false\n")
        config = load_config(tmp_path)
        assert config.path == Path("/srv/www/sitemap.xml")
        assert config.read is False

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.toml").write_text(
            '[sitemap]\npath = "sitemap"\nmax_urls = 250\n'
        )
        config = load_config(tmp_path)
        assert config.path == tmp_path / "sitemap"
        assert config.max_urls == 250

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.yaml").write_text("path: a.xml\nmax_urls: 10\n")
        config = load_config(tmp_path, path="b.xml", max_urls=20)
        assert config.path == tmp_path / "b.xml"
        assert config.max_urls == 20

    def test_numeric_strings_accepted(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.yaml").write_text("path: a.xml\nmax_urls: '300'\n")
        assert load_config(tmp_path).max_urls == 300

    @pytest.mark.parametrize(
        "content",
        [
            "path: a.xml\nmax_urls: lots\n",
            "path: a.xml\ngzip: maybe\n",
            "- just\n- a list\n",
            "path: [unclosed\n",
        ],
    )
    def test_invalid_files(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "sitemapkit.yaml").write_text(content)
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.toml").write_text("path = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapkit.yaml").write_text("path: from-yaml.xml\n")
        (tmp_path / "sitemapkit.toml").write_text('path = "from-toml.xml"\n')
        assert load_config(tmp_path).path.name == "from-yaml.xml"
