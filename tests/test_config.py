"""Tests for configuration loading."""

from pathlib import Path

import pytest
from md2web.config import Config, ServerConfig, SiteConfig, StaticConfig


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "md2web.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000
cache_max_age = 0

[site]
source_dir = "pages"
title = "Notes"
exclude = ["README.md", "drafts"]
template = "page.html"

[static]
dir = "assets"
prefix = "/assets"
subdomain = "cdn"
placeholder = "{{ cdn }}"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.server.cache_max_age == 0
        assert config.site.source_dir == tmp_path / "pages"
        assert config.site.title == "Notes"
        assert config.site.exclude == ["README.md", "drafts"]
        assert config.site.template == tmp_path / "page.html"
        assert config.static.dir == "assets"
        assert config.static.prefix == "/assets"
        assert config.static.subdomain == "cdn"
        assert config.static.url is None
        assert config.static.placeholder == "{{ cdn }}"
        assert config.static_dir == tmp_path / "pages" / "assets"
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "md2web.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.server.cache_max_age == 3600
        assert config.site.source_dir == tmp_path
        assert config.site.exclude == ["README.md"]
        assert config.site.template is None
        assert config.static == StaticConfig()

    def test__missing_explicit_path__raises(self, tmp_path: Path) -> None:
        """Raise when the given config file doesn't exist."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "missing.toml")

    def test__no_config_found__uses_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Fall back to defaults when discovery finds nothing."""
        monkeypatch.setattr(Config, "_discover_config", classmethod(lambda cls: None))

        config = Config.load()

        assert config.server == ServerConfig()
        assert config.site == SiteConfig()
        assert config.config_path is None

    def test__discovers_config_in_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Find md2web.toml in a parent of the working directory."""
        config_file = tmp_path / "md2web.toml"
        config_file.write_text('[site]\ntitle = "Found"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config.load()

        assert config.config_path == config_file
        assert config.site.title == "Found"


class TestConfigValidation:
    """Tests for invalid configuration values."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ("[server]\ncache_max_age = -1", "server.cache_max_age must not be negative"),
            ("server = 1", "server section must be a dictionary"),
            ('[site]\nexclude = "README.md"', "site.exclude must be a list"),
            ("[site]\nexclude = [1]", "site.exclude items must be strings"),
            ("[site]\nsource_dir = 1", "site.source_dir must be a string"),
            ("[static]\nsubdomain = 1", "static.subdomain must be a string"),
            ('[static]\ndir = "a/b"', "static.dir must be a single folder name"),
            ("[server\n", "Invalid TOML"),
        ],
    )
    def test__invalid_value__raises(self, tmp_path: Path, content: str, message: str) -> None:
        """Reject values of the wrong type with a message naming the key."""
        config_file = tmp_path / "md2web.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides__applied_without_mutation(self, tmp_path: Path) -> None:
        """Apply CLI values to a copy."""
        original = Config(server=ServerConfig(), site=SiteConfig(), static=StaticConfig())

        config = original.with_overrides(
            host="example.com",
            port=80,
            source_dir=tmp_path,
            exclude=["drafts"],
            static_subdomain="cdn",
        )

        assert config.server.host == "example.com"
        assert config.server.port == 80
        assert config.site.source_dir == tmp_path
        assert config.site.exclude == ["README.md", "drafts"]
        assert config.static.subdomain == "cdn"
        assert original.server.host == "127.0.0.1"
        assert original.site.exclude == ["README.md"]

    def test__none_values__keep_config(self) -> None:
        """Leave values alone when no override is given."""
        original = Config(server=ServerConfig(port=9000), site=SiteConfig(), static=StaticConfig())

        config = original.with_overrides()

        assert config == original
