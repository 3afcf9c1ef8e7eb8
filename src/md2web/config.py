"""Configuration management for md2web.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "md2web.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080
    cache_max_age: int = 3600


@dataclass
class SiteConfig:
    """Markdown site configuration."""

    source_dir: Path = field(default_factory=lambda: Path("."))
    title: str = "md2web"
    exclude: list[str] = field(default_factory=lambda: ["README.md"])
    template: Path | None = None


@dataclass
class StaticConfig:
    """Static asset configuration."""

    dir: str = "static"
    prefix: str = "/static"
    subdomain: str | None = None
    url: str | None = None
    placeholder: str = "{{ static }}"


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    static: StaticConfig
    config_path: Path | None = None

    @property
    def static_dir(self) -> Path:
        """Static asset folder on disk."""
        return self.site.source_dir / self.static.dir

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for md2web.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            site=SiteConfig(),
            static=StaticConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site"), config_dir),
            static=cls._parse_static(data.get("static")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        cache_max_age = data.get("cache_max_age", 3600)
        if not isinstance(cache_max_age, int) or isinstance(cache_max_age, bool):
            raise ValueError("server.cache_max_age must be an integer")
        if cache_max_age < 0:
            raise ValueError("server.cache_max_age must not be negative")

        return ServerConfig(host=host, port=port, cache_max_age=cache_max_age)

    @classmethod
    def _parse_site(cls, data: object, config_dir: Path) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig(source_dir=config_dir)

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        source_dir = data.get("source_dir", ".")
        if not isinstance(source_dir, str):
            raise ValueError("site.source_dir must be a string")

        title = data.get("title", "md2web")
        if not isinstance(title, str):
            raise ValueError("site.title must be a string")

        exclude_raw = data.get("exclude", ["README.md"])
        if not isinstance(exclude_raw, list):
            raise ValueError("site.exclude must be a list")
        exclude: list[str] = []
        for item in exclude_raw:
            if not isinstance(item, str):
                raise ValueError("site.exclude items must be strings")
            exclude.append(item)

        template = data.get("template", "")
        if not isinstance(template, str):
            raise ValueError("site.template must be a string")

        return SiteConfig(
            source_dir=config_dir / source_dir,
            title=title,
            exclude=exclude,
            template=config_dir / template if template else None,
        )

    @classmethod
    def _parse_static(cls, data: object) -> StaticConfig:
        """Parse static configuration section.

        Empty strings for subdomain and url mean "not set".
        """
        if data is None:
            return StaticConfig()

        if not isinstance(data, dict):
            raise ValueError("static section must be a dictionary")

        values: dict[str, str] = {}
        for key, default in (
            ("dir", "static"),
            ("prefix", "/static"),
            ("subdomain", ""),
            ("url", ""),
            ("placeholder", "{{ static }}"),
        ):
            value = data.get(key, default)
            if not isinstance(value, str):
                raise ValueError(f"static.{key} must be a string")
            values[key] = value

        if not values["dir"] or "/" in values["dir"]:
            raise ValueError("static.dir must be a single folder name")

        return StaticConfig(
            dir=values["dir"],
            prefix=values["prefix"],
            subdomain=values["subdomain"] or None,
            url=values["url"] or None,
            placeholder=values["placeholder"],
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        exclude: list[str] | None = None,
        static_subdomain: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. Excludes are
        added to the configured ones rather than replacing them.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override site.source_dir
            exclude: Extra names for site.exclude
            static_subdomain: Override static.subdomain

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if source_dir is not None:
            site = replace(site, source_dir=source_dir)
        if exclude:
            site = replace(site, exclude=[*site.exclude, *exclude])

        static = self.static
        if static_subdomain is not None:
            static = replace(self.static, subdomain=static_subdomain or None)

        return replace(self, server=server, site=site, static=static)
