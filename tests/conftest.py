"""Shared test fixtures."""

from pathlib import Path

import pytest
from md2web.config import Config, ServerConfig, SiteConfig, StaticConfig


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a small markdown site.

    Layout:
        main.md, guide.md, README.md, notes.txt
        a/main.md, a/one.md, a/sub/deep.md
        secrets/x.md
        static/style.css, static/robots.txt
    """
    root = tmp_path / "site"
    root.mkdir()
    (root / "main.md").write_text("# Home\n\nWelcome.")
    (root / "guide.md").write_text("# Guide\n\nThis is a guide.")
    (root / "README.md").write_text("# Readme\n\nRepository notes.")
    (root / "notes.txt").write_text("not markdown")

    a = root / "a"
    (a / "sub").mkdir(parents=True)
    (a / "main.md").write_text("# A\n\nSection A.")
    (a / "one.md").write_text("# One\n\nFirst page.")
    (a / "sub" / "deep.md").write_text("# Deep\n\nNested page.")

    secrets = root / "secrets"
    secrets.mkdir()
    (secrets / "x.md").write_text("# Secret")

    static = root / "static"
    static.mkdir()
    (static / "style.css").write_text("body { color: red; }")
    (static / "robots.txt").write_text("User-agent: *\nDisallow:\n")
    return root


@pytest.fixture
def test_config(site_dir: Path) -> Config:
    """Create a test configuration serving site_dir."""
    return Config(
        server=ServerConfig(host="localhost", port=8080),
        site=SiteConfig(source_dir=site_dir, exclude=["README.md", "secrets"]),
        static=StaticConfig(),
    )
