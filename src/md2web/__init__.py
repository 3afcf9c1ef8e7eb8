"""md2web - serve a directory tree of markdown files as a website."""

__version__ = "0.1.0"
