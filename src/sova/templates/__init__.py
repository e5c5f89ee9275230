"""Bundled project templates, one directory per project kind."""
