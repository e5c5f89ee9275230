"""Read-only catalog of project templates grouped by category."""

from __future__ import annotations

import importlib.resources as ilr
import logging
import re
from pathlib import Path, PurePosixPath

from sova.core.errors import (
    InvalidNameError,
    TemplateNotFoundError,
    TemplateReadError,
    UnknownCategoryError,
)

logger = logging.getLogger(__name__)

ENTRY_TEMPLATE = "main.tpl"
"""Every category ships this file; its presence is what makes a category valid."""

TEMPLATE_SUFFIX = ".tpl"

_SEPARATORS = re.compile(r"[\\/]")


def _default_root() -> Path:
    return Path(str(ilr.files("sova.templates")))


def _check_lexical(name: str, *, allow_nested: bool) -> None:
    """Reject names that could address anything outside their category."""
    if not name or not name.strip():
        raise InvalidNameError(name, "name cannot be empty")
    if "\x00" in name:
        raise InvalidNameError(name, "contains a NUL byte")

    parts = _SEPARATORS.split(name)
    if ".." in parts:
        raise InvalidNameError(name, "contains path traversal")
    if PurePosixPath(name).is_absolute() or name.startswith("\\") or re.match(r"^[A-Za-z]:", name):
        raise InvalidNameError(name, "must be a relative name")
    if not allow_nested and len(parts) > 1:
        raise InvalidNameError(name, "categories cannot be nested")
    if any(p in ("", ".") for p in parts):
        raise InvalidNameError(name, "contains an empty path segment")


class TemplateStore:
    """
    Resolves ``(category, name)`` pairs to template files under a fixed root.

    The store is immutable for its lifetime, so resolved paths are cached per
    instance. Lexical traversal checks always run before the filesystem is
    consulted, and the final path is re-checked after symlink resolution.

    Attributes:
        root: Directory holding one sub-directory per template category.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root if root is not None else _default_root()).resolve()
        self._resolved: dict[tuple[str, str], Path] = {}

    def _category_dir(self, category: str) -> Path:
        _check_lexical(category, allow_nested=False)
        path = self.root / category
        if not path.is_dir():
            raise UnknownCategoryError(category)
        return path

    def resolve(self, category: str, name: str) -> Path:
        """Return the path of template *name* in *category*."""
        key = (category, name)
        cached = self._resolved.get(key)
        if cached is not None:
            return cached

        _check_lexical(name, allow_nested=True)
        category_dir = self._category_dir(category)

        path = (category_dir / name).resolve()
        if not path.is_relative_to(self.root):
            raise InvalidNameError(name, "resolves outside the template store")
        if not path.is_file():
            raise TemplateNotFoundError(category, name)

        self._resolved[key] = path
        return path

    def load(self, category: str, name: str) -> str:
        """Resolve a template and return its body."""
        path = self.resolve(category, name)
        logger.debug("Loading template %s/%s", category, name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateReadError(category, name, e) from e

    def validate_category(self, category: str) -> None:
        """Check that *category* names a usable template set."""
        try:
            self.resolve(category, ENTRY_TEMPLATE)
        except TemplateNotFoundError:
            raise UnknownCategoryError(category) from None

    def list_template_keys(self, category: str) -> frozenset[str]:
        """All template names available in *category*."""
        self.validate_category(category)
        category_dir = self.root / category
        return frozenset(
            p.relative_to(category_dir).as_posix()
            for p in category_dir.rglob(f"*{TEMPLATE_SUFFIX}")
            if p.is_file()
        )

    def categories(self) -> list[str]:
        """Sorted names of every valid category in the store."""
        return sorted(
            p.name
            for p in self.root.iterdir()
            if p.is_dir() and (p / ENTRY_TEMPLATE).is_file()
        )
