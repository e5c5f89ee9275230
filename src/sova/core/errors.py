"""Error taxonomy for template resolution and project generation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error surfaced by the generation pipeline."""


class InvalidNameError(ScaffoldError):
    """A template or category name is empty or tries to leave the store."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"invalid template name {name!r}: {reason}")


class UnknownCategoryError(ScaffoldError):
    """The template category has no directory (or no entry file) in the store."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"template category {category!r} does not exist")


class TemplateNotFoundError(ScaffoldError):
    def __init__(self, category: str, name: str) -> None:
        self.category = category
        self.name = name
        super().__init__(f"template {name!r} not found in category {category!r}")


class MissingParameterError(ScaffoldError):
    """A template references parameters that the parameter set does not define."""

    def __init__(self, names: Sequence[str], template: str | None = None) -> None:
        self.names = tuple(names)
        self.template = template
        quoted = ", ".join(repr(n) for n in self.names)
        plural = "s" if len(self.names) > 1 else ""
        where = f" in template {template!r}" if template else ""
        super().__init__(f"missing parameter{plural} {quoted}{where}")


class DirectoryExistsError(ScaffoldError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory {str(path)!r} already exists")


class FileWriteError(ScaffoldError):
    """Wraps a filesystem error with the destination it happened on."""

    def __init__(self, destination: str, cause: OSError) -> None:
        self.destination = destination
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"failed to write {destination!r}: {reason}")


class TemplateReadError(ScaffoldError):
    """A template exists but its body could not be read as UTF-8 text."""

    def __init__(self, category: str, name: str, cause: OSError | UnicodeDecodeError) -> None:
        self.category = category
        self.name = name
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"cannot read template '{category}/{name}': {reason}")
