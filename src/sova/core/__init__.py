"""Template resolution, rendering and file generation."""

from sova.core.config import (
    Features,
    ParameterSet,
    ParameterValue,
    ProjectOptions,
    freeze,
)
from sova.core.errors import (
    DirectoryExistsError,
    FileWriteError,
    InvalidNameError,
    MissingParameterError,
    ScaffoldError,
    TemplateNotFoundError,
    TemplateReadError,
    UnknownCategoryError,
)
from sova.core.files import (
    FileEntry,
    GenerationResult,
    GenerationState,
    Manifest,
    generate,
)
from sova.core.render import render
from sova.core.store import TemplateStore

__all__ = [
    "DirectoryExistsError",
    "Features",
    "FileEntry",
    "FileWriteError",
    "GenerationResult",
    "GenerationState",
    "InvalidNameError",
    "Manifest",
    "MissingParameterError",
    "ParameterSet",
    "ParameterValue",
    "ProjectOptions",
    "ScaffoldError",
    "TemplateNotFoundError",
    "TemplateReadError",
    "TemplateStore",
    "UnknownCategoryError",
    "freeze",
    "generate",
    "render",
]
