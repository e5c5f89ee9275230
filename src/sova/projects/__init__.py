"""Project kinds and the generators that declare their output."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Protocol

from sova.core.config import ParameterSet, ProjectOptions
from sova.core.files import GenerationResult, Manifest, generate
from sova.core.store import TemplateStore
from sova.projects import api, cli


class ProjectKind(str, Enum):
    """Available project kinds. Each value is also its template category."""

    API = "api"
    CLI = "cli"

    @property
    def label(self) -> str:
        labels: dict[ProjectKind, str] = {
            ProjectKind.API: "HTTP API",
            ProjectKind.CLI: "Command-line tool",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ProjectKind, str] = {
            ProjectKind.API: "Gin HTTP service with cmd/, internal/, pkg/ and api/ layout.",
            ProjectKind.CLI: "Cobra command-line application with root and version commands.",
        }
        return descriptions[self]


class ProjectGenerator(Protocol):
    """Protocol for project kind modules."""

    CATEGORY: str

    def manifest(self, options: ProjectOptions) -> Manifest: ...

    def parameters(self, options: ProjectOptions) -> ParameterSet: ...


_GENERATORS: dict[ProjectKind, ModuleType] = {
    ProjectKind.API: api,
    ProjectKind.CLI: cli,
}


def get_generator(kind: ProjectKind) -> ProjectGenerator:
    return _GENERATORS[kind]  # type: ignore[return-value]


def generate_project(
    kind: ProjectKind,
    options: ProjectOptions,
    parent: Path = Path("."),
    *,
    store: TemplateStore | None = None,
    rollback: bool = False,
) -> GenerationResult:
    """Generate a *kind* project named ``options.name`` inside *parent*."""
    generator = get_generator(kind)
    return generate(
        generator.manifest(options),
        generator.parameters(options),
        parent / options.name,
        store=store,
        rollback=rollback,
    )


__all__ = ["ProjectGenerator", "ProjectKind", "generate_project", "get_generator"]
