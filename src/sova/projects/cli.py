"""Go command-line application built on cobra."""

from __future__ import annotations

from sova.core.config import ParameterSet, ProjectOptions
from sova.core.files import FileEntry, Manifest
from sova.projects._common import base_parameters, feature_files, feature_requires

CATEGORY = "cli"

COBRA = "github.com/spf13/cobra v1.8.1"

DIRECTORIES: tuple[str, ...] = ("cmd",)

FILES: tuple[FileEntry, ...] = (
    FileEntry("main.go", ("main.tpl",)),
    FileEntry("go.mod", ("go-mod.tpl",)),
    FileEntry("README.md", ("readme.tpl",)),
    FileEntry("cmd/root.go", ("root.tpl",)),
    FileEntry("cmd/version.go", ("version.tpl",)),
    FileEntry(".gitignore", ("gitignore.tpl",)),
)


def manifest(options: ProjectOptions) -> Manifest:
    return Manifest(
        category=CATEGORY,
        directories=DIRECTORIES,
        files=FILES + tuple(feature_files(options.features)),
    )


def parameters(options: ProjectOptions) -> ParameterSet:
    return base_parameters(options, [COBRA, *feature_requires(options.features)])
