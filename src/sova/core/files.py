"""Writes a manifest of rendered templates to a fresh project directory."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from sova.core.config import ParameterSet
from sova.core.errors import DirectoryExistsError, FileWriteError, ScaffoldError
from sova.core.render import render
from sova.core.store import TemplateStore

logger = logging.getLogger(__name__)


def _check_relative(path: str) -> None:
    p = PurePosixPath(path)
    if not path or p.is_absolute() or ".." in p.parts:
        raise ValueError(f"manifest paths must be relative and inside the project, got {path!r}.")


@dataclass(frozen=True)
class FileEntry:
    """
    One output file.

    Attributes:
        destination: Path relative to the project root, POSIX separators.
        sources: Template names concatenated in order to form the file body.
    """

    destination: str
    sources: tuple[str, ...]

    def __post_init__(self) -> None:
        _check_relative(self.destination)
        if not self.sources:
            raise ValueError(f"{self.destination!r} needs at least one template.")


@dataclass(frozen=True)
class Manifest:
    """Static output shape of one project kind."""

    category: str
    directories: tuple[str, ...]
    files: tuple[FileEntry, ...]

    def __post_init__(self) -> None:
        for d in self.directories:
            _check_relative(d)

    @property
    def destinations(self) -> list[str]:
        return [f.destination for f in self.files]


class GenerationState(str, Enum):
    UNSTARTED = "unstarted"
    DIRECTORY_CREATED = "directory-created"
    FILES_WRITTEN = "files-written"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass
class GenerationResult:
    """
    Outcome of one generation run. Always mirrors what is on disk.

    Attributes:
        root: Project root the run targeted.
        state: Terminal state once returned by :func:`generate`.
        directories: Manifest directories created, in order.
        written: Destinations written, in order.
        error: The failure that stopped the run, if any.
        rolled_back: Whether the partial tree was removed after a failure.
    """

    root: Path
    state: GenerationState = GenerationState.UNSTARTED
    directories: list[str] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    error: ScaffoldError | None = None
    rolled_back: bool = False

    @property
    def ok(self) -> bool:
        return self.state is GenerationState.COMPLETE

    def _fail(self, error: ScaffoldError) -> GenerationResult:
        self.state = GenerationState.FAILED
        self.error = error
        return self


def _write_atomic(path: Path, content: str) -> None:
    """Write *content* next to *path* first, then move it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def _render_entry(
    store: TemplateStore, category: str, entry: FileEntry, parameters: ParameterSet
) -> str:
    body = "".join(store.load(category, name) for name in entry.sources)
    return render(body, parameters, template=f"{category}/{'+'.join(entry.sources)}")


def generate(
    manifest: Manifest,
    parameters: ParameterSet,
    project_root: Path,
    *,
    store: TemplateStore | None = None,
    rollback: bool = False,
) -> GenerationResult:
    """
    Materialize *manifest* under *project_root*.

    The root must not exist yet. Files are written one at a time in manifest
    order; the first failure stops the run and the result lists exactly the
    files written before it.

    Args:
        manifest: Directories and file entries to create.
        parameters: Values substituted into every template.
        project_root: Directory to create.
        store: Template catalog; the bundled templates by default.
        rollback: Remove the partial tree when the run fails.

    Returns:
        The generation result. Errors are reported through it, never raised.
    """
    store = store or TemplateStore()
    result = GenerationResult(root=project_root)

    if project_root.exists():
        return result._fail(DirectoryExistsError(project_root))

    try:
        project_root.mkdir(parents=True)
    except FileExistsError:
        return result._fail(DirectoryExistsError(project_root))
    except OSError as e:
        return result._fail(FileWriteError(str(project_root), e))
    result.state = GenerationState.DIRECTORY_CREATED
    logger.debug("Created project root %s", project_root)

    try:
        for directory in manifest.directories:
            try:
                (project_root / directory).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FileWriteError(directory, e) from e
            result.directories.append(directory)
            logger.debug("Created directory %s", directory)

        for entry in manifest.files:
            content = _render_entry(store, manifest.category, entry, parameters)
            try:
                _write_atomic(project_root / entry.destination, content)
            except OSError as e:
                raise FileWriteError(entry.destination, e) from e
            result.written.append(entry.destination)
            result.state = GenerationState.FILES_WRITTEN
            logger.debug("Wrote %s", entry.destination)
    except ScaffoldError as e:
        logger.warning(
            "Generation of %s stopped after %d file(s): %s", project_root, len(result.written), e
        )
        result._fail(e)
        if rollback:
            _rollback(result)
        return result

    result.state = GenerationState.COMPLETE
    logger.info("Generated %d file(s) in %s", len(result.written), project_root)
    return result


def _rollback(result: GenerationResult) -> None:
    try:
        shutil.rmtree(result.root)
    except OSError as e:
        logger.error("Could not remove partial project %s: %s", result.root, e)
        return
    result.rolled_back = True
    result.directories.clear()
    result.written.clear()
    logger.info("Removed partial project %s", result.root)
