"""Commands run in a freshly generated project."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class HookError(RuntimeError):
    """A post-generation command could not be run or exited non-zero."""


def go_mod_tidy(project_dir: Path) -> None:
    """Run ``go mod tidy`` in *project_dir*."""
    go = shutil.which("go")
    if go is None:
        raise HookError("'go' was not found on PATH; run 'go mod tidy' manually.")

    logger.debug("Running go mod tidy in %s", project_dir)
    proc = subprocess.run(
        [go, "mod", "tidy"],
        cwd=project_dir,
        capture_output=True,
        text=True,
        check=False,
    )
    if proc.returncode != 0:
        output = (proc.stderr or proc.stdout).strip()
        raise HookError(f"go mod tidy failed (exit {proc.returncode}): {output}")
