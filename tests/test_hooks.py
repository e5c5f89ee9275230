"""Tests for post-generation commands."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from sova.cli import _hooks
from sova.cli._hooks import HookError, go_mod_tidy


class TestGoModTidy:
    def test_missing_go_binary(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(_hooks.shutil, "which", lambda _: None)

        with pytest.raises(HookError, match="not found"):
            go_mod_tidy(tmp_path)

    def test_runs_in_project_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(_hooks.shutil, "which", lambda _: "/usr/bin/go")
        run = MagicMock(return_value=subprocess.CompletedProcess([], 0, "", ""))
        monkeypatch.setattr(_hooks.subprocess, "run", run)

        go_mod_tidy(tmp_path)

        args, kwargs = run.call_args
        assert args[0] == ["/usr/bin/go", "mod", "tidy"]
        assert kwargs["cwd"] == tmp_path

    def test_failure_includes_output(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(_hooks.shutil, "which", lambda _: "/usr/bin/go")
        failed = subprocess.CompletedProcess([], 1, "", "go: missing go.sum entry\n")
        monkeypatch.setattr(_hooks.subprocess, "run", MagicMock(return_value=failed))

        with pytest.raises(HookError, match="missing go.sum entry"):
            go_mod_tidy(tmp_path)
