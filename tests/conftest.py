"""Shared fixtures for the sova test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

from sova.core.store import TemplateStore

DEMO_TEMPLATES: dict[str, str] = {
    "main.tpl": "package {{ProjectName}}\n",
    "readme.tpl": "# {{ProjectName}}\n\nModule: {{ModulePath}}\n",
    "header.tpl": "services:\n",
    "part-a.tpl": "  a: {{ProjectName}}-a\n",
    "part-b.tpl": "  b: {{ProjectName}}-b\n",
    "broken.tpl": "value: {{Undefined}}\n",
}


@pytest.fixture
def store() -> TemplateStore:
    """The bundled template catalog."""
    return TemplateStore()


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A small store with a single ``demo`` category."""
    root = tmp_path / "templates"
    demo = root / "demo"
    demo.mkdir(parents=True)
    for name, body in DEMO_TEMPLATES.items():
        (demo / name).write_text(body, encoding="utf-8")
    # Directory without an entry template: not a valid category.
    (root / "empty").mkdir()
    return root


@pytest.fixture
def demo_store(template_root: Path) -> TemplateStore:
    return TemplateStore(template_root)


@pytest.fixture
def demo_parameters() -> dict[str, str]:
    return {"ProjectName": "demo", "ModulePath": "github.com/example/demo"}


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes() for p in root.rglob("*") if p.is_file()
    }


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Relative path -> bytes for every file under a directory."""
    return _snapshot
