"""Tests for template resolution and path validation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sova.core.errors import (
    InvalidNameError,
    TemplateNotFoundError,
    TemplateReadError,
    UnknownCategoryError,
)
from sova.core.store import TemplateStore

TRAVERSAL_NAMES = [
    "../../etc/passwd",
    "..",
    "../cli/main.tpl",
    "sub/../../main.tpl",
    "..\\..\\windows\\win.ini",
]


class TestResolve:
    def test_bundled_cli_entry(self, store: TemplateStore) -> None:
        path = store.resolve("cli", "main.tpl")
        assert path.is_file()
        assert path.is_relative_to(store.root)

    @pytest.mark.parametrize("name", TRAVERSAL_NAMES)
    def test_traversal_rejected(self, store: TemplateStore, name: str) -> None:
        with pytest.raises(InvalidNameError):
            store.resolve("cli", name)

    @pytest.mark.parametrize("name", TRAVERSAL_NAMES)
    def test_traversal_rejected_before_touching_disk(self, tmp_path: Path, name: str) -> None:
        # The root does not exist, so any filesystem lookup would report the
        # category as unknown instead.
        missing = TemplateStore(tmp_path / "nowhere")
        with pytest.raises(InvalidNameError):
            missing.resolve("cli", name)

    @pytest.mark.parametrize("category", ["../cli", "..", "cli/..", "cli/sub", "/etc", "."])
    def test_bad_category_rejected(self, store: TemplateStore, category: str) -> None:
        with pytest.raises(InvalidNameError):
            store.resolve(category, "main.tpl")

    @pytest.mark.parametrize("name", ["", "   ", "/etc/passwd", "C:\\evil.tpl", "a//b.tpl"])
    def test_malformed_names_rejected(self, store: TemplateStore, name: str) -> None:
        with pytest.raises(InvalidNameError):
            store.resolve("cli", name)

    def test_unknown_category(self, store: TemplateStore) -> None:
        with pytest.raises(UnknownCategoryError) as exc:
            store.resolve("bogus", "main.tpl")
        assert exc.value.category == "bogus"

    def test_missing_template(self, store: TemplateStore) -> None:
        with pytest.raises(TemplateNotFoundError) as exc:
            store.resolve("cli", "nonexistent.tpl")
        assert "nonexistent.tpl" in str(exc.value)

    def test_symlink_escape_rejected(self, tmp_path: Path, template_root: Path) -> None:
        outside = tmp_path / "secret.tpl"
        outside.write_text("secret", encoding="utf-8")
        os.symlink(outside, template_root / "demo" / "link.tpl")

        with pytest.raises(InvalidNameError):
            TemplateStore(template_root).resolve("demo", "link.tpl")

    def test_resolution_is_cached(self, demo_store: TemplateStore) -> None:
        first = demo_store.resolve("demo", "main.tpl")
        assert demo_store.resolve("demo", "main.tpl") is first

    def test_load_returns_body(self, store: TemplateStore) -> None:
        assert "{{ModulePath}}" in store.load("cli", "main.tpl")

    def test_load_non_utf8_raises_read_error(
        self, template_root: Path, demo_store: TemplateStore
    ) -> None:
        (template_root / "demo" / "binary.tpl").write_bytes(b"\xff\xfe")
        with pytest.raises(TemplateReadError, match="demo/binary.tpl"):
            demo_store.load("demo", "binary.tpl")


class TestCategories:
    def test_list_template_keys(self, demo_store: TemplateStore) -> None:
        keys = demo_store.list_template_keys("demo")
        assert keys == {
            "main.tpl",
            "readme.tpl",
            "header.tpl",
            "part-a.tpl",
            "part-b.tpl",
            "broken.tpl",
        }

    def test_list_template_keys_bundled(self, store: TemplateStore) -> None:
        keys = store.list_template_keys("cli")
        assert {"main.tpl", "root.tpl", "version.tpl", "go-mod.tpl"} <= keys

    def test_category_without_entry_template(self, demo_store: TemplateStore) -> None:
        with pytest.raises(UnknownCategoryError):
            demo_store.list_template_keys("empty")

    def test_list_unknown_category(self, store: TemplateStore) -> None:
        with pytest.raises(UnknownCategoryError):
            store.list_template_keys("nonexistent")

    @pytest.mark.parametrize(
        ("category", "error"),
        [
            ("", InvalidNameError),
            ("../invalid", InvalidNameError),
            ("nonexistent", UnknownCategoryError),
        ],
    )
    def test_validate_category_errors(
        self, store: TemplateStore, category: str, error: type[Exception]
    ) -> None:
        with pytest.raises(error):
            store.validate_category(category)

    def test_validate_category_ok(self, store: TemplateStore) -> None:
        store.validate_category("cli")
        store.validate_category("api")

    def test_bundled_categories(self, store: TemplateStore) -> None:
        assert store.categories() == ["api", "cli"]

    def test_custom_categories_skip_invalid(self, demo_store: TemplateStore) -> None:
        assert demo_store.categories() == ["demo"]
