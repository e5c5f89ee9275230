"""Typer CLI application for sova."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import sova
from sova.cli._hooks import HookError, go_mod_tidy
from sova.cli._logging import configure_logging
from sova.cli._prompts import prompt_features, prompt_project_kind, prompt_project_name
from sova.core.config import DEFAULT_GO_VERSION, Features, ProjectOptions
from sova.core.errors import DirectoryExistsError, UnknownCategoryError
from sova.core.store import TemplateStore
from sova.projects import ProjectKind, generate_project, get_generator

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """sova: scaffolding tool for Go API and CLI projects."""


_NEXT_STEPS: dict[ProjectKind, list[str]] = {
    ProjectKind.API: ["go mod tidy", "go run ."],
    ProjectKind.CLI: ["go mod tidy", "go run . --help"],
}


def _error(message: str, code: int) -> Exit:
    _console.print(f"[bold red]Error:[/] {escape(message)}", soft_wrap=True)
    return Exit(code=code)


def _echo_choice(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(answer)}")
    _console.print("[dim]│[/]")


def _check_free(project_dir: Path) -> None:
    if project_dir.exists():
        raise _error(str(DirectoryExistsError(project_dir)), 1)


def _options(name: str, module: str | None, go_version: str) -> ProjectOptions:
    try:
        return ProjectOptions(name=name, module=module, go_version=go_version)
    except ValueError as e:
        raise _error(str(e), 2) from None


def _parse_kind(kind_str: str) -> ProjectKind:
    try:
        return ProjectKind(kind_str)
    except ValueError:
        valid = ", ".join(f"'{k.value}'" for k in ProjectKind)
        _console.print(
            f"[bold red]Error:[/] unsupported project type: [bold]{escape(kind_str)}[/]"
        )
        _console.print(f"[dim]Valid values:[/] {valid}")
        raise Exit(code=2) from None


@app.command()
def init(
    project: Annotated[
        str | None,
        Argument(help="Name (or path) of the new project directory", show_default=False),
    ] = None,
    kind_str: Annotated[
        str | None,
        Option("--type", "-t", help="Project type: api or cli.", show_default=False),
    ] = None,
    use_zap: Annotated[
        bool | None, Option("--use-zap/--no-use-zap", help="Use zap logger")
    ] = None,
    use_postgres: Annotated[
        bool | None, Option("--use-postgres/--no-use-postgres", help="Use PostgreSQL")
    ] = None,
    use_redis: Annotated[
        bool | None, Option("--use-redis/--no-use-redis", help="Use Redis")
    ] = None,
    use_rabbitmq: Annotated[
        bool | None, Option("--use-rabbitmq/--no-use-rabbitmq", help="Use RabbitMQ")
    ] = None,
    module: Annotated[
        str | None,
        Option(
            "--module",
            "-m",
            help="Go module path (default: github.com/example/<name>).",
            show_default=False,
        ),
    ] = None,
    go_version: Annotated[
        str, Option("--go-version", help="Go version written to go.mod")
    ] = DEFAULT_GO_VERSION,
    rollback: Annotated[
        bool, Option("--rollback", help="Remove the partial project if generation fails.")
    ] = False,
    tidy: Annotated[
        bool, Option("--tidy/--no-tidy", help="Run 'go mod tidy' after generation.")
    ] = False,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log every step.")] = False,
) -> None:
    """Initialize a new Go project."""
    configure_logging(verbose)

    kind = _parse_kind(kind_str) if kind_str is not None else None

    if project is not None:
        _check_free(Path(project))

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  sova v{sova.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing options
    if project is None:
        project = prompt_project_name()
        _check_free(Path(project))
    else:
        _echo_choice("What is the name of your project?", project)
    project_dir = Path(project)
    options = _options(project_dir.name, module, go_version)

    if kind is None:
        kind = prompt_project_kind()
    else:
        _echo_choice("What kind of project?", f"{kind.label} ({kind.value})")

    toggles = (use_zap, use_postgres, use_redis, use_rabbitmq)
    if all(t is None for t in toggles):
        features = prompt_features()
    else:
        features = Features(
            zap=bool(use_zap),
            postgres=bool(use_postgres),
            redis=bool(use_redis),
            rabbitmq=bool(use_rabbitmq),
        )
        enabled = [n for n, on in zip(("zap", "postgres", "redis", "rabbitmq"), toggles) if on]
        _echo_choice("Optional components", ", ".join(enabled) or "none")

    options = replace(options, features=features)

    # Render
    _console.print(f"[bold green]◇[/]  Creating {escape(str(project_dir))}/...")

    result = generate_project(kind, options, project_dir.parent, rollback=rollback)

    for name in result.written:
        _console.print(f"[dim]│[/]  {escape(name)}")

    if not result.ok:
        _console.print("[dim]│[/]")
        if result.rolled_back:
            _console.print(f"[dim]│[/]  removed partial project {escape(str(project_dir))}/")
        elif project_dir.exists():
            _console.print(f"[dim]│[/]  remove {escape(str(project_dir))}/ before retrying")
        raise _error(str(result.error), 1)

    if tidy:
        try:
            go_mod_tidy(project_dir)
        except HookError as e:
            raise _error(str(e), 1) from None
        _console.print("[dim]│[/]  go mod tidy")

    _console.print("[dim]│[/]")
    steps = " && ".join([f"cd {project_dir}", *_NEXT_STEPS[kind]])
    _console.print(f"[bold cyan]●[/]  Done! {escape(steps)}")
    _console.print()


@app.command()
def templates() -> None:
    """List project types and the templates each one uses."""
    store = TemplateStore()
    available = set(store.categories())
    _console.print()
    _console.print("[bold cyan]◆[/]  Available project types")
    _console.print("[dim]│[/]")
    for kind in ProjectKind:
        category = get_generator(kind).CATEGORY
        if category not in available:
            raise _error(str(UnknownCategoryError(category)), 1)
        names = sorted(store.list_template_keys(category))
        _console.print(f"[dim]│[/]  [bold cyan]{kind.value:<6}[/] [bold]{kind.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 6} [dim]{kind.description}[/]")
        _console.print(f"[dim]│[/]  {' ' * 6} [dim]{', '.join(names)}[/]")
        _console.print("[dim]│[/]")
    _console.print()


@app.command()
def version(
    as_json: Annotated[bool, Option("--json", help="Print version information as JSON.")] = False,
) -> None:
    """Print the version of sova."""
    if as_json:
        _console.print(json.dumps({"version": sova.__version__}), soft_wrap=True)
    else:
        _console.print(f"sova v{sova.__version__}")
