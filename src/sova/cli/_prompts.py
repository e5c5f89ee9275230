"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from sova.core.config import Features
from sova.projects import ProjectKind

_console = Console()

T = TypeVar("T")

_FEATURE_QUESTIONS: dict[str, str] = {
    "zap": "Use zap structured logger?",
    "postgres": "Use PostgreSQL?",
    "redis": "Use Redis cache?",
    "rabbitmq": "Use RabbitMQ message queue?",
}


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _confirm(question: str) -> bool:
    """Display a clack-style yes/no prompt; an empty answer means no."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    _console.print("[dim]│[/]  ", end="")
    answer = input(" [y/N] ").strip().lower()

    result = answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + │ bar + │ [y/N] input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def _text(question: str) -> str:
    """Display a clack-style free text prompt; re-asks until non-empty."""
    while True:
        _console.print(f"[bold cyan]◆[/]  {question}")
        _console.print("[dim]│[/]  ", end="")
        answer = input().strip()
        _clear_lines(2)
        if answer:
            break

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()

    return answer


def prompt_project_name() -> str:
    """Prompt user for the project name."""
    return _text("What is the name of your project?")


def prompt_project_kind() -> ProjectKind:
    """Prompt user to choose a project kind."""
    kinds = list(ProjectKind)
    labels = [f"{k.label} ({k.value})" for k in kinds]
    return _select("What kind of project?", kinds, labels)


def prompt_features() -> Features:
    """Ask one yes/no question per optional component."""
    answers = {attr: _confirm(q) for attr, q in _FEATURE_QUESTIONS.items()}
    return Features(**answers)
