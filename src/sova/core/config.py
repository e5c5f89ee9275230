"""Configuration dataclasses for a single generation run."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

ParameterValue: TypeAlias = str | int | bool | Sequence[str]
ParameterSet: TypeAlias = Mapping[str, ParameterValue]

DEFAULT_MODULE_PREFIX = "github.com/example"
DEFAULT_GO_VERSION = "1.22"

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")
_MODULE_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._~/-]*")
_GO_VERSION_RE = re.compile(r"1\.\d+(\.\d+)?")


def freeze(parameters: Mapping[str, ParameterValue]) -> ParameterSet:
    """Return a read-only copy of *parameters*; list values become tuples."""
    return MappingProxyType(
        {k: tuple(v) if isinstance(v, list) else v for k, v in parameters.items()}
    )


@dataclass(frozen=True, kw_only=True)
class Features:
    """
    Optional components to include in the generated project.

    Attributes:
        zap: Structured logging with go.uber.org/zap.
        postgres: PostgreSQL connection helper.
        redis: Redis cache client.
        rabbitmq: RabbitMQ publisher/consumer helper.
    """

    zap: bool = False
    postgres: bool = False
    redis: bool = False
    rabbitmq: bool = False

    @property
    def any_service(self) -> bool:
        """Whether any toggle needs a backing service container."""
        return self.postgres or self.redis or self.rabbitmq


@dataclass(frozen=True, kw_only=True)
class ProjectOptions:
    """
    Everything a project generator needs, resolved before generation starts.

    Attributes:
        name: Project directory name, also the default module basename.
        module: Go module path. Defaults to ``github.com/example/<name>``.
        go_version: Go toolchain version written to ``go.mod``.
        features: Optional components.
    """

    name: str
    module: str | None = None
    go_version: str = DEFAULT_GO_VERSION
    features: Features = field(default_factory=Features)

    def __post_init__(self) -> None:
        if not _NAME_RE.fullmatch(self.name):
            raise ValueError(
                f"project name must start with a letter or digit and contain only "
                f"letters, digits, '.', '_' or '-', got {self.name!r}."
            )
        if self.module is not None:
            if not _MODULE_RE.fullmatch(self.module) or ".." in self.module.split("/"):
                raise ValueError(f"invalid module path {self.module!r}.")
        if not _GO_VERSION_RE.fullmatch(self.go_version):
            raise ValueError(f"go_version must look like '1.22', got {self.go_version!r}.")

    @property
    def module_path(self) -> str:
        return self.module or f"{DEFAULT_MODULE_PREFIX}/{self.name}"
