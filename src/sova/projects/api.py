"""Go HTTP API built on gin, laid out as cmd/internal/pkg/api."""

from __future__ import annotations

from sova.core.config import Features, ParameterSet, ProjectOptions
from sova.core.files import FileEntry, Manifest
from sova.projects._common import base_parameters, feature_files, feature_requires

CATEGORY = "api"

GIN = "github.com/gin-gonic/gin v1.10.0"
GODOTENV = "github.com/joho/godotenv v1.5.1"

DIRECTORIES: tuple[str, ...] = ("cmd", "internal", "pkg", "api")

FILES: tuple[FileEntry, ...] = (
    FileEntry("main.go", ("main.tpl",)),
    FileEntry("go.mod", ("go-mod.tpl",)),
    FileEntry("README.md", ("readme.tpl",)),
    FileEntry(".gitignore", ("gitignore.tpl",)),
    FileEntry("api/router.go", ("router.tpl",)),
    FileEntry("internal/handlers/ping.go", ("ping.tpl",)),
    FileEntry("internal/config/config.go", ("config.tpl",)),
    FileEntry("pkg/response/response.go", ("response.tpl",)),
)

# Fragment suffix per service-backed toggle, in output order.
_SERVICES: tuple[tuple[str, str], ...] = (
    ("postgres", "postgres"),
    ("redis", "redis"),
    ("rabbitmq", "rabbitmq"),
)


def _enabled_services(features: Features) -> list[str]:
    return [suffix for attr, suffix in _SERVICES if getattr(features, attr)]


def _service_files(features: Features) -> list[FileEntry]:
    services = _enabled_services(features)
    env = FileEntry(".env.example", ("env.tpl", *(f"env-{s}.tpl" for s in services)))
    if not services:
        return [env]
    compose = FileEntry(
        "docker-compose.yml", ("compose.tpl", *(f"compose-{s}.tpl" for s in services))
    )
    return [env, compose]


def manifest(options: ProjectOptions) -> Manifest:
    features = options.features
    return Manifest(
        category=CATEGORY,
        directories=DIRECTORIES,
        files=FILES + tuple(_service_files(features)) + tuple(feature_files(features)),
    )


def parameters(options: ProjectOptions) -> ParameterSet:
    return base_parameters(options, [GIN, GODOTENV, *feature_requires(options.features)])
