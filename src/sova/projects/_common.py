"""Pieces shared by every project kind: go.mod requirements and feature files."""

from __future__ import annotations

from sova.core.config import Features, ParameterSet, ProjectOptions, freeze
from sova.core.files import FileEntry

# Pinned so that generated go.mod files are complete without network access.
ZAP = "go.uber.org/zap v1.27.0"
PGX = "github.com/jackc/pgx/v5 v5.7.1"
REDIS = "github.com/redis/go-redis/v9 v9.7.0"
AMQP = "github.com/rabbitmq/amqp091-go v1.10.0"


def feature_requires(features: Features) -> list[str]:
    requires = []
    if features.zap:
        requires.append(ZAP)
    if features.postgres:
        requires.append(PGX)
    if features.redis:
        requires.append(REDIS)
    if features.rabbitmq:
        requires.append(AMQP)
    return requires


def feature_files(features: Features) -> list[FileEntry]:
    """Optional helper packages, one per enabled toggle."""
    entries = []
    if features.zap:
        entries.append(FileEntry("internal/logger/logger.go", ("logger.tpl",)))
    if features.postgres:
        entries.append(FileEntry("internal/database/postgres.go", ("postgres.tpl",)))
    if features.redis:
        entries.append(FileEntry("internal/cache/redis.go", ("redis.tpl",)))
    if features.rabbitmq:
        entries.append(FileEntry("internal/queue/rabbitmq.go", ("rabbitmq.tpl",)))
    return entries


def base_parameters(options: ProjectOptions, requires: list[str]) -> ParameterSet:
    return freeze(
        {
            "ProjectName": options.name,
            "ModulePath": options.module_path,
            "GoVersion": options.go_version,
            "Requires": [f"\t{r}" for r in sorted(requires)],
        }
    )
