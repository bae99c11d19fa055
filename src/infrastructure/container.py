"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from src.application.ports.dashboard_sink import DashboardSinkPort
from src.application.ports.document_source import (
    MonthlyDocumentSinkPort,
    MonthlyDocumentSourcePort,
)
from src.application.use_cases.generate_dashboard import (
    GenerateDashboardUseCase,
)
from src.application.use_cases.get_snapshot_entries import (
    GetSnapshotEntriesUseCase,
)
from src.domain.models.settings import PipelineSettings
from src.infrastructure.dashboard_writer import JsonDashboardWriter
from src.infrastructure.json_documents import (
    JsonDirectoryDocumentSource,
    JsonDocumentWriter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import (
    AppSettings,
    load_settings_with_fallback,
)


def build_app_settings() -> AppSettings:
    """Return the environment-driven application settings."""
    return AppSettings.from_env()


def build_pipeline_settings(
    app_settings: AppSettings | None = None,
) -> PipelineSettings:
    """Return the pipeline settings of the run."""
    resolved = app_settings or build_app_settings()
    return load_settings_with_fallback(
        resolved.settings_file,
        logger=get_app_logger(),
    )


def build_document_source(
    app_settings: AppSettings | None = None,
) -> MonthlyDocumentSourcePort:
    """Return the monthly document source."""
    resolved = app_settings or build_app_settings()
    return JsonDirectoryDocumentSource(
        resolved.database_dir,
        logger=get_app_logger(),
    )


def build_document_writer(
    app_settings: AppSettings | None = None,
    directory: Path | None = None,
) -> MonthlyDocumentSinkPort:
    """Return the writer used for rolled-over documents."""
    resolved = app_settings or build_app_settings()
    return JsonDocumentWriter(
        directory or resolved.database_dir,
        output_path=resolved.rollover_output,
    )


def build_dashboard_writer(
    app_settings: AppSettings | None = None,
) -> DashboardSinkPort:
    """Return the dashboard JSON writer."""
    resolved = app_settings or build_app_settings()
    return JsonDashboardWriter(
        resolved.output_file,
        pretty=resolved.pretty,
        logger=get_app_logger(),
    )


def build_generate_dashboard_use_case(
    app_settings: AppSettings | None = None,
) -> GenerateDashboardUseCase:
    """Return the dashboard use case wired to the JSON document source."""
    resolved = app_settings or build_app_settings()
    return GenerateDashboardUseCase(
        document_source=build_document_source(resolved),
        settings=build_pipeline_settings(resolved),
        logger=get_app_logger(),
    )


def build_snapshot_entries_use_case(
    app_settings: AppSettings | None = None,
) -> GetSnapshotEntriesUseCase:
    """Return the entries use case wired to the JSON document source."""
    resolved = app_settings or build_app_settings()
    return GetSnapshotEntriesUseCase(
        document_source=build_document_source(resolved),
        settings=build_pipeline_settings(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_app_settings",
    "build_pipeline_settings",
    "build_document_source",
    "build_document_writer",
    "build_dashboard_writer",
    "build_generate_dashboard_use_case",
    "build_snapshot_entries_use_case",
]
