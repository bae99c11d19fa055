"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any, Mapping

from src.domain.constants import (
    DEFAULT_ASSET_BUCKETS,
    DEFAULT_BASE_CURRENCY,
    DEFAULT_BUCKET_ALIASES,
    DEFAULT_LIABILITY_BUCKETS,
    DEFAULT_NEGATIVE_CASH_FLOWS,
    DEFAULT_PORTFOLIO_BUCKETS,
    DEFAULT_POSITIVE_CASH_FLOWS,
    NEW_YORK_REFERENCE_MONTHLY_SALARY,
)
from src.domain.errors import DocumentParseError, SettingsError
from src.domain.models.settings import (
    CategorySettings,
    HicpBase,
    PipelineSettings,
)
from src.domain.services.normalization import (
    normalize_currency,
    normalize_flag,
)
from src.infrastructure.document_mapper import parse_ecli_weights
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal
from src.utils.utils import get_project_root, resolve_project_path

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_DATABASE_DIR = "database"
DEFAULT_OUTPUT_FILE = "dashboard/dashboard.json"


def _env_flag(name: str, default: bool) -> bool:
    value = normalize_flag(os.getenv(name))
    return default if value is None else value


@dataclass(frozen=True)
class AppSettings:
    """File locations and output options of a dashboard run.

    Attributes:
        settings_file: Pipeline settings JSON file.
        database_dir: Directory holding the monthly JSON documents.
        output_file: Destination of the dashboard JSON.
        pretty: Indent the dashboard JSON.
        latest_only: Emit only the most recent snapshot.
        rollover_input: Document to roll over; the latest one when unset.
        rollover_output: Destination of the rolled-over document.
        rollover_keep_meta: Keep FX rates and HICP when rolling over.
    """

    settings_file: Path
    database_dir: Path
    output_file: Path
    pretty: bool = True
    latest_only: bool = False
    rollover_input: Path | None = None
    rollover_output: Path | None = None
    rollover_keep_meta: bool = True

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        raw_input = os.getenv("NETWORTH_ROLLOVER_INPUT")
        raw_output = os.getenv("NETWORTH_ROLLOVER_OUTPUT")
        return cls(
            settings_file=resolve_project_path(
                os.getenv("NETWORTH_SETTINGS_FILE", DEFAULT_SETTINGS_FILE)
            ),
            database_dir=resolve_project_path(
                os.getenv("NETWORTH_DATABASE_DIR", DEFAULT_DATABASE_DIR)
            ),
            output_file=resolve_project_path(
                os.getenv("NETWORTH_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)
            ),
            pretty=_env_flag("NETWORTH_PRETTY", True),
            latest_only=_env_flag("NETWORTH_LATEST_ONLY", False),
            rollover_input=(
                resolve_project_path(raw_input) if raw_input else None
            ),
            rollover_output=(
                resolve_project_path(raw_output) if raw_output else None
            ),
            rollover_keep_meta=_env_flag("NETWORTH_ROLLOVER_KEEP_META", True),
        )


def _string_tuple(value, default: tuple[str, ...], label: str) -> tuple:
    if value is None:
        return default
    if not isinstance(value, list) or not all(
        isinstance(item, str) for item in value
    ):
        raise SettingsError(f"'{label}' must be a list of strings")
    return tuple(item.strip() for item in value if item.strip())


def _parse_hicp(value) -> HicpBase | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        raw_base = value.get("base_value", value.get("base_hicp"))
        base_year = value.get("base_year")
        base_month = value.get("base_month")
    else:
        raw_base, base_year, base_month = value, None, None
    if raw_base is None:
        return None
    try:
        base_value = coerce_decimal(raw_base)
        year = int(base_year) if base_year is not None else None
        month = int(base_month) if base_month is not None else None
    except ValueError as exc:
        raise SettingsError(f"Invalid hicp settings: {value!r}") from exc
    if base_value <= 0:
        raise SettingsError(
            f"Base HICP must be positive, got {base_value}"
        )
    return HicpBase(base_value=base_value, base_year=year, base_month=month)


def _parse_categories(payload: Mapping[str, Any]) -> CategorySettings:
    raw = payload.get("categories") or {}
    if not isinstance(raw, Mapping):
        raise SettingsError("'categories' must be an object")
    aliases = raw.get("aliases")
    if aliases is None:
        aliases = dict(DEFAULT_BUCKET_ALIASES)
    elif not isinstance(aliases, Mapping):
        raise SettingsError("'categories.aliases' must be an object")
    raw_weights = raw.get("ecli_weights", payload.get("ecli_weights"))
    try:
        ecli_weights = parse_ecli_weights(raw_weights, source="settings")
    except DocumentParseError as exc:
        raise SettingsError(str(exc)) from exc
    return CategorySettings(
        assets=_string_tuple(
            raw.get("assets"),
            DEFAULT_ASSET_BUCKETS,
            "categories.assets",
        ),
        liabilities=_string_tuple(
            raw.get("liabilities"),
            DEFAULT_LIABILITY_BUCKETS,
            "categories.liabilities",
        ),
        positive_cash_flows=_string_tuple(
            raw.get("positive_cash_flows"),
            DEFAULT_POSITIVE_CASH_FLOWS,
            "categories.positive_cash_flows",
        ),
        negative_cash_flows=_string_tuple(
            raw.get("negative_cash_flows"),
            DEFAULT_NEGATIVE_CASH_FLOWS,
            "categories.negative_cash_flows",
        ),
        aliases={str(key): str(value) for key, value in aliases.items()},
        ecli_weights=ecli_weights,
    )


def settings_from_dict(payload: Mapping[str, Any]) -> PipelineSettings:
    """Build pipeline settings from a decoded settings payload.

    Args:
        payload: Decoded ``settings.json`` object.

    Returns:
        PipelineSettings: Parsed settings, defaults filling absent keys.

    Raises:
        SettingsError: If a value has the wrong shape or is not usable.
    """
    if not isinstance(payload, Mapping):
        raise SettingsError("Settings must be a JSON object")
    raw_salary = payload.get("reference_monthly_salary")
    try:
        version = int(payload.get("settings_version", 1))
        salary = (
            coerce_decimal(raw_salary)
            if raw_salary is not None
            else NEW_YORK_REFERENCE_MONTHLY_SALARY
        )
    except ValueError as exc:
        raise SettingsError(f"Invalid settings value: {exc}") from exc
    if salary <= 0:
        raise SettingsError(
            f"reference_monthly_salary must be positive, got {salary}"
        )
    return PipelineSettings(
        settings_version=version,
        base_currency=(
            normalize_currency(payload.get("base_currency"))
            or DEFAULT_BASE_CURRENCY
        ),
        hicp=_parse_hicp(payload.get("hicp")),
        categories=_parse_categories(payload),
        adjust_to_inflation=bool(
            normalize_flag(payload.get("adjust_to_inflation"))
        ),
        normalize_to_new_york_ecli=bool(
            normalize_flag(payload.get("normalize_to_new_york_ecli"))
        ),
        reference_monthly_salary=salary,
        portfolio_buckets=_string_tuple(
            payload.get("portfolio_buckets"),
            DEFAULT_PORTFOLIO_BUCKETS,
            "portfolio_buckets",
        ),
    )


def load_settings(path: Path | str) -> PipelineSettings:
    """Load pipeline settings from a JSON file.

    Raises:
        SettingsError: If the file cannot be read, decoded or parsed.
    """
    resolved = Path(path)
    try:
        payload = json.loads(resolved.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SettingsError(
            f"Reading settings file {resolved}: {exc}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise SettingsError(
            f"Parsing settings JSON in {resolved}: {exc}"
        ) from exc
    return settings_from_dict(payload)


def load_settings_with_fallback(
    path: Path | str | None = None,
    logger=None,
) -> PipelineSettings:
    """Load settings from ``path``, then the project default, then defaults.

    A file that exists but cannot be parsed still raises.

    Args:
        path: Preferred settings file.
        logger: Optional logger used to report fallbacks.

    Returns:
        PipelineSettings: Loaded or default settings.
    """
    logger = logger or get_app_logger()
    candidates: list[Path] = []
    if path is not None:
        candidates.append(Path(path))
    candidates.append(get_project_root() / DEFAULT_SETTINGS_FILE)
    for candidate in candidates:
        if candidate.is_file():
            logger.info(f"Loading settings from {candidate}")
            return load_settings(candidate)
        logger.debug(f"No settings file at {candidate}")
    logger.warning("No settings file found; using default settings")
    return PipelineSettings()


__all__ = [
    "AppSettings",
    "load_settings",
    "load_settings_with_fallback",
    "settings_from_dict",
]
