"""Run-level errors that abort dashboard generation.

Entry-level problems (unknown kinds, missing FX rates, missing adjustment
inputs) never raise; they are recorded as snapshot warnings instead.
"""


class DashboardError(RuntimeError):
    """Base class for fatal dashboard generation errors."""


class NoDocumentsError(DashboardError):
    """Raised when a run has no monthly documents to process."""


class InvalidMonthError(DashboardError):
    """Raised when a month key or document date cannot be parsed."""


class DuplicateMonthError(DashboardError):
    """Raised when two documents share the same month key."""


class DocumentParseError(DashboardError):
    """Raised when a monthly document cannot be mapped to the domain model."""


class SettingsError(DashboardError):
    """Raised when settings are unreadable or cannot support computation."""


__all__ = [
    "DashboardError",
    "NoDocumentsError",
    "InvalidMonthError",
    "DuplicateMonthError",
    "DocumentParseError",
    "SettingsError",
]
