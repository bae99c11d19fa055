"""Shared utilities package."""

from .decimal_utils import coerce_decimal, coerce_optional_decimal
from .utils import get_project_root, resolve_project_path

__all__ = [
    "coerce_decimal",
    "coerce_optional_decimal",
    "get_project_root",
    "resolve_project_path",
]
