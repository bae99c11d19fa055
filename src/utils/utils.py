"""Generic project helpers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory.

    Returns:
        Path: Directory containing the ``src`` package.
    """
    return Path(__file__).resolve().parents[2]


def resolve_project_path(raw_path: str | Path) -> Path:
    """Resolve a path relative to the project root.

    Args:
        raw_path: Absolute path, or path relative to the project root.

    Returns:
        Path: Absolute, user-expanded path.
    """
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = get_project_root() / path
    return path.resolve()


__all__ = ["get_project_root", "resolve_project_path"]
