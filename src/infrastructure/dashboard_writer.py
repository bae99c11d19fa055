"""JSON file sink for computed dashboards."""

import json
from pathlib import Path

from src.domain.errors import DashboardError
from src.domain.models.snapshot import Dashboard
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.serialization import dashboard_to_dict


class JsonDashboardWriter:
    """Write dashboards to a JSON file, creating parent directories."""

    def __init__(
        self,
        output_file: Path | str,
        pretty: bool = True,
        logger=None,
    ) -> None:
        """Initialize the writer.

        Args:
            output_file: Destination file.
            pretty: Indent the JSON output when True.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._output_file = Path(output_file)
        self._pretty = pretty
        self._logger = logger or get_app_logger()

    def render(self, dashboard: Dashboard) -> str:
        """Return the JSON text of ``dashboard``."""
        payload = dashboard_to_dict(dashboard)
        if self._pretty:
            return json.dumps(payload, indent=2, ensure_ascii=False)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    def write(self, dashboard: Dashboard) -> str:
        """Write ``dashboard`` and return the output path as a string.

        Raises:
            DashboardError: If the output file cannot be written.
        """
        text = self.render(dashboard)
        try:
            self._output_file.parent.mkdir(parents=True, exist_ok=True)
            self._output_file.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise DashboardError(
                f"Writing output file {self._output_file}: {exc}"
            ) from exc
        self._logger.info(
            f"Dashboard with {len(dashboard.snapshots)} snapshots written "
            f"to {self._output_file}"
        )
        return str(self._output_file)


__all__ = ["JsonDashboardWriter"]
