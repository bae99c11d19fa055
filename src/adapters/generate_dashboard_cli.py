"""CLI adapter to build the dashboard JSON from the monthly documents.

Locations and options come from the ``NETWORTH_*`` environment variables
read by ``AppSettings.from_env``.
"""

from src.domain.errors import DashboardError
from src.infrastructure.container import (
    build_app_settings,
    build_dashboard_writer,
    build_generate_dashboard_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> int:
    """Generate and write the dashboard.

    Returns:
        int: Process exit status, non-zero when the run failed.
    """
    logger = get_app_logger()
    settings = build_app_settings()
    print(
        "Generating dashboard...\n"
        f"  settings: {settings.settings_file}\n"
        f"  database: {settings.database_dir}\n"
        f"  output  : {settings.output_file}"
    )
    try:
        use_case = build_generate_dashboard_use_case(settings)
        dashboard = use_case.execute(latest_only=settings.latest_only)
        output = build_dashboard_writer(settings).write(dashboard)
    except DashboardError as exc:
        logger.error(f"Dashboard generation failed: {exc}")
        print(f"Error: {exc}")
        return 1

    get_usage_logger().info(
        f"dashboard generated snapshots={len(dashboard.snapshots)}"
    )
    latest = dashboard.latest
    print(
        f"Wrote {len(dashboard.snapshots)} snapshots to {output}. "
        f"Generated at {dashboard.generated_at}"
    )
    if latest is not None:
        print(
            f"Latest {latest.month}: net worth {latest.totals.net_worth} "
            f"{dashboard.base_currency}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
