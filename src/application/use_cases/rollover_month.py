"""Use case to prepare the next month's document from the current one."""

from dataclasses import replace

from src.domain.models.documents import MonthlyDocument
from src.domain.services.months import month_file_name, next_month
from src.infrastructure.logging.logger import get_app_logger


class RolloverMonthUseCase:
    """Copy balances forward into an empty document for the next month."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        document: MonthlyDocument,
        keep_meta: bool = True,
    ) -> MonthlyDocument:
        """Return the document of the month following ``document``.

        Net-worth entries are copied unchanged; cash flows and investment
        contributions start empty.

        Args:
            document: Current month document.
            keep_meta: Keep FX rates and HICP of the current month.

        Returns:
            MonthlyDocument: Next month's document.
        """
        following = next_month(document.month)
        rolled = replace(
            document,
            month=following,
            fx_rates=dict(document.fx_rates) if keep_meta else {},
            hicp=document.hicp if keep_meta else None,
            cash_flow_entries=(),
            investment_contributions=(),
            source=month_file_name(following),
        )
        self._logger.info(
            f"Rolled {document.month} over to {following} with "
            f"{len(rolled.net_worth_entries)} net worth entries"
        )
        return rolled


__all__ = ["RolloverMonthUseCase"]
