"""CLI adapter generating next month's document from the current one.

``NETWORTH_ROLLOVER_INPUT`` selects the document to roll over; when unset
the most recent document of the database directory is used. The new file
is written as ``YYYY_MM.json`` next to the documents unless
``NETWORTH_ROLLOVER_OUTPUT`` is set.
"""

from src.application.use_cases.rollover_month import RolloverMonthUseCase
from src.domain.errors import DashboardError, NoDocumentsError
from src.infrastructure.container import (
    build_app_settings,
    build_document_source,
    build_document_writer,
)
from src.infrastructure.json_documents import read_document
from src.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Roll the selected document over to the following month.

    Returns:
        int: Process exit status, non-zero when the rollover failed.
    """
    logger = get_app_logger()
    settings = build_app_settings()
    try:
        if settings.rollover_input is not None:
            document = read_document(settings.rollover_input)
        else:
            documents = build_document_source(settings).load_documents()
            if not documents:
                raise NoDocumentsError(
                    f"No documents found in {settings.database_dir}"
                )
            document = max(documents, key=lambda item: item.month)
        rolled = RolloverMonthUseCase(logger=logger).execute(
            document,
            keep_meta=settings.rollover_keep_meta,
        )
        directory = (
            settings.rollover_input.parent
            if settings.rollover_input is not None
            else settings.database_dir
        )
        writer = build_document_writer(settings, directory=directory)
        output = writer.write_document(rolled)
    except DashboardError as exc:
        logger.error(f"Month rollover failed: {exc}")
        print(f"Error: {exc}")
        return 1

    print(f"Generated next month file: {output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
