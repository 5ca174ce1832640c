"""RMC filter service - picks likely Residents' Management Companies out of
the Companies House BasicCompanyData snapshot."""

import csv
import io
import logging
import sys
from enum import Enum
from typing import Iterable, Iterator, Optional, TextIO

from src.registry.entity_types import classify_entity_type, is_worth_examining
from src.registry.models import (
    LegalEntity,
    LegalEntityRecord,
    MalformedRecordError,
    check_header,
)
from src.registry.sic_codes import extract_sics, has_relevant_sic
from src.utils.config import settings
from src.utils.name_matching import exclude_by_name, include_by_name, load_wordlist
from src.utils.progress import (
    DEFAULT_INTERVAL,
    ProgressCallback,
    ProgressCounter,
    log_progress,
)

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    UNRECOGNISED_TYPE = "unrecognised entity type"
    IRRELEVANT_TYPE = "entity type cannot be an RMC"
    EXCLUDED_NAME = "name matches excluded list"
    NO_RELEVANT_SIC = "no relevant SIC code"
    NOT_INCLUDED_NAME = "name does not look like an RMC"


class RMCFilterService:
    """Applies the RMC rule chain to register records.

    The checks run cheapest first, and a name on the excluded list vetoes
    the record before SIC codes or the inclusion rule are considered.
    """

    def __init__(
        self,
        excluded_names: Iterable[str],
        included_names: Iterable[str],
        progress: Optional[ProgressCallback] = None,
        progress_interval: int = DEFAULT_INTERVAL,
        skip_malformed_rows: bool = False,
    ):
        self.excluded_names = tuple(excluded_names)
        self.included_names = tuple(included_names)
        self.progress = progress
        self.progress_interval = progress_interval
        self.skip_malformed_rows = skip_malformed_rows

    def _reject(self, record: LegalEntityRecord, reason: RejectionReason) -> None:
        logger.debug("Rejected %s (%s): %s", record.number, record.name, reason.value)
        return None

    def evaluate(self, record: LegalEntityRecord) -> Optional[LegalEntity]:
        """Decide whether a record is a candidate RMC.

        Returns the classified entity when accepted, otherwise None.
        """
        category = classify_entity_type(record.company_type)
        if category is None:
            logger.warning(
                "Unrecognised entity type for company %s: %r",
                record.number,
                record.company_type,
            )
            return self._reject(record, RejectionReason.UNRECOGNISED_TYPE)

        if not is_worth_examining(category):
            return self._reject(record, RejectionReason.IRRELEVANT_TYPE)

        if exclude_by_name(record.name, self.excluded_names):
            return self._reject(record, RejectionReason.EXCLUDED_NAME)

        entity = LegalEntity(
            name=record.name,
            number=record.number,
            category=category,
            sic_codes=extract_sics(record),
        )
        if not has_relevant_sic(entity.sic_codes):
            return self._reject(record, RejectionReason.NO_RELEVANT_SIC)

        if not include_by_name(entity.name, self.included_names):
            return self._reject(record, RejectionReason.NOT_INCLUDED_NAME)

        return entity

    def filter_records(self, rows: Iterable[dict]) -> Iterator[LegalEntity]:
        """Yield accepted entities from csv.DictReader rows, in input order."""
        processed = ProgressCounter("records", self.progress, self.progress_interval)

        for row in rows:
            processed.tick()
            try:
                record = LegalEntityRecord.from_row(row)
            except MalformedRecordError as e:
                if not self.skip_malformed_rows:
                    raise
                logger.warning("Skipping malformed row %d: %s", processed.count, e)
                continue

            entity = self.evaluate(record)
            if entity is not None:
                yield entity

    def run(self, source: TextIO, output: TextIO) -> int:
        """Filter a register CSV into (number, type, name) rows.

        The output has no header. Returns the number of rows written.
        """
        reader = csv.DictReader(source)
        check_header(reader.fieldnames)

        writer = csv.writer(output, lineterminator="\n")
        written = ProgressCounter("accepted", None, self.progress_interval)

        for entity in self.filter_records(reader):
            writer.writerow(entity.to_row())
            if written.tick():
                output.flush()

        output.flush()
        return written.count


def main():
    """Entry point for the RMC filter: register CSV on stdin, RMCs on stdout."""
    settings.configure_logging()

    try:
        excluded_names = load_wordlist(settings.excluded_names_file)
        included_names = load_wordlist(settings.included_names_file)
    except OSError as e:
        logger.error("Cannot load wordlist: %s", e)
        sys.exit(1)

    service = RMCFilterService(
        excluded_names,
        included_names,
        progress=log_progress,
        progress_interval=settings.progress_interval,
        skip_malformed_rows=settings.skip_malformed_rows,
    )

    # utf-8-sig so a byte order mark cannot corrupt the first header name
    source = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8-sig", newline="")
    try:
        count = service.run(source, sys.stdout)
    except (MalformedRecordError, csv.Error) as e:
        logger.error("Aborting: %s", e)
        sys.exit(1)

    logger.info("Found %d candidate RMCs", count)


if __name__ == "__main__":
    main()
