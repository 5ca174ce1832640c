"""PSC scan service - lists companies with a live disclosure of significant
control from the Companies House PSC snapshot."""

import csv
import io
import json
import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from pydantic import ValidationError

from src.registry.models import MalformedRecordError
from src.registry.psc import (
    PSCClassification,
    PSCRecord,
    SchemaViolationError,
    classify_psc,
)
from src.utils.config import settings
from src.utils.progress import (
    DEFAULT_INTERVAL,
    ProgressCallback,
    ProgressCounter,
    log_progress,
)

logger = logging.getLogger(__name__)


class PSCScanService:
    """Classifies PSC snapshot lines and writes the companies of interest."""

    def __init__(
        self,
        progress: Optional[ProgressCallback] = None,
        progress_interval: int = DEFAULT_INTERVAL,
        skip_malformed_rows: bool = False,
        emit_controller: bool = False,
    ):
        self.progress = progress
        self.progress_interval = progress_interval
        self.skip_malformed_rows = skip_malformed_rows
        self.emit_controller = emit_controller

    def parse_line(self, line: str) -> PSCRecord:
        """Parse one JSON line into a PSCRecord."""
        try:
            return PSCRecord.model_validate(json.loads(line))
        except (json.JSONDecodeError, ValidationError) as e:
            raise MalformedRecordError(f"Invalid PSC line: {e}") from e

    def scan(self, lines: Iterable[str]) -> Iterator[PSCClassification]:
        """Yield a classification for every line that is not skipped."""
        read = ProgressCounter("reader", self.progress, self.progress_interval)

        for line in lines:
            read.tick()
            try:
                record = self.parse_line(line)
            except MalformedRecordError as e:
                if not self.skip_malformed_rows:
                    raise
                logger.warning("Skipping malformed line %d: %s", read.count, e)
                continue

            classification = classify_psc(record)
            if classification is not None:
                yield classification

    def run(self, lines: Iterable[str], output: TextIO) -> int:
        """Write one row per classified disclosure; return the row count."""
        writer = csv.writer(output, lineterminator="\n")
        written = ProgressCounter("dumper", self.progress, self.progress_interval)

        for classification in self.scan(lines):
            writer.writerow(classification.to_row(self.emit_controller))
            if written.tick():
                output.flush()

        output.flush()
        return written.count


def main():
    """Entry point for the PSC scan: JSON lines on stdin, numbers on stdout."""
    settings.configure_logging()

    service = PSCScanService(
        progress=log_progress,
        progress_interval=settings.progress_interval,
        skip_malformed_rows=settings.skip_malformed_rows,
        emit_controller=settings.psc_emit_controller,
    )

    source = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
    try:
        count = service.run(source, sys.stdout)
    except (MalformedRecordError, SchemaViolationError) as e:
        logger.error("Aborting: %s", e)
        sys.exit(1)

    logger.info("Wrote %d companies", count)


if __name__ == "__main__":
    main()
