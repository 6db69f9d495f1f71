# src/cord_convert/converter.py

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from time import monotonic
from typing import Any

from cord_convert.config import ConvertConfig
from cord_convert.documents import extract, render
from cord_convert.errors import (
    ConversionError,
    DocumentParseError,
    FileReadError,
    WriteError,
)
from cord_convert.locator import DocumentLocator
from cord_convert.metadata import MetadataRecord, read_metadata
from cord_convert.observability import names
from cord_convert.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    converted: int = 0
    skipped: int = 0
    failed: int = 0


class Converter:
    """
    Drives a conversion run: metadata rows -> locate -> extract -> render -> write.

    Records are processed sequentially. A failure on one record is logged as
    a warning and the run moves on; only an unreadable metadata file stops
    the run (MetadataOpenError propagates from run()).
    """

    def __init__(
        self,
        config: ConvertConfig,
        locator: DocumentLocator | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        if locator is None:
            locator = DocumentLocator(
                config.dataset_dir,
                suffix=config.document_suffix,
                metrics_hook=metrics_hook,
            )
        self._locator = locator

    def run(self) -> ConversionStats:
        start = monotonic()
        stats = ConversionStats()
        logger.info("Reading metadata from %s", self.config.metadata_path)

        records = read_metadata(
            self.config.metadata_path,
            full_text_flag=self.config.full_text_flag,
            encoding=self.config.encoding,
        )
        for record in records:
            if not record.has_full_text:
                stats.skipped += 1
                self.metrics_hook.increment(names.DOCUMENTS_SKIPPED_TOTAL)
                continue

            try:
                self.convert_record(record)
            except ConversionError as e:
                stats.failed += 1
                logger.warning("Skipping %s: %s", record.file_id, e)
                self.metrics_hook.increment(
                    names.DOCUMENTS_FAILED_TOTAL, labels={"error": type(e).__name__}
                )
                continue

            stats.converted += 1
            self.metrics_hook.increment(names.DOCUMENTS_CONVERTED_TOTAL)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CONVERSION_RUN_DURATION, elapsed_ms)
        logger.debug(
            "Run finished: converted=%d skipped=%d failed=%d",
            stats.converted,
            stats.skipped,
            stats.failed,
        )
        return stats

    def convert_record(self, record: MetadataRecord) -> Path:
        """Convert one paper and return the path of the written text file."""
        start = monotonic()
        source = self._locator.locate(record.file_id + self.config.document_suffix)
        logger.debug("Converting %s from %s", record.file_id, source)

        raw = self._load(source)
        text = render(extract(raw))

        target = self.config.output_path(record.file_id)
        try:
            data = _replace_lone_surrogates(text).encode(self.config.encoding)
            target.write_bytes(data)
        except (OSError, UnicodeEncodeError) as e:
            raise WriteError(target, str(e)) from e

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DOCUMENT_CONVERSION_DURATION, elapsed_ms)
        return target

    def _load(self, path: Path) -> Any:
        try:
            content = path.read_bytes()
        except OSError as e:
            raise FileReadError(path, str(e)) from e

        try:
            return json.loads(content, parse_constant=_reject_constant)
        except ValueError as e:
            raise DocumentParseError(path, str(e)) from e


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def _replace_lone_surrogates(text: str) -> str:
    # json.loads keeps unpaired "\ud800" style escapes; write them as U+FFFD
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
