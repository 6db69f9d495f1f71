# metadata/reader.py

import csv
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from cord_convert.errors import MetadataOpenError

from .models import MetadataRecord

logger = logging.getLogger(__name__)

FULL_TEXT_FLAG = "True"

# Metadata rows can carry whole abstracts; csv defaults to 128 KiB per field
FIELD_SIZE_LIMIT = min(sys.maxsize, 2**31 - 1)


def read_metadata(
    path: str | Path,
    *,
    full_text_flag: str = FULL_TEXT_FLAG,
    encoding: str = "utf-8",
) -> Iterator[MetadataRecord]:
    """
    Yield one MetadataRecord per data row of the metadata CSV.

    - The header row is skipped
    - Column 0 is the file id, the last column is the full-text flag
    - A row has full text only when its flag equals full_text_flag exactly
    - Fields have no practical size limit
    - A malformed CSV line (e.g. text after a closing quote) ends the
      iteration with a warning

    Raises MetadataOpenError (on first iteration) if the file cannot be opened.
    """
    path = Path(path)
    try:
        f = open(path, newline="", encoding=encoding)
    except OSError as e:
        raise MetadataOpenError(path, str(e)) from e

    csv.field_size_limit(FIELD_SIZE_LIMIT)
    with f:
        reader = csv.reader(f, strict=True)
        try:
            header = next(reader, None)
            if header is None:
                logger.info("Metadata file %s is empty", path)
                return

            for row in reader:
                if not row:
                    continue
                yield MetadataRecord(
                    file_id=row[0],
                    has_full_text=row[-1] == full_text_flag,
                )
        except (csv.Error, UnicodeDecodeError) as e:
            logger.warning(
                "Stopped reading metadata file %s at line %d: %s",
                path,
                reader.line_num,
                e,
            )
