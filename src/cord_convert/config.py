# src/cord_convert/config.py

from dataclasses import dataclass
from pathlib import Path

from cord_convert.metadata import FULL_TEXT_FLAG

DEFAULT_METADATA_FILENAME = "all_sources_metadata_2020-03-13.csv"


@dataclass(frozen=True)
class ConvertConfig:
    """Configuration for a conversion run.

    Immutable. Explicit. Nothing is read from the environment.
    The output directory must already exist.
    """

    dataset_dir: Path
    output_dir: Path
    metadata_filename: str = DEFAULT_METADATA_FILENAME
    full_text_flag: str = FULL_TEXT_FLAG
    document_suffix: str = ".json"
    output_suffix: str = ".txt"
    encoding: str = "utf-8"

    @property
    def metadata_path(self) -> Path:
        return self.dataset_dir / self.metadata_filename

    def output_path(self, file_id: str) -> Path:
        return self.output_dir / f"{file_id}{self.output_suffix}"
