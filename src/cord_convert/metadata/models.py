# metadata/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class MetadataRecord:
    file_id: str
    has_full_text: bool
