from .models import MetadataRecord
from .reader import FULL_TEXT_FLAG, read_metadata

__all__ = [
    "FULL_TEXT_FLAG",
    "MetadataRecord",
    "read_metadata",
]
