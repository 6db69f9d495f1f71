# Configuration
from .config import ConvertConfig

# Driver
from .converter import ConversionStats, Converter

# Documents
from .documents import (
    Author,
    BibEntry,
    Document,
    FigureRef,
    Paragraph,
    extract,
    render,
)

# Errors
from .errors import (
    ConversionError,
    DocumentNotFoundError,
    DocumentParseError,
    ExtractionError,
    FileReadError,
    MetadataOpenError,
    WriteError,
)
from .locator import DocumentLocator

# Metadata
from .metadata import MetadataRecord, read_metadata

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # Configuration
    "ConvertConfig",
    # Driver
    "ConversionStats",
    "Converter",
    "DocumentLocator",
    # Documents
    "Author",
    "BibEntry",
    "Document",
    "FigureRef",
    "Paragraph",
    "extract",
    "render",
    # Errors
    "ConversionError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "ExtractionError",
    "FileReadError",
    "MetadataOpenError",
    "WriteError",
    # Metadata
    "MetadataRecord",
    "read_metadata",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
