# src/cord_convert/observability/names.py

"""Standard metric names for cord-convert.

All duration metrics are in milliseconds.
"""

# ============================================================================
# Conversion run
# ============================================================================

# Duration
CONVERSION_RUN_DURATION = "conversion_run_duration"
DOCUMENT_CONVERSION_DURATION = "document_conversion_duration"

# Counters
DOCUMENTS_CONVERTED_TOTAL = "documents_converted_total"
# Rows whose full-text flag is not set
DOCUMENTS_SKIPPED_TOTAL = "documents_skipped_total"
# Labelled with error="<ConversionError subclass name>"
DOCUMENTS_FAILED_TOTAL = "documents_failed_total"


# ============================================================================
# Document locator
# ============================================================================

LOCATOR_INDEX_DURATION = "locator_index_duration"

# Gauges
LOCATOR_FILES_INDEXED = "locator_files_indexed"
