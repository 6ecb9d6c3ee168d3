# src/markup_kit/observability/names.py

"""Standard metric names for markup-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSING_DURATION = "parsing_duration"

# Counters
PARSING_DOCUMENTS_TOTAL = "parsing_documents_total"
PARSING_ERRORS_TOTAL = "parsing_errors_total"
# Failures isolated to a single extraction (tables, lists, ...), labelled by field
PARSING_EXTRACTION_ERRORS_TOTAL = "parsing_extraction_errors_total"

# Gauges
PARSING_MARKUP_SIZE = "parsing_markup_size"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"
CHUNKING_ERRORS_TOTAL = "chunking_errors_total"

# Gauges
CHUNKING_SECTIONS_SEEN = "chunking_sections_seen"
