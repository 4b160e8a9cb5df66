# src/data_handlers/observability/names.py

"""Standard metric names for data-handlers.

All duration metrics are in milliseconds. Every metric carries a
`handler` label with the handler type tag (e.g. "xml").
"""

# ============================================================================
# Iterate
# ============================================================================

# Duration
HANDLER_ITERATE_DURATION = "handler_iterate_duration"

# Counters
HANDLER_ITERATE_TOTAL = "handler_iterate_total"
# Sub-documents handed back to the pipeline
HANDLER_SUBDOCUMENTS_EMITTED = "handler_subdocuments_emitted"
# Iteration queries that matched nothing (not an error)
HANDLER_EMPTY_MATCHES_TOTAL = "handler_empty_matches_total"

# Gauges
HANDLER_ITERATE_MATCHES = "handler_iterate_matches"


# ============================================================================
# Filter
# ============================================================================

# Duration
HANDLER_FILTER_DURATION = "handler_filter_duration"

# Counters
HANDLER_FILTER_TOTAL = "handler_filter_total"
HANDLER_FILTER_VALUES_EMITTED = "handler_filter_values_emitted"
# Zero-match filters answered through scalar evaluation
HANDLER_SCALAR_FALLBACKS_TOTAL = "handler_scalar_fallbacks_total"


# ============================================================================
# Errors
# ============================================================================

# Counters (labelled with `kind`: parse, compile, evaluation, serialization)
HANDLER_ERRORS_TOTAL = "handler_errors_total"
