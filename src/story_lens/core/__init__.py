"""Pure text analysis, aggregation, and read-model projections."""
