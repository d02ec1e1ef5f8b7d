"""Application layer: ports consumed by the formatter."""
