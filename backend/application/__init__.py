"""Application layer: user use cases (commands and queries)."""
