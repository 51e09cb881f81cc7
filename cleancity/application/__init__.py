"""Application layer: patterns and use cases built on the domain."""
