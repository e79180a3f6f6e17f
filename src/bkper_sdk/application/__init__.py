"""Application layer: transaction iteration and read-only queries."""
