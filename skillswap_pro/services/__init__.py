"""Client engine: local-first state and the operations on it."""
