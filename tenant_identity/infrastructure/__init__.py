"""Infrastructure adapters (persistence, events, logging)."""
