"""Application layer: use-case services returning Result values."""
