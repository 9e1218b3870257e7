"""Database layer: models, sessions and the row-level store."""
