"""Command-line interface (predo)."""
