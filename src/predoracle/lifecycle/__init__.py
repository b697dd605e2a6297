"""Market lifecycle: finalization, status and countdowns."""
