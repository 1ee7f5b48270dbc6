"""API layer - commands returning StageResult objects."""
