"""Infrastructure layer: cache e cliente do YouTube."""
