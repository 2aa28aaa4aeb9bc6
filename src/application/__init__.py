"""Application layer: DTOs e use cases."""
