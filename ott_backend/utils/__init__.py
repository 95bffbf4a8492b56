"""Small filesystem helpers shared by the storage adapters."""

__all__ = ["fs"]
