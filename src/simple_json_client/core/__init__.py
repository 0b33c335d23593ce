"""Core request plumbing shared by the sync and async clients."""

__all__: list[str] = []
