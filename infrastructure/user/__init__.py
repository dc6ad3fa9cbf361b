"""User repository implementations."""
