"""Event domain module (read side only: events as seen from a user)."""
