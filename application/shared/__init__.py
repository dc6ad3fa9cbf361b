from .guard import guarded, guarded_lookup

__all__ = ["guarded", "guarded_lookup"]
