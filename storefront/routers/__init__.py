from . import collections, fields, health

__all__ = ["collections", "fields", "health"]
