"""
Session storage backends.
"""

from .json_file_store import JsonFileSessionStore
from .memory_store import InMemorySessionStore

__all__ = ["InMemorySessionStore", "JsonFileSessionStore"]
