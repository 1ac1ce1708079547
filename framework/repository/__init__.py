"""
Repository pattern: data access abstraction, decouples callers from the database session.
"""

from .base import BaseRepository
from .unit_of_work import UnitOfWork

__all__ = ["BaseRepository", "UnitOfWork"]
