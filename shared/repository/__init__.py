from .base import Repository
from .memory import InMemoryRepository
from .sql import SqlRepository

__all__ = [
    "Repository",
    "InMemoryRepository",
    "SqlRepository",
]
