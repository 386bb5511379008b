"""In-memory repository implementations for testing."""

from .blog import InMemoryBlogRepository
from .directory import InMemoryDirectoryRepository
from .reply import InMemoryReplyRepository
from .store import InMemoryStore
from .topic import InMemoryTopicRepository

__all__ = [
    "InMemoryBlogRepository",
    "InMemoryDirectoryRepository",
    "InMemoryReplyRepository",
    "InMemoryStore",
    "InMemoryTopicRepository",
]
