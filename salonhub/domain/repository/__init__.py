"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from salonhub.domain.repository.blog import BlogRepository
from salonhub.domain.repository.directory import DirectoryRepository
from salonhub.domain.repository.reply import ReplyRepository
from salonhub.domain.repository.topic import TopicRepository

__all__ = [
    "TopicRepository",
    "ReplyRepository",
    "DirectoryRepository",
    "BlogRepository",
]
