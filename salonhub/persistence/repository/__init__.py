"""PostgreSQL repository implementations."""

from salonhub.persistence.repository.blog import PostgresBlogRepository
from salonhub.persistence.repository.directory import PostgresDirectoryRepository
from salonhub.persistence.repository.reply import PostgresReplyRepository
from salonhub.persistence.repository.topic import PostgresTopicRepository

__all__ = [
    "PostgresTopicRepository",
    "PostgresReplyRepository",
    "PostgresDirectoryRepository",
    "PostgresBlogRepository",
]
