"""Forum use cases."""

from .common import ReplyNodeResponse, ReplyResponse, TopicResponse
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .create_topic import CreateTopicRequest, CreateTopicUseCase
from .flag_content import FlagContentRequest, FlagContentUseCase
from .get_topic import GetTopicRequest, GetTopicResponse, GetTopicUseCase
from .list_topics import ListTopicsRequest, ListTopicsUseCase
from .upvote_topic import UpvoteTopicRequest, UpvoteTopicUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "CreateTopicRequest",
    "CreateTopicUseCase",
    "FlagContentRequest",
    "FlagContentUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "ListTopicsRequest",
    "ListTopicsUseCase",
    "ReplyNodeResponse",
    "ReplyResponse",
    "TopicResponse",
    "UpvoteTopicRequest",
    "UpvoteTopicUseCase",
]
