"""Forum routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import Field

from salonhub.application.usecase.base import ApiModel, MessageResponse
from salonhub.application.usecase.forum import (
    CreateReplyRequest,
    CreateReplyUseCase,
    CreateTopicRequest,
    CreateTopicUseCase,
    FlagContentRequest,
    FlagContentUseCase,
    GetTopicRequest,
    GetTopicResponse,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsUseCase,
    ReplyResponse,
    TopicResponse,
    UpvoteTopicRequest,
    UpvoteTopicUseCase,
)
from salonhub.domain.error import DomainError
from salonhub.domain.value import FlaggableType
from salonhub.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/forum", tags=["forum"], route_class=DishkaRoute)


def client_key(request: Request) -> str:
    """Identify the caller for rate limiting."""
    return request.client.host if request.client else "unknown"


def parse_topic_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid topic ID"
        )


class CreateTopicAPIRequest(ApiModel):
    """API request for creating a topic."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author_name: str | None = Field(default=None, max_length=100)
    author_email: str | None = Field(default=None, max_length=255)
    tags: list[str] = Field(default_factory=list, max_length=10)


class CreateReplyAPIRequest(ApiModel):
    """API request for replying to a topic."""

    content: str = Field(min_length=1)
    author_name: str | None = Field(default=None, max_length=100)
    author_email: str | None = Field(default=None, max_length=255)
    parent_reply_id: int | None = None


class FlagAPIRequest(ApiModel):
    """API request for flagging content."""

    content_type: FlaggableType
    content_id: int = Field(strict=True)


class UpvoteAPIRequest(ApiModel):
    """API request for upvoting a topic."""

    topic_id: int = Field(strict=True)


@router.get("/topics", response_model=list[TopicResponse])
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
    sort_by: str | None = Query(default=None, alias="sortBy"),
    tags: list[str] | None = Query(default=None),
    search: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> list[TopicResponse]:
    """List visible topics.

    Args:
        list_topics_use_case: List topics use case from DI
        sort_by: "recent", "replies" or "newest"
        tags: Keep topics carrying any of these tags (repeatable)
        search: Case-insensitive text in title or content
        limit: Page size
        offset: Page start

    Returns:
        Topics below the moderation threshold
    """
    return await list_topics_use_case.execute(
        ListTopicsRequest(
            sort_by=sort_by, tags=tags, search=search, limit=limit, offset=offset
        )
    )


@router.post(
    "/topics", response_model=TopicResponse, status_code=status.HTTP_201_CREATED
)
async def create_topic(
    body: CreateTopicAPIRequest,
    request: Request,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
) -> TopicResponse:
    """Create a new topic.

    Raises:
        HTTPException: 429 if rejected by spam protection
    """
    try:
        return await create_topic_use_case.execute(
            CreateTopicRequest(
                title=body.title,
                content=body.content,
                author_name=body.author_name,
                author_email=body.author_email,
                tags=body.tags,
                client_key=client_key(request),
            )
        )
    except DomainError as e:
        logfire.warn("Topic creation rejected", error=str(e))
        raise to_http_exception(e)


@router.get("/topics/{topic_id}", response_model=GetTopicResponse)
async def get_topic(
    topic_id: str,
    get_topic_use_case: FromDishka[GetTopicUseCase],
) -> GetTopicResponse:
    """Get a topic with its replies as a tree.

    Raises:
        HTTPException: 400 for a non-numeric id, 404 if not found
    """
    try:
        return await get_topic_use_case.execute(
            GetTopicRequest(topic_id=parse_topic_id(topic_id))
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/topics/{topic_id}/reply",
    response_model=ReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    topic_id: str,
    body: CreateReplyAPIRequest,
    request: Request,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
) -> ReplyResponse:
    """Reply to a topic, or to a top-level reply via parentReplyId.

    Raises:
        HTTPException: 429 if rejected by spam protection, 400 if nesting
            would exceed two levels, 404 if the topic or parent is missing
    """
    parsed_id = parse_topic_id(topic_id)
    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                topic_id=parsed_id,
                content=body.content,
                author_name=body.author_name,
                author_email=body.author_email,
                parent_reply_id=body.parent_reply_id,
                client_key=client_key(request),
            )
        )
    except DomainError as e:
        logfire.warn("Reply rejected", topic_id=parsed_id, error=str(e))
        raise to_http_exception(e)


@router.post("/flag", response_model=MessageResponse)
async def flag_content(
    body: FlagAPIRequest,
    flag_content_use_case: FromDishka[FlagContentUseCase],
) -> MessageResponse:
    """Flag a topic or reply as inappropriate."""
    try:
        return await flag_content_use_case.execute(
            FlagContentRequest(content_type=body.content_type, content_id=body.content_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/upvote", response_model=MessageResponse)
async def upvote_topic(
    body: UpvoteAPIRequest,
    upvote_topic_use_case: FromDishka[UpvoteTopicUseCase],
) -> MessageResponse:
    """Upvote a topic."""
    try:
        return await upvote_topic_use_case.execute(UpvoteTopicRequest(topic_id=body.topic_id))
    except DomainError as e:
        raise to_http_exception(e)
