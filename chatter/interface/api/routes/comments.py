"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from pydantic import BaseModel

from chatter.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    ReactToCommentRequest,
    ReactToCommentResponse,
    ReactToCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from chatter.domain.error import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from chatter.domain.service import JWTService
from chatter.domain.value import ReactionKind, SortMode
from chatter.interface.api.security import require_identity

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


def _to_http_error(e: Exception, action: str) -> HTTPException:
    """Map a domain or ID parsing error to an HTTP error."""
    if isinstance(e, NotFoundError):
        logfire.warn(f"{action} failed - not found", error=str(e))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, AuthorizationError):
        logfire.warn(f"Unauthorized {action.lower()} attempt", error=str(e))
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to modify this comment",
        )
    if isinstance(e, (ValidationError, ValueError)):
        logfire.info(f"{action} rejected", error=str(e))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logfire.error(f"Unexpected error: {action.lower()}", error=str(e))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action} failed",
    )


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    page_id: str
    parent_comment_id: str | None = None  # Parent comment ID for replies


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a page or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated, the parent is missing or
            validation fails
    """
    identity = require_identity(jwt_service, authorization)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                page_id=request.page_id,
                content=request.content,
                author_id=identity.user_id,
                parent_id=request.parent_comment_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise _to_http_error(e, "Comment creation")


@router.get("/{page_id}", response_model=GetCommentsResponse)
async def get_comments(
    page_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    sort: SortMode = Query(default=SortMode.NEWEST),
) -> GetCommentsResponse:
    """Get one page of a page's top-level comments.

    Args:
        page_id: Page identifier
        get_comments_use_case: Get comments use case from DI
        page: 1-indexed page number
        limit: Comments per page
        sort: newest, mostLiked or mostDisliked

    Returns:
        Top-level comments and pagination info
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(page_id=page_id, page=page, limit=limit, sort=sort)
        )
    except ValidationError as e:
        raise _to_http_error(e, "Comment listing")


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """Get the direct replies of a comment, oldest first.

    Args:
        comment_id: Parent comment UUID
        get_replies_use_case: Get replies use case from DI

    Returns:
        Visible replies
    """
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=comment_id)
        )
    except ValueError as e:
        raise _to_http_error(e, "Reply listing")


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Updated comment

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    identity = require_identity(jwt_service, authorization)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                user_id=identity.user_id,
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise _to_http_error(e, "Comment update")


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment.

    Only the comment author can delete. Replies stay in place.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Confirmation message

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    identity = require_identity(jwt_service, authorization)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=identity.user_id)
        )
    except (DomainError, ValueError) as e:
        raise _to_http_error(e, "Comment deletion")


async def _react(
    comment_id: str,
    kind: ReactionKind,
    react_use_case: ReactToCommentUseCase,
    jwt_service: JWTService,
    authorization: str | None,
) -> ReactToCommentResponse:
    identity = require_identity(jwt_service, authorization)

    try:
        return await react_use_case.execute(
            ReactToCommentRequest(
                comment_id=comment_id, user_id=identity.user_id, kind=kind
            )
        )
    except (DomainError, ValueError) as e:
        raise _to_http_error(e, "Reaction")


@router.post("/{comment_id}/like", response_model=ReactToCommentResponse)
async def like_comment(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ReactToCommentResponse:
    """Toggle a like on a comment.

    Liking twice removes the like; liking a disliked comment switches the
    reaction.
    """
    return await _react(
        comment_id, ReactionKind.LIKE, react_use_case, jwt_service, authorization
    )


@router.post("/{comment_id}/dislike", response_model=ReactToCommentResponse)
async def dislike_comment(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ReactToCommentResponse:
    """Toggle a dislike on a comment.

    Disliking twice removes the dislike; disliking a liked comment switches
    the reaction.
    """
    return await _react(
        comment_id, ReactionKind.DISLIKE, react_use_case, jwt_service, authorization
    )
