"""Get comments use case."""

from pydantic import BaseModel

from chatter.domain.service import ThreadService
from chatter.domain.value import PageId, SortMode
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.comment.view import CommentView


class GetCommentsRequest(BaseModel):
    """Get top-level comments of a page."""

    page_id: str
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    sort: SortMode = SortMode.NEWEST


class Pagination(BaseModel):
    """Pagination block of a comment listing."""

    page: int
    limit: int
    total_pages: int
    total_comments: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]
    pagination: Pagination


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for listing a page's top-level comments."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get comments use case.

        Args:
            thread_service: Thread read-side service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Page, paging and sort parameters

        Returns:
            One page of top-level comments with pagination info

        Raises:
            ValidationError: If page or limit is out of range
        """
        thread_page = await self.thread_service.list_top_level(
            page_id=PageId(request.page_id),
            page=request.page,
            page_size=request.limit,
            sort=request.sort,
        )

        return GetCommentsResponse(
            comments=[CommentView.from_comment(c) for c in thread_page.items],
            pagination=Pagination(
                page=thread_page.page,
                limit=thread_page.page_size,
                total_pages=thread_page.total_pages,
                total_comments=thread_page.total,
            ),
        )
