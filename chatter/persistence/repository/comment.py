"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import any_, case, desc, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.domain.model import Comment
from chatter.domain.repository import CommentRepository
from chatter.domain.value import (
    CommentId,
    PageId,
    ReactionKind,
    ReactionOutcome,
    SortMode,
    UserId,
)
from chatter.persistence.mappers import comment_to_dict, row_to_comment
from chatter.persistence.tables import comments_table

_c = comments_table.c


def _uuid_param(value: CommentId | UserId):
    return literal(value, type_=UUID(as_uuid=True))


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every mutation is a single UPDATE ... RETURNING statement on one row, so
    PostgreSQL's row lock gives per-comment atomic read-modify-write.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[Comment]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(row) if row else None

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(_c.id == comment_id)
        return await self._fetch_one(stmt)

    async def find_top_level(
        self,
        page_id: PageId,
        sort: SortMode,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find visible top-level comments of a page, sorted and sliced."""
        stmt = select(comments_table).where(
            _c.page_id == page_id,
            _c.is_deleted.is_(False),
            _c.parent_id.is_(None),
        )

        if sort == SortMode.MOST_LIKED:
            stmt = stmt.order_by(desc(func.cardinality(_c.likes)))
        elif sort == SortMode.MOST_DISLIKED:
            stmt = stmt.order_by(desc(func.cardinality(_c.dislikes)))
        stmt = stmt.order_by(desc(_c.created_at), desc(_c.id))

        stmt = stmt.limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row) for row in result.mappings().all()]

    async def count_top_level(self, page_id: PageId) -> int:
        """Count visible top-level comments of a page."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_c.page_id == page_id)
            .where(_c.is_deleted.is_(False))
            .where(_c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_children(
        self,
        parent_id: CommentId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        stmt = select(comments_table).where(_c.parent_id == parent_id)

        if not include_deleted:
            stmt = stmt.where(_c.is_deleted.is_(False))

        stmt = stmt.order_by(_c.created_at, _c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(row) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or replace)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(_c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()

        return await self.find_by_id(comment.id) or comment

    async def add_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Append ``reply_id`` to the parent's back-link unless present."""
        reply = _uuid_param(reply_id)
        stmt = (
            update(comments_table)
            .where(_c.id == parent_id)
            .values(
                reply_ids=case(
                    (reply == any_(_c.reply_ids), _c.reply_ids),
                    else_=func.array_append(_c.reply_ids, reply),
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_reply_ids(
        self, comment_id: CommentId, reply_ids: List[CommentId]
    ) -> Optional[Comment]:
        """Overwrite the back-link of a comment."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .values(reply_ids=list(reply_ids))
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        await self.session.flush()
        return updated

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a non-deleted comment."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .where(_c.is_deleted.is_(False))
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        await self.session.flush()
        return updated

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft-delete a non-deleted comment."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .where(_c.is_deleted.is_(False))
            .values(is_deleted=True, updated_at=datetime.now())
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        await self.session.flush()
        return updated

    async def toggle_reaction(
        self,
        comment_id: CommentId,
        user_id: UserId,
        kind: ReactionKind,
    ) -> Optional[tuple[Comment, ReactionOutcome]]:
        """Toggle a reaction in one UPDATE evaluated against the current row.

        SET expressions all read the pre-update row, so the membership test
        is shared by both columns and a concurrent toggle re-evaluates it on
        the newest row version.
        """
        if kind is ReactionKind.LIKE:
            target_col, opposite_col = _c.likes, _c.dislikes
        else:
            target_col, opposite_col = _c.dislikes, _c.likes

        user = _uuid_param(user_id)
        already_reacted = user == any_(target_col)

        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .where(_c.is_deleted.is_(False))
            .values(
                {
                    target_col: case(
                        (already_reacted, func.array_remove(target_col, user)),
                        else_=func.array_append(target_col, user),
                    ),
                    opposite_col: case(
                        (already_reacted, opposite_col),
                        else_=func.array_remove(opposite_col, user),
                    ),
                }
            )
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        if updated is None:
            return None
        await self.session.flush()

        outcome = (
            ReactionOutcome.ADDED
            if user_id in updated.reactors(kind)
            else ReactionOutcome.REMOVED
        )
        return updated, outcome
