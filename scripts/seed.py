#!/usr/bin/env python3
"""Seed the database with demo users, comments, replies and reactions.

Existing users and comments are removed first. Run after migrations:

    python scripts/seed.py
"""

import asyncio
import random
import sys

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.config import Settings
from chatter.domain.model.comment import Comment
from chatter.domain.model.user import User
from chatter.domain.service import CommentService, ReactionService, UserService
from chatter.domain.value import PageId, ReactionKind
from chatter.persistence.tables import comments_table, users_table
from chatter.util.di.container import create_container
from chatter.util.logging import setup_logging
from chatter.util.observability import configure_logfire

DEMO_PAGE = PageId("page-123")

USERS = [
    ("Alice", "alice@example.com", "password1"),
    ("Bob", "bob@example.com", "password2"),
    ("Charlie", "charlie@example.com", "password3"),
    ("Diana", "diana@example.com", "password4"),
    ("Eve", "eve@example.com", "password5"),
]

COMMENT_CONTENTS = [
    "This is a great article! I really enjoyed reading it.",
    "I have a different opinion on this topic. What do you think?",
    "Thanks for sharing this information. Very helpful!",
    "I agree with the points made here. Well written.",
    "This made me think differently about the subject.",
]

REPLY_CONTENTS = [
    "I completely agree with you!",
    "That's a good point. Thanks for sharing.",
    "I hadn't thought of it that way.",
]


async def _seed_users(user_service: UserService) -> list[User]:
    users = []
    for username, email, password in USERS:
        users.append(await user_service.register(username, email, password))
    logfire.info("Users created", count=len(users))
    return users


async def _seed_comments(
    comment_service: CommentService, users: list[User]
) -> list[Comment]:
    top_level = []
    for user in users:
        for content in COMMENT_CONTENTS:
            top_level.append(
                await comment_service.create_comment(
                    page_id=DEMO_PAGE,
                    author_id=user.id,
                    author_username=user.username,
                    content=f"{content} - by {user.username.root}",
                )
            )
    logfire.info("Top-level comments created", count=len(top_level))

    replies = []
    for parent in top_level:
        for reply_content in REPLY_CONTENTS[: random.randint(0, 2)]:
            author = random.choice(users)
            replies.append(
                await comment_service.create_comment(
                    page_id=parent.page_id,
                    author_id=author.id,
                    author_username=author.username,
                    content=f"{reply_content} - Reply by {author.username.root}",
                    parent_id=parent.id,
                )
            )
    logfire.info("Replies added", count=len(replies))

    return top_level + replies


async def _seed_reactions(
    reaction_service: ReactionService, comments: list[Comment], users: list[User]
) -> None:
    for comment in comments:
        shuffled = random.sample(users, len(users))
        num_likes = random.randint(0, 4)
        num_dislikes = random.randint(0, 2)
        for user in shuffled[:num_likes]:
            await reaction_service.react(comment.id, user.id, ReactionKind.LIKE)
        for user in shuffled[num_likes : num_likes + num_dislikes]:
            await reaction_service.react(comment.id, user.id, ReactionKind.DISLIKE)
    logfire.info("Likes and dislikes added")


async def seed() -> None:
    container = create_container()
    try:
        async with container() as request_container:
            session = await request_container.get(AsyncSession)
            await session.execute(comments_table.delete())
            await session.execute(users_table.delete())

            users = await _seed_users(await request_container.get(UserService))
            comments = await _seed_comments(
                await request_container.get(CommentService), users
            )
            await _seed_reactions(
                await request_container.get(ReactionService), comments, users
            )
    finally:
        await container.close()


def main() -> int:
    """Seed the database and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("seed", page_id=DEMO_PAGE):
        try:
            asyncio.run(seed())
        except Exception as e:
            logfire.error(
                "Seeding failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Seeding completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
