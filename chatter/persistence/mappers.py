"""Conversion between table rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by validation
rather than by an ORM mapper: pydantic wraps text columns in their value
objects and turns the UUID[] columns into sets and lists.
"""

from collections.abc import Mapping
from typing import Any

from chatter.domain.model import Comment, User


def row_to_user(row: Mapping[str, Any]) -> User:
    return User.model_validate(dict(row))


def user_to_dict(user: User) -> dict[str, Any]:
    return user.model_dump()


def row_to_comment(row: Mapping[str, Any]) -> Comment:
    data = dict(row)
    # NULL arrays from rows written outside the application
    for column in ("likes", "dislikes", "reply_ids"):
        data[column] = data[column] or []
    return Comment.model_validate(data)


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    """Row values for ``comment``; reaction sets are stored sorted."""
    data = comment.model_dump()
    data["likes"] = sorted(comment.likes)
    data["dislikes"] = sorted(comment.dislikes)
    data["reply_ids"] = list(comment.reply_ids)
    return data
