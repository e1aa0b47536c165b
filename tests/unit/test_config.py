"""Unit tests for settings validation."""

import pytest
from pydantic import ValidationError

from chatter.config import AuthSettings, CommentSettings, Settings


def test_default_secret_refused_in_production():
    with pytest.raises(ValidationError, match="jwt_secret"):
        Settings(environment="production")


def test_production_with_secret():
    settings = Settings(environment="production", auth=AuthSettings(jwt_secret="s3cret"))

    assert settings.auth.jwt_secret == "s3cret"


def test_default_page_size_must_fit_max():
    with pytest.raises(ValidationError, match="default_page_size"):
        Settings(comments=CommentSettings(default_page_size=50, max_page_size=20))
