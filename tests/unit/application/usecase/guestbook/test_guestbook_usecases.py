"""Unit tests for the guestbook use cases."""

import pytest

from guestbook.application.usecase.guestbook import (
    ListGreetingsUseCase,
    SignGuestbookUseCase,
)
from guestbook.application.usecase.guestbook.list_greetings import ListGreetingsRequest
from guestbook.application.usecase.guestbook.sign_guestbook import SignGuestbookRequest
from guestbook.domain.error import ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignGuestbook:
    """Tests for SignGuestbookUseCase."""

    @pytest.mark.asyncio
    async def test_signed_greeting(self, unit_env):
        use_case = await unit_env.get(SignGuestbookUseCase)

        greeting = await use_case.execute(
            SignGuestbookRequest(author="alice@example.com", content="Hello")
        )

        assert greeting.author == "alice@example.com"
        assert greeting.content == "Hello"
        assert not greeting.anonymous
        assert greeting.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_anonymous_greeting(self, unit_env):
        use_case = await unit_env.get(SignGuestbookUseCase)

        greeting = await use_case.execute(SignGuestbookRequest(content="Hi"))

        assert greeting.author == ""
        assert greeting.anonymous


class TestListGreetings:
    """Tests for ListGreetingsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_signed_greetings_newest_first(self, unit_env):
        sign = await unit_env.get(SignGuestbookUseCase)
        list_greetings = await unit_env.get(ListGreetingsUseCase)
        await sign.execute(SignGuestbookRequest(content="first"))
        await sign.execute(SignGuestbookRequest(content="second"))

        response = await list_greetings.execute(ListGreetingsRequest())

        assert [g.content for g in response.greetings] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_empty_guestbook(self, unit_env):
        list_greetings = await unit_env.get(ListGreetingsUseCase)

        response = await list_greetings.execute(ListGreetingsRequest())

        assert response.greetings == []

    @pytest.mark.asyncio
    async def test_invalid_limit(self, unit_env):
        list_greetings = await unit_env.get(ListGreetingsUseCase)

        with pytest.raises(ValidationError):
            await list_greetings.execute(ListGreetingsRequest(limit=500))
