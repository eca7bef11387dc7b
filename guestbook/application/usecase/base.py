"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One user-facing operation, taking and returning pydantic models.

    Use cases orchestrate domain services and never touch storage or HTTP
    directly.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
