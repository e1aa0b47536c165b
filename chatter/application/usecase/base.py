"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: validated request in, response model out.

    Use cases orchestrate domain services and let domain errors propagate to
    the interface layer, which maps them to transport errors.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
