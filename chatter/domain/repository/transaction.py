"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The storage transaction of the current request.

    Writes made through repositories become visible to other readers only
    once committed. Use cases commit before announcing a change to viewers.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make all writes of the request so far durable and visible.

        Later writes in the same request start a new transaction.
        """
        pass
