"""In-memory transaction."""

from chatter.domain.repository import Transaction


class InMemoryTransaction(Transaction):
    """Dict-backed repositories apply writes immediately; commits are counted."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
