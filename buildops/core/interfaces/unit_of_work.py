"""Abstract interface for atomic multi-record writes."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class IUnitOfWork(ABC):
    """
    Transactional boundary shared by store calls.

    Store calls made inside ``transaction()`` commit together when the block
    exits normally and roll back together when it raises.

    Usage:
        async with uow.transaction():
            await orders.update_status(order)
            await ledger.create_transaction(entry)
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic read-modify-write block."""
        pass
