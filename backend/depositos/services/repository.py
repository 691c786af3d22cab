# depositos/services/repository.py
import asyncio
import inspect
import logging

from pydantic import ValidationError

from depositos.core.config import settings
from depositos.core.errors import FetchError, NotFoundError
from depositos.schemas.deposito import DepositoRead

logger = logging.getLogger(__name__)


def build_store():
    """Pick the table store configured by DEPOSITOS_BACKEND."""
    if settings.DEPOSITOS_BACKEND == "rest":
        from depositos.store.rest import RestDepositoStore
        return RestDepositoStore()

    from depositos.store.sql import SqlDepositoStore
    return SqlDepositoStore()


class DepositoRepository:
    """Read-only client over a depositos table store."""

    def __init__(self, store=None):
        self.store = store if store is not None else build_store()

    async def _call(self, fn, *args):
        if inspect.iscoroutinefunction(fn):
            return await fn(*args)
        return await asyncio.to_thread(fn, *args)

    def _validate(self, row) -> DepositoRead:
        try:
            return DepositoRead.model_validate(row)
        except ValidationError as e:
            raise FetchError("Store returned a malformed deposito row", cause=e) from e

    async def list_deposits(self) -> list[DepositoRead]:
        """All depositos, newest first."""
        rows = await self._call(self.store.select_all)
        items = [self._validate(r) for r in rows]
        logger.debug("Fetched %d depositos", len(items))
        return items

    async def get_deposit(self, deposito_id: int) -> DepositoRead:
        row = await self._call(self.store.select_one, deposito_id)
        if row is None:
            raise NotFoundError(deposito_id)
        return self._validate(row)
