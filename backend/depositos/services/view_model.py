"""
View models behind the depositos screens.

The list view model holds the last good list for the session and derives the
visible subset, the domain chips and the running total from it. Nothing here
mutates the fetched records. Fetch failures are logged and swallowed at this
boundary: the previous list stays on screen until the user refreshes again.
"""

import asyncio
import enum
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Iterator

from depositos.core.config import settings
from depositos.core.errors import DepositosError, FetchError, NotFoundError
from depositos.schemas.deposito import DepositoRead
from depositos.services.repository import DepositoRepository

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
NOT_FOUND_MESSAGE = "No se encontró el depósito"


# =========================
# PURE HELPERS
# =========================
def filter_depositos(
    items: Iterable[DepositoRead],
    dominio: str | None = None,
    query: str = "",
) -> list[DepositoRead]:
    """Domain filter (exact match) AND search over nombre/mensaje (case-insensitive)."""
    q = (query or "").lower()
    visible = []
    for dep in items:
        if dominio is not None and dep.dominio != dominio:
            continue
        if q and q not in dep.nombre.lower() and q not in dep.mensaje.lower():
            continue
        visible.append(dep)
    return visible


def iter_dominios(items: Iterable[DepositoRead]) -> Iterator[str]:
    """Distinct non-null dominio values in order of first appearance."""
    seen = set()
    for dep in items:
        if dep.dominio and dep.dominio not in seen:
            seen.add(dep.dominio)
            yield dep.dominio


def sum_montos(items: Iterable[DepositoRead]) -> Decimal:
    # TODO: group by moneda once mixed-currency lists need a currency-safe total
    total = sum((Decimal(dep.monto) for dep in items), Decimal("0"))
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal, currency: str = settings.CURRENCY_LABEL) -> str:
    return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):.2f} {currency}".strip()


class DominioSequence:
    """Restartable view over the dominios of whatever list the source returns."""

    def __init__(self, source):
        self._source = source

    def __iter__(self) -> Iterator[str]:
        return iter_dominios(self._source())


# =========================
# LIST VIEW MODEL
# =========================
class DepositoListViewModel:
    def __init__(self, repository: DepositoRepository, currency: str = settings.CURRENCY_LABEL):
        self.repository = repository
        self.currency = currency

        self.depositos: list[DepositoRead] = []
        self.selected_dominio: str | None = None
        self.search_query: str = ""

        self.loading = False
        self.refreshing = False
        self.loaded = False
        self.last_error: DepositosError | None = None

        self._inflight: asyncio.Task | None = None

    # --- fetching ---
    async def load(self) -> bool:
        """First load on mount. Shows the loading state only until the first fetch settles."""
        if self._fetch_in_flight():
            return await asyncio.shield(self._inflight)
        if not self.loaded:
            self.loading = True
        return await self._start_fetch()

    async def refresh(self) -> bool:
        """Manual refresh; coalesced onto a fetch that is already running."""
        if self._fetch_in_flight():
            return await asyncio.shield(self._inflight)
        self.refreshing = True
        return await self._start_fetch()

    def _fetch_in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def _start_fetch(self) -> bool:
        self._inflight = asyncio.create_task(self._fetch())
        return await asyncio.shield(self._inflight)

    async def _fetch(self) -> bool:
        try:
            depositos = await self.repository.list_deposits()
        except FetchError as e:
            logger.error("Error fetching depositos: %s", e, exc_info=e.cause or e)
            self.last_error = e
            return False
        finally:
            self.loading = False
            self.refreshing = False
            self.loaded = True

        self.depositos = depositos
        self.last_error = None
        return True

    # --- filters ---
    def set_domain_filter(self, dominio: str | None):
        self.selected_dominio = dominio

    def toggle_domain(self, dominio: str):
        self.selected_dominio = None if dominio == self.selected_dominio else dominio

    def set_search_query(self, text: str):
        self.search_query = text or ""

    # --- derived views ---
    def visible(self) -> list[DepositoRead]:
        return filter_depositos(self.depositos, self.selected_dominio, self.search_query)

    def available_domains(self) -> DominioSequence:
        return DominioSequence(lambda: self.depositos)

    def total_amount(self) -> Decimal:
        return sum_montos(self.visible())

    def format_total(self) -> str:
        return format_amount(self.total_amount(), self.currency)


# =========================
# DETAIL VIEW MODEL
# =========================
class DetailState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class DepositoDetailViewModel:
    def __init__(self, repository: DepositoRepository):
        self.repository = repository
        self.state = DetailState.IDLE
        self.deposito: DepositoRead | None = None
        self.message: str | None = None

    async def load(self, deposito_id: int) -> DetailState:
        self.state = DetailState.LOADING
        self.deposito = None
        self.message = None
        try:
            self.deposito = await self.repository.get_deposit(deposito_id)
            self.state = DetailState.FOUND
        except NotFoundError as e:
            logger.warning("Deposito not found: %s", e.deposito_id)
            self.state = DetailState.NOT_FOUND
            self.message = NOT_FOUND_MESSAGE
        except FetchError as e:
            logger.error("Error fetching deposito %s: %s", deposito_id, e, exc_info=e.cause or e)
            self.state = DetailState.ERROR
            self.message = str(e)
        return self.state

