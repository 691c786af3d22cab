# depositos/store/rest.py
import httpx

from depositos.core.config import settings
from depositos.core.errors import FetchError

TABLE = "depositos"


class RestDepositoStore:
    """
    Reads the depositos table over the Supabase / PostgREST HTTP API.

    Only two queries are issued:
    - select=*&order=creado_en.desc
    - select=*&id=eq.<id>
    """

    def __init__(
        self,
        base_url: str = settings.SUPABASE_URL,
        api_key: str = settings.SUPABASE_KEY,
        timeout: float = settings.HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{TABLE}"

    def _headers(self) -> dict:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    async def _get(self, params: dict) -> list[dict]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.table_url, params=params, headers=self._headers())
                resp.raise_for_status()
                rows = resp.json()
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {self.table_url} failed", cause=e) from e
        except ValueError as e:
            raise FetchError("Store returned invalid JSON", cause=e) from e

        if not isinstance(rows, list):
            raise FetchError(f"Unexpected payload from store: {type(rows).__name__}")
        return rows

    async def select_all(self) -> list[dict]:
        return await self._get({"select": "*", "order": "creado_en.desc"})

    async def select_one(self, deposito_id: int) -> dict | None:
        rows = await self._get({"select": "*", "id": f"eq.{deposito_id}"})
        return rows[0] if rows else None
