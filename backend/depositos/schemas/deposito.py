from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class DepositoBase(BaseModel):
    nombre: str
    monto: Decimal = Field(ge=0)
    moneda: str
    origen: str | None = None
    dominio: str | None = None
    mensaje: str = ""
    canal: str
    hash: str


class DepositoCreate(DepositoBase):
    # id and creado_en are assigned by the store
    pass


class DepositoUpdate(BaseModel):
    nombre: str | None = None
    monto: Decimal | None = Field(default=None, ge=0)
    moneda: str | None = None
    origen: str | None = None
    dominio: str | None = None
    mensaje: str | None = None
    canal: str | None = None
    hash: str | None = None


class DepositoRead(DepositoBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    creado_en: datetime


class DepositoPresentation(DepositoRead):
    color: str
    icon: str


class DepositoListView(BaseModel):
    items: list[DepositoRead]
    total: Decimal
    total_formatted: str
    dominios: list[str]
    selected_dominio: str | None = None
    search_query: str = ""
    loading: bool
    refreshing: bool
    error: str | None = None
