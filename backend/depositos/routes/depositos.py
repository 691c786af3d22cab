from fastapi import APIRouter, Depends, HTTPException, Query

from depositos.deps import get_list_view_model, get_repository
from depositos.schemas.deposito import DepositoListView, DepositoPresentation, DepositoRead
from depositos.services.classification import get_dominio_color, get_origen_icon
from depositos.services.repository import DepositoRepository
from depositos.services.view_model import (
    DepositoDetailViewModel,
    DepositoListViewModel,
    DetailState,
    filter_depositos,
    format_amount,
    sum_montos,
)

router = APIRouter(prefix="/depositos", tags=["Depositos"])


def _list_view(vm: DepositoListViewModel, dominio: str | None, q: str) -> DepositoListView:
    # filters are per request; the shared view model only owns the fetched list
    dominio = dominio or None
    visible = filter_depositos(vm.depositos, dominio, q)
    total = sum_montos(visible)
    return DepositoListView(
        items=visible,
        total=total,
        total_formatted=format_amount(total, vm.currency),
        dominios=list(vm.available_domains()),
        selected_dominio=dominio,
        search_query=q,
        loading=vm.loading,
        refreshing=vm.refreshing,
        error=str(vm.last_error) if vm.last_error else None,
    )


@router.get("", response_model=DepositoListView)
async def list_depositos(
    dominio: str | None = Query(default=None),
    q: str = Query(default=""),
    vm: DepositoListViewModel = Depends(get_list_view_model),
):
    if not vm.loaded:
        await vm.load()
    return _list_view(vm, dominio, q)


@router.post("/refresh", response_model=DepositoListView)
async def refresh_depositos(
    dominio: str | None = Query(default=None),
    q: str = Query(default=""),
    vm: DepositoListViewModel = Depends(get_list_view_model),
):
    await vm.refresh()
    return _list_view(vm, dominio, q)


async def _load_detail(deposito_id: int, repo: DepositoRepository) -> DepositoRead:
    detail = DepositoDetailViewModel(repo)
    state = await detail.load(deposito_id)
    if state == DetailState.NOT_FOUND:
        raise HTTPException(status_code=404, detail=detail.message)
    if state == DetailState.ERROR:
        raise HTTPException(status_code=503, detail="Could not reach the depositos store")
    return detail.deposito


@router.get("/{deposito_id}", response_model=DepositoRead)
async def get_deposito(deposito_id: int, repo: DepositoRepository = Depends(get_repository)):
    return await _load_detail(deposito_id, repo)


@router.get("/{deposito_id}/presentation", response_model=DepositoPresentation)
async def get_deposito_presentation(deposito_id: int, repo: DepositoRepository = Depends(get_repository)):
    dep = await _load_detail(deposito_id, repo)
    return DepositoPresentation(
        **dep.model_dump(),
        color=get_dominio_color(dep.dominio),
        icon=get_origen_icon(dep.origen),
    )
