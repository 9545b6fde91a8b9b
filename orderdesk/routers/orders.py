from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from orderdesk.db import get_db
from orderdesk.dependencies import require_permission
from orderdesk.exceptions import NotFound
from orderdesk.repositories import OrdersRepository
from orderdesk.schemas.auth import ClaimSet, PermissionAction
from orderdesk.schemas.base import MAX_ID
from orderdesk.schemas.orders import OrderCreate, OrderSchema, OrderUpdate

MODULE = "Order"

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
    responses={404: {"description": "Not found"}},
)


def _serialize(order) -> Dict[str, Any]:
    return OrderSchema.model_validate(order).model_dump()


@router.get("", response_model=Dict[str, Any])
def list_orders(
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    sort: Optional[str] = Query(None),
    dir: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    claims: ClaimSet = Depends(require_permission(PermissionAction.VIEW, MODULE)),
    db: Session = Depends(get_db),
):
    """
    Lista pedidos com paginação, busca e ordenação.
    """
    repo = OrdersRepository(db)
    params = repo.page_params(page, page_size, sort, dir, search)
    result = repo.paginate(params)
    return result.as_dict([_serialize(o) for o in result.rows])


@router.get("/{order_id}", response_model=Dict[str, Any])
def get_order(
    order_id: int = Path(..., ge=1, le=MAX_ID),
    claims: ClaimSet = Depends(require_permission(PermissionAction.VIEW, MODULE)),
    db: Session = Depends(get_db),
):
    order = OrdersRepository(db).get(order_id)
    if not order:
        raise NotFound("Pedido não encontrado")
    return {"data": _serialize(order)}


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    claims: ClaimSet = Depends(require_permission(PermissionAction.ADD, MODULE)),
    db: Session = Depends(get_db),
):
    order = OrdersRepository(db).create(payload, created_by=claims.sub)
    return {"message": "Pedido criado", "data": _serialize(order)}


@router.put("/{order_id}", response_model=Dict[str, Any])
def update_order(
    payload: OrderUpdate,
    order_id: int = Path(..., ge=1, le=MAX_ID),
    claims: ClaimSet = Depends(require_permission(PermissionAction.EDIT, MODULE)),
    db: Session = Depends(get_db),
):
    order = OrdersRepository(db).update(order_id, payload.model_dump())
    if not order:
        raise NotFound("Pedido não encontrado")
    return {"message": "Pedido atualizado", "data": _serialize(order)}


@router.delete("/{order_id}", response_model=Dict[str, Any])
def delete_order(
    order_id: int = Path(..., ge=1, le=MAX_ID),
    claims: ClaimSet = Depends(require_permission(PermissionAction.DELETE, MODULE)),
    db: Session = Depends(get_db),
):
    if not OrdersRepository(db).delete(order_id):
        raise NotFound("Pedido não encontrado")
    return {"message": "Pedido removido"}
