from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from orderdesk.db import get_db
from orderdesk.dependencies import require_permission
from orderdesk.exceptions import NotFound
from orderdesk.repositories import CustomersRepository
from orderdesk.schemas.auth import ClaimSet, PermissionAction
from orderdesk.schemas.base import MAX_ID
from orderdesk.schemas.customers import CustomerCreate, CustomerSchema, CustomerUpdate

MODULE = "Customer"

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    responses={404: {"description": "Not found"}},
)


def _serialize(customer) -> Dict[str, Any]:
    return CustomerSchema.model_validate(customer).model_dump()


@router.get("", response_model=Dict[str, Any])
def list_customers(
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    sort: Optional[str] = Query(None),
    dir: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    claims: ClaimSet = Depends(require_permission(PermissionAction.VIEW, MODULE)),
    db: Session = Depends(get_db),
):
    """
    Lista clientes com paginação, busca e ordenação.
    """
    repo = CustomersRepository(db)
    params = repo.page_params(page, page_size, sort, dir, search)
    result = repo.paginate(params)
    return result.as_dict([_serialize(c) for c in result.rows])


@router.get("/{customer_id}", response_model=Dict[str, Any])
def get_customer(
    customer_id: int = Path(..., ge=1, le=MAX_ID),
    claims: ClaimSet = Depends(require_permission(PermissionAction.VIEW, MODULE)),
    db: Session = Depends(get_db),
):
    customer = CustomersRepository(db).get(customer_id)
    if not customer:
        raise NotFound("Cliente não encontrado")
    return {"data": _serialize(customer)}


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: CustomerCreate,
    claims: ClaimSet = Depends(require_permission(PermissionAction.ADD, MODULE)),
    db: Session = Depends(get_db),
):
    customer = CustomersRepository(db).create(payload, created_by=claims.sub)
    return {"message": "Cliente criado", "data": _serialize(customer)}


@router.put("/{customer_id}", response_model=Dict[str, Any])
def update_customer(
    payload: CustomerUpdate,
    customer_id: int = Path(..., ge=1, le=MAX_ID),
    claims: ClaimSet = Depends(require_permission(PermissionAction.EDIT, MODULE)),
    db: Session = Depends(get_db),
):
    customer = CustomersRepository(db).update(customer_id, payload.model_dump())
    if not customer:
        raise NotFound("Cliente não encontrado")
    return {"message": "Cliente atualizado", "data": _serialize(customer)}


@router.delete("/{customer_id}", response_model=Dict[str, Any])
def delete_customer(
    customer_id: int = Path(..., ge=1, le=MAX_ID),
    claims: ClaimSet = Depends(require_permission(PermissionAction.DELETE, MODULE)),
    db: Session = Depends(get_db),
):
    if not CustomersRepository(db).delete(customer_id):
        raise NotFound("Cliente não encontrado")
    return {"message": "Cliente removido"}
