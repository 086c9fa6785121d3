from typing import Annotated

from fastapi import APIRouter, Depends, Query

from buku_api.dependencies.buku import get_buku_service
from buku_api.domain import BukuId
from buku_api.schemas.buku import BukuInsert, BukuInsertMany, BukuRead
from buku_api.schemas.envelope import (
    DataEnvelope,
    ErrorEnvelope,
    ResultEnvelope,
    StatusEnvelope,
)
from buku_api.services.buku_service import BukuService

router = APIRouter(tags=["buku"])

_BAD_INPUT = {400: {"model": ErrorEnvelope, "description": "Malformed id or payload"}}
_NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Buku not found"}}
_STORAGE = {500: {"model": ErrorEnvelope, "description": "Storage failure"}}


@router.get(
    "/bukus",
    response_model=DataEnvelope[list[BukuRead]],
    summary="List all books",
    responses={**_STORAGE},
)
def list_buku(
    svc: Annotated[BukuService, Depends(get_buku_service)],
) -> DataEnvelope[list[BukuRead]]:
    """Retrieve every book, each joined with its Penulis name."""
    return DataEnvelope(data=svc.list_buku())


@router.get(
    "/buku",
    response_model=DataEnvelope[list[BukuRead]],
    summary="Get a book by id",
    description="Returns a list holding the matching book, or an empty list.",
    responses={**_BAD_INPUT, **_STORAGE},
)
def get_buku(
    svc: Annotated[BukuService, Depends(get_buku_service)],
    id: Annotated[BukuId, Query(description="Id of the Buku")],
) -> DataEnvelope[list[BukuRead]]:
    return DataEnvelope(data=svc.find_buku(id))


@router.post(
    "/buku",
    response_model=ResultEnvelope[BukuRead],
    summary="Create a book",
    responses={**_BAD_INPUT, **_STORAGE},
)
def create_buku(
    payload: BukuInsert,
    svc: Annotated[BukuService, Depends(get_buku_service)],
) -> ResultEnvelope[BukuRead]:
    return ResultEnvelope(result=svc.create_buku(payload))


@router.post(
    "/bukus",
    response_model=ResultEnvelope[list[BukuRead]],
    summary="Create several books",
    description=(
        "Inserts every item of `data` in one transaction; nothing is stored on failure."
    ),
    responses={**_BAD_INPUT, **_STORAGE},
)
def create_many_buku(
    payload: BukuInsertMany,
    svc: Annotated[BukuService, Depends(get_buku_service)],
) -> ResultEnvelope[list[BukuRead]]:
    return ResultEnvelope(result=svc.create_many_buku(payload))


@router.put(
    "/buku/{id}",
    response_model=ResultEnvelope[BukuRead],
    summary="Partially update a book",
    description="Only fields present and non-null in the payload are written.",
    responses={**_BAD_INPUT, **_NOT_FOUND, **_STORAGE},
)
def update_buku(
    id: BukuId,
    payload: BukuInsert,
    svc: Annotated[BukuService, Depends(get_buku_service)],
) -> ResultEnvelope[BukuRead]:
    return ResultEnvelope(result=svc.update_buku(id, payload))


@router.delete(
    "/buku/{id}",
    response_model=StatusEnvelope,
    summary="Delete a book",
    description="Deleting an id that does not exist still succeeds.",
    responses={**_BAD_INPUT, **_STORAGE},
)
def delete_buku(
    id: BukuId,
    svc: Annotated[BukuService, Depends(get_buku_service)],
) -> StatusEnvelope:
    svc.delete_buku(id)
    return StatusEnvelope()
