from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from buku_api.context import AppContext
from buku_api.repositories.buku_repository import BukuRepository
from buku_api.services.buku_service import BukuService


def get_app_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db_session(
    context: Annotated[AppContext, Depends(get_app_context)],
) -> Iterator[Session]:
    session = context.session_factory()
    try:
        yield session
    finally:
        session.close()


def get_buku_repository(session: Annotated[Session, Depends(get_db_session)]) -> BukuRepository:
    return BukuRepository(session=session)


def get_buku_service(
    repo: Annotated[BukuRepository, Depends(get_buku_repository)],
) -> BukuService:
    return BukuService(repo=repo)
