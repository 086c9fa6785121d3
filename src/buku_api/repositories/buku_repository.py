import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Row, Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from buku_api.domain import BukuId
from buku_api.models import Buku, Penulis
from buku_api.schemas.buku import BukuInsert

logger = logging.getLogger(__name__)

# attribute name on the model -> storage column name
UPDATABLE_COLUMNS = {
    "name": "name",
    "penulis_id": "penulisId",
}


class BukuRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    @staticmethod
    def _joined_select() -> Select[Any]:
        return (
            select(
                Buku.id,
                Buku.name,
                Buku.penulis_id,
                Penulis.name.label("penulis_name"),
            )
            .select_from(Buku)
            .outerjoin(Penulis, Buku.penulis_id == Penulis.id)
        )

    def list_with_penulis(self) -> Sequence[Row[Any]]:
        stmt = self._joined_select().order_by(Buku.id)
        return self.session.execute(stmt).all()

    def find_with_penulis(self, buku_id: BukuId) -> Sequence[Row[Any]]:
        """
        Returns the rows whose id equals buku_id, joined with the Penulis name.
        Zero or one row since id is the primary key.
        """
        stmt = self._joined_select().where(Buku.id == buku_id)
        return self.session.execute(stmt).all()

    def find_many_with_penulis(self, buku_ids: Sequence[int]) -> Sequence[Row[Any]]:
        if not buku_ids:
            return []
        stmt = self._joined_select().where(Buku.id.in_(buku_ids)).order_by(Buku.id)
        return self.session.execute(stmt).all()

    def get_by_id(self, buku_id: BukuId) -> Buku | None:
        return self.session.get(Buku, buku_id)

    def create(self, payload: BukuInsert) -> Buku:
        buku = Buku(name=payload.name, penulis_id=payload.penulis_id)
        self.session.add(buku)
        self._commit()
        self.session.refresh(buku)

        logger.info("Created buku id=%s", buku.id)
        return buku

    def create_many(self, payloads: Sequence[BukuInsert]) -> list[Buku]:
        """
        Inserts all payloads in a single transaction.

        Either every row is stored or, on any failure, none are.
        """
        rows = [Buku(name=p.name, penulis_id=p.penulis_id) for p in payloads]
        if not rows:
            return []

        self.session.add_all(rows)
        self._commit()
        for row in rows:
            self.session.refresh(row)

        logger.info("Created %d buku rows", len(rows))
        return rows

    def update_fields(self, buku: Buku, patch: BukuInsert) -> Buku:
        update_data = patch.model_dump(exclude_unset=True, exclude_none=True)
        update_data = {k: v for k, v in update_data.items() if k in UPDATABLE_COLUMNS}
        if not update_data:
            return buku

        for attr, value in update_data.items():
            setattr(buku, attr, value)
        self._commit()
        self.session.refresh(buku)

        logger.info(
            "Updated buku id=%s columns=%s",
            buku.id,
            sorted(UPDATABLE_COLUMNS[attr] for attr in update_data),
        )
        return buku

    def delete_by_id(self, buku_id: BukuId) -> int:
        result = self.session.execute(delete(Buku).where(Buku.id == buku_id))
        self._commit()

        deleted = max(getattr(result, "rowcount", 0), 0)
        logger.info("Deleted buku id=%s rows=%d", buku_id, deleted)
        return deleted

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
