import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Row

from buku_api.domain import BukuId
from buku_api.errors import BukuNotFoundError
from buku_api.repositories.buku_repository import BukuRepository
from buku_api.schemas.buku import BukuInsert, BukuInsertMany, BukuRead

logger = logging.getLogger(__name__)


class BukuService:
    def __init__(self, repo: BukuRepository) -> None:
        self.repo = repo

    @staticmethod
    def _map_to_schema(row: Row[Any]) -> BukuRead:
        return BukuRead(
            id=row.id,
            name=row.name,
            penulis_id=row.penulis_id,
            penulis_name=row.penulis_name,
        )

    def _read_one(self, buku_id: int) -> BukuRead:
        rows = self.repo.find_with_penulis(BukuId(buku_id))
        if not rows:
            raise BukuNotFoundError(buku_id)
        return self._map_to_schema(rows[0])

    def list_buku(self) -> list[BukuRead]:
        return [self._map_to_schema(row) for row in self.repo.list_with_penulis()]

    def find_buku(self, buku_id: BukuId) -> list[BukuRead]:
        return [self._map_to_schema(row) for row in self.repo.find_with_penulis(buku_id)]

    def create_buku(self, payload: BukuInsert) -> BukuRead:
        buku = self.repo.create(payload)
        return self._read_one(buku.id)

    def create_many_buku(self, payload: BukuInsertMany) -> list[BukuRead]:
        created = self.repo.create_many(payload.data)
        ids = [buku.id for buku in created]
        rows = self.repo.find_many_with_penulis(ids)
        by_id = {row.id: self._map_to_schema(row) for row in rows}
        return [by_id[buku_id] for buku_id in ids]

    def update_buku(self, buku_id: BukuId, patch: BukuInsert) -> BukuRead:
        buku = self.repo.get_by_id(buku_id)
        if buku is None:
            logger.info("Update skipped, buku id=%s not found", buku_id)
            raise BukuNotFoundError(buku_id)

        self.repo.update_fields(buku, patch)
        # re-read so penulisName follows a changed penulisId
        return self._read_one(buku_id)

    def delete_buku(self, buku_id: BukuId) -> None:
        self.repo.delete_by_id(buku_id)
