import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from buku_api.models import Buku, Penulis


class DataFactory:
    def __init__(self, session: Session):
        self.session = session

    def create_penulis(self, name: str = "Andrea Hirata") -> Penulis:
        p = Penulis(name=name)
        self.session.add(p)
        self.session.flush()
        return p

    def create_buku(self, name: str = "Test Buku", penulis_id: int | None = None) -> Buku:
        b = Buku(name=name, penulis_id=penulis_id)
        self.session.add(b)
        self.session.flush()
        return b

    def get_all_buku(self) -> list[Buku]:
        self.session.expire_all()
        return list(self.session.execute(select(Buku).order_by(Buku.id)).scalars().all())

    def commit(self):
        self.session.commit()


@pytest.fixture
def test_data(db_session: Session) -> DataFactory:
    return DataFactory(db_session)


@pytest.fixture
def sample_buku(test_data: DataFactory):
    hirata = test_data.create_penulis(name="Andrea Hirata")
    pram = test_data.create_penulis(name="Pramoedya Ananta Toer")
    laskar = test_data.create_buku(name="Laskar Pelangi", penulis_id=hirata.id)
    bumi = test_data.create_buku(name="Bumi Manusia", penulis_id=pram.id)
    anon = test_data.create_buku(name="Hikayat Hang Tuah")
    ids = {
        "penulis": {"hirata": hirata.id, "pram": pram.id},
        "buku": {"laskar": laskar.id, "bumi": bumi.id, "anon": anon.id},
    }
    test_data.commit()
    return ids
