from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from buku_api.database import Base


class Penulis(Base):
    __tablename__ = "Penulis"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)


class Buku(Base):
    __tablename__ = "Buku"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)

    # column keeps the camelCase name used by existing databases
    penulis_id: Mapped[int | None] = mapped_column(
        "penulisId",
        Integer,
        ForeignKey("Penulis.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
