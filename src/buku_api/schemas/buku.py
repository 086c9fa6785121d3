from pydantic import BaseModel, ConfigDict, Field

from buku_api.domain import PenulisId


class BukuBase(BaseModel):
    name: str | None = Field(
        default=None, description="Title of the book", examples=["Laskar Pelangi"]
    )
    penulis_id: PenulisId | None = Field(
        default=None,
        alias="penulisId",
        description="Id of the Penulis who wrote the book",
        examples=[1],
    )

    model_config = ConfigDict(populate_by_name=True)


class BukuInsert(BukuBase):
    """Payload for creating a Buku, or for partially updating one."""


class BukuInsertMany(BaseModel):
    data: list[BukuInsert] = Field(description="Books to insert in a single transaction")


class BukuRead(BukuBase):
    id: int
    penulis_name: str | None = Field(
        default=None,
        alias="penulisName",
        description="Name of the referenced Penulis, if any",
    )

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
