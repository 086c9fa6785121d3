import typing
from typing import Annotated

from pydantic import Field

# upper bound of the 32-bit INTEGER columns holding Buku and Penulis ids
MAX_ID = 2_147_483_647

if typing.TYPE_CHECKING:
    BukuId = typing.NewType("BukuId", int)
    PenulisId = typing.NewType("PenulisId", int)
else:
    _IdInt = Annotated[int, Field(gt=0, le=MAX_ID)]
    BukuId = typing.NewType("BukuId", _IdInt)
    PenulisId = typing.NewType("PenulisId", _IdInt)
