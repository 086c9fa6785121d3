from buku_api.schemas.buku import BukuInsert, BukuInsertMany, BukuRead
from buku_api.schemas.envelope import (
    DataEnvelope,
    ErrorEnvelope,
    GreetingEnvelope,
    ResultEnvelope,
    StatusEnvelope,
)

__all__ = [
    "BukuInsert",
    "BukuInsertMany",
    "BukuRead",
    "DataEnvelope",
    "ErrorEnvelope",
    "GreetingEnvelope",
    "ResultEnvelope",
    "StatusEnvelope",
]
