class BukuDomainError(ValueError):
    """Base exception for all Buku-related domain errors."""

    pass


class BukuNotFoundError(BukuDomainError):
    """Raised when a Buku with the requested id does not exist."""

    def __init__(self, buku_id: int) -> None:
        super().__init__(f"Buku with id {buku_id} not found")
        self.buku_id = buku_id
