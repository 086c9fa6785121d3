from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from buku_api.models import Penulis


@dataclass
class SeedStats:
    requested: int = 0
    inserted: int = 0
    skipped: int = 0


def normalize_names(names: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for raw in names:
        name = raw.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result


def seed_penulis(session: Session, names: Iterable[str]) -> SeedStats:
    """Inserts a Penulis row for every name not already stored."""
    wanted = normalize_names(names)
    stats = SeedStats(requested=len(wanted))
    if not wanted:
        return stats

    existing = set(session.scalars(select(Penulis.name).where(Penulis.name.in_(wanted))).all())
    new_rows = [Penulis(name=name) for name in wanted if name not in existing]

    session.add_all(new_rows)
    session.commit()

    stats.inserted = len(new_rows)
    stats.skipped = stats.requested - stats.inserted
    return stats
