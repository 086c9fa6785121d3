from __future__ import annotations

import argparse
from pathlib import Path

from buku_api.config import settings
from buku_api.database import Base, build_engine, build_session_factory
from scripts.penulis_seeder import seed_penulis


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Insert Penulis rows referenced by Buku.")
    parser.add_argument("names", nargs="*", help="Penulis names to insert.")
    parser.add_argument(
        "--from-file",
        type=Path,
        help="Text file with one Penulis name per line.",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Overrides BUKU_DATABASE_URL.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    names = list(args.names)
    if args.from_file is not None:
        names.extend(args.from_file.read_text(encoding="utf-8").splitlines())

    engine = build_engine(args.database_url)
    Base.metadata.create_all(engine)
    session_factory = build_session_factory(engine)
    with session_factory() as session:
        stats = seed_penulis(session, names)
    engine.dispose()

    print(
        "Seed finished. "
        f"requested={stats.requested} inserted={stats.inserted} skipped={stats.skipped}"
    )


if __name__ == "__main__":
    main()
