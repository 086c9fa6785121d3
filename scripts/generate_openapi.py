import argparse
import json
from pathlib import Path

from buku_api.main import app


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write the Buku API OpenAPI schema to a file.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("docs") / "openapi.json",
        help="Destination file; parent directories are created.",
    )
    return parser.parse_args()


def write_schema(output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(app.openapi(), f, indent=2)
    return output_path


def main() -> None:
    args = parse_args()
    output_path = write_schema(args.output)
    print(f"OpenAPI schema written to {output_path}")


if __name__ == "__main__":
    main()
