"""Write the served schema's SDL to the schema document checked at start-up."""

import sys
from pathlib import Path

from registry.core.config import settings
from registry.graphql.schema import schema


def export(path: str) -> None:
  Path(path).write_text(schema.as_str() + "\n", encoding="utf-8")
  print(f"Wrote schema to {path}")


if __name__ == "__main__":
  export(sys.argv[1] if len(sys.argv) > 1 else settings.schema_file)
