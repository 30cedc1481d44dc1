"""
Configuration read from environment variables.

All values have defaults so the server runs out of the box. Set the
variables before the ``Settings`` instance is created, values are
read once at instantiation time.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent.parent


def _flag(name: str, default: str) -> bool:
  return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
  """Application settings loaded from environment variables."""

  project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "People GraphQL"))
  api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "0.1.0"))
  debug: bool = field(default_factory=lambda: _flag("DEBUG", "false"))
  log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
  log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

  graphql_path: str = field(default_factory=lambda: os.getenv("GRAPHQL_PATH", "/graphql"))
  graphiql_page: str = field(default_factory=lambda: os.getenv("GRAPHIQL_PAGE", str(PACKAGE_DIR / "static" / "graphiql.html")))

  # SDL checked against the served schema at start-up.
  schema_file: str = field(default_factory=lambda: os.getenv("SCHEMA_FILE", str(PACKAGE_DIR / "schema.graphql")))

  seed_people: bool = field(default_factory=lambda: _flag("SEED_PEOPLE", "true"))

  host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
  port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))


settings = Settings()
