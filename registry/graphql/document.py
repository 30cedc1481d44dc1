import logging
import strawberry
import typing as t
from pathlib import Path

from graphql import GraphQLError, GraphQLSchema, build_schema
from graphql.utilities import find_breaking_changes

from registry.errors import SchemaFileError


logger = logging.getLogger(__name__)


def load_schema_document(path: t.Union[str, Path]) -> GraphQLSchema:
  try:
    source = Path(path).read_text(encoding="utf-8")
  except OSError as e:
    raise SchemaFileError(f"Cannot read schema document '{path}': {e}") from e

  try:
    return build_schema(source)
  except GraphQLError as e:
    raise SchemaFileError(f"Cannot parse schema document '{path}': {e.message}") from e


"""
Two schemas agree when neither would break clients of the other:
checking both directions catches fields added on either side.
"""
def schema_differences(document: GraphQLSchema, schema: strawberry.Schema) -> t.List[str]:
  live = build_schema(schema.as_str())

  changes = find_breaking_changes(document, live) + find_breaking_changes(live, document)

  return sorted({c.description for c in changes})


def verify_schema_document(path: t.Union[str, Path], schema: strawberry.Schema) -> None:
  document = load_schema_document(path)
  differences = schema_differences(document, schema)

  if differences:
    raise SchemaFileError(
      f"Schema document '{path}' is out of date: " + "; ".join(differences)
    )

  logger.info("Schema document '%s' matches the served schema", path)
