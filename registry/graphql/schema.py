import strawberry
import typing as t
from datetime import datetime

from strawberry.extensions import MaskErrors

from .types import Person
from .resolvers import get_people, create_person
from .scalars import DateTime
from registry.errors import RegistryError


@strawberry.type
class Query:
  all_people: t.List[Person] = strawberry.field(resolver=get_people)


@strawberry.type
class Mutation:
  create_person: Person = strawberry.mutation(resolver=create_person)


def should_mask_error(error) -> bool:
  original = error.original_error

  return original is not None and not isinstance(original, RegistryError)


def mask_errors() -> MaskErrors:
  return MaskErrors(should_mask_error=should_mask_error)


def build_schema(*, debug: bool = False) -> strawberry.Schema:
  # Extensions are passed as factories so every request gets its own instance.
  extensions = [] if debug else [mask_errors]

  return strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=extensions,
    scalar_overrides={datetime: DateTime},
  )


schema = build_schema()
