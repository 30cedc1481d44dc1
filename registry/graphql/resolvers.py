import logging
import typing as t
from strawberry.types import Info

from registry.db.store import PersonStore
from registry.graphql import types as gql
from registry.util.time import to_rfc3339


logger = logging.getLogger(__name__)


def get_people(self, info: Info) -> t.List[gql.Person]:
  store: PersonStore = info.context["store"]
  now = info.context["clock"]()

  return [gql.Person.from_model(m, now) for m in store.list()]


def create_person(self, info: Info, name: str) -> gql.Person:
  store: PersonStore = info.context["store"]
  now = info.context["clock"]()

  person = store.append(name, now)
  logger.info("Created person %r dated %s", person.name, to_rfc3339(person.date))

  return gql.Person.from_model(person, now)
