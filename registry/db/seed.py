import typing as t
from datetime import datetime, timezone

from registry.db.models import Person


def seed_people() -> t.List[Person]:
  return [
    Person(id="1000", name="Luke Skywalker", date=datetime(1951, 2, 3, 4, 5, 6, tzinfo=timezone.utc)),
    Person(id="1001", name="Leia Organa", date=datetime(1951, 2, 3, 4, 5, 6, tzinfo=timezone.utc)),
    Person(id="1002", name="Darth Vader", date=datetime(1931, 2, 3, 4, 5, 6, tzinfo=timezone.utc)),
    Person(id="1003", name="Han Solo", date=datetime(1946, 2, 3, 4, 5, 6, tzinfo=timezone.utc)),
    Person(id="1004", name="Wilhuff Tarkin", date=datetime(1942, 2, 3, 4, 5, 6, tzinfo=timezone.utc)),
  ]
