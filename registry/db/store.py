import logging
import threading
import typing as t
from datetime import datetime

from registry.db.models import Person
from registry.db.seed import seed_people


logger = logging.getLogger(__name__)


class PersonStore:
  """
  In-memory, append-only list of people. Reads hand out copies so
  callers can never change what is stored. A single lock guards
  both reads and appends.
  """
  def __init__(self, people: t.Iterable[Person] = ()):
    self._lock = threading.Lock()
    self._people: t.List[Person] = [p.model_copy() for p in people]

  @classmethod
  def seeded(cls) -> "PersonStore":
    return cls(seed_people())

  def __len__(self) -> int:
    with self._lock:
      return len(self._people)

  def list(self) -> t.List[Person]:
    with self._lock:
      return [p.model_copy() for p in self._people]

  def append(self, name: str, date: datetime) -> Person:
    person = Person(name=name, date=date)

    with self._lock:
      self._people.append(person)
      size = len(self._people)

    logger.debug("Appended person %r, store now holds %d", name, size)

    return person.model_copy()
