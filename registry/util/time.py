"""Clock and formatting helpers for person dates."""

import math
from datetime import datetime, timezone


def utc_now() -> datetime:
  return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
  """Normalise to UTC. Naive datetimes are taken to be UTC already."""
  if dt.tzinfo is None:
    return dt.replace(tzinfo=timezone.utc)

  return dt.astimezone(timezone.utc)


def to_rfc3339(dt: datetime) -> str:
  """Format a datetime as RFC 3339, using a ``Z`` suffix for UTC."""
  return to_utc(dt).isoformat().replace("+00:00", "Z")


def parse_rfc3339(value: str) -> datetime:
  # fromisoformat only accepts a trailing "Z" from Python 3.11.
  if value.endswith(("Z", "z")):
    value = value[:-1] + "+00:00"

  return to_utc(datetime.fromisoformat(value))


def days_ago(date: datetime, now: datetime) -> str:
  """
  Whole days between `date` and `now`, always counted as "ago":
  a date in the future still renders as a positive number of days.
  """
  hours = (now - date).total_seconds() / 3600
  days = math.floor(abs(hours) / 24)

  return f"{days} days ago"
