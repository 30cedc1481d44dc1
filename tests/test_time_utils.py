"""Tests for date helpers."""

import math
from datetime import datetime, timedelta, timezone

from registry.db.seed import seed_people
from registry.util.time import days_ago, parse_rfc3339, to_rfc3339, to_utc, utc_now


def test_days_ago_for_seed_person():
  luke = seed_people()[0]
  now = datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)

  hours = (now - luke.date).total_seconds() / 3600
  expected = math.floor(abs(hours) / 24)

  assert expected == (now - luke.date).days
  assert days_ago(luke.date, now) == f"{expected} days ago"


def test_days_ago_is_deterministic():
  date = datetime(1990, 6, 1, 12, tzinfo=timezone.utc)
  now = datetime(2001, 1, 1, 3, tzinfo=timezone.utc)

  assert len({days_ago(date, now) for _ in range(5)}) == 1


def test_days_ago_truncates_partial_days():
  now = datetime(2024, 1, 10, tzinfo=timezone.utc)

  assert days_ago(now - timedelta(hours=47, minutes=59), now) == "1 days ago"
  assert days_ago(now - timedelta(hours=48), now) == "2 days ago"
  assert days_ago(now, now) == "0 days ago"


def test_days_ago_counts_future_dates_as_past():
  now = datetime(2024, 1, 10, tzinfo=timezone.utc)

  assert days_ago(now + timedelta(days=3, hours=5), now) == "3 days ago"


def test_to_rfc3339_uses_z_suffix():
  date = datetime(1951, 2, 3, 4, 5, 6, tzinfo=timezone.utc)

  assert to_rfc3339(date) == "1951-02-03T04:05:06Z"
  assert to_rfc3339(date.replace(tzinfo=None)) == "1951-02-03T04:05:06Z"


def test_to_rfc3339_normalises_offsets():
  date = datetime(2024, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))

  assert to_rfc3339(date) == "2024-01-01T00:00:00Z"


def test_utc_now_is_timezone_aware():
  assert utc_now().tzinfo is not None
  assert utc_now().utcoffset() == timedelta(0)


def test_to_utc_treats_naive_as_utc():
  assert to_utc(datetime(2020, 1, 1)) == datetime(2020, 1, 1, tzinfo=timezone.utc)
  assert to_utc(datetime(2020, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))).hour == 0


def test_parse_rfc3339():
  assert parse_rfc3339("1951-02-03T04:05:06Z") == datetime(1951, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
  assert parse_rfc3339("1951-02-03T06:05:06+02:00") == datetime(1951, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
  assert parse_rfc3339("1951-02-03T04:05:06").tzinfo is not None
