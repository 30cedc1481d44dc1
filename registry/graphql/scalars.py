import strawberry
from datetime import datetime

from registry.util.time import parse_rfc3339, to_rfc3339


# Replaces strawberry's isoformat DateTime so UTC prints as "Z".
DateTime = strawberry.scalar(
  datetime,
  name="DateTime",
  description="Date with time (RFC 3339, UTC)",
  serialize=to_rfc3339,
  parse_value=parse_rfc3339,
)
