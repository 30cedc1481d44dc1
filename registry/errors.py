class RegistryError(Exception):
  """Errors whose message is safe to show to GraphQL callers."""


class SchemaFileError(RegistryError):
  """The schema document is missing, unparsable or out of date."""
