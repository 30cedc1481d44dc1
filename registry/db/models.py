from datetime import datetime
from pydantic import field_validator
from sqlmodel import SQLModel, Field

from registry.util.time import to_utc


class BaseModel(SQLModel):
  pass


class Person(BaseModel):
  # Records created through the API are never given an id.
  id: str = Field(default="", primary_key=True)
  name: str
  date: datetime

  @field_validator("date")
  @classmethod
  def date_in_utc(cls, value: datetime) -> datetime:
    return to_utc(value)
