from datetime import datetime
import strawberry
import typing as t

from sqlmodel import SQLModel
from registry.db import models as m
from registry.util.time import days_ago


def list_to_map(list: t.List[t.Any]) -> t.Mapping[int, t.Any]:
  return {k: v for k, v in enumerate(list)}


class MetaKeywordArguments(type):
  """
  Builds strawberry fields from keyword arguments on the class statement:
    - model: copy every field of a SQLModel, primary keys become `ID`
    - derived: extra fields computed by `derive` when a view is built
  """
  def __new__(cls, name, bases, class_dict, **kwargs):
    annotations = {}

    if 'model' in kwargs:
      model: SQLModel = kwargs['model']

      for field, type in model.model_fields.items():
        graphql_type = type.annotation
        metadata = list_to_map(type.metadata)

        if hasattr(type, 'primary_key') and type.primary_key is True:
          graphql_type = strawberry.ID

        annotations[field] = graphql_type
        class_dict[field] = strawberry.field(
          graphql_type=graphql_type,
          metadata=metadata
        )

    for field, graphql_type in kwargs.get('derived', {}).items():
      annotations[field] = graphql_type
      class_dict[field] = strawberry.field(graphql_type=graphql_type)

    if annotations:
      class_dict['__annotations__'] = annotations

    return super().__new__(cls, name, bases, class_dict)

  def __init__(cls, name, bases, class_dict, **kwargs):
    return super().__init__(name, bases, class_dict)


class BaseType(metaclass=MetaKeywordArguments):
  @classmethod
  def derive(cls, model: SQLModel, now: datetime) -> t.Dict[str, t.Any]:
    return {}

  # Snapshot of the model at read time, the view never writes back.
  @classmethod
  def from_model(cls, model: SQLModel, now: datetime):
    fields = {k: getattr(model, k) for k in type(model).model_fields}

    return cls(**fields, **cls.derive(model, now))


@strawberry.type
class Person(BaseType, model=m.Person, derived={"days_ago": str}):
  @classmethod
  def derive(cls, model: m.Person, now: datetime) -> t.Dict[str, t.Any]:
    return {"days_ago": days_ago(model.date, now)}
