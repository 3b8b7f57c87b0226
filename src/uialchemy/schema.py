"""Schema descriptors: the read-only view of a record type the resolver needs."""
import logging
from typing import Iterable, Protocol, Tuple, runtime_checkable

from pluralizer import Pluralizer
from sqlalchemy import (BigInteger, Boolean, Date, DateTime, Double, Enum, Float, Integer,
                        LargeBinary, Numeric, SmallInteger, String, Text, Time, Uuid)
from sqlalchemy.orm import DeclarativeBase

from .exceptions import SchemaError
from .utils import col2attr, columns, last_segment, underscore

pluralizer = Pluralizer()
pluralize = pluralizer.plural

log = logging.getLogger('UIAlchemy')

INTEGER_FAMILY = (Integer, BigInteger, SmallInteger)

# Order matters: Float and Double subclass Numeric, Text subclasses String.
SQL_TYPE_TAGS = (
    (Float, 'float'),
    (Double, 'float'),
    (Numeric, 'decimal'),
    (INTEGER_FAMILY, 'integer'),
    (Uuid, 'uuid'),
    (Time, 'time'),
    (Date, 'date'),
    (LargeBinary, 'binary'),
    (Enum, 'string'),
    (Text, 'string'),
    (String, 'string'),
    (Boolean, 'boolean'),
)


@runtime_checkable
class SchemaDescriptor(Protocol):
    """What the resolver needs to know about a record type."""

    source: str
    type_name: str

    def fields(self) -> Tuple[str, ...]:
        ...

    def field_type(self, name: str):
        ...


def to_type_tag(column) -> str:
    """Transform a SQLAlchemy column into a primitive type tag."""
    sql_type = column.type
    if column.primary_key and isinstance(sql_type, INTEGER_FAMILY):
        return 'id'
    if isinstance(sql_type, DateTime):
        return 'utc_datetime' if sql_type.timezone else 'naive_datetime'
    for types, tag in SQL_TYPE_TAGS:
        if isinstance(sql_type, types):
            return tag
    return type(sql_type).__name__.lower()


class ModelSchema:
    """Schema descriptor of a SQLAlchemy declarative model."""

    def __init__(self, model: DeclarativeBase):
        if not hasattr(model, '__mapper__') or not hasattr(model, '__table__'):
            raise SchemaError(f'{model!r} is not a mapped SQLAlchemy model')
        self.model = model
        self.source = model.__table__.name
        self.type_name = f'{model.__module__}.{model.__qualname__}'
        attrs = col2attr(model)
        self._types = {attrs.get(name, name): to_type_tag(col) for name, col in columns(model).items()}
        log.debug('Described model "%s" as "%s"', self.type_name, self.source)

    def fields(self) -> Tuple[str, ...]:
        return tuple(self._types)

    def field_type(self, name: str):
        return self._types.get(name)

    def __repr__(self):
        return f'<ModelSchema {last_segment(self.type_name)}>'


class StaticSchema:
    """Schema descriptor built from an explicit list of `(field, type)` pairs.

    When `source` is not given it follows the table naming convention: the
    plural of the underscored type name (`AccountReceivable` -> `account_receivables`).
    """

    def __init__(self, type_name: str, fields: Iterable[Tuple[str, object]], source: str = None):
        self.type_name = type_name
        self._types = dict(fields)
        self.source = source or pluralize(underscore(last_segment(type_name)))

    def fields(self) -> Tuple[str, ...]:
        return tuple(self._types)

    def field_type(self, name: str):
        return self._types.get(name)

    def __repr__(self):
        return f'<StaticSchema {last_segment(self.type_name)}>'
