import re
from typing import Tuple

from sqlalchemy.orm import ColumnProperty, DeclarativeBase

ACRONYM = re.compile(r'([A-Z]+)([A-Z][a-z])')
LOWER_UPPER = re.compile(r'([a-z\d])([A-Z])')


def all_model(base) -> Tuple[DeclarativeBase]:
    return tuple(mapper.class_ for mapper in base.registry.mappers)


def columns(model):
    return {c.name: c for c in model.__mapper__.columns}


def col2attr(model) -> dict:
    """Returns a dict which associate column names with attribute names."""
    return { next(iter(p.columns)).name: p.key
             for p in model.__mapper__.attrs if isinstance(p, ColumnProperty)}


def underscore(camel: str) -> str:
    """Transform any camel case string into a snake case.

    `AccountReceivable` -> `account_receivable`, `HTTPServer` -> `http_server`.
    """
    return LOWER_UPPER.sub(r'\1_\2', ACRONYM.sub(r'\1_\2', camel)).replace('-', '_').lower()


def capitalize(snake: str) -> str:
    """Upper-case the first letter of every underscore separated word.

    `account_receivables` -> `Account Receivables`.
    """
    return ' '.join(word[:1].upper() + word[1:] for word in snake.split('_') if word)


def capitalize_first(value: str) -> str:
    """Upper-case the first letter, lower-case the rest."""
    return value[:1].upper() + value[1:].lower()


def last_segment(dotted: str) -> str:
    return dotted.rsplit('.', 1)[-1]


def load_class(class_path: str) -> type:
    full_path = class_path.rsplit('.')
    class_name = full_path.pop()
    module = __import__('.'.join(full_path), fromlist=[class_name])
    return getattr(module, class_name)
