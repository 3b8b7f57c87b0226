"""Maps primitive field types to UI presentation hints.

The rules are evaluated in order and the first one containing the type wins.
Types no rule knows about fall back to a generic classification, so new
primitive types degrade gracefully instead of failing.
"""
from collections.abc import Hashable
from typing import NamedTuple, Optional

from .utils import capitalize_first


class Classification(NamedTuple):
    html_type: str
    length: int
    precision: int = 0
    scale: int = 0
    placeholder: Optional[str] = None


INTEGER_TYPES = frozenset({'id', 'integer'})
FLOAT_TYPES = frozenset({'float', 'decimal'})
TEXT_TYPES = frozenset({'string', 'binary_id', 'binary', 'bitstring'})
DATETIME_TYPES = frozenset({'naive_datetime', 'naive_datetime_usec', 'utc_datetime', 'utc_datetime_usec'})
TIME_TYPES = frozenset({'time', 'time_usec'})
UUID_TYPES = frozenset({'uuid'})

RULES = (
    (INTEGER_TYPES, Classification('number', 10, 10, 0, '0')),
    (FLOAT_TYPES, Classification('number', 12, 10, 2, '0')),
    (TEXT_TYPES, Classification('text', 255)),
    (DATETIME_TYPES, Classification('datetime-local', 20, placeholder='yyyy/MM/dd HH:mm:ss')),
    (TIME_TYPES, Classification('time', 10, placeholder='HH:mm:ss')),
    (UUID_TYPES, Classification('text', 34)),
)

FALLBACK_LENGTH = 50


def classify(field_type) -> Classification:
    """Return the widget kind, length, precision and scale for `field_type`."""
    for types, classification in RULES:
        if isinstance(field_type, Hashable) and field_type in types:
            return classification
    return Classification(str(field_type), FALLBACK_LENGTH)


def placeholder(name, field_type) -> str:
    """Placeholder text: type dictated when the type has one, the field name otherwise."""
    dictated = classify(field_type).placeholder
    if dictated is not None:
        return dictated
    return capitalize_first(str(name))


def label(name) -> str:
    if name is None:
        return ''
    return capitalize_first(str(name)).replace('_', ' ')
