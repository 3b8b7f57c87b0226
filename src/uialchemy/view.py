"""The resolved view configuration handed over to the templates."""
from enum import Enum
from typing import Any, Callable, Literal, NamedTuple, Tuple, Union

from orjson import dumps
from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidOption
from .field import Field

PLACEMENTS = ('top', 'bottom')


class SubTitle(Enum):
    """Sentinel values of `sub_title`, never equal to a display string."""

    HIDE = False


HIDE = SubTitle.HIDE


class Action(NamedTuple):
    placement: Literal['top', 'bottom']
    action: Callable


def to_action(item) -> Action:
    """Normalize a `(placement, callable)` pair into an `Action`."""
    try:
        placement, action = item
    except (TypeError, ValueError):
        raise InvalidOption(f'Action {item!r} is not a (placement, callable) pair') from None
    if placement not in PLACEMENTS:
        raise InvalidOption(f'Invalid action placement {placement!r}. Available placements are {PLACEMENTS}')
    if not callable(action):
        raise InvalidOption(f'Action {action!r} is not callable')
    return Action(placement, action)


def qualified_name(obj) -> str:
    module = getattr(obj, '__module__', None)
    name = getattr(obj, '__qualname__', None) or getattr(obj, '__name__', None)
    if not name:
        return str(obj)
    return f'{module}.{name}' if module else name


class ViewConfig(BaseModel):
    """Fully resolved configuration of a view.

    `parse` hands overrides over verbatim, while `module`, `name`, `source`
    and `title` must be strings here: any other value raises a pydantic
    `ValidationError`. Actions are normalised into `Action` tuples.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    module: str
    name: str
    source: str
    title: str
    fields: Tuple[Union[Field, str], ...]
    actions: Tuple[Action, ...] = ()
    sub_title: Union[SubTitle, str, None] = None
    template: Any = None

    def field(self, name: str) -> Field | None:
        return next((f for f in self.fields if isinstance(f, Field) and f.field == name), None)

    def to_dict(self) -> dict:
        """Transform the configuration into a JSON friendly dictionary."""
        return {
            'module': self.module,
            'name': self.name,
            'source': self.source,
            'title': self.title,
            'fields': [f.model_dump() if isinstance(f, Field) else str(f) for f in self.fields],
            'actions': [[a.placement, qualified_name(a.action)] for a in self.actions],
            'sub_title': self.sub_title.value if isinstance(self.sub_title, SubTitle) else self.sub_title,
            'template': self.template and qualified_name(self.template),
        }

    def to_json(self) -> bytes:
        """Transform the configuration into a JSON string."""
        return dumps(self.to_dict())
