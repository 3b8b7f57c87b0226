from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field as PField

WidgetKind = Union[Literal['number', 'text', 'datetime-local', 'time'], str]


class Field(BaseModel):
    """Resolved UI metadata of a single schema field.

    `html_type` is the widget kind (`number`, `text`, `datetime-local`,
    `time` or the raw type tag), also known as `widget_kind`.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    label: str = ''
    placeholder: str = ''
    html_type: WidgetKind = 'text'
    length: int = PField(default=50, gt=0)
    precision: int = PField(default=0, ge=0)
    scale: int = PField(default=0, ge=0)

    def __str__(self):
        return self.field
