from .classifier import classify, label, placeholder
from .exceptions import InvalidOption, SchemaError, UIAlchemyException, UnsupportedKey
from .field import Field
from .parser import parse, resolve
from .resolver import build_field, default_value
from .schema import ModelSchema, SchemaDescriptor, StaticSchema
from .view import HIDE, Action, ViewConfig
