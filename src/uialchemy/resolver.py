import logging

from . import classifier
from .config import DEFAULTS
from .exceptions import UnsupportedKey
from .field import Field
from .schema import SchemaDescriptor
from .utils import capitalize, last_segment, underscore

log = logging.getLogger('UIAlchemy')


def build_field(schema: SchemaDescriptor, name: str) -> Field:
    """Create the field descriptor of `name` from its type in `schema`."""
    field_type = schema.field_type(name)
    html_type, length, precision, scale, _ = classifier.classify(field_type)
    return Field(
        field=name,
        label=classifier.label(name),
        placeholder=classifier.placeholder(name, field_type),
        html_type=html_type,
        length=length,
        precision=precision,
        scale=scale,
    )


def default_module(schema: SchemaDescriptor) -> str:
    return underscore(last_segment(schema.type_name))


def default_name(schema: SchemaDescriptor) -> str:
    return capitalize(default_module(schema))


def default_source(schema: SchemaDescriptor) -> str:
    return schema.source


def default_title(schema: SchemaDescriptor) -> str:
    return capitalize(schema.source)


def default_fields(schema: SchemaDescriptor) -> tuple:
    excluded = DEFAULTS['system_fields']
    return tuple(build_field(schema, name) for name in schema.fields() if name not in excluded)


DEFAULT_RESOLVERS = {
    'module': default_module,
    'name': default_name,
    'source': default_source,
    'title': default_title,
    'fields': default_fields,
}


def default_value(schema: SchemaDescriptor, key: str):
    """Resolve the default value of `key` for `schema`.

    Only `module`, `name`, `source`, `title` and `fields` have a default, any
    other key raises `UnsupportedKey`.
    """
    try:
        resolve = DEFAULT_RESOLVERS[key]
    except KeyError:
        raise UnsupportedKey(key) from None
    value = resolve(schema)
    log.debug('Default "%s" for %r resolved', key, schema)
    return value
