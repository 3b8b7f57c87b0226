"""Merges the caller options with the defaults resolved from the schema.

Available options:

* `actions: [(top | bottom, callable)]`: overrides the default list of actions.
* `add_opt: []`: fields appended to the list; duplicated fields are skipped with a warning.
* `add_actions: [(top | bottom, callable)]`: actions appended to the current list.
* `fields: []`: fields to be used, overrides the default list built from the schema
  without the system managed fields.
* `name: str`: display name, defaults to the capitalized last part of the type name.
* `remove: []`: fields removed from the list; unknown fields only log a warning.
* `remove_actions: [callable]`: actions removed from the current list.
* `source: str`: data key, defaults to the schema source.
* `sub_title: str | HIDE`: subtitle of the view, `HIDE` disallows its generation.
* `template`: the template handling the rendering, passed through untouched.
* `title: str`: defaults to the capitalized schema source.
"""
import logging
from typing import Iterable

from click import style

from .config import DEFAULTS, OPTIONS
from .field import Field
from .resolver import build_field, default_fields, default_module, default_name, default_source, default_title
from .schema import SchemaDescriptor
from .view import Action, ViewConfig, to_action

log = logging.getLogger('UIAlchemy')

# `fields` is computed from the schema alone, so overriding `name` or `source`
# never changes it.
STEPS = (
    ('module', default_module),
    ('name', default_name),
    ('source', default_source),
    ('title', default_title),
    ('fields', default_fields),
)


def field_name(field) -> str:
    return field.field if isinstance(field, Field) else str(field)


def add_opt(parsed_opts: dict, schema: SchemaDescriptor, opts: dict, key: str, default) -> dict:
    if key in opts:
        value = opts[key]
    else:
        value = default(schema)
    log.debug('"%s" resolved for %r', key, schema)
    return {**parsed_opts, key: value}


def add_fields(parsed_opts: dict, schema: SchemaDescriptor, additions: Iterable) -> dict:
    fields = list(parsed_opts['fields'])
    present = {field_name(f) for f in fields}
    declared = set(schema.fields())
    for item in additions:
        name = field_name(item)
        if name in present:
            log.warning('field "%s" already present in %r, skipping', style(name, fg='red'), schema)
            continue
        if not isinstance(item, Field):
            if name not in declared:
                log.warning('field "%s" not found in %r, skipping', style(name, fg='red'), schema)
                continue
            item = build_field(schema, name)
        fields.append(item)
        present.add(name)
    return {**parsed_opts, 'fields': tuple(fields)}


def remove_fields(parsed_opts: dict, schema: SchemaDescriptor, removals: Iterable) -> dict:
    fields = tuple(parsed_opts['fields'])
    present = {field_name(f) for f in fields}
    removed = set()
    for item in removals:
        name = field_name(item)
        if name not in present:
            log.warning('field "%s" not found in %r, it cannot be removed', style(name, fg='red'), schema)
            continue
        removed.add(name)
    return {**parsed_opts, 'fields': tuple(f for f in fields if field_name(f) not in removed)}


def _matches(action: Action, target) -> bool:
    if isinstance(target, tuple):
        return tuple(action) == tuple(target)
    return action.action == target


def merge_actions(parsed_opts: dict, opts: dict) -> dict:
    """Resolve the action list: replace, then add, then remove.

    Unlike fields, duplicated or missing actions are not reported. An
    `actions` override with nothing to add or remove is kept verbatim.
    """
    actions = opts['actions'] if 'actions' in opts else DEFAULTS['actions']
    normalized = [to_action(a) for a in actions]
    if 'actions' in opts and 'add_actions' not in opts and 'remove_actions' not in opts:
        return {**parsed_opts, 'actions': actions}
    actions = normalized
    actions.extend(to_action(a) for a in opts.get('add_actions', ()))
    targets = tuple(opts.get('remove_actions', ()))
    if targets:
        actions = [a for a in actions if not any(_matches(a, t) for t in targets)]
    return {**parsed_opts, 'actions': tuple(actions)}


def parse(parsed_opts: dict, schema: SchemaDescriptor, opts: dict) -> dict:
    """Parse the schema and the common options into a new configuration mapping.

    `parsed_opts` is never modified, a new mapping is returned.
    """
    opts = dict(opts or {})
    for key in opts:
        if key not in OPTIONS:
            log.warning('option "%s" not supported, skipping', style(key, fg='red'))

    parsed = dict(parsed_opts)
    for key, default in STEPS:
        parsed = add_opt(parsed, schema, opts, key, default)

    if 'add_opt' in opts:
        parsed = add_fields(parsed, schema, opts['add_opt'])
    if 'remove' in opts:
        parsed = remove_fields(parsed, schema, opts['remove'])

    parsed = merge_actions(parsed, opts)
    parsed['sub_title'] = opts.get('sub_title', DEFAULTS['sub_title'])
    parsed['template'] = opts.get('template', DEFAULTS['template'])
    log.info('View %s resolved with %d fields', style(str(parsed['name']), fg='blue'), len(parsed['fields']))
    return parsed


def resolve(schema: SchemaDescriptor, **opts) -> ViewConfig:
    """Resolve the whole view configuration of `schema`."""
    return ViewConfig(**parse({}, schema, opts))
