from types import MappingProxyType

SYSTEM_FIELDS = frozenset({'id', 'inserted_at', 'updated_at'})

OPTIONS = (
    'actions',
    'add_opt',
    'add_actions',
    'fields',
    'module',
    'name',
    'remove',
    'remove_actions',
    'source',
    'sub_title',
    'template',
    'title',
)

DEFAULTS = MappingProxyType(dict(
    system_fields=SYSTEM_FIELDS,
    actions=(),
    sub_title=None,
    template=None,
))
