import pytest

from uialchemy import ModelSchema, SchemaDescriptor, SchemaError, StaticSchema


def test_model_schema(account):
    schema = ModelSchema(account)
    assert isinstance(schema, SchemaDescriptor)
    assert schema.source == 'accounts'
    assert schema.type_name.endswith('.Account')
    assert schema.fields() == ('id', 'description', 'number', 'inserted_at', 'updated_at')
    assert schema.field_type('id') == 'id'
    assert schema.field_type('description') == 'string'
    assert schema.field_type('inserted_at') == 'naive_datetime'
    assert schema.field_type('missing') is None


def test_model_schema_types(all_types):
    schema = ModelSchema(all_types)
    types = {name: schema.field_type(name) for name in schema.fields()}
    assert types == {
        'id': 'id',
        'integer': 'integer',
        'flt': 'float',
        'amount': 'decimal',
        'string': 'string',
        'clob': 'string',
        'large_binary': 'binary',
        'naive': 'naive_datetime',
        'zoned': 'utc_datetime',
        'at_time': 'time',
        'day': 'date',
        'uid': 'uuid',
        'boolean': 'boolean',
        'interval': 'interval',
        'renamed': 'string',
    }


def test_model_schema_rejects_plain_classes():
    class NotAModel:
        pass

    with pytest.raises(SchemaError):
        ModelSchema(NotAModel)


def test_static_schema_source():
    assert StaticSchema('GeneralLedger.Account', []).source == 'accounts'
    assert StaticSchema('Shop.Category', []).source == 'categories'
    assert StaticSchema('Shop.Category', [], source='cats').source == 'cats'


def test_static_schema_fields():
    schema = StaticSchema('GeneralLedger.Account', [('id', 'id'), ('number', 'string')])
    assert isinstance(schema, SchemaDescriptor)
    assert schema.fields() == ('id', 'number')
    assert schema.field_type('number') == 'string'
    assert schema.field_type('other') is None
