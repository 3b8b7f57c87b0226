import pytest

from uialchemy import classify, label, placeholder


@pytest.mark.parametrize('field_type, expected', [
    ('id', ('number', 10, 10, 0)),
    ('integer', ('number', 10, 10, 0)),
    ('float', ('number', 12, 10, 2)),
    ('decimal', ('number', 12, 10, 2)),
    ('string', ('text', 255, 0, 0)),
    ('binary_id', ('text', 255, 0, 0)),
    ('binary', ('text', 255, 0, 0)),
    ('bitstring', ('text', 255, 0, 0)),
    ('naive_datetime', ('datetime-local', 20, 0, 0)),
    ('naive_datetime_usec', ('datetime-local', 20, 0, 0)),
    ('utc_datetime', ('datetime-local', 20, 0, 0)),
    ('utc_datetime_usec', ('datetime-local', 20, 0, 0)),
    ('time', ('time', 10, 0, 0)),
    ('time_usec', ('time', 10, 0, 0)),
    ('uuid', ('text', 34, 0, 0)),
])
def test_classify(field_type, expected):
    result = classify(field_type)
    assert (result.html_type, result.length, result.precision, result.scale) == expected


@pytest.mark.parametrize('field_type', ['boolean', 'date', 'map', None, ('array', 'string'), ['unhashable']])
def test_classify_unknown_types(field_type):
    result = classify(field_type)
    assert result.html_type == str(field_type)
    assert result.length == 50
    assert result.precision == 0
    assert result.scale == 0


def test_placeholder():
    assert placeholder('amount', 'float') == '0'
    assert placeholder('id', 'id') == '0'
    assert placeholder('created', 'utc_datetime') == 'yyyy/MM/dd HH:mm:ss'
    assert placeholder('opens', 'time_usec') == 'HH:mm:ss'
    assert placeholder('description', 'string') == 'Description'
    assert placeholder('token', 'uuid') == 'Token'
    assert placeholder('is_active', 'boolean') == 'Is_active'


def test_label():
    assert label(None) == ''
    assert label('description') == 'Description'
    assert label('first_name') == 'First name'
    assert label('VAT_code') == 'Vat code'
