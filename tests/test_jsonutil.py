import io
from dataclasses import dataclass

import pytest

from toolkit.jsonutil import (
    AnyJSONType,
    as_indent_json_text,
    as_json_text,
    is_complete_json,
    is_new_line_delimited_json,
    is_structured_json,
    json_to_interface,
    json_to_map,
    json_to_slice,
    new_line_delimited_json,
)

BROKEN_MULTILINE = """{"a":1, "b":2}
	   {"a2":2, "b3":21}
	   {"a3":3, "b4:22
	   """

EXPENDITURE = (
    '{"category":"Food","country":"Poland","expenditure":"6759.00","id":1,"sub_category":null,"year":2014}\n'
    '{"category":"Housing","country":"US","expenditure":"17798.00","id":4,"sub_category":null,"year":2014}\n'
    '{"category":"Food","country":"Poland","expenditure":"7023.00","id":2,"sub_category":null,"year":2015}\n'
    '{"category":"Housing","country":"US","expenditure":"18409.00","id":5,"sub_category":null,"year":2015}\n'
    '{"category":"Food","country":"Poland","expenditure":"7023.00","id":3,"sub_category":null,"year":2016}\n'
    '{"category":"Housing","country":"US","expenditure":"18886.00","id":6,"sub_category":null,"year":2016}\n'
)


def test_is_complete_json():
    assert is_complete_json('{"a":1, "b":2}') is True
    assert is_complete_json(BROKEN_MULTILINE) is False
    assert is_complete_json('{"name":"abc"},{"id":"10}"') is False
    assert is_complete_json('"abc"') is True


def test_is_structured_json():
    assert is_structured_json('{"a":1, "b":2}') is True
    assert is_structured_json(BROKEN_MULTILINE) is False
    assert is_structured_json('{"name":"abc"},{"id":"10}"') is False
    assert is_structured_json('"abc""') is False


def test_is_new_line_delimited_json():
    assert is_new_line_delimited_json('{"a":1, "b":2}') is False
    assert is_new_line_delimited_json('{"a":1, "b":2}\n{"a2":2, "b3":21}\n{"a3":3, "b4:22}\n') is True
    assert is_new_line_delimited_json('{"a":1, "b":2}\n{"a2":2, "b3":21\n{"a3":3, "b4:22}\n') is False
    assert is_new_line_delimited_json(EXPENDITURE) is True


def test_new_line_delimited_json_decodes_each_line():
    rows = new_line_delimited_json(EXPENDITURE)
    assert [row["id"] for row in rows] == [1, 4, 2, 5, 3, 6]
    assert json_to_interface(EXPENDITURE) == rows


def test_json_to_map_sources():
    text = '{"a":1, "b":2}'
    assert len(json_to_map(text)) > 0
    assert len(json_to_map(text.encode())) > 0
    assert json_to_map(io.StringIO(text)) == {"a": 1, "b": 2}


def test_json_to_map_errors():
    with pytest.raises(TypeError):
        json_to_map(1)
    with pytest.raises(ValueError):
        json_to_map('{"a":1, "b":2')
    with pytest.raises(ValueError):
        json_to_map("[1,2]")


def test_json_to_slice():
    assert json_to_slice("[1,2]") == [1, 2]
    with pytest.raises(ValueError):
        json_to_slice('{"a":1}')


def test_as_json_text():
    assert as_json_text({"k": 1}) == '{"k":1}\n'

    @dataclass
    class Source:
        K: int

    assert as_json_text(Source(K=1)) == '{"K":1}\n'
    assert as_json_text([1, 3]) == "[1,3]\n"
    with pytest.raises(TypeError):
        as_json_text(1)
    with pytest.raises(ValueError):
        as_json_text(None)


def test_as_indent_json_text():
    assert as_indent_json_text({"a": [1]}) == '{\n\t"a": [\n\t\t1\n\t]\n}'
    with pytest.raises(TypeError):
        as_indent_json_text(1)


def test_json_to_interface():
    output = json_to_interface('{"a":1, "b":2}')
    assert isinstance(output, dict)
    assert output["a"] == 1
    assert output["b"] == 2
    assert json_to_interface("[1,2]") == [1.0, 2.0]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('"abc"', "abc"),
        ("123", 123),
        ("[1,2,3]", [1.0, 2.0, 3.0]),
        ('{"z":[1,2]}', {"z": [1.0, 2.0]}),
    ],
)
def test_any_json_type_value(raw, expected):
    value = AnyJSONType(raw)
    assert value.value() == expected
    assert value.to_json() == raw


def test_any_json_type_empty_marshal():
    assert AnyJSONType("").to_json() == '""'