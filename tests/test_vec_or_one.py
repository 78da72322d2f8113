import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from serde_stuff.exceptions import ElementDecodeError, ElementEncodeError, ShapeMismatchError
from serde_stuff.model import BaseModel
from serde_stuff.node import NodeShape
from serde_stuff.vec_or_one import VecOrOne, decode_vec_or_one, encode_vec_or_one


class Inner(BaseModel):
    item: str


class Outer(BaseModel):
    inners: VecOrOne[Inner]


class Pairs(BaseModel):
    pairs: VecOrOne[list[int]]


def test_single():
    test = '''
    {
        "inners": {
            "item": "value"
        }
    }'''

    result = Outer.model_validate_json(test)
    assert result == Outer(inners=[Inner(item='value')])


def test_multiple():
    test = '''
    {
        "inners": [
            {
                "item": "value"
            },
            {
                "item": "value"
            }
        ]
    }'''

    result = Outer.model_validate_json(test)
    assert result == Outer(inners=[Inner(item='value'), Inner(item='value')])


def test_single_instance_in_python():
    outer = Outer(inners=Inner(item='value'))
    assert outer.inners == [Inner(item='value')]


def test_serialize_one():
    outer = Outer(inners=[Inner(item='value 1')])
    assert outer.model_dump_json() == '{"inners":{"item":"value 1"}}'
    assert outer.model_dump() == {'inners': {'item': 'value 1'}}


def test_serialize_some():
    outer = Outer(inners=[Inner(item='value 1'), Inner(item='value 2'), Inner(item='value 3')])
    json = '{"inners":[{"item":"value 1"},{"item":"value 2"},{"item":"value 3"}]}'
    assert outer.model_dump_json() == json


def test_serialize_empty():
    assert Outer(inners=[]).model_dump_json() == '{"inners":[]}'


def test_one_element_array_collapses():
    outer = Outer.model_validate_json('{"inners": [{"item": "value"}]}')
    assert outer.inners == [Inner(item='value')]
    assert outer.model_dump_json() == '{"inners":{"item":"value"}}'


@pytest.mark.parametrize('size', [0, 1, 2, 3, 10])
def test_round_trip_keeps_order(size):
    outer = Outer(inners=[Inner(item=f'value {i}') for i in range(size)])
    assert Outer.model_validate_json(outer.model_dump_json()) == outer


def test_element_error_names_index():
    with pytest.raises(ValidationError) as e:
        Outer.model_validate_json('{"inners": [{"item": "value"}, {"other": "value"}]}')

    assert 'sequence interpretation, index 1' in str(e.value)


def test_neither_shape():
    with pytest.raises(ValidationError) as e:
        Outer.model_validate_json('{"inners": "value"}')

    assert 'expected an element or an array of elements, got string' in str(e.value)


def test_null_is_not_absent():
    with pytest.raises(ValidationError) as e:
        Outer.model_validate_json('{"inners": null}')

    assert 'got null' in str(e.value)


def test_array_elements():
    assert Pairs.model_validate_json('{"pairs": [[1, 2], [3]]}').pairs == [[1, 2], [3]]
    assert Pairs.model_validate_json('{"pairs": [1, 2]}').pairs == [[1, 2]]
    assert Pairs.model_validate_json('{"pairs": []}').pairs == []
    assert Pairs(pairs=[[1, 2]]).model_dump_json() == '{"pairs":[1,2]}'
    assert Pairs(pairs=[[1, 2], [3]]).model_dump_json() == '{"pairs":[[1,2],[3]]}'


def test_decode_functions():
    assert decode_vec_or_one({'item': 'value'}, Inner.model_validate) == [Inner(item='value')]
    assert decode_vec_or_one((1, 2), int) == [1, 2]

    nodes = [1, 2, 3]
    result = decode_vec_or_one(nodes, int)
    assert result == nodes
    assert result is not nodes


def test_decode_element_error():
    with pytest.raises(ElementDecodeError) as e:
        decode_vec_or_one([1, 'x'], int)

    assert e.value.interpretation == 'sequence'
    assert e.value.index == 1
    assert isinstance(e.value.__cause__, ValueError)


def test_decode_shape_mismatch():
    with pytest.raises(ShapeMismatchError) as e:
        decode_vec_or_one('x', int)

    assert e.value.shape is NodeShape.STRING
    assert isinstance(e.value.__cause__, ValueError)


def test_decode_array_element_fallback_fails():
    def decode_int_list(node):
        return [int(i) for i in node]

    assert decode_vec_or_one([1, 2], decode_int_list, element_is_array=True) == [[1, 2]]

    with pytest.raises(ShapeMismatchError) as e:
        decode_vec_or_one([1, 'x'], decode_int_list, element_is_array=True)

    assert e.value.shape is NodeShape.ARRAY
    assert isinstance(e.value.__cause__, ElementDecodeError)


def test_array_element_fallback_logs():
    with capture_logs() as log_list:
        assert decode_vec_or_one([1, 2], list, element_is_array=True) == [[1, 2]]

    assert len(log_list) == 1
    assert log_list[0]['log_level'] == 'debug'
    assert log_list[0]['index'] == 0

    with capture_logs() as log_list:
        assert decode_vec_or_one([[1, 2], [3]], list, element_is_array=True) == [[1, 2], [3]]

    assert log_list == []


def test_encode_functions():
    assert encode_vec_or_one([{'item': 'value'}], dict) == {'item': 'value'}
    assert encode_vec_or_one((1, 2, 3), int) == [1, 2, 3]
    assert encode_vec_or_one([], int) == []


def test_encode_element_error():
    def encode_int(value):
        if not isinstance(value, int):
            raise ValueError('not an int')
        return value

    with pytest.raises(ElementEncodeError) as e:
        encode_vec_or_one([1, 'x'], encode_int)

    assert e.value.index == 1
    assert str(e.value) == 'index 1: not an int'
