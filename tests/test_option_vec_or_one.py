from pydantic import Field

from serde_stuff.model import BaseModel
from serde_stuff.node import OMIT
from serde_stuff.option_vec_or_one import OptionVecOrOne, decode_option_vec_or_one, encode_option_vec_or_one


class Inner(BaseModel):
    item: str


class Outer(BaseModel):
    items: OptionVecOrOne[Inner] = None


class OuterWithOther(BaseModel):
    items: OptionVecOrOne[Inner] = None
    other: str


class Aliased(BaseModel):
    items: OptionVecOrOne[Inner] = Field(default=None, alias='Items')


def test_deserialize_one():
    test = '''
    {
        "items": {
            "item": "value"
        }
    }'''

    result = Outer.model_validate_json(test)
    assert result == Outer(items=[Inner(item='value')])


def test_deserialize_multiple():
    test = '''
    {
        "items": [
            {
                "item": "value"
            },
            {
                "item": "value"
            }
        ]
    }'''

    result = Outer.model_validate_json(test)
    assert result == Outer(items=[Inner(item='value'), Inner(item='value')])


def test_deserialize_none():
    assert Outer.model_validate_json('{}') == Outer(items=None)
    assert Outer.model_validate_json('{"items": null}') == Outer(items=None)


def test_deserialize_empty():
    assert Outer.model_validate_json('{"items": []}') == Outer(items=[])


def test_serialize_none():
    assert Outer(items=None).model_dump_json() == '{}'
    assert Outer().model_dump() == {}
    assert OuterWithOther(other='value').model_dump_json() == '{"other":"value"}'


def test_serialize_one():
    outer = Outer(items=[Inner(item='value 1')])
    assert outer.model_dump_json() == '{"items":{"item":"value 1"}}'


def test_serialize_some():
    outer = Outer(items=[Inner(item='value 1'), Inner(item='value 2'), Inner(item='value 3')])
    json = '{"items":[{"item":"value 1"},{"item":"value 2"},{"item":"value 3"}]}'
    assert outer.model_dump_json() == json


def test_serialize_empty_is_not_absent():
    assert Outer(items=[]).model_dump_json() == '{"items":[]}'


def test_aliased_field():
    assert Aliased().model_dump_json(by_alias=True) == '{}'
    assert Aliased().model_dump_json() == '{}'
    aliased = Aliased.model_validate_json('{"Items": {"item": "a"}}')
    assert aliased.model_dump_json(by_alias=True) == '{"Items":{"item":"a"}}'


def test_decode_absent_does_not_call_decoder():
    def decoder(node):
        raise AssertionError('must not be called')

    assert decode_option_vec_or_one(None, decoder) is None
    assert decode_option_vec_or_one([1, 2], int) == [1, 2]
    assert decode_option_vec_or_one([[1], [2]], list, element_is_array=True) == [[1], [2]]


def test_encode_functions():
    assert encode_option_vec_or_one(None, int) is OMIT
    assert encode_option_vec_or_one([1], int) == 1
    assert encode_option_vec_or_one([1, 2], int) == [1, 2]
    assert encode_option_vec_or_one([], int) == []
