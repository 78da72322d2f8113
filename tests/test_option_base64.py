import pytest
from pydantic import ValidationError

from serde_stuff.exceptions import ShapeMismatchError
from serde_stuff.model import BaseModel
from serde_stuff.node import OMIT
from serde_stuff.option_base64 import OptionBase64, decode_option_base64, encode_option_base64

TEST_B64 = 'AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8='
TEST_VEC = bytes(range(32))


class Outer(BaseModel):
    item: OptionBase64 = None
    other: str


def test_serialize_some():
    model = f'{{"item":"{TEST_B64}","other":"value"}}'
    outer = Outer(item=TEST_VEC, other='value')

    assert outer.model_dump_json() == model


def test_serialize_none():
    outer = Outer(item=None, other='value')
    assert outer.model_dump_json() == '{"other":"value"}'


def test_deserialize_some():
    model = f'''
    {{
        "item": "{TEST_B64}",
        "other": "value"
    }}'''

    result = Outer.model_validate_json(model)
    assert result == Outer(item=TEST_VEC, other='value')


def test_deserialize_none():
    model = '''
    {
        "other": "value"
    }'''

    result = Outer.model_validate_json(model)
    assert result == Outer(item=None, other='value')


def test_deserialize_null():
    result = Outer.model_validate_json('{"item": null, "other": "value"}')
    assert result.item is None


def test_deserialize_invalid():
    with pytest.raises(ValidationError):
        Outer.model_validate_json('{"item": "+/8=", "other": "value"}')


def test_functions():
    assert encode_option_base64(None) is OMIT
    assert encode_option_base64(TEST_VEC) == TEST_B64
    assert decode_option_base64(None) is None
    assert decode_option_base64(TEST_B64) == TEST_VEC


def test_decode_function_not_a_string():
    with pytest.raises(ShapeMismatchError):
        decode_option_base64(123)
