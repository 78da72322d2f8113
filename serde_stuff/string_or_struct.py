#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
Support a 'short' and a 'long' version of the same object: the field holds either a string, parsed by the element type's
own `from_str`, or the full map. How a string maps to the object is decided by the type itself.

>>> from typing import NamedTuple
>>> class Inner(NamedTuple):
...     item: str
...     @classmethod
...     def from_str(cls, text):
...         return cls(item=text)
>>> decode_string_or_struct('value', Inner.from_str, lambda node: Inner(**node))
Inner(item='value')
>>> decode_string_or_struct({'item': 'value'}, Inner.from_str, lambda node: Inner(**node))
Inner(item='value')

>>> try:
...     decode_string_or_struct(1, Inner.from_str, lambda node: Inner(**node))
... except ShapeMismatchError as e:
...     print(*e.args)
expected string or map, got number

This adapter only decodes, values are written with the element's own serialization. On a pydantic model:

>>> from pydantic import BaseModel
>>> class Item(BaseModel):
...     item: str
...     @classmethod
...     def from_str(cls, text):
...         return cls(item=text)
>>> class Outer(BaseModel):
...     inner: StringOrStruct[Item]
>>> Outer.model_validate_json('{"inner": "value"}')
Outer(inner=Item(item='value'))
>>> Outer.model_validate_json('{"inner": {"item": "value"}}').model_dump_json()
'{"inner":{"item":"value"}}'
"""

from typing import TYPE_CHECKING, Annotated, Any, Callable, Protocol, TypeVar

from pydantic import SerializationInfo
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import PlainValidator
from typing_extensions import Self

from serde_stuff.element import ElementAdapter
from serde_stuff.exceptions import ElementDecodeError, ShapeMismatchError, TextParseError
from serde_stuff.node import Decoder, NodeShape, node_shape

T = TypeVar('T')

EXPECTED = 'string or map'


class FromStr(Protocol):
    @classmethod
    def from_str(cls, text: str, /) -> Self:
        ...


def decode_string_or_struct(node: Any, from_str: Callable[[str], T], decoder: Decoder[T]) -> T:
    """ Decode a node that is either the text form or the map form of an element.

    This module's docstring has more details and examples.
    """
    shape = node_shape(node)
    if shape is NodeShape.STRING:
        try:
            return from_str(node)
        except (ValueError, TypeError) as e:
            raise TextParseError(node, e) from e
    if shape is NodeShape.MAP:
        try:
            return decoder(node)
        except (ValueError, TypeError) as e:
            raise ElementDecodeError('map', e) from e
    raise ShapeMismatchError(shape, EXPECTED)


def string_or_struct_annotations(
    element_type: type[FromStr],
    *,
    optional: bool = False,
) -> tuple[PlainValidator, PlainSerializer]:
    """Validator and serializer pair used by `StringOrStruct[T]` and `OptionStringOrStruct[T]`.

    Values are always written in the map form, through the element type's own serialization.
    """
    if not callable(getattr(element_type, 'from_str', None)):
        raise TypeError(f'{element_type!r} must implement from_str() to be used as string or struct')
    element: ElementAdapter[Any] = ElementAdapter(element_type)

    def validate(value: Any) -> Any:
        if value is None and optional:
            return None
        if isinstance(value, element_type):
            return value
        return decode_string_or_struct(value, element_type.from_str, element.decode)

    def serialize(value: Any, info: SerializationInfo) -> Any:
        if value is None:
            return None
        return element.encoder_for(info)(value)

    return PlainValidator(validate), PlainSerializer(serialize)


if TYPE_CHECKING:
    # For type checking: StringOrStruct[T] is just T
    StringOrStruct = Annotated[T, ...]
else:
    class _StringOrStructMeta(type):
        """Metaclass that makes StringOrStruct[T] return Annotated[T, ...] at runtime."""

        def __getitem__(cls, element_type: type[FromStr]) -> Any:
            validator, serializer = string_or_struct_annotations(element_type)
            return Annotated[element_type, validator, serializer]

    class StringOrStruct(metaclass=_StringOrStructMeta):
        """StringOrStruct[T] accepts a string parsed with `T.from_str` or the map form of `T`."""
        pass
