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
Many formats allow either a single instance of an element or a collection of elements in the same field. This module
decodes both forms into a `list`, and encodes a list of exactly one element back to the bare element.

Layout:

    element                    when there is exactly one element
    [element_0, ..., element_N] otherwise (including the empty list)

>>> decode_vec_or_one({'item': 'value'}, dict)
[{'item': 'value'}]
>>> decode_vec_or_one([{'item': 'a'}, {'item': 'b'}], dict)
[{'item': 'a'}, {'item': 'b'}]
>>> decode_vec_or_one([], dict)
[]

>>> encode_vec_or_one(['a'], str)
'a'
>>> encode_vec_or_one(['a', 'b', 'c'], str)
['a', 'b', 'c']
>>> encode_vec_or_one([], str)
[]

The shape is probed before decoding, so an array is always taken as the collection form. When the element type is
itself written as an array, the decoder must be told so with `element_is_array=True`, then an array that does not decode
as a collection of elements is retried as a single element, so `[1, 2]` decodes to `[[1, 2]]` for a `list[int]` element:

>>> decode_vec_or_one([[1, 2], [3]], list, element_is_array=True)
[[1, 2], [3]]

>>> from structlog.testing import capture_logs
>>> with capture_logs() as logs:
...     decode_vec_or_one([1, 2], list, element_is_array=True)
[[1, 2]]
>>> logs[0]['event']
'array is not a sequence of array elements, retrying as one element'

On a pydantic model the same behavior is available through the `VecOrOne[T]` annotation:

>>> from pydantic import BaseModel
>>> class Outer(BaseModel):
...     inners: VecOrOne[int]
>>> Outer.model_validate_json('{"inners": 1}')
Outer(inners=[1])
>>> Outer(inners=[1]).model_dump_json()
'{"inners":1}'
>>> Outer(inners=[1, 2]).model_dump_json()
'{"inners":[1,2]}'
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

from pydantic import SerializationInfo
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import PlainValidator
from structlog import get_logger

from serde_stuff.element import ElementAdapter
from serde_stuff.exceptions import ElementDecodeError, ElementEncodeError, ShapeMismatchError
from serde_stuff.node import Decoder, Encoder, NodeShape, node_shape

logger = get_logger()

T = TypeVar('T')

EXPECTED = 'an element or an array of elements'


def _decode_sequence(nodes: Sequence[Any], decoder: Decoder[T]) -> list[T]:
    values: list[T] = []
    for index, node in enumerate(nodes):
        try:
            values.append(decoder(node))
        except (ValueError, TypeError) as e:
            raise ElementDecodeError('sequence', e, index=index) from e
    return values


def _decode_one(node: Any, decoder: Decoder[T]) -> list[T]:
    try:
        return [decoder(node)]
    except (ValueError, TypeError) as e:
        raise ShapeMismatchError(node_shape(node), EXPECTED, str(e)) from e


def decode_vec_or_one(node: Any, decoder: Decoder[T], *, element_is_array: bool = False) -> list[T]:
    """ Decode a node that is either a single element or an array of elements.

    This module's docstring has more details and examples.
    """
    if node_shape(node) is not NodeShape.ARRAY:
        return _decode_one(node, decoder)
    if not element_is_array:
        return _decode_sequence(node, decoder)
    try:
        return _decode_sequence(node, decoder)
    except ElementDecodeError as e:
        logger.debug('array is not a sequence of array elements, retrying as one element', index=e.index)
        try:
            return [decoder(node)]
        except (ValueError, TypeError) as exc:
            raise ShapeMismatchError(NodeShape.ARRAY, EXPECTED, str(exc)) from e


def encode_vec_or_one(values: Sequence[T], encoder: Encoder[T]) -> Any:
    """ Encode a list, collapsing a list of exactly one element to the bare element.

    This module's docstring has more details and examples.
    """
    encoded = []
    for index, value in enumerate(values):
        try:
            encoded.append(encoder(value))
        except (ValueError, TypeError) as e:
            raise ElementEncodeError(index, e) from e
    if len(encoded) == 1:
        return encoded[0]
    return encoded


def vec_or_one_annotations(
    element: ElementAdapter[Any],
    *,
    optional: bool = False,
) -> tuple[PlainValidator, PlainSerializer]:
    """Validator and serializer pair used by `VecOrOne[T]` and `OptionVecOrOne[T]`."""
    def validate(value: Any) -> Any:
        if value is None and optional:
            return None
        return decode_vec_or_one(value, element.decode, element_is_array=element.is_array_shaped)

    def serialize(value: Any, info: SerializationInfo) -> Any:
        if value is None:
            return None
        return encode_vec_or_one(value, element.encoder_for(info))

    return PlainValidator(validate), PlainSerializer(serialize)


if TYPE_CHECKING:
    # For type checking: VecOrOne[T] is just list[T]
    VecOrOne = Annotated[list[T], ...]
else:
    # At runtime: VecOrOne[T] returns Annotated[list[T], validator, serializer]
    #
    # Usage:
    #     class Outer(BaseModel):
    #         inners: VecOrOne[Inner]
    #
    # Behavior:
    #     - Deserialization: accepts a single element or an array of elements, always produces a list
    #     - Serialization: a list of one element is written as the bare element, anything else as an array

    class _VecOrOneMeta(type):
        """Metaclass that makes VecOrOne[T] return Annotated[list[T], ...] at runtime."""

        def __getitem__(cls, element_type: Any) -> Any:
            validator, serializer = vec_or_one_annotations(ElementAdapter(element_type))
            return Annotated[list[element_type], validator, serializer]  # type: ignore[valid-type]

    class VecOrOne(metaclass=_VecOrOneMeta):
        """VecOrOne[T] accepts `T` or `list[T]` and always holds a `list[T]`."""
        pass
