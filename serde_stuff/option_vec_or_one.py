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
An optional vec-or-one field is encoded the same way as a vec-or-one field when it is present, and is not written at
all when it is absent.

Layout:

    (no field)                  when None
    element                     when a list of one element
    [element_0, ..., element_N] otherwise, `[]` included

>>> decode_option_vec_or_one(None, int) is None
True
>>> decode_option_vec_or_one(1, int)
[1]
>>> decode_option_vec_or_one([], int)
[]

>>> encode_option_vec_or_one(None, int)
<Omit.OMIT: 'omit'>
>>> encode_option_vec_or_one([1], int)
1
>>> encode_option_vec_or_one([], int)
[]

A present but empty list is kept distinct from an absent one, it is written as an empty array.

The `OptionVecOrOne[T]` annotation must be used on a `serde_stuff.model.BaseModel` field with a `None` default, the
model leaves the field out of its output when it holds `None`:

>>> from serde_stuff.model import BaseModel
>>> class Outer(BaseModel):
...     items: OptionVecOrOne[int] = None
>>> Outer.model_validate_json('{}')
Outer(items=None)
>>> Outer().model_dump_json()
'{}'
>>> Outer(items=[1, 2]).model_dump_json()
'{"items":[1,2]}'
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Annotated, Any, Optional, TypeVar, Union

from serde_stuff.element import ElementAdapter
from serde_stuff.model import OMIT_IF_ABSENT
from serde_stuff.node import OMIT, Decoder, Encoder, Omitted
from serde_stuff.vec_or_one import decode_vec_or_one, encode_vec_or_one, vec_or_one_annotations

T = TypeVar('T')


def decode_option_vec_or_one(
    node: Any,
    decoder: Decoder[T],
    *,
    element_is_array: bool = False,
) -> Optional[list[T]]:
    if node is None:
        return None
    return decode_vec_or_one(node, decoder, element_is_array=element_is_array)


def encode_option_vec_or_one(values: Optional[Sequence[T]], encoder: Encoder[T]) -> Union[Any, Omitted]:
    """Encode like `encode_vec_or_one`, returning `OMIT` when there is no value."""
    if values is None:
        return OMIT
    return encode_vec_or_one(values, encoder)


if TYPE_CHECKING:
    # For type checking: OptionVecOrOne[T] is just Optional[list[T]]
    OptionVecOrOne = Annotated[Optional[list[T]], ...]
else:
    class _OptionVecOrOneMeta(type):
        """Metaclass that makes OptionVecOrOne[T] return Annotated[Optional[list[T]], ...] at runtime."""

        def __getitem__(cls, element_type: Any) -> Any:
            validator, serializer = vec_or_one_annotations(ElementAdapter(element_type), optional=True)
            return Annotated[Optional[list[element_type]], validator, serializer, OMIT_IF_ABSENT]

    class OptionVecOrOne(metaclass=_OptionVecOrOneMeta):
        """OptionVecOrOne[T] accepts nothing, `null`, `T` or `list[T]`, and holds `None` or a `list[T]`."""
        pass
