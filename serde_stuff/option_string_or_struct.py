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
Optional version of string-or-struct: a missing field or `null` decodes to `None`, anything else is decoded as
string-or-struct.

>>> from typing import NamedTuple
>>> class Inner(NamedTuple):
...     item: str
>>> decode_option_string_or_struct(None, lambda text: Inner(text), lambda node: Inner(**node)) is None
True
>>> decode_option_string_or_struct('value', lambda text: Inner(text), lambda node: Inner(**node))
Inner(item='value')
"""

from typing import TYPE_CHECKING, Annotated, Any, Callable, Optional, TypeVar

from serde_stuff.node import Decoder
from serde_stuff.string_or_struct import FromStr, decode_string_or_struct, string_or_struct_annotations

T = TypeVar('T')


def decode_option_string_or_struct(node: Any, from_str: Callable[[str], T], decoder: Decoder[T]) -> Optional[T]:
    if node is None:
        return None
    return decode_string_or_struct(node, from_str, decoder)


if TYPE_CHECKING:
    # For type checking: OptionStringOrStruct[T] is just Optional[T]
    OptionStringOrStruct = Annotated[Optional[T], ...]
else:
    class _OptionStringOrStructMeta(type):
        def __getitem__(cls, element_type: type[FromStr]) -> Any:
            validator, serializer = string_or_struct_annotations(element_type, optional=True)
            return Annotated[Optional[element_type], validator, serializer]

    class OptionStringOrStruct(metaclass=_OptionStringOrStructMeta):
        """OptionStringOrStruct[T] accepts nothing, `null`, a string parsed with `T.from_str` or the map form of `T`.

        Fields must default to `None`, a missing field is never decoded.
        """
        pass
