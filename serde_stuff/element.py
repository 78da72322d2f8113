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

from functools import partial
from typing import Annotated, Any, Generic, Optional, TypeVar, get_args, get_origin

from pydantic import SerializationInfo, TypeAdapter

from serde_stuff.node import Encoder

T = TypeVar('T')

_ARRAY_TYPES = (list, tuple, set, frozenset)


def is_array_type(element_type: Any) -> bool:
    """Whether values of `element_type` are themselves written as arrays.

    >>> is_array_type(list[int])
    True
    >>> is_array_type(Annotated[tuple[int, int], 'pair'])
    True
    >>> is_array_type(dict[str, int])
    False
    """
    origin = get_origin(element_type)
    if origin is Annotated:
        return is_array_type(get_args(element_type)[0])
    return (origin or element_type) in _ARRAY_TYPES


class ElementAdapter(Generic[T]):
    """Decode and encode a single element through a pydantic `TypeAdapter`.

    The `TypeAdapter` is only built on first use, so an element type can be annotated before its forward references
    are resolvable.
    """

    def __init__(self, element_type: Any) -> None:
        self.element_type = element_type
        self._type_adapter: Optional[TypeAdapter[T]] = None

    @property
    def type_adapter(self) -> TypeAdapter[T]:
        if self._type_adapter is None:
            self._type_adapter = TypeAdapter(self.element_type)
        return self._type_adapter

    @property
    def is_array_shaped(self) -> bool:
        return is_array_type(self.element_type)

    def decode(self, node: Any) -> T:
        return self.type_adapter.validate_python(node)

    def encode(self, value: T, *, mode: str = 'json', by_alias: bool = False) -> Any:
        return self.type_adapter.dump_python(value, mode=mode, by_alias=by_alias)

    def encoder_for(self, info: SerializationInfo) -> Encoder[T]:
        """Element encoder that follows the mode of the enclosing serialization."""
        return partial(self.encode, mode=info.mode, by_alias=bool(info.by_alias))

    def __repr__(self) -> str:
        return f'ElementAdapter({self.element_type!r})'
