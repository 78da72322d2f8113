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
A value node is an already-parsed piece of a JSON-like document: `None`, a `bool`, a number, a `str`, a list/tuple of
nodes or a mapping of nodes. Adapters in this package never parse text themselves, they inspect the shape of a node and
delegate the rest to an element `Decoder` or `Encoder`.

The shape is probed without consuming or converting the node:

>>> node_shape({'item': 'value'})
<NodeShape.MAP: 'map'>
>>> node_shape([{'item': 'value'}, {'item': 'value'}])
<NodeShape.ARRAY: 'array'>
>>> node_shape('value')
<NodeShape.STRING: 'string'>
>>> node_shape(True)
<NodeShape.BOOL: 'bool'>
>>> node_shape(None)
<NodeShape.NULL: 'null'>

Anything that isn't a JSON-like value (for instance an already built model instance) is reported as `OTHER`:

>>> node_shape(object())
<NodeShape.OTHER: 'other'>

The `OMIT` sentinel is what optional encoders return when the field should not be written at all:

>>> OMIT
<Omit.OMIT: 'omit'>
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Protocol, TypeVar

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class NodeShape(Enum):
    NULL = 'null'
    BOOL = 'bool'
    NUMBER = 'number'
    STRING = 'string'
    ARRAY = 'array'
    MAP = 'map'
    OTHER = 'other'


class Omit(Enum):
    OMIT = 'omit'


OMIT = Omit.OMIT
Omitted = Literal[Omit.OMIT]


class Decoder(Protocol[T_co]):
    def __call__(self, node: Any, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, value: T_contra, /) -> Any:
        ...


def node_shape(node: Any) -> NodeShape:
    """Return the shape of a value node."""
    if node is None:
        return NodeShape.NULL
    # bool must be checked before int, it's a subclass
    if isinstance(node, bool):
        return NodeShape.BOOL
    if isinstance(node, (int, float)):
        return NodeShape.NUMBER
    if isinstance(node, str):
        return NodeShape.STRING
    if isinstance(node, (list, tuple)):
        return NodeShape.ARRAY
    if isinstance(node, Mapping):
        return NodeShape.MAP
    return NodeShape.OTHER
