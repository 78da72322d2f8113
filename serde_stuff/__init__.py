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

"""
Common field (de)serialization adapters for pydantic models and plain JSON-like documents.

Every adapter module exposes `decode_x`/`encode_x` functions that work on already-parsed nodes, and an annotation to be
used on a model field, for instance `items: OptionVecOrOne[Inner] = None`.
"""

from serde_stuff.exceptions import (
    AbsenceContractViolation,
    Base64DecodeError,
    DecodeError,
    ElementDecodeError,
    ElementEncodeError,
    EncodeError,
    SerdeError,
    ShapeMismatchError,
    TextParseError,
)
from serde_stuff.model import OMIT_IF_ABSENT, BaseModel, OmitIfAbsent
from serde_stuff.node import OMIT, NodeShape, node_shape
from serde_stuff.option_base64 import OptionBase64, decode_option_base64, encode_option_base64
from serde_stuff.option_string_or_struct import OptionStringOrStruct, decode_option_string_or_struct
from serde_stuff.option_vec_or_one import OptionVecOrOne, decode_option_vec_or_one, encode_option_vec_or_one
from serde_stuff.string_or_struct import FromStr, StringOrStruct, decode_string_or_struct
from serde_stuff.url_base64 import Base64, decode_base64, encode_base64
from serde_stuff.vec_or_one import VecOrOne, decode_vec_or_one, encode_vec_or_one
from serde_stuff.version import __version__

__all__ = [
    'AbsenceContractViolation',
    'Base64',
    'Base64DecodeError',
    'BaseModel',
    'DecodeError',
    'ElementDecodeError',
    'ElementEncodeError',
    'EncodeError',
    'FromStr',
    'NodeShape',
    'OMIT',
    'OMIT_IF_ABSENT',
    'OmitIfAbsent',
    'OptionBase64',
    'OptionStringOrStruct',
    'OptionVecOrOne',
    'SerdeError',
    'ShapeMismatchError',
    'StringOrStruct',
    'TextParseError',
    'VecOrOne',
    'decode_base64',
    'decode_option_base64',
    'decode_option_string_or_struct',
    'decode_option_vec_or_one',
    'decode_string_or_struct',
    'decode_vec_or_one',
    'encode_base64',
    'encode_option_base64',
    'encode_option_vec_or_one',
    'encode_vec_or_one',
    'node_shape',
]
