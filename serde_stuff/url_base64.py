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
This module carries a byte-sequence as URL-safe base64 text: the alphabet uses `-` and `_` instead of `+` and `/`, and
the text is padded with `=` unless the settings say otherwise.

>>> encode_base64(bytes(range(32)), padding=True)
'AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8='
>>> encode_base64(b'\xfb\xff', padding=True)
'-_8='
>>> encode_base64(b'\xfb\xff', padding=False)
'-_8'

>>> decode_base64('AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8=', accept_unpadded=False) == bytes(range(32))
True
>>> decode_base64('-_8=', accept_unpadded=False)
b'\xfb\xff'

The standard alphabet is not accepted, neither is text with a broken padding:

>>> try:
...     decode_base64('+/8=', accept_unpadded=False)
... except Base64DecodeError as e:
...     print(*e.args)
invalid URL-safe base64 alphabet

>>> try:
...     decode_base64('-_8', accept_unpadded=False)
... except Base64DecodeError as e:
...     print(*e.args)
invalid base64 padding
>>> decode_base64('-_8', accept_unpadded=True)
b'\xfb\xff'
"""

import base64
import binascii
import re
from typing import Annotated, Any, Optional

from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

from serde_stuff.conf import get_settings
from serde_stuff.exceptions import Base64DecodeError, ShapeMismatchError
from serde_stuff.node import NodeShape, node_shape

_URL_SAFE_ALPHABET = re.compile(r'[A-Za-z0-9_-]*={0,2}')


def encode_base64(data: bytes, *, padding: Optional[bool] = None) -> str:
    """ Encodes a byte-sequence as URL-safe base64 text.

    This module's docstring has more details and examples.
    """
    if padding is None:
        padding = get_settings().BASE64_PADDING
    text = base64.urlsafe_b64encode(data).decode('ascii')
    if not padding:
        text = text.rstrip('=')
    return text


def decode_base64(text: Any, *, accept_unpadded: Optional[bool] = None) -> bytes:
    """ Decodes URL-safe base64 text into a byte-sequence.

    Only the canonical encoding is accepted: unused bits of the last symbol must be zero.

    This module's docstring has more details and examples.
    """
    shape = node_shape(text)
    if shape is not NodeShape.STRING:
        raise ShapeMismatchError(shape, 'base64 string')
    if accept_unpadded is None:
        accept_unpadded = get_settings().BASE64_ACCEPT_UNPADDED
    if not _URL_SAFE_ALPHABET.fullmatch(text):
        raise Base64DecodeError('invalid URL-safe base64 alphabet')
    if accept_unpadded and '=' not in text:
        text += '=' * (-len(text) % 4)
    if len(text) % 4 != 0:
        raise Base64DecodeError('invalid base64 padding')
    try:
        data = base64.b64decode(text, altchars=b'-_', validate=True)
    except binascii.Error as e:
        raise Base64DecodeError(f'invalid base64: {e}') from e
    if base64.urlsafe_b64encode(data).decode('ascii') != text:
        raise Base64DecodeError('invalid base64 trailing bits')
    return data


def base64_to_bytes(value: Any) -> bytes:
    """Convert base64 text to bytes, or pass through if already bytes."""
    if isinstance(value, bytes):
        return value
    return decode_base64(value)


def _bytes_to_base64(value: bytes) -> str:
    return encode_base64(value)


# Deserialization accepts bytes or URL-safe base64 text, serialization always outputs URL-safe base64 text
Base64 = Annotated[bytes, BeforeValidator(base64_to_bytes), PlainSerializer(_bytes_to_base64, return_type=str)]
