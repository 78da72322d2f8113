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
Optional byte-sequence carried as URL-safe base64 text. A missing field or `null` decodes to `None`, and `None` is not
written at all.

>>> decode_option_base64(None) is None
True
>>> decode_option_base64('-_8=')
b'\xfb\xff'
>>> encode_option_base64(None)
<Omit.OMIT: 'omit'>
>>> encode_option_base64(b'\xfb\xff')
'-_8='
"""

from typing import Annotated, Any, Optional, Union

from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

from serde_stuff.model import OMIT_IF_ABSENT
from serde_stuff.node import OMIT, Omitted
from serde_stuff.url_base64 import base64_to_bytes, decode_base64, encode_base64


def encode_option_base64(data: Optional[bytes]) -> Union[str, Omitted]:
    if data is None:
        return OMIT
    return encode_base64(data)


def decode_option_base64(text: Optional[str]) -> Optional[bytes]:
    if text is None:
        return None
    return decode_base64(text)


def _option_base64_to_bytes(value: Any) -> Optional[bytes]:
    if value is None:
        return None
    return base64_to_bytes(value)


def _option_bytes_to_base64(value: Optional[bytes]) -> Optional[str]:
    if value is None:
        return None
    return encode_base64(value)


# Must be used on a `serde_stuff.model.BaseModel` field that defaults to None
OptionBase64 = Annotated[
    Optional[bytes],
    BeforeValidator(_option_base64_to_bytes),
    PlainSerializer(_option_bytes_to_base64, return_type=Optional[str]),
    OMIT_IF_ABSENT,
]
