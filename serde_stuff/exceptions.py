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

from typing import Optional

from serde_stuff.node import NodeShape


class SerdeError(Exception):
    """General error class"""


class DecodeError(SerdeError, ValueError):
    """A value node could not be decoded.

    It is a `ValueError` so pydantic validators report it as a regular validation error.
    """


class EncodeError(SerdeError, ValueError):
    """A value could not be encoded into a node"""


class ShapeMismatchError(DecodeError):
    """The node matched none of the shapes accepted by the adapter"""

    def __init__(self, shape: NodeShape, expected: str, detail: Optional[str] = None) -> None:
        message = f'expected {expected}, got {shape.value}'
        if detail:
            message = f'{message}: {detail}'
        super().__init__(message)
        self.shape = shape
        self.expected = expected


class ElementDecodeError(DecodeError):
    """An element failed to decode under its own contract"""

    def __init__(self, interpretation: str, cause: Exception, index: Optional[int] = None) -> None:
        where = f'{interpretation} interpretation'
        if index is not None:
            where = f'{where}, index {index}'
        super().__init__(f'{where}: {cause}')
        self.interpretation = interpretation
        self.index = index


class TextParseError(DecodeError):
    """The element type could not parse its text form"""

    def __init__(self, text: str, cause: Exception) -> None:
        super().__init__(f'cannot parse {text!r}: {cause}')
        self.text = text


class Base64DecodeError(DecodeError):
    """Text is not valid URL-safe base64"""


class ElementEncodeError(EncodeError):
    """An element failed to encode under its own contract"""

    def __init__(self, index: int, cause: Exception) -> None:
        super().__init__(f'index {index}: {cause}')
        self.index = index


class AbsenceContractViolation(SerdeError, TypeError):
    """An optional field that is omitted when absent was declared without a `None` default.

    This is a programming error in the model declaration, not a data error.
    """
