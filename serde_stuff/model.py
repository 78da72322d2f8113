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

from dataclasses import dataclass
from typing import Any

from pydantic import (
    BaseModel as PydanticBaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.fields import FieldInfo

from serde_stuff.exceptions import AbsenceContractViolation


@dataclass(frozen=True)
class OmitIfAbsent:
    """Field marker: when the value is `None` the field is left out of the output instead of written as `null`."""


OMIT_IF_ABSENT = OmitIfAbsent()


def omits_if_absent(field: FieldInfo) -> bool:
    return any(isinstance(item, OmitIfAbsent) for item in field.metadata)


class BaseModel(PydanticBaseModel):
    """Substitute for pydantic's BaseModel.
    This class defines a project BaseModel to be used instead of pydantic's, setting stricter global configurations.
    Other configurations can be set on a case by case basis.

    It is also the host for optional adapters (`OptionVecOrOne`, `OptionBase64`, ...): fields marked with
    `OmitIfAbsent` must default to `None`, and are dropped from the output when they hold `None`.

    Read: https://docs.pydantic.dev/latest/concepts/config/
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name, field in cls.model_fields.items():
            if not omits_if_absent(field):
                continue
            if field.is_required() or field.default_factory is not None or field.default is not None:
                raise AbsenceContractViolation(f'{cls.__name__}.{name} is omitted when absent, it must default to None')

    @model_serializer(mode='wrap')
    def omit_absent_fields(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is not None or not omits_if_absent(field):
                continue
            key = name
            if info.by_alias:
                key = field.serialization_alias or field.alias or name
            data.pop(key, None)
        return data

    def json_dumpb(self) -> bytes:
        """Utility method for converting a Model into bytes representation of a JSON."""
        return self.model_dump_json().encode('utf-8')
