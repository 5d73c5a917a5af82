from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Protocol, runtime_checkable


class StructuredDataName(str):
    """SD-ID of an element, e.g. "origin". Not validated until rendering."""

    __slots__ = ()


class StructuredDataParamName(str):
    __slots__ = ()


class StructuredDataParamValue(str):
    """
    Raw PARAM-VALUE text.

    Never pre-escaped: quote, backslash and "]" are escaped by the renderer
    (see rfc5424.render.escape_param_value).
    """

    __slots__ = ()


@dataclass(frozen=True)
class StructuredDataParam:
    name: StructuredDataParamName
    value: StructuredDataParamValue

    @classmethod
    def of(cls, name: str, value: Any) -> "StructuredDataParam":
        return cls(name=StructuredDataParamName(name), value=StructuredDataParamValue(str(value)))


@runtime_checkable
class StructuredDataElement(Protocol):
    """
    Contract for a structured-data element.

      - id(): constant SD-ID for the element type
      - params(): ordered params, wire order; never fails, never mutates
      - validate(): raises ValidationError for the first violated constraint
    """

    def id(self) -> StructuredDataName: ...

    def params(self) -> List[StructuredDataParam]: ...

    def validate(self) -> None: ...


def is_element(obj: object) -> bool:
    return isinstance(obj, StructuredDataElement)
