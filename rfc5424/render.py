from __future__ import annotations

import logging
from typing import Iterable

from .errors import ValidationError, invalid_value, missing_field, too_large
from .structured_data import StructuredDataElement

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 32
NILVALUE = "-"

_ESCAPED = frozenset('"\\]')
_FORBIDDEN_NAME_CHARS = frozenset('="]')


def escape_param_value(value: str) -> str:
    return "".join("\\" + ch if ch in _ESCAPED else ch for ch in str(value))


def validate_name(name: str, what: str) -> None:
    """
    SD-NAME rule (RFC 5424 section 6.3): 1..32 PRINTUSASCII except '=', ']', '"'.
    """
    text = str(name)
    if not text:
        raise missing_field(what)
    for ch in text:
        if not 33 <= ord(ch) <= 126 or ch in _FORBIDDEN_NAME_CHARS:
            raise invalid_value(f"{what} has invalid character {ch!r}")
    if len(text) > MAX_NAME_LENGTH:
        raise too_large(what, text, MAX_NAME_LENGTH)


def render_element(element: StructuredDataElement) -> str:
    element.validate()

    sd_id = str(element.id())
    validate_name(sd_id, "SD-ID")

    parts = [sd_id]
    for param in element.params():
        validate_name(param.name, "PARAM-NAME")
        parts.append(f'{param.name}="{escape_param_value(param.value)}"')

    logger.debug("rendered structured data element %s (%d params)", sd_id, len(parts) - 1)
    return "[" + " ".join(parts) + "]"


def render_structured_data(elements: Iterable[StructuredDataElement], *, skip_invalid: bool = False) -> str:
    """
    Render a STRUCTURED-DATA section.

    skip_invalid=False: the first ValidationError propagates (caller drops the message).
    skip_invalid=True: invalid elements are omitted and logged.
    """
    rendered: list[str] = []
    seen: set[str] = set()

    for element in elements:
        sd_id = str(element.id())
        try:
            if sd_id in seen:
                raise invalid_value(f"duplicate SD-ID {sd_id}")
            text = render_element(element)
        except ValidationError as exc:
            if not skip_invalid:
                raise
            logger.warning("omitting structured data element %s: %s", sd_id, exc)
            continue
        seen.add(sd_id)
        rendered.append(text)

    if not rendered:
        return NILVALUE
    return "".join(rendered)
