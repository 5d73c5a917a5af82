from __future__ import annotations

from enum import Enum


def utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class ValidationErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TOO_LARGE = "too_large"
    INVALID_VALUE = "invalid_value"


class ValidationError(ValueError):
    """
    Raised by an element's validate() (and by the rendering helpers).

    str(err) is exactly the message, so callers and tests can match on it.
    """

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError({self.kind.value!r}, {self.message!r})"


def missing_field(field: str) -> ValidationError:
    return ValidationError(ValidationErrorKind.MISSING_FIELD, f"empty {field}")


def too_large(field: str, text: str, limit: int) -> ValidationError:
    size = utf8_len(text)
    return ValidationError(ValidationErrorKind.TOO_LARGE, f"{field} too big ({size} UTF-8 > {limit} max)")


def invalid_value(message: str) -> ValidationError:
    return ValidationError(ValidationErrorKind.INVALID_VALUE, message)
