from .errors import (
    ValidationError,
    ValidationErrorKind,
    invalid_value,
    missing_field,
    too_large,
    utf8_len,
)
from .render import (
    MAX_NAME_LENGTH,
    NILVALUE,
    escape_param_value,
    render_element,
    render_structured_data,
    validate_name,
)
from .structured_data import (
    StructuredDataElement,
    StructuredDataName,
    StructuredDataParam,
    StructuredDataParamName,
    StructuredDataParamValue,
    is_element,
)

__all__ = [
    "StructuredDataElement",
    "StructuredDataName",
    "StructuredDataParam",
    "StructuredDataParamName",
    "StructuredDataParamValue",
    "is_element",
    "ValidationError",
    "ValidationErrorKind",
    "invalid_value",
    "missing_field",
    "too_large",
    "utf8_len",
    "MAX_NAME_LENGTH",
    "NILVALUE",
    "escape_param_value",
    "render_element",
    "render_structured_data",
    "validate_name",
]
