"""formfield — form field values with composable, short-circuit validation."""

from formfield.domain.field import (
    Field,
    Invalid,
    Metadata,
    Valid,
    extract_metadata,
    extract_value,
    init,
    is_invalid,
    is_valid,
    reset_metadata,
    reset_value,
    to_maybe,
    to_result,
    update_metadata,
    view,
    with_default,
)
from formfield.domain.result import Err, Ok
from formfield.domain.validators import Validator, chain, create_validator, traced, validate

__version__ = "0.1.0"

__all__ = [
    "Err",
    "Field",
    "Invalid",
    "Metadata",
    "Ok",
    "Valid",
    "Validator",
    "__version__",
    "chain",
    "create_validator",
    "extract_metadata",
    "extract_value",
    "init",
    "is_invalid",
    "is_valid",
    "reset_metadata",
    "reset_value",
    "to_maybe",
    "to_result",
    "traced",
    "update_metadata",
    "validate",
    "view",
    "with_default",
]
