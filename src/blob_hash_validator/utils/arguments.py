"""Argument checking shared by the hasher and the validator."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from blob_hash_validator.exceptions import InvalidArgumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_pydantic_error(error: ValidationError) -> str:
    """Format Pydantic ValidationError for error messages.

    Args:
        error: Pydantic ValidationError

    Returns:
        Formatted error message string
    """
    errors = error.errors()
    if len(errors) == 1:
        e = errors[0]
        field_path = " -> ".join(str(loc) for loc in e["loc"])
        return f"Invalid argument {field_path}: {e['msg']}"
    else:
        lines = ["Invalid arguments:"]
        for e in errors:
            field_path = " -> ".join(str(loc) for loc in e["loc"])
            lines.append(f"  - {field_path}: {e['msg']}")
        return "\n".join(lines)


def parse_arguments(model: type[ModelT], **data: Any) -> ModelT:
    """Validate call arguments against a request model.

    Args:
        model: Request model class
        **data: Raw argument values

    Returns:
        Validated model instance

    Raises:
        InvalidArgumentError: If any argument is rejected
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidArgumentError(format_pydantic_error(e)) from e
