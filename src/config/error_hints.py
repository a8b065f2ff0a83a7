"""Error hints for configuration validation errors.

Provides user-friendly hints with actionable remediation steps
for common validation errors.
"""

from typing import Final


# Mapping of error types to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    # Missing field errors
    "missing": "This field is required. Please add it to your configuration.",
    "extra_forbidden": "Unknown field. Check for typos in the field name.",
    # Type errors
    "enum": "Check the allowed values in the documentation.",
    "literal_error": "Check the allowed values in the documentation.",
    "int_type": "This field must be an integer (whole number).",
    "int_parsing": "This field must be an integer (whole number).",
    "float_type": "This field must be a number.",
    "float_parsing": "This field must be a number.",
    "string_type": "This field must be a text string.",
    "list_type": "This field must be a list/array.",
    "model_type": "This entry must be an object/mapping.",
    # Value constraint errors
    "greater_than": "The value is too small. It must be above the minimum.",
    "greater_than_equal": "The value is too small. Check the minimum allowed.",
    "less_than_equal": "The value is too large. Check the maximum allowed.",
    "string_too_short": "The text is too short. Check minimum length requirement.",
    "string_too_long": "The text is too long. Check maximum length requirement.",
    "string_pattern_mismatch": "The format is invalid. Versions look like '1.0'.",
    # Cross-field errors
    "value_error": "Check the value. Source names must be unique ignoring case.",
    # File errors
    "file_not_found": "The file does not exist. Check the file path.",
    "file_read_error": "The file could not be read. Check that it is a regular file and readable.",
    "encoding_error": "The file is not valid UTF-8. Re-save it with UTF-8 encoding.",
    "yaml_parse_error": "Invalid YAML syntax. Check for proper indentation and formatting.",
}

# Field-specific hints for more context
FIELD_HINTS: Final[dict[str, str]] = {
    "name": "Use the source name exactly as it appears on posts (e.g., 'technology').",
    "category": "Must be one of: technology, finance, entertainment, gaming, lifestyle, news, drama, sports, science, other.",
    "baseline_score": "Must be a positive number (at least 1): the typical score of an ordinary post.",
    "tier": "Must be 1 (poll often), 2, or 3 (poll rarely).",
    "subscribers": "Must be a non-negative whole number.",
    "decay_hours": "Must be a positive number of hours.",
    "min_age_hours": "Must be between 0.05 and 24 hours.",
    "default_baseline": "Must be a positive number (at least 1).",
    "batch_error_policy": "Must be 'skip' or 'abort'.",
}


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a validation error.

    Args:
        error_type: The Pydantic error type (e.g., 'missing', 'enum').
        field_name: Optional field name for field-specific hints.

    Returns:
        A user-friendly hint string.
    """
    if field_name:
        # 'sources.0.tier' -> 'tier'
        simple_field = field_name.split(".")[-1]
        if simple_field in FIELD_HINTS:
            return FIELD_HINTS[simple_field]

    return ERROR_HINTS.get(
        error_type, "Check the configuration documentation for valid values."
    )


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a validation error with optional hint.

    Args:
        location: The error location (e.g., 'sources.0.baseline_score').
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}"
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
