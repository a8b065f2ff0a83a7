"""Configuration errors."""

from pydantic import ValidationError

from src.config.error_hints import format_validation_error


class ConfigurationError(Exception):
    """Raised when source or scoring configuration is malformed.

    Configuration is validated as a whole; when this is raised nothing
    built from the rejected input is usable.
    """

    def __init__(self, errors: list[dict[str, str]], source: str) -> None:
        """Initialize the error.

        Args:
            errors: Validation error details, each with loc/msg/type keys.
            source: File path or description of the rejected configuration.
        """
        self.errors = errors
        self.source = source
        super().__init__(
            f"Invalid configuration in {source}: {len(errors)} error(s)"
        )

    def format_errors(self, *, include_hint: bool = True) -> list[str]:
        """Render each error with an optional remediation hint.

        Args:
            include_hint: Whether to append a hint line to each error.

        Returns:
            One formatted string per error.
        """
        return [
            format_validation_error(
                err["loc"], err["msg"], err["type"], include_hint=include_hint
            )
            for err in self.errors
        ]


def errors_from_pydantic(error: ValidationError) -> list[dict[str, str]]:
    """Flatten a pydantic ValidationError into loc/msg/type dicts.

    Args:
        error: The validation failure.

    Returns:
        List of error detail dicts.
    """
    return [
        {
            "loc": ".".join(str(loc) for loc in err["loc"]) or "root",
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]
