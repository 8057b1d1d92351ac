"""Address-specific error classes.

These classes provide package-specific error handling for metadata lookups
and address validation.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_address_metadata"

T = TypeVar("T")


class RyanDataAddressError(PydanticCustomError):
    """Custom exception for ryandata_address_metadata that wraps Pydantic errors.

    Inherits from PydanticCustomError (and therefore ValueError) to stay
    compatible with Pydantic's error handling while providing package
    identification.

    Error types raised by this package:
    - invalid_argument: a required key, address or record was None
    - remote_request: the metadata service could not be reached
    - remote_http_error: the metadata service answered with an error status
    - remote_parse: the metadata service returned an unusable payload
    """

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataAddressError:
        """Wrap a pydantic.ValidationError or any other exception.

        Args:
            error: The exception to wrap.
            context: Additional context to include in the error.

        Returns:
            RyanDataAddressError of type ``remote_parse`` describing the problem.
        """
        from pydantic import ValidationError

        ctx = {
            "package": PACKAGE_NAME,
            **(context or {}),
        }
        if isinstance(error, ValidationError):
            error_messages = "; ".join(e.get("msg", str(e)) for e in error.errors())
            return cls("remote_parse", error_messages, ctx)
        return cls("remote_parse", str(error), ctx)


class RyanDataValidationError(Exception):
    """Custom exception that wraps pydantic.ValidationError with package identification.

    Raised when caller-supplied data (such as an address mapping) cannot be
    turned into a model.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        """Initialize RyanDataValidationError.

        Args:
            validation_error: The pydantic.ValidationError to wrap.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"RyanDataValidationError({self.original_error!r}, context={self.context})"


def invalid_argument(name: str) -> RyanDataAddressError:
    """Create the error raised when a required argument is None."""
    return RyanDataAddressError(
        "invalid_argument",
        "{argument} is required",
        {"package": PACKAGE_NAME, "argument": name},
    )


def require_argument(value: T | None, name: str) -> T:
    """Return value unchanged, raising invalid_argument when it is None.

    Args:
        value: Value to check.
        name: Argument name reported in the error context.

    Raises:
        RyanDataAddressError: If value is None.
    """
    if value is None:
        raise invalid_argument(name)
    return value
