"""
Error types for token loading, configuration and artifact emission.
"""

from dataclasses import dataclass
from typing import Optional


class TokensmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: Optional["TokenContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class TokenSourceError(TokensmithError):
    """
    Raised when token source documents cannot be turned into a dictionary.

    Examples:
    - Malformed JSON or YAML
    - Token record without a $value
    - A document whose root is not an object
    """

    pass


class ConfigError(TokensmithError):
    """
    Raised when the build configuration is invalid.

    Examples:
    - Invalid YAML in tokensmith.yaml
    - Unknown format or filter name
    - Schema violations (missing destination, bad max_workers)
    """

    pass


class EmitError(TokensmithError):
    """
    Raised when an output file cannot be produced.

    Examples:
    - Output directory not writable
    - Format function failure
    """

    pass


@dataclass
class TokenContext:
    """
    Location of an error inside the token sources.

    Attributes:
        file: Source document the token was read from
        path: Dot-joined token path
    """

    file: str | None = None
    path: str | None = None

    def format(self) -> str:
        """
        Format the context as a human-readable prefix.

        Returns:
            Formatted string like: "src/primitives/color.json (color.blue.500)"
        """
        if self.file and self.path:
            return f"{self.file} ({self.path})"
        return self.file or self.path or "<unknown>"
