"""Error taxonomy for document compilation and configuration"""

from typing import Optional


class CompileError(Exception):
    """Base class for failures scoped to a single document."""

    def __init__(self, message: str, source_path: Optional[str] = None):
        self.source_path = source_path
        where = f"{source_path}: " if source_path else ""
        super().__init__(f"{where}{message}")


class ParseError(CompileError):
    """Malformed document structure or metadata block."""

    def __init__(self, message: str, source_path: Optional[str] = None, location: Optional[str] = None):
        self.location = location
        if location:
            message = f"{message} ({location})"
        super().__init__(message, source_path)


class ResolutionError(CompileError):
    """A referenced component name matched no import resolver."""

    def __init__(self, name: str, source_path: Optional[str] = None):
        self.name = name
        super().__init__(f"Cannot resolve import for component '{name}'", source_path)


class DocumentIOError(CompileError):
    """The document could not be read."""


class ValidationError(ValueError):
    """Compiler configuration or settings violate the recognized options."""
