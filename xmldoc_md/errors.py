"""Exceptions raised while reading XML documentation files."""


class XmlDocError(Exception):
    """Base class for all errors raised by this package."""


class UnrecognizedKindError(XmlDocError, ValueError):
    """Raised when a member identifier has no known kind prefix."""

    def __init__(self, identifier: str | None) -> None:
        """Store the offending identifier and build a readable message."""
        self.identifier = identifier
        super().__init__(f"Cannot determine the kind of member identifier {identifier!r}")
