"""The kinds of program element an XML documentation member can describe."""

from enum import Enum

from xmldoc_md.errors import UnrecognizedKindError


class MemberKind(Enum):
    """One-character kind tags used as identifier prefixes."""

    TYPE = "T"
    METHOD = "M"  # constructors too
    PROPERTY = "P"
    FIELD = "F"
    EVENT = "E"

    @classmethod
    def from_tag(cls, tag: str) -> "MemberKind":
        """Map a kind tag such as ``M`` to its member kind."""
        try:
            return cls(tag)
        except ValueError:
            raise UnrecognizedKindError(tag) from None
