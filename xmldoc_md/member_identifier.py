"""Data model for a decoded member identifier."""

from dataclasses import dataclass

from xmldoc_md.member_kind import MemberKind


@dataclass(frozen=True)
class MemberIdentifier:
    """Structured form of an identifier such as ``M:Ns.Type.Method(System.String)``."""

    raw: str
    kind: MemberKind
    full_name: str  # Ns.Type.Method, without the kind prefix or parameters
    name: str
    declaring_type_name: str
    declaring_type_full_name: str
    parameter_types: tuple[str, ...] = ()
    is_constructor: bool = False

    @property
    def namespace(self) -> str:
        """Everything before the simple name of the declaring type."""
        owner = self.declaring_type_full_name
        if "." not in owner:
            return ""
        return owner.rsplit(".", 1)[0]
