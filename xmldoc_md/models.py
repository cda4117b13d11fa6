"""Data models for documented types and members."""

from dataclasses import dataclass, field
from typing import ClassVar

from xmldoc_md.member_kind import MemberKind


@dataclass
class ParameterInfo:
    """A method parameter, paired by position with its ``<param>`` element."""

    type_name: str
    name: str | None = None
    summary: str | None = None
    full_name: str | None = None  # cref on the <param> element, if any


@dataclass
class ExceptionInfo:
    """An ``<exception cref="...">`` entry."""

    name: str | None
    full_name: str | None
    summary: str | None = None


@dataclass
class ResponseInfo:
    """A ``<response code="...">`` entry; unparsable codes are ``-1``."""

    code: int
    summary: str | None = None


@dataclass
class ReturnInfo:
    """The ``<returns>`` element of a method."""

    summary: str | None = None
    full_name: str | None = None


@dataclass
class PermissionInfo:
    """A ``<permission cref="...">`` entry.

    The summary is replaced by the documentation of the referenced property or
    field during resolution.
    """

    name: str | None
    full_name: str | None
    summary: str | None = None


@dataclass
class UriInfo:
    """HTTP method and route of an endpoint method."""

    method: str | None
    path: str | None

    def __str__(self) -> str:
        method = self.method.strip().upper() if self.method and self.method.strip() else "UNKNOWN"
        path = (self.path or "").strip().lower()
        return f"[{method}] {path}"


@dataclass
class BaseMetadata:
    """Attributes shared by every documented element."""

    name: str
    full_name: str
    order: int
    summary: str | None = None
    assembly_name: str | None = None

    kind: ClassVar[MemberKind]


@dataclass
class MemberMetadata(BaseMetadata):
    """A member that belongs to a declaring type."""

    declaring_type_full_name: str = ""
    declaring_type_name: str = ""


@dataclass
class PropertyMetadata(MemberMetadata):
    """A documented property."""

    type_name: str | None = None

    kind: ClassVar[MemberKind] = MemberKind.PROPERTY


@dataclass
class FieldMetadata(MemberMetadata):
    """A documented field."""

    type_name: str | None = None

    kind: ClassVar[MemberKind] = MemberKind.FIELD


@dataclass
class EventMetadata(MemberMetadata):
    """A documented event."""

    kind: ClassVar[MemberKind] = MemberKind.EVENT


@dataclass
class MethodMetadata(MemberMetadata):
    """A documented method or constructor."""

    is_constructor: bool = False
    remarks: str | None = None
    example: str | None = None
    returns: ReturnInfo | None = None
    uri: UriInfo | None = None
    parameters: list[ParameterInfo] = field(default_factory=list)
    exceptions: list[ExceptionInfo] = field(default_factory=list)
    responses: list[ResponseInfo] = field(default_factory=list)
    permissions: list[PermissionInfo] = field(default_factory=list)

    kind: ClassVar[MemberKind] = MemberKind.METHOD

    @property
    def has_details(self) -> bool:
        """Whether there is anything beyond the summary and remarks to show."""
        return bool(
            (self.example and self.example.strip())
            or self.returns
            or self.uri
            or self.exceptions
            or self.parameters
            or self.responses
        )


@dataclass
class TypeMetadata(BaseMetadata):
    """A documented type and, once resolved, its members."""

    remarks: str | None = None
    methods: list[MethodMetadata] = field(default_factory=list)
    properties: list[PropertyMetadata] = field(default_factory=list)
    fields: list[FieldMetadata] = field(default_factory=list)
    events: list[EventMetadata] = field(default_factory=list)

    kind: ClassVar[MemberKind] = MemberKind.TYPE
