"""Decoding of the member identifiers found in XML documentation files.

An identifier has the shape ``<Kind>:<QualifiedPath>[(<ParamTypes>)]``, e.g.
``M:Shop.Orders.OrderService.Place(System.String,System.Int32)``. The kind is
one of ``T`` (type), ``M`` (method or constructor), ``P`` (property), ``F``
(field) and ``E`` (event).

Generic parameters appear as ```N`` / ````N``, generic arguments inside
parameter lists use braces (``List{System.String}``), ref/out parameters end
with ``@`` and multi-dimensional arrays list their ranks as ``[0:,0:]``.
"""

from xmldoc_md.errors import UnrecognizedKindError
from xmldoc_md.member_identifier import MemberIdentifier
from xmldoc_md.member_kind import MemberKind

CONSTRUCTOR_MARKER = ".#ctor"

_OPENERS = "{[("
_CLOSERS = "}])"


def parse_identifier(identifier: str | None) -> MemberIdentifier:
    """Parse a member identifier into its parts.

    Raises UnrecognizedKindError for a missing or blank identifier and for
    any prefix other than the five known kind tags.
    """
    if not identifier or not identifier.strip() or len(identifier) < 2:
        raise UnrecognizedKindError(identifier)
    if identifier[1] != ":":
        raise UnrecognizedKindError(identifier)
    try:
        kind = MemberKind.from_tag(identifier[0])
    except UnrecognizedKindError:
        raise UnrecognizedKindError(identifier) from None

    has_params = "(" in identifier and ")" in identifier
    full_name = identifier[2 : identifier.index("(")] if has_params else identifier[2:]

    segments = [s for s in full_name.split(".") if s]
    name = segments[-1] if segments else ""
    declaring_type_name = segments[-2] if len(segments) >= 2 else ""

    if kind is MemberKind.TYPE:
        # A type declares itself.
        declaring_type_full_name = full_name
    else:
        declaring_type_full_name = _owner_of(full_name, name)

    return MemberIdentifier(
        raw=identifier,
        kind=kind,
        full_name=full_name,
        name=name,
        declaring_type_name=declaring_type_name,
        declaring_type_full_name=declaring_type_full_name,
        parameter_types=tuple(parse_parameter_types(identifier)),
        is_constructor=kind is MemberKind.METHOD and CONSTRUCTOR_MARKER in identifier,
    )


def parse_parameter_types(identifier: str) -> list[str]:
    """Return the raw parameter types listed between the parentheses.

    Commas nested in generic braces or array rank brackets do not split.
    """
    if "(" not in identifier or ")" not in identifier:
        return []
    start = identifier.index("(") + 1
    end = identifier.rindex(")")
    if end < start:
        return []
    return split_top_level(identifier[start:end])


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split on ``sep`` outside of any bracket pair, dropping empty entries."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS and depth:
            depth -= 1
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return [p for p in parts if p]


def _owner_of(full_name: str, name: str) -> str:
    """Cut the simple name (and its separator) off a qualified path."""
    if not name:
        return ""
    cut = full_name.rfind(name) - 1
    if cut <= 0:
        return ""
    return full_name[:cut]
