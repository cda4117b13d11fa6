"""Logic for turning one ``<member>`` element into a metadata record."""

import re

from lxml import etree

from xmldoc_md.member_identifier import MemberIdentifier
from xmldoc_md.member_kind import MemberKind
from xmldoc_md.models import (
    BaseMetadata,
    EventMetadata,
    ExceptionInfo,
    FieldMetadata,
    MethodMetadata,
    ParameterInfo,
    PermissionInfo,
    PropertyMetadata,
    ResponseInfo,
    ReturnInfo,
    TypeMetadata,
    UriInfo,
)
from xmldoc_md.order_sequence import OrderSequence
from xmldoc_md.parse_identifier import parse_identifier
from xmldoc_md.strip_cref_prefix import strip_cref_prefix
from xmldoc_md.xml_text import element_text

INVALID_RESPONSE_CODE = -1
RESPONSE_CODE_RE = re.compile(r"^\s*[+-]?\d+\s*$")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def read_member(member: etree._Element, sequence: OrderSequence) -> BaseMetadata:
    """Build the record matching the kind of the member's ``name`` attribute.

    The identifier is parsed before an order is drawn, so an unrecognized
    kind raises without consuming a value of the sequence.
    """
    ident = parse_identifier(member.get("name"))
    reader = _READERS[ident.kind]
    return reader(member, ident, sequence.next())


def _read_type(member: etree._Element, ident: MemberIdentifier, order: int) -> TypeMetadata:
    return TypeMetadata(
        name=ident.name,
        full_name=ident.full_name,
        order=order,
        summary=element_text(member.find("summary")),
        remarks=element_text(member.find("remarks")),
    )


def _read_method(member: etree._Element, ident: MemberIdentifier, order: int) -> MethodMetadata:
    return MethodMetadata(
        name=ident.name,
        full_name=ident.full_name,
        order=order,
        summary=element_text(member.find("summary")),
        declaring_type_full_name=ident.declaring_type_full_name,
        declaring_type_name=ident.declaring_type_name,
        is_constructor=ident.is_constructor,
        remarks=element_text(member.find("remarks")),
        example=element_text(member.find("example")),
        returns=read_returns(member.find("returns")),
        uri=read_uri(member.find("uri")),
        parameters=read_parameters(member.findall("param"), ident.parameter_types),
        exceptions=read_exceptions(member.findall("exception")),
        responses=read_responses(member.findall("response")),
        permissions=read_permissions(member.findall("permission")),
    )


def _read_property(
    member: etree._Element, ident: MemberIdentifier, order: int
) -> PropertyMetadata:
    return PropertyMetadata(
        name=ident.name,
        full_name=ident.full_name,
        order=order,
        summary=element_text(member.find("summary")),
        declaring_type_full_name=ident.declaring_type_full_name,
        declaring_type_name=ident.declaring_type_name,
        type_name=_cref(member.find("see")),
    )


def _read_field(member: etree._Element, ident: MemberIdentifier, order: int) -> FieldMetadata:
    return FieldMetadata(
        name=ident.name,
        full_name=ident.full_name,
        order=order,
        summary=element_text(member.find("summary")),
        declaring_type_full_name=ident.declaring_type_full_name,
        declaring_type_name=ident.declaring_type_name,
        type_name=_cref(member.find("see")),
    )


def _read_event(member: etree._Element, ident: MemberIdentifier, order: int) -> EventMetadata:
    return EventMetadata(
        name=ident.name,
        full_name=ident.full_name,
        order=order,
        summary=element_text(member.find("summary")),
        declaring_type_full_name=ident.declaring_type_full_name,
        declaring_type_name=ident.declaring_type_name,
    )


_READERS = {
    MemberKind.TYPE: _read_type,
    MemberKind.METHOD: _read_method,
    MemberKind.PROPERTY: _read_property,
    MemberKind.FIELD: _read_field,
    MemberKind.EVENT: _read_event,
}


def read_parameters(
    params: list[etree._Element], parameter_types: tuple[str, ...]
) -> list[ParameterInfo]:
    """Pair parameter types with ``<param>`` elements by position.

    There is no matching by name: the i-th type gets the i-th element.
    """
    result = []
    for ix, type_name in enumerate(parameter_types):
        element = params[ix] if ix < len(params) else None
        result.append(
            ParameterInfo(
                type_name=type_name,
                name=element.get("name") if element is not None else None,
                summary=element_text(element),
                full_name=_cref(element),
            )
        )
    return result


def read_returns(returns: etree._Element | None) -> ReturnInfo | None:
    """Read ``<returns>``; ``None`` when absent or without text and cref."""
    if returns is None:
        return None
    summary = element_text(returns)
    full_name = _cref(returns)
    if not (summary and summary.strip()) and not full_name:
        return None
    return ReturnInfo(summary=summary, full_name=full_name)


def read_exceptions(exceptions: list[etree._Element]) -> list[ExceptionInfo]:
    """Read ``<exception cref="...">`` elements."""
    result = []
    for exception in exceptions:
        full_name = _cref(exception)
        result.append(
            ExceptionInfo(
                name=full_name.split(".")[-1] if full_name else None,
                full_name=full_name,
                summary=element_text(exception),
            )
        )
    return result


def read_permissions(permissions: list[etree._Element]) -> list[PermissionInfo]:
    """Read ``<permission cref="...">`` elements."""
    result = []
    for permission in permissions:
        full_name = _cref(permission)
        result.append(
            PermissionInfo(
                name=full_name.split(".")[-1] if full_name else None,
                full_name=full_name,
                summary=element_text(permission),
            )
        )
    return result


def read_responses(responses: list[etree._Element]) -> list[ResponseInfo]:
    """Read ``<response code="...">`` elements."""
    return [
        ResponseInfo(code=parse_response_code(r.get("code")), summary=element_text(r))
        for r in responses
    ]


def parse_response_code(value: str | None) -> int:
    """Parse a status code, mapping anything unparsable to ``-1``.

    Codes must fit a 32-bit signed integer.
    """
    if value is None or not RESPONSE_CODE_RE.match(value):
        return INVALID_RESPONSE_CODE
    code = int(value)
    if not INT32_MIN <= code <= INT32_MAX:
        return INVALID_RESPONSE_CODE
    return code


def read_uri(uri: etree._Element | None) -> UriInfo | None:
    """Read an optional ``<uri method="GET">/route</uri>`` element."""
    if uri is None:
        return None
    path = element_text(uri)
    method = uri.get("method")
    if not (path and path.strip()) and not (method and method.strip()):
        return None
    return UriInfo(method=method, path=path)


def _cref(element: etree._Element | None) -> str | None:
    if element is None:
        return None
    return strip_cref_prefix(element.get("cref"))
