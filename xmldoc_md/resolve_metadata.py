"""Logic for assembling flat metadata records into per-type trees."""

import logging
from collections.abc import Callable, Hashable, Iterable

from xmldoc_md.models import (
    BaseMetadata,
    EventMetadata,
    FieldMetadata,
    MemberMetadata,
    MethodMetadata,
    PropertyMetadata,
    TypeMetadata,
)

logger = logging.getLogger(__name__)


def resolve_metadata(
    records: Iterable[BaseMetadata], *, scope_by_assembly: bool = False
) -> list[TypeMetadata]:
    """Attach every member to the type that declares it.

    Members are grouped by the full name of their declaring type, or by
    assembly and full name when ``scope_by_assembly`` is set. Each type, in
    encounter order, then receives its group in encounter order. Members whose
    declaring type is not among the records are left out. Permission
    references of attached methods pick up the summary of the first property
    or field with the same full name.

    The returned types keep their encounter order; sorting for presentation
    is left to the renderer.
    """
    records = list(records)

    def key(record: BaseMetadata, full_name: str) -> Hashable:
        if scope_by_assembly:
            return (record.assembly_name, full_name)
        return full_name

    types: list[TypeMetadata] = []
    members_by_owner: dict[Hashable, list[MemberMetadata]] = {}
    documented_values: dict[Hashable, str | None] = {}

    for record in records:
        if isinstance(record, TypeMetadata):
            types.append(record)
        elif isinstance(record, MemberMetadata):
            owner = key(record, record.declaring_type_full_name)
            members_by_owner.setdefault(owner, []).append(record)
            if isinstance(record, (PropertyMetadata, FieldMetadata)):
                documented_values.setdefault(key(record, record.full_name), record.summary)
        else:
            raise TypeError(f"Unsupported metadata record: {type(record).__name__}")

    attached: set[Hashable] = set()
    for type_record in types:
        owner = key(type_record, type_record.full_name)
        members = members_by_owner.get(owner, [])
        if members:
            attached.add(owner)
        _attach(type_record, members)

    for owner in attached:
        for member in members_by_owner[owner]:
            if isinstance(member, MethodMetadata):
                _resolve_permissions(member, documented_values, key)

    for owner, members in members_by_owner.items():
        if owner not in attached:
            logger.debug(
                "No declared type %s for %d member(s); left out", owner, len(members)
            )

    return types


def _attach(type_record: TypeMetadata, members: list[MemberMetadata]) -> None:
    """Append members to the child list matching their kind."""
    for member in members:
        if isinstance(member, MethodMetadata):
            type_record.methods.append(member)
        elif isinstance(member, PropertyMetadata):
            type_record.properties.append(member)
        elif isinstance(member, FieldMetadata):
            type_record.fields.append(member)
        elif isinstance(member, EventMetadata):
            type_record.events.append(member)
        else:
            raise TypeError(f"Unsupported member record: {type(member).__name__}")


def _resolve_permissions(
    method: MethodMetadata,
    documented_values: dict[Hashable, str | None],
    key: Callable[[BaseMetadata, str], Hashable],
) -> None:
    for permission in method.permissions:
        if not permission.full_name:
            continue
        lookup = key(method, permission.full_name)
        if lookup in documented_values:
            permission.summary = documented_values[lookup]
