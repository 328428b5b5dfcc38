"""Sui JSON-RPC response types (suix_getOwnedObjects subset)."""

from __future__ import annotations

from typing import Any, TypedDict


class MoveObjectContentSchema(TypedDict, total=False):
    """``content`` of a Sui object when showContent is requested."""

    dataType: str
    """``moveObject`` or ``package``."""
    type: str
    hasPublicTransfer: bool
    fields: dict[str, Any]


class ObjectDataSchema(TypedDict, total=False):
    """``data`` of a Sui object response."""

    objectId: str
    version: str
    digest: str
    type: str
    content: MoveObjectContentSchema


class ObjectResponseSchema(TypedDict, total=False):
    """One item of a suix_getOwnedObjects page."""

    data: ObjectDataSchema
    error: dict[str, Any]


class OwnedObjectsPageSchema(TypedDict, total=False):
    """``result`` of suix_getOwnedObjects."""

    data: list[ObjectResponseSchema]
    nextCursor: str | None
    hasNextPage: bool
