"""Kinds of content a sync operation can be started for."""

from __future__ import annotations

import enum


class SyncType(enum.IntEnum):
    ASSET = 0
    ENTRY = 1
    ALL = 2
    ONLY_DELETION = 3
    DELETED_ASSET = 4
    DELETED_ENTRY = 5

    def __str__(self) -> str:
        return _NAMES[self]


_NAMES = {
    SyncType.ASSET: "Asset",
    SyncType.ENTRY: "Entry",
    SyncType.ALL: "all",
    SyncType.ONLY_DELETION: "Deletion",
    SyncType.DELETED_ASSET: "DeletedAsset",
    SyncType.DELETED_ENTRY: "DeletedEntry",
}