"""Nested configuration document construction from flat key/value listings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kv_config.backends.protocol import KeyValue


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


logger = logging.getLogger(__name__)


def build_tree(entries: Iterable[KeyValue], prefix_length: int, delimiter: str = "/") -> dict[str, Any]:
    """Build a nested document from ordered key/value entries.

    Each key has its first ``prefix_length`` characters removed and the rest is
    split on ``delimiter``. All segments but the last name nested mappings,
    created on first use and shared by later entries; the last segment
    receives the entry value. Keys ending with the delimiter are directory
    markers and are skipped.

    Conflicting paths never raise: later entries overwrite earlier ones at the
    colliding node, whether that node held a scalar or a mapping.
    """
    tree: dict[str, Any] = {}
    for entry in entries:
        if entry.key.endswith(delimiter):
            continue

        *parents, leaf = entry.key[prefix_length:].split(delimiter)
        node = tree
        for segment in parents:
            child = node.get(segment)
            if not isinstance(child, dict):
                if child is not None:
                    logger.debug("replacing scalar at %r with a mapping for key %r", segment, entry.key)
                child = {}
                node[segment] = child
            node = child
        node[leaf] = entry.value
    return tree


def flatten_tree(document: Mapping[str, Any], delimiter: str = "/", prefix: str = "") -> list[KeyValue]:
    """Flatten a nested document back into delimiter-joined key/value entries.

    Leaves are emitted in document order. Empty nested mappings have no leaf and
    produce no entry.
    """
    flat: list[KeyValue] = []
    for key, value in document.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.extend(flatten_tree(value, delimiter, f"{path}{delimiter}"))
        else:
            flat.append(KeyValue(path, value))
    return flat
