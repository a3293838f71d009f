"""
Org Tree Kernel: Canonical Hashing v1.0

Deterministic canonical serialization + SHA-256 hashing of a tree shape.
Two trees hash equal iff they have the same ids, names and subordinate
order at every level.

Rules:
  - Subordinates kept in stored order (order is part of the shape)
  - UTF-8 JSON, no whitespace, fixed field order
  - Emitted fragment by fragment from an explicit stack, so any depth
    the engine accepts can also be hashed
"""

from __future__ import annotations

import hashlib
import json
from typing import Iterator, List, Union

from .domain_types import Employee

_PREFIX = '{"kernel_version":1,"ceo":'
_SUFFIX = "}"


def canonical_serialize(root: Employee) -> bytes:
    """
    Canonical serialization of an Employee tree to UTF-8 JSON bytes.
    No whitespace. Deterministic field order.
    """
    return "".join(_iter_canonical_fragments(root)).encode("utf-8")


def canonical_hash(root: Employee) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    h = hashlib.sha256()
    for fragment in _iter_canonical_fragments(root):
        h.update(fragment.encode("utf-8"))
    return h.hexdigest()


def _iter_canonical_fragments(root: Employee) -> Iterator[str]:
    """Yield the canonical JSON text in order, without recursion."""
    yield _PREFIX
    stack: List[Union[str, Employee]] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            yield item
            continue
        yield (
            '{"id":' + json.dumps(item.id)
            + ',"name":' + json.dumps(item.name, ensure_ascii=True)
            + ',"subordinates":['
        )
        stack.append("]}")
        subs = item.subordinates
        for i in range(len(subs) - 1, -1, -1):
            stack.append(subs[i])
            if i:
                stack.append(",")
    yield _SUFFIX
