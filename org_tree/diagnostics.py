"""
Org Tree Kernel: Diagnostics v1.0

Compute a diagnostic snapshot of an employee tree and its history.
"""

from __future__ import annotations

from .constants import DEEP_TREE_WARNING_THRESHOLD, WIDE_SPAN_WARNING_THRESHOLD
from .domain_types import Employee
from .locator import find_leaves, iter_employees, tree_depth


def compute_diagnostics(
    root: Employee,
    undo_depth: int = 0,
    redo_depth: int = 0,
    max_history_depth: int = 0,
) -> dict:
    """Return a diagnostic dict summarising the current tree health."""
    nodes = list(iter_employees(root))
    depth = tree_depth(root)
    leaves = find_leaves(root)
    widest = max(nodes, key=lambda n: len(n.subordinates))
    wide = sorted(
        n.id for n in nodes if len(n.subordinates) > WIDE_SPAN_WARNING_THRESHOLD
    )

    warnings: list[str] = []

    if wide:
        warnings.append(
            f"{len(wide)} supervisor(s) with more than "
            f"{WIDE_SPAN_WARNING_THRESHOLD} direct reports: "
            f"{', '.join(str(i) for i in wide)}"
        )
    if depth > DEEP_TREE_WARNING_THRESHOLD:
        warnings.append(f"Deep hierarchy ({depth} levels)")
    if max_history_depth and undo_depth >= max_history_depth:
        warnings.append(
            f"Undo history at capacity ({max_history_depth}), "
            f"oldest moves are being discarded"
        )

    return {
        "employee_count": len(nodes),
        "depth": depth,
        "leaf_count": len(leaves),
        "widest_span": len(widest.subordinates),
        "widest_supervisor_id": widest.id,
        "undo_depth": undo_depth,
        "redo_depth": redo_depth,
        "warnings": warnings,
    }
