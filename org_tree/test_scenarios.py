"""
Org Tree Kernel v1.0: Test Scenarios

Executable scenarios over the sample organization:

  CEO(1) ─┬─ Margot(2) ─┬─ Tina(5)
          │             └─ Will(6)
          └─ Tyler(3) ──┬─ Ben(7)
                        ├─ Georgina(8)
                        └─ Sophie(9)

Run:  python -m org_tree.test_scenarios
"""

from __future__ import annotations

import json
import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_tree.domain_types import Employee, TreeConstants
from org_tree.employees import create_employee
from org_tree.engine import OrgTree
from org_tree.errors import (
    EmployeeNotFoundError,
    EmptyHistoryError,
    InvalidMoveError,
)
from org_tree.hashing import canonical_hash, canonical_serialize
from org_tree.invariants import InvariantViolationError
from org_tree.locator import find_employee, iter_employees


def _header(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def _dump(label: str, data: dict) -> None:
    print(f"\n--- {label} ---")
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _sample_org() -> Employee:
    return create_employee(1, "John Smith", [
        create_employee(2, "Margot Donald", [
            create_employee(5, "Tina Teff"),
            create_employee(6, "Will Turner"),
        ]),
        create_employee(3, "Tyler Simpson", [
            create_employee(7, "Ben Willis"),
            create_employee(8, "Georgina Flangy"),
            create_employee(9, "Sophie Turner"),
        ]),
    ])


def _sub_ids(tree: OrgTree, employee_id: int) -> list:
    return [s.id for s in tree.find(employee_id).subordinates]


class _LogCapture(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


# ───────────────────────────────────────────────────────────────
# Locator
# ───────────────────────────────────────────────────────────────

def scenario_01_locator() -> None:
    _header("Scenario 01 -- Node Locator")
    root = _sample_org()

    assert find_employee(root, 1) is root
    assert find_employee(root, 8).name == "Georgina Flangy"
    assert find_employee(root, 42) is None
    assert [e.id for e in iter_employees(root)] == [1, 2, 5, 6, 3, 7, 8, 9]

    # duplicates: first in preorder wins
    dup = Employee(1, "root", [
        Employee(2, "a", [Employee(4, "first")]),
        Employee(4, "second"),
    ])
    assert find_employee(dup, 4).name == "first"

    print("\n[PASS] Scenario 01 PASSED")


# ───────────────────────────────────────────────────────────────
# Move / Undo / Redo on the sample organization
# ───────────────────────────────────────────────────────────────

def scenario_02_move_undo_redo() -> None:
    _header("Scenario 02 -- move(5, 8), undo, redo")
    tree = OrgTree(_sample_org())
    initial = canonical_hash(tree.ceo)

    result = tree.move(5, 8)
    assert result.success
    assert (result.from_supervisor_id, result.to_supervisor_id) == (2, 8)
    _dump("Result", result.to_dict())
    assert _sub_ids(tree, 8) == [5]
    assert _sub_ids(tree, 2) == [6]
    assert tree.supervisor_of(5) == 8
    moved = canonical_hash(tree.ceo)
    _dump("After move", tree.to_dict())

    result = tree.undo()
    assert result.success
    assert _sub_ids(tree, 2) == [5, 6]
    assert _sub_ids(tree, 8) == []
    assert tree.supervisor_of(5) == 2
    assert canonical_hash(tree.ceo) == initial

    result = tree.redo()
    assert result.success
    assert _sub_ids(tree, 8) == [5]
    assert _sub_ids(tree, 2) == [6]
    assert canonical_hash(tree.ceo) == moved

    tree.validate()
    print("\n[PASS] Scenario 02 PASSED")


def scenario_03_two_moves_two_undos() -> None:
    _header("Scenario 03 -- move(a,b); move(a,c); undo; undo")
    tree = OrgTree(_sample_org())
    initial = canonical_hash(tree.ceo)

    assert tree.move(6, 7).success
    assert tree.move(6, 9).success
    assert _sub_ids(tree, 9) == [6]
    assert _sub_ids(tree, 7) == []

    assert tree.undo().success
    assert _sub_ids(tree, 7) == [6]
    assert tree.undo().success
    assert canonical_hash(tree.ceo) == initial
    assert tree.redo_depth == 2

    tree.validate()
    print("\n[PASS] Scenario 03 PASSED")


def scenario_04_subtree_moves_with_employee() -> None:
    _header("Scenario 04 -- Subtree travels with its root")
    tree = OrgTree(_sample_org())

    assert tree.move(3, 5).success
    assert _sub_ids(tree, 1) == [2]
    assert _sub_ids(tree, 5) == [3]
    assert _sub_ids(tree, 3) == [7, 8, 9]
    assert tree.supervisor_of(8) == 3

    assert tree.undo().success
    assert _sub_ids(tree, 1) == [2, 3]
    tree.validate()
    print("\n[PASS] Scenario 04 PASSED")


# ───────────────────────────────────────────────────────────────
# Failure handling: no-op + diagnostic
# ───────────────────────────────────────────────────────────────

def scenario_05_empty_history_is_noop() -> None:
    _header("Scenario 05 -- Empty history")
    tree = OrgTree(_sample_org())
    initial = canonical_hash(tree.ceo)

    capture = _LogCapture()
    engine_logger = logging.getLogger("org_tree.engine")
    engine_logger.addHandler(capture)
    try:
        for _ in range(3):
            result = tree.undo()
            assert not result.success
            assert "No action to undo" in result.reason
        result = tree.redo()
        assert not result.success
        assert "No action to redo" in result.reason
    finally:
        engine_logger.removeHandler(capture)

    assert canonical_hash(tree.ceo) == initial
    assert len(capture.records) == 4
    assert all(r.levelno == logging.ERROR for r in capture.records)
    print("\n[PASS] Scenario 05 PASSED")


def scenario_06_unknown_ids_are_noop() -> None:
    _header("Scenario 06 -- NotFound")
    tree = OrgTree(_sample_org())
    initial = canonical_hash(tree.ceo)

    result = tree.move(99, 8)
    assert not result.success
    assert "Employee 99 not found" in result.reason
    result = tree.move(5, 99)
    assert not result.success
    assert "Supervisor 99 not found" in result.reason

    assert canonical_hash(tree.ceo) == initial
    assert tree.undo_depth == 0
    print("\n[PASS] Scenario 06 PASSED")


def scenario_07_structure_breaking_moves_rejected() -> None:
    _header("Scenario 07 -- InvalidMove")
    tree = OrgTree(_sample_org())
    initial = canonical_hash(tree.ceo)

    assert not tree.move(1, 2).success       # CEO
    assert not tree.move(2, 2).success       # self
    assert not tree.move(2, 5).success       # own descendant
    assert canonical_hash(tree.ceo) == initial
    assert tree.undo_depth == 0
    print("\n[PASS] Scenario 07 PASSED")


def scenario_08_strict_mode_raises() -> None:
    _header("Scenario 08 -- strict=True raises after no-op")
    tree = OrgTree(_sample_org(), TreeConstants(strict=True))
    initial = canonical_hash(tree.ceo)

    for call, exc in [
        (lambda: tree.move(99, 8), EmployeeNotFoundError),
        (lambda: tree.move(2, 5), InvalidMoveError),
        (tree.undo, EmptyHistoryError),
        (tree.redo, EmptyHistoryError),
    ]:
        try:
            call()
        except exc as e:
            print(f"  Caught expected error: {e}")
        else:
            raise AssertionError(f"expected {exc.__name__}")

    assert canonical_hash(tree.ceo) == initial
    print("\n[PASS] Scenario 08 PASSED")


# ───────────────────────────────────────────────────────────────
# History semantics
# ───────────────────────────────────────────────────────────────

def scenario_09_move_keeps_redo_stack() -> None:
    _header("Scenario 09 -- Redo stack survives a new move by default")
    tree = OrgTree(_sample_org())
    tree.move(5, 8)
    tree.undo()
    tree.move(6, 7)
    assert tree.redo_depth == 1
    assert tree.redo().success
    assert _sub_ids(tree, 8) == [5]

    linear = OrgTree(_sample_org(), TreeConstants(clear_redo_on_move=True))
    assert linear.constants.clear_redo_on_move
    assert not tree.constants.clear_redo_on_move
    linear.move(5, 8)
    linear.undo()
    linear.move(6, 7)
    assert linear.redo_depth == 0
    assert not linear.redo().success
    print("\n[PASS] Scenario 09 PASSED")


def scenario_10_interleaved_redo_cannot_form_cycle() -> None:
    _header("Scenario 10 -- Interleaved redo guarded")
    tree = OrgTree(_sample_org())
    tree.move(5, 8)
    tree.undo()
    # Georgina now reports to Tina; redoing Tina -> Georgina would loop
    assert tree.move(8, 5).success
    before = canonical_hash(tree.ceo)

    result = tree.redo()
    assert not result.success
    assert canonical_hash(tree.ceo) == before
    assert tree.redo_depth == 1
    assert tree.undo_depth == 1

    tree.validate()
    print("\n[PASS] Scenario 10 PASSED")


def scenario_11_history_depth_cap() -> None:
    _header("Scenario 11 -- max_history_depth")
    tree = OrgTree(_sample_org(), TreeConstants(max_history_depth=2))
    assert tree.constants.max_history_depth == 2
    tree.move(5, 8)
    tree.move(6, 8)
    tree.move(7, 9)
    assert tree.undo_depth == 2
    assert [r.employee_id for r in tree.undo_history()] == [6, 7]

    diag = tree.get_diagnostics()
    _dump("Diagnostics", diag)
    assert any("capacity" in w for w in diag["warnings"])
    print("\n[PASS] Scenario 11 PASSED")


# ───────────────────────────────────────────────────────────────
# Construction / diagnostics
# ───────────────────────────────────────────────────────────────

def scenario_12_invalid_tree_rejected() -> None:
    _header("Scenario 12 -- Invariants at construction")
    dup = Employee(1, "a", [Employee(2, "b"), Employee(2, "c")])
    shared = Employee(3, "shared")
    twice = Employee(1, "a", [Employee(2, "b", [shared]), shared])

    for root, rule in [(dup, "duplicate_employee_ids"), (twice, "single_owner")]:
        try:
            OrgTree(root)
        except InvariantViolationError as e:
            assert e.rule == rule
            print(f"  Caught expected error: {e}")
        else:
            raise AssertionError(f"expected {rule} violation")
    print("\n[PASS] Scenario 12 PASSED")


def scenario_13_diagnostics_and_hash() -> None:
    _header("Scenario 13 -- Diagnostics + canonical hash")
    tree = OrgTree(_sample_org())
    diag = tree.get_diagnostics()
    assert diag["employee_count"] == 8
    assert diag["depth"] == 3
    assert diag["leaf_count"] == 5
    assert diag["widest_span"] == 3
    assert diag["widest_supervisor_id"] == 3
    assert diag["warnings"] == []

    assert canonical_hash(_sample_org()) == canonical_hash(tree.ceo)
    reordered = _sample_org()
    reordered.subordinates.reverse()
    assert canonical_hash(reordered) != canonical_hash(tree.ceo)
    assert canonical_serialize(tree.ceo) == json.dumps(
        {"kernel_version": 1, "ceo": tree.to_dict()}, separators=(",", ":"),
    ).encode("utf-8")
    print("\n[PASS] Scenario 13 PASSED")


def _chain(n: int) -> Employee:
    """0 -> 1 -> ... -> n-1, one report per level."""
    root = create_employee(0, "E0")
    node = root
    for eid in range(1, n):
        sub = create_employee(eid, f"E{eid}")
        node.subordinates.append(sub)
        node = sub
    return root


def scenario_14_deep_chain() -> None:
    _header("Scenario 14 -- Chain deeper than the recursion limit")
    depth = max(5000, sys.getrecursionlimit() + 1000)
    tree = OrgTree(_chain(depth))
    initial = canonical_hash(tree.ceo)
    assert tree.get_diagnostics()["depth"] == depth

    assert not tree.move(1, depth - 1).success   # own descendant
    assert tree.move(depth - 1, 0).success
    assert _sub_ids(tree, 0) == [1, depth - 1]
    assert _sub_ids(tree, depth - 2) == []
    moved = canonical_hash(tree.ceo)
    assert moved != initial

    assert tree.undo().success
    assert canonical_hash(tree.ceo) == initial
    assert tree.redo().success
    assert canonical_hash(tree.ceo) == moved
    tree.validate()

    # walk the nested dict view down the long branch
    level = tree.to_dict()
    assert [s["id"] for s in level["subordinates"]] == [1, depth - 1]
    levels = 1
    while level["subordinates"]:
        level = level["subordinates"][0]
        levels += 1
    assert levels == depth - 1
    assert level["id"] == depth - 2
    print("\n[PASS] Scenario 14 PASSED")


# ───────────────────────────────────────────────────────────────
# Runner
# ───────────────────────────────────────────────────────────────

def main() -> None:
    results = []
    for fn in [
        scenario_01_locator,
        scenario_02_move_undo_redo,
        scenario_03_two_moves_two_undos,
        scenario_04_subtree_moves_with_employee,
        scenario_05_empty_history_is_noop,
        scenario_06_unknown_ids_are_noop,
        scenario_07_structure_breaking_moves_rejected,
        scenario_08_strict_mode_raises,
        scenario_09_move_keeps_redo_stack,
        scenario_10_interleaved_redo_cannot_form_cycle,
        scenario_11_history_depth_cap,
        scenario_12_invalid_tree_rejected,
        scenario_13_diagnostics_and_hash,
        scenario_14_deep_chain,
    ]:
        try:
            fn()
            results.append(True)
        except Exception as e:
            print(f"\n[ERROR] UNEXPECTED ERROR in {fn.__name__}: {e}")
            import traceback
            traceback.print_exc()
            results.append(False)

    print(f"\n{'='*60}")
    passed = sum(results)
    total = len(results)
    print(f"  RESULTS: {passed}/{total} scenarios passed")
    print(f"{'='*60}")
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
