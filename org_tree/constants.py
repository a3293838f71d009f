"""
Org Tree Kernel: Configuration Defaults

Module-level defaults for TreeConstants. Runtime values are injected
through the OrgTree constructor.
"""

# --- History ---
# 0 = unbounded stacks.
DEFAULT_MAX_HISTORY_DEPTH: int = 0

# A new move leaves pending redo records in place unless enabled.
DEFAULT_CLEAR_REDO_ON_MOVE: bool = False

# --- Error reporting ---
# False: log and return a failed OperationResult. True: raise.
DEFAULT_STRICT: bool = False

# --- Diagnostics ---
WIDE_SPAN_WARNING_THRESHOLD: int = 12
DEEP_TREE_WARNING_THRESHOLD: int = 10
