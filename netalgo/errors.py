"""Exception types raised by netalgo.

Caller errors derive from the matching built-in exception, so code that
catches ``ValueError`` or ``IndexError`` keeps working.
"""


class NetAlgoError(Exception):
    """Base class for all netalgo errors."""


class InvalidArgumentError(NetAlgoError, ValueError):
    """A required argument is missing or structurally invalid."""


class OutOfRangeError(NetAlgoError, IndexError):
    """An index, count or node number lies outside its valid bounds."""


class InternalInconsistencyError(NetAlgoError, RuntimeError):
    """An algorithmic invariant was violated.

    Not expected for well-formed input. Indicates a bug, or an edge object
    whose state was changed behind the algorithm's back.
    """
