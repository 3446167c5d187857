"""Exception hierarchy for geoprim.

Only caller errors are modelled here. Undefined numeric results (projection
onto a zero-length edge, circumcenter of a degenerate triangle) are left to
Python's own ZeroDivisionError.
"""


class GeoprimError(Exception):
    """Base exception for all geoprim errors."""


class PreconditionViolation(GeoprimError, AssertionError):
    """A documented precondition of an operation was violated by the caller.

    Not meant to be recovered from: the current operation is aborted.
    """


class CollinearEdgesError(PreconditionViolation):
    """Non-collinear intersection test was called on collinear edges."""


class DimensionError(GeoprimError, ValueError):
    """Unsupported dimension or mismatched point dimensions."""


class UnknownKernelError(GeoprimError, KeyError):
    """No kernel is registered under the requested name."""


class SerializationError(GeoprimError, ValueError):
    """Structural encode/decode of a primitive failed."""


__all__ = [
    'GeoprimError',
    'PreconditionViolation',
    'CollinearEdgesError',
    'DimensionError',
    'UnknownKernelError',
    'SerializationError',
]
