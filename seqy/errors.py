class SeqyError(Exception):
    """base class for every error raised by seqy itself."""
    pass


class InvalidArgumentError(SeqyError, ValueError):
    """raised when an argument has the wrong shape, e.g. a non-iterable source."""
    pass


class IllegalStateError(SeqyError, RuntimeError):
    """raised when an operation is not allowed in the current state."""
    pass
