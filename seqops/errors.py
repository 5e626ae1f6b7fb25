class SequenceError(Exception):
    """base class for errors raised by seqops itself."""
    pass


class SourceNotRestartableError(SequenceError, TypeError):
    """an operator that needs a second pass was given a single-pass source."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} requires a restartable source, got a single-pass iterator")
        self.operation = operation


class CursorStateError(SequenceError, RuntimeError):
    """cursor was read while not positioned on an element."""
    pass
