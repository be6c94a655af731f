"""Errors raised by the input channel codec."""


class InputChannelError(Exception):
    """Base class for input channel load/save failures."""


class ChannelTagMismatchError(InputChannelError, ValueError):
    """Reader is not positioned on a channel element."""

    def __init__(self, tag: str, expected: str):
        super().__init__(f"Channel node not found: expected <{expected}>, got <{tag}>")
        self.tag = tag
        self.expected = expected


class UnwritableDestinationError(InputChannelError):
    """Writer is missing or already closed."""
