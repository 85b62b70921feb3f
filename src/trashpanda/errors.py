"""Error definitions shared by the helper modules."""


class HelpersError(Exception):
    """Base class for errors raised by trashpanda helpers."""


class InvalidUrlError(HelpersError, ValueError):
    """Raised when an absolute URL cannot be parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid absolute URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class PathError(HelpersError, ValueError):
    """Raised when a dot-notation path cannot be written into a structure."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot put value at path {path!r}: {reason}")
        self.path = path
        self.reason = reason
