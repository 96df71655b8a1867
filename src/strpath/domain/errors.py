# Licensed under the Apache License, Version 2.0


class StrpathError(Exception):
    """Base exception for domain-specific errors."""


class InvalidPathError(StrpathError, ValueError):
    """A string that cannot become a normalized absolute path."""


class FilesystemError(StrpathError):
    """OS-level failures other than "nothing there": permissions, I/O, etc."""


class DecodingError(StrpathError):
    """A serialized path that cannot be decoded (e.g. relative with no root)."""


