from .errors import (
    DecodingError,
    FilesystemError,
    InvalidPathError,
    StrpathError,
)
from .models import ControlFlow, Entry, Kind
from .path import Path

__all__ = [
    "ControlFlow",
    "DecodingError",
    "Entry",
    "FilesystemError",
    "InvalidPathError",
    "Kind",
    "Path",
    "StrpathError",
]
