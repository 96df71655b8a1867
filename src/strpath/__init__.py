from .adapters.environment import LocalEnvironment
from .adapters.filesystem import FileOps, LocalFS
from .domain import (
    ControlFlow,
    DecodingError,
    Entry,
    FilesystemError,
    InvalidPathError,
    Kind,
    Path,
    StrpathError,
)
from .services import Finder, FinderState, Listing, PathCodec, find, ls

__version__ = "0.1.0"

__all__ = [
    "ControlFlow",
    "DecodingError",
    "Entry",
    "FileOps",
    "FilesystemError",
    "Finder",
    "FinderState",
    "InvalidPathError",
    "Kind",
    "Listing",
    "LocalEnvironment",
    "LocalFS",
    "Path",
    "PathCodec",
    "StrpathError",
    "find",
    "ls",
]
