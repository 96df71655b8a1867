from .codec import PathCodec
from .common_dirs import (
    application_support,
    caches,
    cwd,
    documents,
    home,
    temporary,
)
from .finder import Finder, FinderState, find
from .listing import Listing, ls


__all__ = [
    'Finder',
    'FinderState',
    'Listing',
    'PathCodec',
    'application_support',
    'caches',
    'cwd',
    'documents',
    'find',
    'home',
    'ls',
    'temporary',
]
