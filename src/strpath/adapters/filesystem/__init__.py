from .file_ops import FileOps
from .local_fs import LocalFS

__all__ = ["FileOps", "LocalFS"]
