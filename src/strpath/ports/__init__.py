from .environment import EnvironmentPort
from .filesystem import FilesystemPort

__all__ = ["EnvironmentPort", "FilesystemPort"]
