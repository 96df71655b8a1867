from typing import Dict, Iterable, Iterator, Optional

import pytest

from strpath.domain.models import Kind
from strpath.ports.environment import EnvironmentPort
from strpath.ports.filesystem import FilesystemPort


class MemoryFS(FilesystemPort):
    """In-memory FS: parents of every listed entry exist as directories."""

    def __init__(
        self,
        files: Iterable[str] = (),
        dirs: Iterable[str] = (),
        symlinks: Iterable[str] = (),
        links: Optional[Dict[str, str]] = None,
        unreadable: Iterable[str] = (),
    ) -> None:
        self.kinds: Dict[str, Kind] = {"/": Kind.DIRECTORY}
        for kind, paths in (
            (Kind.FILE, files),
            (Kind.DIRECTORY, dirs),
            (Kind.SYMLINK, symlinks),
        ):
            for p in paths:
                self._add(p, kind)
        # link path -> target path; each link is also a SYMLINK entry
        self.links: Dict[str, str] = dict(links or {})
        for link in self.links:
            self._add(link, Kind.SYMLINK)
        self.unreadable = set(unreadable)
        self.scandir_calls: list = []

    def _add(self, path: str, kind: Kind) -> None:
        self.kinds[path] = kind
        parent = path.rsplit("/", 1)[0] or "/"
        if parent not in self.kinds:
            self._add(parent, Kind.DIRECTORY)

    def classify(self, path: str, follow_symlinks: bool = False) -> Optional[Kind]:
        kind = self.kinds.get(path)
        if follow_symlinks and kind is Kind.SYMLINK and path in self.links:
            # links with a missing target stay SYMLINK, as on disk
            return self.kinds.get(self.links[path]) or Kind.SYMLINK
        return kind

    def scandir(self, path: str) -> Iterator[str]:
        self.scandir_calls.append(path)
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        kind = self.kinds.get(path)
        if kind is None:
            raise FileNotFoundError(2, "No such file or directory", path)
        if kind is not Kind.DIRECTORY:
            raise NotADirectoryError(20, "Not a directory", path)
        prefix = path.rstrip("/") + "/"
        names = sorted(
            p[len(prefix):]
            for p in self.kinds
            if p.startswith(prefix) and p != path and "/" not in p[len(prefix):]
        )
        return iter(names)


class FakeEnvironment(EnvironmentPort):
    def __init__(
        self,
        home: Optional[str] = "/home/alice",
        users: Optional[Dict[str, str]] = None,
        environ: Optional[Dict[str, str]] = None,
        cwd: str = "/work",
        platform: str = "linux",
    ) -> None:
        self._home = home
        self._users = users or {}
        self._environ = environ or {}
        self._cwd = cwd
        self._platform = platform

    def home(self, user: Optional[str] = None) -> Optional[str]:
        if user is None:
            return self._home
        return self._users.get(user)

    def getenv(self, name: str) -> Optional[str]:
        return self._environ.get(name)

    def cwd(self) -> str:
        return self._cwd

    @property
    def platform(self) -> str:
        return self._platform


@pytest.fixture
def memory_fs():
    """Factory for MemoryFS trees."""
    return MemoryFS


@pytest.fixture
def fake_env():
    """Factory for FakeEnvironment instances."""
    return FakeEnvironment
