# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from datetime import datetime, timezone
from typing import Iterator, Optional

from ...domain.errors import FilesystemError
from ...domain.path import Path

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _os_errors(op: str, path: Path) -> Iterator[None]:
    try:
        yield
    except OSError as e:
        raise FilesystemError(f"{op} failed for {path}: {e}") from e


class FileOps:
    """
    Thin pass-throughs from Path values to os / shutil.

    Mutating calls return the resulting Path so they chain:

        ops.touch(ops.mkdir(tmp / "a/b", parents=True) / "c.txt")
    """

    # ------------------------------
    # Probes
    # ------------------------------

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: Path) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: Path) -> bool:
        """True for any existing entry that is not a directory."""
        return os.path.exists(path) and not os.path.isdir(path)

    def is_symlink(self, path: Path) -> bool:
        return os.path.islink(path)

    def is_writable(self, path: Path) -> bool:
        """True if `path` exists and the current user may write to it."""
        return os.access(path, os.W_OK)

    def is_executable(self, path: Path) -> bool:
        """True if `path` exists and the current user may execute (or enter) it."""
        return os.access(path, os.X_OK)

    # ------------------------------
    # Attributes
    # ------------------------------

    def chmod(self, path: Path, mode: int) -> Path:
        """Set permission bits in octal notation, e.g. ``ops.chmod(p, 0o555)``."""
        with _os_errors("chmod", path):
            os.chmod(path, mode)
        return path

    def mtime(self, path: Path) -> Optional[datetime]:
        """
        Last modification time (UTC), or None if nothing exists at `path`.

        Falls back to the creation time on platforms that report a birth
        time but no modification time.
        """
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return None
        except OSError as e:
            raise FilesystemError(f"mtime failed for {path}: {e}") from e
        seconds = st.st_mtime or getattr(st, "st_birthtime", 0.0)
        return datetime.fromtimestamp(seconds, tz=timezone.utc)

    # ------------------------------
    # Contents
    # ------------------------------

    def read_bytes(self, path: Path) -> bytes:
        with _os_errors("read", path):
            with open(path, "rb") as f:
                return f.read()

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        with _os_errors("read", path):
            with open(path, "r", encoding=encoding) as f:
                return f.read()

    def write_bytes(self, path: Path, data: bytes, *, atomic: bool = False) -> Path:
        """
        Write `data` to `path`, replacing any previous contents.

        With `atomic` the bytes go to a temporary file in the same directory
        which is then renamed over `path`, so readers never see a partial
        file.
        """
        with _os_errors("write", path):
            if not atomic:
                with open(path, "wb") as f:
                    f.write(data)
                return path
            fd, tmp = tempfile.mkstemp(dir=path.parent.string, prefix=f".{path.basename()}.")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp, path)
            except BaseException:
                with contextlib.suppress(FileNotFoundError):
                    os.remove(tmp)
                raise
        return path

    def write_text(
        self, path: Path, text: str, *, encoding: str = "utf-8", atomic: bool = False
    ) -> Path:
        return self.write_bytes(path, text.encode(encoding), atomic=atomic)

    # ------------------------------
    # Creation / removal
    # ------------------------------

    def touch(self, path: Path) -> Path:
        """Create an empty file at `path`; an existing file is truncated."""
        return self.write_bytes(path, b"")

    def mkdir(self, path: Path, *, parents: bool = False) -> Path:
        """Create a directory. An existing directory is not an error."""
        with _os_errors("mkdir", path):
            if parents:
                os.makedirs(path, exist_ok=True)
            else:
                try:
                    os.mkdir(path)
                except FileExistsError:
                    if not os.path.isdir(path):
                        raise
        return path

    def delete(self, path: Path) -> None:
        """Remove `path`, recursively if a directory. Absent paths are ignored."""
        with _os_errors("delete", path):
            if os.path.islink(path) or (os.path.exists(path) and not os.path.isdir(path)):
                os.remove(path)
            elif os.path.isdir(path):
                shutil.rmtree(path)

    # ------------------------------
    # Copy / move
    # ------------------------------

    def _check_destination(self, op: str, dest: Path, overwrite: bool) -> None:
        if os.path.isdir(dest) and not os.path.islink(dest):
            raise FilesystemError(f"{op}: destination {dest} is a directory")
        if os.path.lexists(dest):
            if not overwrite:
                raise FilesystemError(f"{op}: destination {dest} already exists")
            self.delete(dest)

    def _prepare_directory(self, op: str, into: Path) -> None:
        if os.path.lexists(into) and not os.path.isdir(into):
            raise FilesystemError(f"{op}: {into} exists and is not a directory")
        self.mkdir(into, parents=True)

    def copy_to(self, src: Path, dest: Path, *, overwrite: bool = False) -> Path:
        self._check_destination("copy", dest, overwrite)
        with _os_errors("copy", src):
            if os.path.isdir(src) and not os.path.islink(src):
                shutil.copytree(src, dest, symlinks=True)
            else:
                shutil.copy2(src, dest, follow_symlinks=False)
        return dest

    def copy_into(self, src: Path, into: Path, *, overwrite: bool = False) -> Path:
        """Copy `src` into directory `into` (created if needed)."""
        self._prepare_directory("copy", into)
        return self.copy_to(src, into / src.basename(), overwrite=overwrite)

    def move_to(self, src: Path, dest: Path, *, overwrite: bool = False) -> Path:
        self._check_destination("move", dest, overwrite)
        with _os_errors("move", src):
            shutil.move(os.fspath(src), os.fspath(dest))
        return dest

    def move_into(self, src: Path, into: Path, *, overwrite: bool = False) -> Path:
        """Move `src` into directory `into` (created if needed)."""
        self._prepare_directory("move", into)
        return self.move_to(src, into / src.basename(), overwrite=overwrite)

    def rename(self, path: Path, name: str) -> Path:
        """Rename within the same directory; refuses to replace an existing entry."""
        return self.move_to(path, path.parent / name)

    # ------------------------------
    # Symlinks
    # ------------------------------

    def symlink_as(self, target: Path, link: Path) -> Path:
        """Create `link` pointing at `target`."""
        with _os_errors("symlink", link):
            os.symlink(target, link)
        return link

    def symlink_into(self, target: Path, into: Path) -> Path:
        self._prepare_directory("symlink", into)
        return self.symlink_as(target, into / target.basename())

    def readlink(self, path: Path) -> Path:
        """
        The immediate destination of a symlink, or `path` itself if it is not one.

        Relative link text is resolved lexically against the link's parent.
        Raises FilesystemError if nothing exists at `path`.
        """
        if not os.path.lexists(path):
            raise FilesystemError(f"readlink: {path} does not exist")
        if not os.path.islink(path):
            return path
        with _os_errors("readlink", path):
            target = os.readlink(path)
        if target.startswith("/"):
            return Path(target)
        return path.parent / target

    def realpath(self, path: Path) -> Path:
        """Resolve every symlink. Raises FilesystemError if `path` does not exist."""
        if not os.path.exists(path):
            raise FilesystemError(f"realpath: {path} does not exist")
        return Path(os.path.realpath(path))

    # ------------------------------
    # Temporary directories
    # ------------------------------

    @contextlib.contextmanager
    def mktemp(self) -> Iterator[Path]:
        """Yield a fresh temporary directory, removed (recursively) on exit."""
        with _os_errors("mktemp", Path(tempfile.gettempdir())):
            raw = tempfile.mkdtemp(prefix="strpath.")
        tmpdir = Path(raw)
        try:
            yield tmpdir
        finally:
            try:
                # tests may leave the directory unwritable
                os.chmod(tmpdir, 0o700)
                shutil.rmtree(tmpdir)
            except OSError as e:
                logger.warning("mktemp: could not remove %s: %s", tmpdir, e)
