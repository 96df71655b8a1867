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

import functools
import locale
import os
from typing import TYPE_CHECKING, List, Optional, Union

from .errors import InvalidPathError

if TYPE_CHECKING:
    from ..ports.environment import EnvironmentPort

SEP = "/"
HOME_MARKER = "~"

# Archive suffixes recognized as one extension. Longest first so that
# "tar.bz2" wins over "tar.bz".
COMPOUND_EXTENSIONS = ("tar.bz2", "tar.gz", "tar.xz", "tar.bz")


def normalize(string: str) -> str:
    """
    Lexically normalize an absolute path string.

    Empty and ``.`` components are dropped, ``..`` removes the preceding
    component and is a no-op at the root. No filesystem access happens here,
    so symlinks are never resolved.
    """
    parts: List[str] = []
    for segment in string.split(SEP):
        if segment == "" or segment == ".":
            continue
        if segment == "..":
            if parts:
                parts.pop()
            continue
        parts.append(segment)
    return SEP + SEP.join(parts)


@functools.total_ordering
class Path:
    """
    A normalized absolute filesystem path.

    The value is a plain string that always:
      - starts with ``/``
      - has no ``.`` or ``..`` components
      - has no doubled separators
      - has no trailing separator (unless it is the root)

    There may not be anything on disk at the path. Equality and hashing use
    the normalized string only, so two symlinks to one file are *not* equal;
    use ``FileOps.realpath`` when that matters.

    Sorting is locale-aware (``locale.strcoll``) so that listings order the
    way a platform file browser would. Collation follows the process's
    ``LC_COLLATE``; callers set it (the ``strpath`` CLI calls
    ``locale.setlocale(locale.LC_COLLATE, "")`` at startup), otherwise the
    "C" locale orders by code point.
    """

    __slots__ = ("_string",)

    def __init__(self, string: str) -> None:
        if not isinstance(string, str) or not string.startswith(SEP):
            raise InvalidPathError(f"Not an absolute path: {string!r}")
        object.__setattr__(self, "_string", normalize(string))

    @classmethod
    def _from_normalized(cls, string: str) -> "Path":
        p = object.__new__(cls)
        object.__setattr__(p, "_string", string)
        return p

    @classmethod
    def root(cls) -> "Path":
        return cls._from_normalized(SEP)

    @classmethod
    def parse(
        cls, string: str, env: Optional["EnvironmentPort"] = None
    ) -> Optional["Path"]:
        """
        Build a Path from user input, returning None unless it is absolute.

        Accepts strings starting with ``/`` or ``~``. ``~`` and ``~/...``
        expand against the current user's home; ``~name`` and ``~name/...``
        look up that user's home and yield None if there is none.

            Path.parse("/usr//lib/../bin")  # => Path('/usr/bin')
            Path.parse("~/src")             # => Path('/home/me/src')
            Path.parse("src")               # => None
        """
        if string.startswith(SEP):
            return cls(string)
        if not string.startswith(HOME_MARKER):
            return None

        user, _sep, rest = string[len(HOME_MARKER):].partition(SEP)
        if env is None:
            from ..adapters.environment.local_env import LocalEnvironment

            env = LocalEnvironment()
        home = env.home(user or None)
        if not home or not home.startswith(SEP):
            return None
        return cls(home + SEP + rest)

    # ------------------------------
    # Properties
    # ------------------------------

    @property
    def string(self) -> str:
        """The normalized path string."""
        return self._string

    @property
    def parent(self) -> "Path":
        """The containing directory. The root is its own parent."""
        return self.join("..")

    @property
    def components(self) -> List[str]:
        """``["/", "usr", "bin"]`` for ``/usr/bin``; ``["/"]`` for the root."""
        if self._string == SEP:
            return [SEP]
        return [SEP] + self._string[1:].split(SEP)

    @property
    def extension(self) -> str:
        """
        The filename extension, without the leading dot.

        Empty when the name has no dot, only a leading dot, or ends with a
        dot. Known archive double extensions (``tar.gz`` and friends) are
        returned whole.
        """
        name = self.basename()
        if name.endswith("."):
            return ""
        for compound in COMPOUND_EXTENSIONS:
            suffix = "." + compound
            if name.endswith(suffix) and len(name) > len(suffix):
                return compound
        dot = name.rfind(".")
        if dot <= 0:
            return ""
        return name[dot + 1 :]

    def basename(self, drop_extension: bool = False) -> str:
        """
        The last path component, optionally without its extension.

            Path("/a/foo.tar.gz").basename()                     # => "foo.tar.gz"
            Path("/a/foo.tar.gz").basename(drop_extension=True)  # => "foo"
            Path("/a/foo.").basename(drop_extension=True)        # => "foo."
        """
        if self._string == SEP:
            return SEP
        name = self._string.rsplit(SEP, 1)[-1]
        if drop_extension:
            ext = self.extension
            if ext:
                return name[: -(len(ext) + 1)]
        return name

    # ------------------------------
    # Pathing
    # ------------------------------

    def join(self, component: Union[str, "os.PathLike[str]"]) -> "Path":
        """
        Append `component` and normalize the result.

        Never fails. Leading separators in `component` are absorbed rather
        than replacing the base, and ``..`` is resolved lexically:

            Path("/a").join("b/c")     # => Path('/a/b/c')
            Path("/a").join("/b")      # => Path('/a/b')
            Path("/a/b").join("../c")  # => Path('/a/c')
            Path("/a").join("")        # => Path('/a')
        """
        component = os.fspath(component)
        if not component:
            return self
        return Path._from_normalized(normalize(self._string + SEP + component))

    def __truediv__(self, component: Union[str, "os.PathLike[str]"]) -> "Path":
        return self.join(component)

    def relative(self, base: "Path") -> str:
        """
        The path of `self` relative to `base`.

        When `base` is an ancestor (or equal) the result is the plain
        remainder (``""`` if equal). Otherwise the common leading components
        are dropped and one ``..`` is emitted per remaining `base`
        component:

            Path("/tmp/foo").relative(Path("/tmp"))          # => "foo"
            Path("/tmp/foo/bar").relative(Path("/tmp/baz"))  # => "../foo/bar"
        """
        path_comps = self.components
        base_comps = base.components

        if path_comps[: len(base_comps)] == base_comps:
            return SEP.join(path_comps[len(base_comps) :])

        i = 0
        while (
            i < len(path_comps)
            and i < len(base_comps)
            and path_comps[i] == base_comps[i]
        ):
            i += 1
        rel = [".."] * (len(base_comps) - i) + path_comps[i:]
        return SEP.join(rel)

    # ------------------------------
    # Value semantics
    # ------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._string == other._string
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Path):
            return locale.strcoll(self._string, other._string) < 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._string)

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"Path({self._string!r})"

    def __fspath__(self) -> str:
        return self._string

    def __reduce__(self):
        return (Path, (self._string,))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")
