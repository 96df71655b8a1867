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

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..domain.models import ControlFlow, Entry, Kind
from ..domain.path import Path
from ..ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)

Visitor = Callable[[Entry], Optional[ControlFlow]]
DepthRange = Union[range, Tuple[int, Optional[int]]]


class FinderState(Enum):
    NOT_STARTED = "not_started"
    ENUMERATING = "enumerating"
    EXHAUSTED = "exhausted"


def _default_fs() -> FilesystemPort:
    from ..adapters.filesystem.local_fs import LocalFS

    return LocalFS()


class Finder:
    """
    Recursive, single-pass directory search under `root`.

    Configuration is immutable: every builder call returns a new, unstarted
    Finder, so two searches built from one root never interfere.

        finder = find(root).max_depth(2).kind(Kind.FILE).extension("json")
        for path in finder:
            ...

    Depth 0 is the root itself and is never emitted; its direct children are
    depth 1. Entries deeper than the upper bound are pruned (not descended),
    entries shallower than the lower bound are not emitted but are still
    descended.

    Iteration consumes the Finder: once exhausted it stays exhausted, and a
    second ``for`` loop (or ``execute()``) yields nothing. Constructing a
    Finder does not touch the filesystem.
    """

    def __init__(
        self,
        root: Path,
        fs: Optional[FilesystemPort] = None,
        *,
        depth: Tuple[int, Optional[int]] = (1, None),
        kinds: Iterable[Kind] = (),
        extensions: Iterable[str] = (),
    ) -> None:
        self._root = root
        self._fs = fs if fs is not None else _default_fs()
        self._lower, self._upper = depth
        self._kinds = frozenset(kinds)
        self._extensions = frozenset(extensions)

        self._state = FinderState.NOT_STARTED
        # (directory, remaining child names, depth of those children)
        self._stack: List[Tuple[Path, Iterable[str], int]] = []
        # Directory emitted last whose children are listed on the next pull,
        # unless skip_descendants() clears it first.
        self._pending: Optional[Tuple[Path, int]] = None

    # ------------------------------
    # Configuration
    # ------------------------------

    @property
    def root(self) -> Path:
        return self._root

    @property
    def depth_range(self) -> Tuple[int, Optional[int]]:
        """Closed ``(lower, upper)`` depth interval; upper None means unbounded."""
        return (self._lower, self._upper)

    @property
    def kinds(self) -> frozenset:
        return self._kinds

    @property
    def extensions(self) -> frozenset:
        return self._extensions

    @property
    def state(self) -> FinderState:
        return self._state

    def _replace(self, **changes) -> "Finder":
        config = {
            "depth": (self._lower, self._upper),
            "kinds": self._kinds,
            "extensions": self._extensions,
        }
        config.update(changes)
        return Finder(self._root, self._fs, **config)

    def max_depth(self, n: int) -> "Finder":
        """Limit results to depth `n` and above; lowers the minimum if needed."""
        if n < 0:
            raise ValueError(f"max_depth must be >= 0, got {n}")
        return self._replace(depth=(min(n, self._lower), n))

    def min_depth(self, n: int) -> "Finder":
        """Only emit entries at depth `n` or deeper; negative values clamp to 0."""
        n = max(n, 0)
        upper = self._upper if self._upper is None else max(self._upper, n)
        return self._replace(depth=(n, upper))

    def depth(self, bounds: DepthRange) -> "Finder":
        """
        Set the depth interval explicitly.

        Accepts a ``range`` (half-open, converted to closed) or a closed
        ``(lower, upper)`` pair where `upper` may be None for unbounded.
        """
        if isinstance(bounds, range):
            if bounds.step != 1:
                raise ValueError("depth range must have a step of 1")
            lower, upper = bounds.start, bounds.stop - 1
        else:
            lower, upper = bounds
        lower = max(lower, 0)
        if upper is not None and upper < lower:
            raise ValueError(f"empty depth range: {bounds!r}")
        return self._replace(depth=(lower, upper))

    def kind(self, *kinds: Kind) -> "Finder":
        """Only emit entries of the given kinds. Repeated calls accumulate."""
        return self._replace(kinds=self._kinds | frozenset(kinds))

    def extension(self, *extensions: str) -> "Finder":
        """Only emit entries whose extension is listed. Repeated calls accumulate."""
        return self._replace(extensions=self._extensions | frozenset(extensions))

    # ------------------------------
    # Traversal
    # ------------------------------

    def _matches(self, path: Path, kind: Kind) -> bool:
        if self._kinds and kind not in self._kinds:
            return False
        if self._extensions and path.extension not in self._extensions:
            return False
        return True

    def _descend(self) -> None:
        if self._pending is None:
            return
        directory, depth = self._pending
        self._pending = None
        try:
            names = self._fs.scandir(directory.string)
        except OSError as e:
            if directory == self._root:
                logger.debug("Finder: cannot enumerate root %s: %s", directory, e)
            else:
                logger.warning("Finder: skipping unreadable directory %s: %s", directory, e)
            return
        self._stack.append((directory, iter(names), depth))

    def _next_entry(self) -> Optional[Entry]:
        if self._state is FinderState.EXHAUSTED:
            return None
        if self._state is FinderState.NOT_STARTED:
            self._state = FinderState.ENUMERATING
            self._pending = (self._root, 1)

        while True:
            self._descend()
            if not self._stack:
                self._state = FinderState.EXHAUSTED
                return None

            directory, names, depth = self._stack[-1]
            name = next(names, None)
            if name is None:
                self._stack.pop()
                continue

            path = directory.join(name)
            if self._upper is not None and depth > self._upper:
                continue

            try:
                kind = self._fs.classify(path.string)
            except OSError as e:
                logger.warning("Finder: classify failed for %s: %s", path, e)
                continue
            if kind is None:
                # vanished between listing and classification
                continue

            if kind is Kind.DIRECTORY and (self._upper is None or depth < self._upper):
                self._pending = (path, depth + 1)

            if depth < self._lower or not self._matches(path, kind):
                continue
            return Entry(path=path, kind=kind, depth=depth)

    def skip_descendants(self) -> None:
        """Do not descend into the directory most recently emitted."""
        self._pending = None

    def _abort(self) -> None:
        self._pending = None
        self._stack.clear()
        self._state = FinderState.EXHAUSTED

    def __iter__(self) -> "Finder":
        return self

    def __next__(self) -> Path:
        entry = self._next_entry()
        if entry is None:
            raise StopIteration
        return entry.path

    def execute(self, visit: Optional[Visitor] = None) -> List[Path]:
        """
        Push every matching entry through `visit` and return the visited paths.

        `visit` returns a ControlFlow: CONTINUE (or None) goes on, SKIP prunes
        the subtree of the entry just visited, ABORT stops the traversal and
        exhausts the Finder. Without a visitor every match is collected.
        """
        if visit is None:
            visit = _collect_all

        visited: List[Path] = []
        while True:
            entry = self._next_entry()
            if entry is None:
                break
            visited.append(entry.path)
            flow = visit(entry)
            if flow is ControlFlow.SKIP:
                self.skip_descendants()
            elif flow is ControlFlow.ABORT:
                self._abort()
                break
        return visited

    def __repr__(self) -> str:
        return (
            f"Finder(root={self._root!r}, depth={self.depth_range!r}, "
            f"kinds={sorted(k.value for k in self._kinds)!r}, "
            f"extensions={sorted(self._extensions)!r}, state={self._state.value})"
        )


def _collect_all(entry: Entry) -> ControlFlow:
    return ControlFlow.CONTINUE


def find(root: Path, fs: Optional[FilesystemPort] = None) -> Finder:
    """Start a Finder over `root` with the default depth range (1 and deeper)."""
    return Finder(root, fs)
