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
from typing import List, Optional

from ..domain.errors import FilesystemError
from ..domain.models import Entry, Kind
from ..domain.path import Path
from ..ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)


class Listing(list):
    """The entries of one directory, with kind/extension helpers."""

    @property
    def directories(self) -> List[Path]:
        return [e.path for e in self if e.kind is Kind.DIRECTORY]

    @property
    def files(self) -> List[Path]:
        return [e.path for e in self if e.kind is Kind.FILE]

    def files_with_extension(self, ext: str) -> List[Path]:
        """Files whose extension equals `ext`; ``""`` selects extensionless files."""
        return [e.path for e in self if e.kind is Kind.FILE and e.path.extension == ext]


def ls(
    path: Path,
    fs: Optional[FilesystemPort] = None,
    *,
    include_hidden: bool = False,
) -> Listing:
    """
    Shallow, unsorted listing of `path`, like ``ls`` (or ``ls -a`` with
    `include_hidden`).

    Hidden means the basename starts with a dot; no OS hidden-file attribute
    is consulted. A missing directory gives an empty Listing. Other OS errors
    are raised as FilesystemError.

    Symlinks are followed for classification, so every entry is either a
    DIRECTORY (including links to directories) or a FILE (everything else,
    dangling links included).
    """
    if fs is None:
        from ..adapters.filesystem.local_fs import LocalFS

        fs = LocalFS()

    try:
        names = list(fs.scandir(path.string))
    except FileNotFoundError:
        logger.debug("ls: %s does not exist", path)
        return Listing()
    except OSError as e:
        raise FilesystemError(f"cannot list {path}: {e}") from e

    listing = Listing()
    for name in names:
        if not include_hidden and name.startswith("."):
            continue
        child = path.join(name)
        try:
            kind = fs.classify(child.string, follow_symlinks=True)
        except OSError as e:
            logger.warning("ls: classify failed for %s: %s", child, e)
            continue
        if kind is None:
            continue
        if kind is Kind.SYMLINK:
            # dangling link: anything that is not a directory is a file
            kind = Kind.FILE
        listing.append(Entry(path=child, kind=kind, depth=1))
    return listing
