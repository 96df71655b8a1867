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

import os
import stat
from typing import Iterator, Optional

from ...domain.models import Kind
from ...ports.filesystem import FilesystemPort


class LocalFS(FilesystemPort):
    """Local filesystem adapter backed by os.lstat / os.stat / os.scandir."""

    def classify(self, path: str, follow_symlinks: bool = False) -> Optional[Kind]:
        st = None
        if follow_symlinks:
            try:
                st = os.stat(path)
            except (FileNotFoundError, NotADirectoryError):
                pass  # dangling link or absent; lstat below decides which
        if st is None:
            try:
                st = os.lstat(path)
            except (FileNotFoundError, NotADirectoryError):
                return None
        if stat.S_ISLNK(st.st_mode):
            return Kind.SYMLINK
        if stat.S_ISDIR(st.st_mode):
            return Kind.DIRECTORY
        # NOTE: fifos, sockets and devices count as files.
        return Kind.FILE

    def scandir(self, path: str) -> Iterator[str]:
        # Read the listing eagerly so the directory handle is closed before
        # the caller starts descending.
        with os.scandir(path) as it:
            names = [entry.name for entry in it]
        return iter(names)
