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

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from ..domain.models import Kind


class FilesystemPort(ABC):
    """Abstract interface for the filesystem probes the core relies on."""

    @abstractmethod
    def classify(self, path: str, follow_symlinks: bool = False) -> Optional[Kind]:
        """
        Return the Kind of the entry at `path`, or None if nothing is there.

        By default symlinks are reported as Kind.SYMLINK. With
        `follow_symlinks` the link target is classified instead; a dangling
        link still reports Kind.SYMLINK.
        """
        raise NotImplementedError

    @abstractmethod
    def scandir(self, path: str) -> Iterator[str]:
        """
        Yield the names of the entries directly inside the directory `path`.

        Raises an OSError subclass (FileNotFoundError, PermissionError,
        NotADirectoryError, ...) when the directory cannot be listed.
        """
        raise NotImplementedError
