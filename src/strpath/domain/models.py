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

from dataclasses import dataclass
from enum import Enum

from .path import Path


class Kind(Enum):
    """What a filesystem entry is. Absence is expressed as None, not a Kind."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class ControlFlow(Enum):
    """A visitor's decision for each entry during Finder.execute()."""

    CONTINUE = "continue"
    SKIP = "skip"  # do not descend into this directory
    ABORT = "abort"  # stop the whole traversal


@dataclass(frozen=True)
class Entry:
    """One directory entry as seen by ls() or a Finder."""

    path: Path
    kind: Kind
    depth: int = 1
