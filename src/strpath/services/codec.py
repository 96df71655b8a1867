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

import json
from typing import Iterable, List, Optional

from ..domain.errors import DecodingError
from ..domain.path import SEP, Path


class PathCodec:
    """
    Encodes Paths as strings (and JSON arrays), optionally relative to a root.

    With a `relative_to` root, paths are written as ``path.relative(root)``
    and relative strings are read back by joining them onto the root. The
    root used for reading need not match the one used for writing, which is
    how a tree of recorded paths is relocated:

        codec = PathCodec(relative_to=Path("/srv/site"))
        codec.encode(Path("/srv/site/img/a.png"))  # => "img/a.png"
        codec.encode(Path("/srv"))                  # => ".."
    """

    def __init__(self, relative_to: Optional[Path] = None) -> None:
        self._root = relative_to

    @property
    def relative_to(self) -> Optional[Path]:
        return self._root

    def encode(self, path: Path) -> str:
        if self._root is not None:
            return path.relative(self._root)
        return path.string

    def decode(self, value: str) -> Path:
        if not isinstance(value, str):
            raise DecodingError(f"expected a path string, got {type(value).__name__}")
        if value.startswith(SEP):
            return Path(value)
        if self._root is None:
            raise DecodingError(
                f"cannot decode relative path {value!r} without a relative_to root"
            )
        return self._root.join(value)

    def dumps(self, paths: Iterable[Path]) -> str:
        return json.dumps([self.encode(p) for p in paths], ensure_ascii=False)

    def loads(self, text: str) -> List[Path]:
        try:
            values = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodingError(f"invalid JSON: {e}") from e
        if not isinstance(values, list):
            raise DecodingError("expected a JSON array of path strings")
        return [self.decode(v) for v in values]
