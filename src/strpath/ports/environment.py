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
from typing import Optional


class EnvironmentPort(ABC):
    """Process environment and platform facts used for well-known directories."""

    @abstractmethod
    def home(self, user: Optional[str] = None) -> Optional[str]:
        """Home directory of `user` (current user when None), or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def getenv(self, name: str) -> Optional[str]:
        """Value of the environment variable `name`, or None."""
        raise NotImplementedError

    @abstractmethod
    def cwd(self) -> str:
        """Current working directory."""
        raise NotImplementedError

    @property
    @abstractmethod
    def platform(self) -> str:
        """Platform identifier in the style of sys.platform ("linux", "darwin", ...)."""
        raise NotImplementedError
