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
import sys
from typing import Optional

from ...ports.environment import EnvironmentPort


class LocalEnvironment(EnvironmentPort):
    """EnvironmentPort over the running process (os.environ, pwd, sys.platform)."""

    def home(self, user: Optional[str] = None) -> Optional[str]:
        marker = "~" + (user or "")
        expanded = os.path.expanduser(marker)
        # expanduser hands the input back untouched when it cannot resolve it
        if expanded == marker or not expanded.startswith("/"):
            return None
        return expanded

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def cwd(self) -> str:
        return os.getcwd()

    @property
    def platform(self) -> str:
        return sys.platform
