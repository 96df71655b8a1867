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

"""
Well-known directories, computed from an injected EnvironmentPort.

These are plain functions rather than process-wide constants so callers
(and tests) decide which environment they are asking about.
"""

from __future__ import annotations

from typing import Optional

from ..domain.path import Path
from ..ports.environment import EnvironmentPort


def _absolute(value: Optional[str]) -> Optional[Path]:
    # Relative values in XDG_* / TMPDIR are invalid and must be ignored.
    if value and value.startswith("/"):
        return Path(value)
    return None


def home(env: EnvironmentPort) -> Optional[Path]:
    return _absolute(env.home())


def cwd(env: EnvironmentPort) -> Path:
    return Path(env.cwd())


def _under_home(env: EnvironmentPort, darwin: str, xdg_var: str, fallback: str) -> Optional[Path]:
    base = home(env)
    if env.platform == "darwin":
        return base.join(darwin) if base is not None else None
    from_env = _absolute(env.getenv(xdg_var))
    if from_env is not None:
        return from_env
    return base.join(fallback) if base is not None else None


def documents(env: EnvironmentPort) -> Optional[Path]:
    return _under_home(env, "Documents", "XDG_DOCUMENTS_DIR", "Documents")


def caches(env: EnvironmentPort) -> Optional[Path]:
    return _under_home(env, "Library/Caches", "XDG_CACHE_HOME", ".cache")


def application_support(env: EnvironmentPort) -> Optional[Path]:
    return _under_home(env, "Library/Application Support", "XDG_DATA_HOME", ".local/share")


def temporary(env: EnvironmentPort) -> Path:
    for name in ("TMPDIR", "TEMP", "TMP"):
        p = _absolute(env.getenv(name))
        if p is not None:
            return p
    return Path("/tmp")
