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

import locale
import logging
from typing import List, Optional

import typer

from ..adapters.environment.local_env import LocalEnvironment
from ..adapters.filesystem.local_fs import LocalFS
from ..domain.errors import FilesystemError
from ..domain.models import Kind
from ..domain.path import Path
from ..services import find as make_finder
from ..services import ls as list_directory

from ..logging_config import setup_logging

setup_logging()

logger = logging.getLogger(__name__)


def _configure_locale() -> None:
    """Adopt the user's collation order so sorted Paths match the platform."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug("Keeping default collation: %s", e)


_configure_locale()

app = typer.Typer(help="strpath CLI - normalized absolute paths and directory search")

KIND_FLAGS: dict[str, Kind] = {
    "f": Kind.FILE,
    "d": Kind.DIRECTORY,
    "l": Kind.SYMLINK,
}


def _parse_kinds(values: Optional[List[str]]) -> set[Kind]:
    """
    Translate --type values (f, d, l) into Kinds.
    Raises Typer BadParameter if an unknown flag is provided.
    """
    if not values:
        return set()
    parts = {v.strip().lower() for v in values if v.strip()}
    unknown = parts - set(KIND_FLAGS)
    if unknown:
        raise typer.BadParameter(
            f"Unknown type(s): {', '.join(sorted(unknown))}. "
            f"Valid options: {', '.join(sorted(KIND_FLAGS))}"
        )
    return {KIND_FLAGS[p] for p in parts}


def _resolve(value: str) -> Path:
    """Absolute or ~ input as-is; anything else is taken relative to the cwd."""
    env = LocalEnvironment()
    parsed = Path.parse(value, env)
    if parsed is not None:
        return parsed
    return Path(env.cwd()).join(value)


# ------------------------------
# CLI Commands
# ------------------------------


@app.command()
def normalize(value: str = typer.Argument(..., help="Absolute or ~ path")):
    """
    Print the normalized form of an absolute path.
    """
    path = Path.parse(value, LocalEnvironment())
    if path is None:
        typer.echo(f"Not an absolute path: {value}", err=True)
        raise typer.Exit(code=1)
    typer.echo(path.string)


@app.command()
def relative(
    path: str = typer.Argument(..., help="Path to express relatively"),
    base: str = typer.Argument(..., help="Base directory"),
):
    """
    Print PATH relative to BASE.
    """
    typer.echo(_resolve(path).relative(_resolve(base)))


@app.command("ls")
def ls_command(
    path: str = typer.Argument(".", help="Directory to list"),
    all_: bool = typer.Option(False, "--all", "-a", help="Include dot-files"),
):
    """
    List a directory (shallow, sorted). Directories get a trailing '/'.
    """
    root = _resolve(path)
    try:
        listing = list_directory(root, LocalFS(), include_hidden=all_)
    except FilesystemError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    for entry in sorted(listing, key=lambda e: e.path):
        suffix = "/" if entry.kind is Kind.DIRECTORY else ""
        typer.echo(entry.path.basename() + suffix)


@app.command("find")
def find_command(
    path: str = typer.Argument(".", help="Directory to search"),
    min_depth: Optional[int] = typer.Option(None, "--min-depth", help="Minimum depth (1 = direct children)"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", help="Maximum depth"),
    types: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="Entry type: f (file), d (directory), l (symlink). Repeatable."
    ),
    exts: Optional[List[str]] = typer.Option(
        None, "--ext", "-e", help="Extension without the dot, e.g. json or tar.gz. Repeatable."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Recursively search a directory and print matching paths.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    kinds = _parse_kinds(types)
    root = _resolve(path)

    finder = make_finder(root, LocalFS())
    if min_depth is not None:
        finder = finder.min_depth(min_depth)
    if max_depth is not None:
        if max_depth < 0:
            raise typer.BadParameter("--max-depth must be an integer >= 0")
        finder = finder.max_depth(max_depth)
    if kinds:
        finder = finder.kind(*kinds)
    if exts:
        finder = finder.extension(*(e.lstrip(".") for e in exts))

    count = 0
    for match in finder:
        typer.echo(match.string)
        count += 1
    logger.debug("find: %d matches under %s", count, root)
