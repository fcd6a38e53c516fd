"""Vote menu and econ call handling for the server bridge."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional, Union

PathLike = Union[str, Path]
Vote = tuple[str, str]

_ECHO_PIECE = 3
_CALL_PIECE = 4
_ARGS_START = 5

GENERATE_COMMAND = "echo call generate"
INFO_COMMAND = "info"


def parse_call(line: str) -> Optional[list[str]]:
    """Extract the arguments of an echoed ``call`` from an econ line.

    The line is split on single spaces; the fourth piece must be
    ``console:`` and the fifth ``call``. Everything after that is
    returned. Lines that are not such a call give None.
    """
    pieces = line.split(" ")
    if len(pieces) <= _CALL_PIECE:
        return None
    if pieces[_ECHO_PIECE] != "console:" or pieces[_CALL_PIECE] != "call":
        return None
    return pieces[_ARGS_START:]


def _configuration_votes(names: Iterable[str], label: str, inner: str) -> list[Vote]:
    return [
        (f"Set {label} configuration: {name}", f"echo call configurate {inner} {name}")
        for name in names
    ]


def build_votes(
    version: str,
    generator: str,
    walker: str,
    waypoints: str,
    generator_names: Iterable[str],
    walker_names: Iterable[str],
    waypoints_names: Iterable[str],
) -> list[Vote]:
    """Build the vote menu as (description, command) pairs, in display order.

    Separator votes are made of spaces of growing length so that each
    one is distinct.
    """
    gap_size = 0

    def gap() -> Vote:
        nonlocal gap_size
        gap_size += 1
        return (" " * gap_size, INFO_COMMAND)

    votes: list[Vote] = [(f"Random Map Generator, v{version}", INFO_COMMAND), gap()]
    votes += [
        (f"Current generator configuration: {generator}", INFO_COMMAND),
        (f"Current walker configuration: {walker}", INFO_COMMAND),
        (f"Current map layout: {waypoints}", INFO_COMMAND),
        gap(),
        ("Generate Random Map", GENERATE_COMMAND),
        gap(),
    ]
    votes += _configuration_votes(generator_names, "generator", "generator")
    votes.append(gap())
    votes += _configuration_votes(walker_names, "walker", "walker")
    votes.append(gap())
    votes += _configuration_votes(waypoints_names, "layout", "waypoints")
    return votes


def load_configs_from_dir(path: PathLike) -> dict[str, Any]:
    """Load every JSON file of a directory, keyed by file name without ``.json``.

    Raises OSError when the directory or a file cannot be read and
    json.JSONDecodeError when a file is not valid JSON.
    """
    configs: dict[str, Any] = {}
    for file_path in sorted(Path(path).iterdir()):
        name = file_path.name.replace(".json", "")
        configs[name] = json.loads(file_path.read_text(encoding="utf-8"))
    return configs


def format_config_listing(
    generator_names: Iterable[str],
    walker_names: Iterable[str],
    waypoints_names: Iterable[str],
) -> str:
    """Render the available configuration names, one kind per line."""
    return "\n".join(
        [
            f"GeneratorParams: {','.join(generator_names)}",
            f"WalkerParams: {','.join(walker_names)}",
            f"Waypoints: {','.join(waypoints_names)}",
        ]
    )