"""Locating and reading puzzle input files.

The default root is the ``puzzle-inputs/`` directory of a source checkout.
It does not exist in a regular (non-editable) install, so set
``AOC_PUZZLE_INPUTS`` or pass ``root`` explicitly there.
"""

import os
from pathlib import Path
from typing import Optional, Union

PUZZLE_INPUTS_DIR = Path(__file__).resolve().parent.parent / "puzzle-inputs"


def inputs_root() -> Path:
    override = os.environ.get("AOC_PUZZLE_INPUTS")
    if override:
        return Path(override)
    return PUZZLE_INPUTS_DIR


def puzzle_path(name: str, root: Optional[Union[str, Path]] = None) -> Path:
    base = Path(root) if root is not None else inputs_root()
    return (base / name).resolve()


def read_lines(path: Union[str, Path]) -> list[str]:
    with open(path, "r") as f:
        return [line.rstrip() for line in f]


def read_puzzle_lines(name: str, root: Optional[Union[str, Path]] = None) -> list[str]:
    return read_lines(puzzle_path(name, root))
