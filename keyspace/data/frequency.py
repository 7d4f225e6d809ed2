"""
Ranked Frequency Lists
=======================

Loads ordered word lists (most frequent first) and turns them into
ranked dictionaries: lowercase word -> 1-based rank.

The bundled ``frequency_lists.json`` is a small sample of common
passwords, English words, first names, surnames and TV/film vocabulary.
Deployments can point the estimator configuration at a larger JSON file
with the same shape: ``{"list_name": ["word", ...], ...}``.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional

RankedDictionary = dict[str, int]

_BUNDLED_LISTS = "frequency_lists.json"


def build_ranked_dict(ordered_list: Iterable[str]) -> RankedDictionary:
    """Assign ranks by list position, starting at 1."""
    return {word: rank for rank, word in enumerate(ordered_list, start=1)}


def load_frequency_lists(path: str | Path | None = None) -> dict[str, list[str]]:
    """Read ordered word lists from *path*, or the bundled file.

    Args:
        path: JSON file mapping list names to ordered word lists.
              ``None`` or ``""`` selects the bundled lists.

    Returns:
        Mapping of list name to its ordered words.

    Raises:
        FileNotFoundError: If an explicit *path* does not exist.
    """
    if path:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Frequency list file not found: {file_path}")
        raw = file_path.read_text(encoding="utf-8")
    else:
        raw = resources.files("keyspace.data").joinpath(_BUNDLED_LISTS).read_text(encoding="utf-8")
    return json.loads(raw)


def load_ranked_dictionaries(
    path: str | Path | None = None,
    names: Optional[list[str]] = None,
) -> dict[str, RankedDictionary]:
    """Load frequency lists and rank them.

    Args:
        path: Optional JSON file overriding the bundled lists.
        names: Restrict to these list names; empty selects all.

    Raises:
        ValueError: If a requested list name is not present.
    """
    lists = load_frequency_lists(path)
    selected = names or list(lists)
    unknown = [name for name in selected if name not in lists]
    if unknown:
        raise ValueError(f"Unknown frequency list(s): {', '.join(unknown)}")
    return {name: build_ranked_dict(lists[name]) for name in selected}
