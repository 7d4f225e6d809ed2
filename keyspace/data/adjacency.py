"""
Keyboard Adjacency Graphs
==========================

Builds the adjacency graphs used by the spatial matcher from plain
drawings of each layout. Every key token lists its unshifted character
followed by its shifted character (``qQ``, ``2@``); keypads have a single
character per key.

A graph maps each character to a fixed-length list of neighbour slots in
clockwise order. Slot position encodes direction; a missing neighbour is
``None`` so that every key on the same layout has the same arity:

* slanted keyboards (qwerty, dvorak): 6 slots -- left, upper-left,
  upper-right, right, lower-right, lower-left;
* aligned keypads: 8 slots -- left, then clockwise through all
  diagonals.

For example ``g`` on qwerty maps to ``['fF', 'tT', 'yY', 'hH', 'bB', 'vV']``
and ``7`` on the keypad maps to ``[None, None, None, '/', '8', '5', '4', None]``.
"""

from __future__ import annotations

from typing import Callable, Optional

AdjacencyGraph = dict[str, list[Optional[str]]]


# ===================================================================== #
#  Layout Drawings
# ===================================================================== #

QWERTY = r"""
`~ 1! 2@ 3# 4$ 5% 6^ 7& 8* 9( 0) -_ =+
    qQ wW eE rR tT yY uU iI oO pP [{ ]} \|
     aA sS dD fF gG hH jJ kK lL ;: '"
      zZ xX cC vV bB nN mM ,< .> /?
"""

DVORAK = r"""
`~ 1! 2@ 3# 4$ 5% 6^ 7& 8* 9( 0) [{ ]}
    '" ,< .> pP yY fF gG cC rR lL /? =+ \|
     aA oO eE uU iI dD hH tT nN sS -_
      ;: qQ jJ kK xX bB mM wW vV zZ
"""

KEYPAD = r"""
  / * -
7 8 9 +
4 5 6
1 2 3
  0 .
"""

MAC_KEYPAD = r"""
  = / *
7 8 9 -
4 5 6 +
1 2 3
  0 .
"""

# name -> (drawing, slanted)
LAYOUTS: dict[str, tuple[str, bool]] = {
    "qwerty": (QWERTY, True),
    "dvorak": (DVORAK, True),
    "keypad": (KEYPAD, False),
    "mac_keypad": (MAC_KEYPAD, False),
}

# Graphs whose starting characters may be shifted symbols.
KEYBOARD_GRAPHS: frozenset[str] = frozenset({"qwerty", "dvorak"})


# ===================================================================== #
#  Graph Construction
# ===================================================================== #


def _slanted_adjacent_coords(x: int, y: int) -> list[tuple[int, int]]:
    """Six neighbours on a keyboard whose rows slant right going down."""
    return [(x - 1, y), (x, y - 1), (x + 1, y - 1), (x + 1, y), (x, y + 1), (x - 1, y + 1)]


def _aligned_adjacent_coords(x: int, y: int) -> list[tuple[int, int]]:
    """Eight clockwise neighbours on a vertically aligned keypad."""
    return [
        (x - 1, y), (x - 1, y - 1), (x, y - 1), (x + 1, y - 1),
        (x + 1, y), (x + 1, y + 1), (x, y + 1), (x - 1, y + 1),
    ]


def build_graph(layout: str, slanted: bool) -> AdjacencyGraph:
    """Build an adjacency graph from a layout drawing.

    Each drawn row of a slanted layout is indented one column further
    than the previous one; that indent is removed before tokens are
    placed on the grid.

    Args:
        layout: Multi-line drawing with whitespace-separated key tokens.
        slanted: ``True`` for keyboards, ``False`` for keypads.

    Returns:
        Mapping of every character on the layout to its neighbour slots.

    Raises:
        ValueError: If tokens have inconsistent widths or sit off-grid.
    """
    tokens = layout.split()
    token_size = len(tokens[0])
    if any(len(token) != token_size for token in tokens):
        raise ValueError(f"Token length mismatch in layout:\n{layout}")

    x_unit = token_size + 1
    adjacency: Callable[[int, int], list[tuple[int, int]]] = (
        _slanted_adjacent_coords if slanted else _aligned_adjacent_coords
    )

    positions: dict[tuple[int, int], str] = {}
    for y, line in enumerate(layout.split("\n")):
        slant = y - 1 if slanted else 0
        for token in line.split():
            x, remainder = divmod(line.index(token) - slant, x_unit)
            if remainder != 0:
                raise ValueError(f"Unexpected x offset for {token!r} in:\n{layout}")
            positions[(x, y)] = token

    graph: AdjacencyGraph = {}
    for (x, y), chars in positions.items():
        for char in chars:
            graph[char] = [positions.get(coord) for coord in adjacency(x, y)]
    return graph


def average_degree(graph: AdjacencyGraph) -> float:
    """Mean number of present neighbours per key.

    On qwerty, ``g`` has degree 6 (``ftyhbv``) while ``\\`` has degree 1.
    """
    if not graph:
        return 0.0
    total = sum(len([n for n in neighbors if n]) for neighbors in graph.values())
    return total / len(graph)


def load_adjacency_graphs(names: Optional[list[str]] = None) -> dict[str, AdjacencyGraph]:
    """Build the named graphs (all bundled layouts when *names* is empty).

    Raises:
        ValueError: If a requested layout is unknown.
    """
    selected = names or list(LAYOUTS)
    unknown = [name for name in selected if name not in LAYOUTS]
    if unknown:
        raise ValueError(f"Unknown keyboard layout(s): {', '.join(unknown)}")
    return {name: build_graph(*LAYOUTS[name]) for name in selected}


# ===================================================================== #
#  Spatial Guess Constants
# ===================================================================== #

_QWERTY_GRAPH = build_graph(QWERTY, True)
_KEYPAD_GRAPH = build_graph(KEYPAD, False)

KEYBOARD_AVERAGE_DEGREE: float = average_degree(_QWERTY_GRAPH)
KEYBOARD_STARTING_POSITIONS: int = len(_QWERTY_GRAPH)

# slightly different for the mac keypad, but close enough
KEYPAD_AVERAGE_DEGREE: float = average_degree(_KEYPAD_GRAPH)
KEYPAD_STARTING_POSITIONS: int = len(_KEYPAD_GRAPH)
