"""
Bento Blocks piece catalog with all 21 polyominoes and their rotations/reflections.

Shapes are tuples of (row, col) offsets in canonical normalized form: the
minimum row and the minimum column are both 0.
"""

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Dict, List, Tuple

Offset = Tuple[int, int]
Shape = Tuple[Offset, ...]


# Static catalog, keyed by shape id. Order is the inventory order.
PIECE_SHAPES: Dict[str, Shape] = {
    # Single block
    'I1': ((0, 0),),
    # Two blocks
    'I2': ((0, 0), (1, 0)),
    # Three blocks
    'I3': ((0, 0), (1, 0), (2, 0)),
    'L3': ((0, 0), (1, 0), (0, 1)),
    # Four blocks
    'I4': ((0, 0), (1, 0), (2, 0), (3, 0)),
    'L4': ((0, 0), (1, 0), (2, 0), (0, 1)),
    'O4': ((0, 0), (1, 0), (0, 1), (1, 1)),
    'S4': ((0, 0), (1, 0), (1, 1), (2, 1)),
    'T4': ((0, 0), (1, 0), (2, 0), (1, 1)),
    # Five blocks
    'I5': ((0, 0), (1, 0), (2, 0), (3, 0), (4, 0)),
    'L5': ((0, 0), (1, 0), (2, 0), (3, 0), (0, 1)),
    'N5': ((0, 0), (1, 0), (1, 1), (2, 1), (3, 1)),
    'P5': ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2)),
    'T5': ((0, 0), (1, 0), (2, 0), (1, 1), (1, 2)),
    'U5': ((0, 0), (2, 0), (0, 1), (1, 1), (2, 1)),
    'V5': ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2)),
    'W5': ((0, 0), (0, 1), (1, 1), (1, 2), (2, 2)),
    'X5': ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    # True Y pentomino; the web catalog repeated the L5 offsets here
    'Y5': ((0, 0), (1, 0), (2, 0), (3, 0), (1, 1)),
    'Z5': ((0, 0), (1, 0), (1, 1), (1, 2), (2, 2)),
    'F5': ((1, 0), (2, 0), (0, 1), (1, 1), (1, 2)),
}

PIECE_IDS: Tuple[str, ...] = tuple(PIECE_SHAPES)


@dataclass(frozen=True)
class Piece:
    """
    A piece in a player's inventory.

    ``rotation`` counts quarter-turns and ``flipped`` mirrors the piece after
    rotating. Transform methods return new pieces; the base ``shape`` never
    changes.
    """
    id: str
    shape: Shape
    rotation: int = 0
    flipped: bool = False
    used: bool = False

    def __post_init__(self):
        # Accept lists of [row, col] pairs; shapes must be hashable
        object.__setattr__(self, 'shape', tuple((int(r), int(c)) for r, c in self.shape))

    @property
    def size(self) -> int:
        """Number of cells in the piece."""
        return len(self.shape)

    def with_orientation(self, rotation: int, flipped: bool) -> 'Piece':
        return replace(self, rotation=rotation % 4, flipped=flipped)

    def mark_used(self) -> 'Piece':
        return replace(self, used=True)


def normalize_offsets(offsets) -> Shape:
    """
    Shift offsets so that min_row = 0 and min_col = 0.

    Cell order is preserved so that transformed shapes stay comparable
    cell-by-cell with their source.
    """
    offsets = tuple(offsets)
    if not offsets:
        return ()

    min_row = min(r for r, c in offsets)
    min_col = min(c for r, c in offsets)
    return tuple((r - min_row, c - min_col) for r, c in offsets)


def rotate(shape: Shape) -> Shape:
    """Quarter-turn: (r, c) -> (c, -r), then normalize."""
    return normalize_offsets((c, -r) for r, c in shape)


def flip(shape: Shape) -> Shape:
    """Mirror across the column axis: (r, c) -> (-r, c), then normalize."""
    return normalize_offsets((-r, c) for r, c in shape)


@lru_cache(maxsize=None)
def transform_shape(shape: Shape, rotation: int, flipped: bool) -> Shape:
    """Apply ``rotation`` quarter-turns and then an optional flip."""
    result = tuple(shape)
    for _ in range(rotation % 4):
        result = rotate(result)
    if flipped:
        result = flip(result)
    return result


def resolved_shape(piece: Piece) -> Shape:
    """The piece's base shape after its current rotation and flip."""
    return transform_shape(piece.shape, piece.rotation, piece.flipped)


def rotate_piece(piece: Piece) -> Piece:
    """Return ``piece`` turned one more quarter."""
    return replace(piece, rotation=(piece.rotation + 1) % 4)


def flip_piece(piece: Piece) -> Piece:
    """Return ``piece`` with its flip flag toggled."""
    return replace(piece, flipped=not piece.flipped)


def piece_size(shape_id: str) -> int:
    """Cell count of a catalog shape."""
    return len(PIECE_SHAPES[shape_id])


def get_all_pieces() -> Tuple[Piece, ...]:
    """A fresh, unused inventory with one piece of every catalog shape."""
    return tuple(Piece(id=shape_id, shape=shape) for shape_id, shape in PIECE_SHAPES.items())


@lru_cache(maxsize=None)
def unique_orientations(shape: Shape) -> Tuple[Tuple[int, bool, Shape], ...]:
    """
    Distinct footprints of ``shape`` over all (rotation, flipped) states.

    Returns (rotation, flipped, resolved) triples in search order: rotation
    0..3, unflipped before flipped. Only the first state producing a given set
    of cells is kept.
    """
    seen = set()
    orientations: List[Tuple[int, bool, Shape]] = []
    for rotation in range(4):
        for flipped in (False, True):
            resolved = transform_shape(shape, rotation, flipped)
            key = frozenset(resolved)
            if key in seen:
                continue
            seen.add(key)
            orientations.append((rotation, flipped, resolved))
    return tuple(orientations)
