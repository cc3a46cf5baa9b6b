"""
Tests for the piece catalog and the rotate/flip geometry.
"""

import unittest

from bento_blocks.pieces import (
    PIECE_IDS, PIECE_SHAPES, Piece, flip, flip_piece, get_all_pieces,
    normalize_offsets, piece_size, resolved_shape, rotate, rotate_piece,
    unique_orientations,
)


def _is_connected(shape) -> bool:
    cells = set(shape)
    start = next(iter(cells))
    seen = {start}
    stack = [start]
    while stack:
        r, c = stack.pop()
        for nb in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if nb in cells and nb not in seen:
                seen.add(nb)
                stack.append(nb)
    return seen == cells


class TestCatalog(unittest.TestCase):
    """Test the static shape table."""

    def test_catalog_has_21_shapes(self):
        self.assertEqual(len(PIECE_SHAPES), 21)
        self.assertEqual(len(set(PIECE_IDS)), 21)
        self.assertEqual(PIECE_IDS[0], 'I1')

    def test_size_distribution(self):
        sizes = [piece_size(shape_id) for shape_id in PIECE_IDS]
        self.assertEqual(sizes.count(1), 1)
        self.assertEqual(sizes.count(2), 1)
        self.assertEqual(sizes.count(3), 2)
        self.assertEqual(sizes.count(4), 5)
        self.assertEqual(sizes.count(5), 12)
        self.assertEqual(sum(sizes), 89)

    def test_shapes_are_normalized_polyominoes(self):
        for shape_id, shape in PIECE_SHAPES.items():
            self.assertEqual(min(r for r, _ in shape), 0, shape_id)
            self.assertEqual(min(c for _, c in shape), 0, shape_id)
            self.assertEqual(len(set(shape)), len(shape), f"{shape_id} repeats a cell")
            self.assertTrue(_is_connected(shape), f"{shape_id} is not connected")

    def test_shapes_are_distinct_under_rotation_and_flip(self):
        """No two catalog entries are the same free polyomino."""
        footprints = {}
        for shape_id, shape in PIECE_SHAPES.items():
            for _, _, resolved in unique_orientations(shape):
                key = frozenset(resolved)
                self.assertNotIn(key, footprints,
                                 f"{shape_id} matches {footprints.get(key)}")
                footprints[key] = shape_id

    def test_get_all_pieces_is_fresh_inventory(self):
        pieces = get_all_pieces()
        self.assertEqual([p.id for p in pieces], list(PIECE_IDS))
        for piece in pieces:
            self.assertFalse(piece.used)
            self.assertEqual(piece.rotation, 0)
            self.assertFalse(piece.flipped)
            self.assertEqual(piece.shape, PIECE_SHAPES[piece.id])


class TestGeometry(unittest.TestCase):
    """Test rotate, flip and resolved shapes."""

    def test_normalize_offsets(self):
        self.assertEqual(normalize_offsets([(2, 3), (3, 3)]), ((0, 0), (1, 0)))
        self.assertEqual(normalize_offsets([(0, -1), (0, 0)]), ((0, 0), (0, 1)))
        self.assertEqual(normalize_offsets([]), ())

    def test_rotate_domino(self):
        self.assertEqual(set(rotate(PIECE_SHAPES['I2'])), {(0, 0), (0, 1)})

    def test_rotate_l3(self):
        # (r, c) -> (c, -r), then shift columns by +1
        self.assertEqual(rotate(PIECE_SHAPES['L3']), ((0, 1), (0, 0), (1, 1)))

    def test_flip_l3(self):
        self.assertEqual(flip(PIECE_SHAPES['L3']), ((1, 0), (0, 0), (1, 1)))

    def test_four_rotations_are_identity(self):
        for shape_id, shape in PIECE_SHAPES.items():
            result = shape
            for _ in range(4):
                result = rotate(result)
            self.assertEqual(set(result), set(shape), shape_id)

    def test_double_flip_is_identity(self):
        for shape_id, shape in PIECE_SHAPES.items():
            self.assertEqual(set(flip(flip(shape))), set(shape), shape_id)

    def test_transforms_keep_size_and_normal_form(self):
        for shape in PIECE_SHAPES.values():
            for transformed in (rotate(shape), flip(shape)):
                self.assertEqual(len(transformed), len(shape))
                self.assertEqual(min(r for r, _ in transformed), 0)
                self.assertEqual(min(c for _, c in transformed), 0)

    def test_resolved_shape_rotates_before_flipping(self):
        base = PIECE_SHAPES['L3']
        piece = Piece('L3', base, rotation=1, flipped=True)
        self.assertEqual(set(resolved_shape(piece)), set(flip(rotate(base))))
        self.assertEqual(set(resolved_shape(piece)), {(1, 1), (1, 0), (0, 1)})
        self.assertNotEqual(set(resolved_shape(piece)), set(rotate(flip(base))))

    def test_resolved_shape_default_orientation(self):
        for piece in get_all_pieces():
            self.assertEqual(resolved_shape(piece), piece.shape)

    def test_unique_orientation_counts(self):
        counts = {shape_id: len(unique_orientations(shape))
                  for shape_id, shape in PIECE_SHAPES.items()}
        self.assertEqual(counts['I1'], 1)
        self.assertEqual(counts['I2'], 2)
        self.assertEqual(counts['O4'], 1)
        self.assertEqual(counts['X5'], 1)
        self.assertEqual(counts['L3'], 4)
        self.assertEqual(counts['F5'], 8)
        self.assertEqual(sum(counts.values()), 91)


class TestPieceValues(unittest.TestCase):
    """Test piece value transforms."""

    def test_piece_accepts_list_shape(self):
        piece = Piece('I2', [[0, 0], [1, 0]])
        self.assertEqual(piece.shape, ((0, 0), (1, 0)))
        self.assertEqual(piece.size, 2)

    def test_rotate_piece_wraps(self):
        piece = Piece('I2', PIECE_SHAPES['I2'], rotation=3)
        rotated = rotate_piece(piece)
        self.assertEqual(rotated.rotation, 0)
        self.assertEqual(piece.rotation, 3)

    def test_flip_piece_toggles(self):
        piece = Piece('L3', PIECE_SHAPES['L3'])
        self.assertTrue(flip_piece(piece).flipped)
        self.assertFalse(flip_piece(flip_piece(piece)).flipped)

    def test_mark_used_returns_copy(self):
        piece = Piece('I1', PIECE_SHAPES['I1'])
        used = piece.mark_used()
        self.assertTrue(used.used)
        self.assertFalse(piece.used)

    def test_with_orientation_normalizes_rotation(self):
        piece = Piece('T4', PIECE_SHAPES['T4']).with_orientation(5, True)
        self.assertEqual(piece.rotation, 1)
        self.assertTrue(piece.flipped)


if __name__ == '__main__':
    unittest.main()
