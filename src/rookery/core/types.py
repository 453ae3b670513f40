"""Square type alias and coordinate helpers.

Board layout is (row, col), row 0 at the top as rendered:
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)

Black starts on rows 0-1, white on rows 6-7.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

FILES = "abcdefgh"
RANKS = "12345678"


def valid_position(sq: Square) -> bool:
    """Both coordinates lie on the board."""
    row, col = sq
    return 0 <= row < 8 and 0 <= col < 8


def rotate(sq: Square) -> Square:
    """Mirror *sq* through the board centre (180° rotation)."""
    return (7 - sq[0], 7 - sq[1])


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
