from __future__ import annotations

from typing import Dict, Tuple


Color = Tuple[int, int, int]

STACKING_PALETTE: Dict[int, Color] = {
    0: (20, 20, 26),
    1: (0, 240, 240),  # I
    2: (240, 240, 0),  # O
    3: (160, 0, 240),  # T
    4: (0, 240, 0),    # S
    5: (240, 0, 0),    # Z
    6: (0, 0, 240),    # J
    7: (240, 160, 0),  # L
}

CONNECTION_PALETTE: Dict[int, Color] = {
    0: (230, 230, 230),
    1: (220, 50, 50),   # player 1
    2: (240, 210, 40),  # player 2
}

WINNING_RING: Color = (70, 200, 120)
LANDING_RING: Color = (255, 255, 255)
