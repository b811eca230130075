from __future__ import annotations

import itertools
from typing import Callable, Iterable, Sequence

import pytest

from grid_games.connection import ConnectFourGame
from grid_games.stacking import PieceKind, StackingGame


def sequence_chooser(kinds: Iterable[PieceKind]) -> Callable[[Sequence[PieceKind]], PieceKind]:
    """Chooser that ignores its options and cycles through `kinds`."""
    it = itertools.cycle(list(kinds))

    def choose(_options: Sequence[PieceKind]) -> PieceKind:
        return next(it)

    return choose


@pytest.fixture()
def i_game() -> StackingGame:
    return StackingGame(chooser=sequence_chooser([PieceKind.I]))


@pytest.fixture()
def c4() -> ConnectFourGame:
    return ConnectFourGame()
