import pytest

from core.cell import CellState, InvalidAlphabetState
from core.grid import Grid

SIMPLE = "..#\n#..\n..."


def test_grid_query_centers_on_input_block():
    grid = Grid.from_text(SIMPLE)

    assert grid.state((0, 0)) == CellState.CLEAN
    assert grid.state((0, -1)) == CellState.INFECTED
    assert grid.state((-1, 1)) == CellState.INFECTED
    assert grid.state((1, 1)) == CellState.CLEAN
    assert grid.state((100, -32)) == CellState.CLEAN
    assert len(grid) == 2


def test_corners_of_3x3_block_map_to_unit_offsets():
    grid = Grid.from_text("#.#\n.#.\n#.#")

    assert set(grid) == {(-1, -1), (-1, 1), (0, 0), (1, -1), (1, 1)}


def test_even_sized_block_uses_floor_half():
    grid = Grid.from_text("#...\n....\n....\n...#")

    assert set(grid) == {(-2, -2), (1, 1)}


def test_custom_marker():
    grid = Grid.from_text("x#\n#x", infected_marker="x")

    assert set(grid) == {(-1, -1), (0, 0)}


def test_clean_removes_entry():
    grid = Grid.from_text(SIMPLE)

    grid.clean((0, -1))
    assert grid.state((0, -1)) == CellState.CLEAN
    assert (0, -1) not in grid

    grid.clean((0, 0))
    assert grid.state((0, 0)) == CellState.CLEAN


def test_set_clean_is_removal():
    grid = Grid()
    grid.set((3, 4), CellState.FLAGGED)
    assert grid.state((3, 4)) == CellState.FLAGGED

    grid.set((3, 4), CellState.CLEAN)
    assert len(grid) == 0


def test_infect_weaken_flag():
    grid = Grid.from_text(SIMPLE)

    grid.infect((0, 0))
    assert grid.state((0, 0)) == CellState.INFECTED
    grid.infect((0, -1))
    assert grid.state((0, -1)) == CellState.INFECTED

    grid.weaken((5, 5))
    grid.flag((-5, -5))
    assert grid.state((5, 5)) == CellState.WEAKENED
    assert grid.state((-5, -5)) == CellState.FLAGGED


def test_reverse_is_an_involution():
    grid = Grid.from_text(SIMPLE)

    assert grid.reverse((0, 0)) == CellState.CLEAN
    assert grid.state((0, 0)) == CellState.INFECTED
    assert grid.reverse((0, 0)) == CellState.INFECTED
    assert grid.state((0, 0)) == CellState.CLEAN

    assert grid.reverse((0, -1)) == CellState.INFECTED
    assert grid.reverse((0, -1)) == CellState.CLEAN
    assert grid.state((0, -1)) == CellState.INFECTED


def test_reverse_rejects_evolved_states():
    grid = Grid({(0, 0): CellState.WEAKENED})

    with pytest.raises(InvalidAlphabetState):
        grid.reverse((0, 0))
    assert grid.state((0, 0)) == CellState.WEAKENED


def test_count_by_state_and_copy():
    grid = Grid({
        (0, 0): CellState.INFECTED,
        (0, 1): CellState.WEAKENED,
        (0, 2): CellState.CLEAN,
    })
    counts = grid.count_by_state()

    assert counts[CellState.INFECTED] == 1
    assert counts[CellState.WEAKENED] == 1
    assert counts[CellState.CLEAN] == 0
    assert grid.states() == {CellState.INFECTED, CellState.WEAKENED}

    clone = grid.copy()
    clone.clean((0, 0))
    assert grid.state((0, 0)) == CellState.INFECTED
    assert clone != grid
