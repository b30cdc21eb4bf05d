"""Grid construction, edge index and arrangement search."""

import pytest

from core import ArrangementNotFound, InvalidInput, Side, Tile, lines_from_text
from features.orientation import Orientation
from solvers import ArrangementSearch, Grid, Variant, build_edge_index, build_variant_map

from .conftest import EXAMPLE_CORNER_PRODUCT, TILE_2311


@pytest.fixture
def grid(example_lines):
    return Grid.from_lines(example_lines)


@pytest.fixture
def arranged(grid):
    assert grid.arrange()
    return grid


def test_from_lines(grid):
    assert grid.num_tiles == 9
    assert grid.dimensions == (3, 3)
    assert len(grid.variant_map) == 9 * 8
    assert not grid.is_arranged
    assert str(grid) == '\n'.join(["XXXX    XXXX    XXXX"] * 3)


def test_variant_map_keys(grid):
    assert Variant(2311, Orientation()) in grid.variant_map
    assert grid.variant_map[Variant(2311, Orientation())] == grid.tiles[2311]
    assert set(grid.orientations_of(2311)) == set(Orientation.all())


def test_edge_index_covers_top_and_left(grid):
    assert set(grid.edge_index) == {Side.TOP, Side.LEFT}

    for side in (Side.TOP, Side.LEFT):
        indexed = [v for variants in grid.edge_index[side].values() for v in variants]
        assert sorted(indexed, key=repr) == sorted(grid.variant_map, key=repr)
        for edge, variants in grid.edge_index[side].items():
            assert all(grid.variant_map[v].get_edge(side) == edge for v in variants)


def test_build_helpers_are_ordered():
    tiles = {2311: Tile.parse(lines_from_text(TILE_2311))}
    variant_map = build_variant_map(tiles)
    index = build_edge_index(variant_map)

    assert [v.orientation for v in variant_map] == Orientation.all()
    assert index[Side.TOP][210] == [Variant(2311, Orientation())]


def test_arrange(arranged):
    assert arranged.is_arranged
    assert arranged.get_corner_product() == EXAMPLE_CORNER_PRODUCT


def test_arrangement_edges_agree(arranged):
    cells = arranged.arrangement
    for r in range(arranged.size):
        for c in range(arranged.size):
            if c + 1 < arranged.size:
                assert cells[r][c].right == cells[r][c + 1].left
            if r + 1 < arranged.size:
                assert cells[r][c].bottom == cells[r + 1][c].top


def test_every_tile_placed_once(arranged):
    placed = arranged.placed_ids()
    assert len(placed) == 9
    assert sorted(placed) == sorted(arranged.tiles)


def test_grid_str_after_arrange(arranged):
    rows = str(arranged).split('\n')
    assert len(rows) == 3
    assert "XXXX" not in str(arranged)
    assert {int(tile_id) for row in rows for tile_id in row.split()} == set(arranged.tiles)


def test_corner_product_requires_arrangement(grid):
    with pytest.raises(ArrangementNotFound):
        grid.get_corner_product()


def test_assemble_requires_arrangement(grid):
    with pytest.raises(ArrangementNotFound):
        grid.assemble()


def test_assemble(arranged):
    composite = arranged.assemble()
    assert composite.id == 0
    assert composite.dimensions == (24, 24)


def test_single_tile_grid(tile_lines):
    grid = Grid.single(Tile.parse(tile_lines))

    assert grid.dimensions == (1, 1)
    assert grid.arrange()
    assert grid.get_corner_product() == 2311 ** 4


def test_search_fails_without_matching_edges():
    tiles = {
        1: Tile.from_rows(1, ["##", "##"]),
        2: Tile.from_rows(2, ["..", ".."]),
        3: Tile.from_rows(3, ["##", "##"]),
        4: Tile.from_rows(4, ["..", ".."]),
    }
    grid = Grid(tiles)

    assert not grid.arrange()
    assert not grid.is_arranged
    assert grid.placed_ids() == []
    with pytest.raises(ArrangementNotFound):
        grid.get_corner_product()


def test_search_restores_state_after_failure():
    tiles = {tile_id: Tile.from_rows(tile_id, ["#.", ".."]) for tile_id in range(1, 5)}
    tiles[4] = Tile.from_rows(4, ["##", "##"])
    variant_map = build_variant_map(tiles)
    search = ArrangementSearch(2, variant_map, build_edge_index(variant_map))

    assert search.run() is None
    assert sorted(search.available) == [1, 2, 3, 4]
    assert all(len(v) == 8 for v in search.available.values())
    assert search.arrangement == [[None, None], [None, None]]
    assert search.backtracks > 0


def test_non_square_tile_count_fails(example_lines):
    grid = Grid.from_lines(example_lines[:-12])

    assert grid.num_tiles == 8
    assert grid.dimensions == (3, 3)
    assert not grid.arrange()


def test_duplicate_tile_ids():
    lines = lines_from_text(TILE_2311) + [""] + lines_from_text(TILE_2311)
    with pytest.raises(InvalidInput):
        Grid.from_lines(lines)


def test_mixed_tile_shapes():
    tiles = {1: Tile.from_rows(1, ["#."]), 2: Tile.from_rows(2, ["#.", ".#"])}
    with pytest.raises(InvalidInput):
        Grid(tiles)


def test_rectangular_tiles_rejected():
    tiles = {
        1: Tile.from_rows(1, ["#.#", "..#"]),
        2: Tile.from_rows(2, ["#..", "#.#"]),
        3: Tile.from_rows(3, [".##", "#.."]),
        4: Tile.from_rows(4, ["##.", ".#."]),
    }
    with pytest.raises(InvalidInput):
        Grid(tiles)


def test_empty_input():
    with pytest.raises(InvalidInput):
        Grid.from_lines(["", "  "])


def test_malformed_block_aborts_load(example_lines):
    lines = example_lines + ["", "Tile X:", "#."]
    with pytest.raises(InvalidInput):
        Grid.from_lines(lines)
