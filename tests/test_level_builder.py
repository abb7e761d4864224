from levelgen.level import BORDER, CORRIDOR, EMPTY, WALL, WALL_BLUEPRINTS, Grid, build, can_build


def test_build_fills_rectangle_rows_then_cols():
    g = Grid(6, 6)
    written = build(g, 3, 2, (1, 2), WALL)  # 3 wide, 2 tall
    assert written == 6
    walls = {(r, c) for r, c, k in g.cells() if k == WALL}
    assert walls == {(1, 2), (1, 3), (1, 4), (2, 2), (2, 3), (2, 4)}


def test_build_skips_out_of_bounds_cells():
    g = Grid(4, 4)
    written = build(g, 3, 3, (-1, -1), WALL)
    assert written == 4
    assert g.count(WALL) == 4
    assert build(g, 2, 2, (10, 10), WALL) == 0
    assert g.count(WALL) == 4


def test_can_build_rejects_walls_and_borders():
    g = Grid(5, 5)
    assert can_build(g, 3, 3, (1, 1))
    g[2, 2] = WALL
    assert not can_build(g, 3, 3, (1, 1))
    g[2, 2] = BORDER
    assert not can_build(g, 3, 3, (1, 1))


def test_can_build_over_corridor():
    g = Grid(5, 5)
    g[2, 2] = CORRIDOR
    assert can_build(g, 3, 3, (1, 1))


def test_can_build_ignores_out_of_bounds_part():
    g = Grid(3, 3, fill=EMPTY)
    g[2, 2] = WALL
    # Rectangle hangs off the bottom-left corner and never touches (2,2)
    assert can_build(g, 3, 3, (-2, -2))
    # Entirely off-grid: nothing blocks
    assert can_build(g, 2, 2, (5, 5))


def test_blueprints_cover_their_anchor_cell():
    for bp in WALL_BLUEPRINTS:
        g = Grid(9, 9)
        tl = bp.top_left((4, 4))
        build(g, bp.width, bp.height, tl, WALL)
        assert g[4, 4] == WALL, f"{bp} does not cover the digger position"
        assert g.count(WALL) == bp.width * bp.height


def test_blueprint_catalog_shapes():
    shapes = sorted((bp.width, bp.height) for bp in WALL_BLUEPRINTS)
    assert shapes == sorted([(3, 2), (5, 2), (7, 2), (2, 3), (2, 5), (2, 7), (3, 5), (5, 3), (5, 5)])
