import pytest

from pokefight.tilemap import Interior, Quad, build_quads

TILE = (16, 16)
TILESET_WIDTH = 64  # four tiles per tileset row


def test_quad_count_matches_map():
    quads = build_quads(TILESET_WIDTH, TILE, [0] * 6, 3, 2)
    assert len(quads) == 6


def test_first_quad_origin():
    quad = build_quads(TILESET_WIDTH, TILE, [0], 1, 1)[0]
    assert quad.positions[0] == (0, 0)
    assert quad.tex_coords[0] == (0, 0)


def test_quads_span_tile_size():
    for quad in build_quads(TILESET_WIDTH, TILE, [0, 1, 2, 3, 4, 5], 3, 2):
        (x0, y0), (x1, y1) = quad.positions[0], quad.positions[2]
        assert (x1 - x0, y1 - y0) == TILE
        (u0, v0), (u1, v1) = quad.tex_coords[0], quad.tex_coords[2]
        assert (u1 - u0, v1 - v0) == TILE


def test_row_major_order():
    quads = build_quads(TILESET_WIDTH, TILE, [0] * 4, 2, 2)
    assert quads[1].positions[0] == (TILE[0], 0)
    assert quads[2].positions[0] == (0, TILE[1])


def test_adjacent_quads_share_edges():
    quads = build_quads(TILESET_WIDTH, TILE, [0, 0], 2, 1)
    assert quads[0].positions[1] == quads[1].positions[0]
    assert quads[0].positions[2] == quads[1].positions[3]


def test_tile_wraps_to_next_tileset_row():
    quad = build_quads(TILESET_WIDTH, TILE, [4], 1, 1)[0]
    assert quad.tex_coords[0] == (0, TILE[1])


def test_tile_within_first_row():
    quad = build_quads(TILESET_WIDTH, TILE, [3], 1, 1)[0]
    assert quad.tex_coords[1] == (TILESET_WIDTH, 0)


def test_too_few_tiles():
    with pytest.raises(ValueError):
        build_quads(TILESET_WIDTH, TILE, [0, 1], 2, 2)


def test_tileset_too_narrow():
    with pytest.raises(ValueError):
        build_quads(8, TILE, [0], 1, 1)


def test_negative_tile_rejected():
    with pytest.raises(ValueError):
        build_quads(TILESET_WIDTH, TILE, [-1], 1, 1)


def test_interior_load():
    interior = Interior()
    interior.load(TILESET_WIDTH, TILE, [0, 1, 2, 3], 2, 2)
    assert interior.vertex_count == 16
    assert interior.quads == build_quads(TILESET_WIDTH, TILE, [0, 1, 2, 3], 2, 2)
    assert all(isinstance(q, Quad) for q in interior.quads)


def test_interior_load_replaces_geometry():
    interior = Interior()
    interior.load(TILESET_WIDTH, TILE, [0] * 4, 2, 2)
    interior.load(TILESET_WIDTH, TILE, [0], 1, 1)
    assert interior.vertex_count == 4