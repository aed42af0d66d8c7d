from io import BytesIO

import pytest
from PIL import Image

from minefield.field import Field
from minefield.renderer import MIN_WIDTH, FieldRenderer


@pytest.fixture
def renderer():
    return FieldRenderer(scale=2)


def test_render_png(renderer, field):
    data = renderer.render(field)
    assert data.startswith(b"\x89PNG")

    img = Image.open(BytesIO(data))
    w, h = renderer.board_size(field)
    assert img.size == (w * 2, h * 2)


def test_small_board_keeps_header_width(renderer):
    field = Field(1, 1, 0)
    assert renderer.board_size(field)[0] == MIN_WIDTH
    assert renderer.render(field).startswith(b"\x89PNG")


def test_render_does_not_touch_field(renderer, field):
    field.mark_tile(2, 3)
    field.open_tile(0, 2)
    field.open_tile(0, 0)
    before = [[t.visibility for t in row] for row in field.tiles]

    renderer.render(field)

    assert [[t.visibility for t in row] for row in field.tiles] == before
    assert not field.tile_at(2, 3).is_open


def test_render_every_count():
    field = Field(16, 30, 99, seed=11)
    for r in range(field.row_count):
        for c in range(field.column_count):
            if not field.tile_at(r, c).is_mine:
                field.open_tile(r, c)
    assert field.is_solved
    assert FieldRenderer().render(field).startswith(b"\x89PNG")
