# renderer.py
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont
from PIL.Image import Image as IMG
from PIL.Image import Resampling

from .command import row_label
from .field import Field
from .model import GameState, Tile, Visibility

TILE = 16
GUTTER = 16  # 行字母
HEADER = 28  # 剩余雷数 + 表情
TOP = HEADER + 16  # 列号
BORDER = 4
MIN_WIDTH = 84  # 计数器和表情并排所需宽度

NUMBER_COLORS = {
    1: "blue",
    2: "green",
    3: "red",
    4: "navy",
    5: "maroon",
    6: "teal",
    7: "black",
    8: "gray",
}

FACES = {
    GameState.PLAYING: ":)",
    GameState.SOLVED: "B)",
    GameState.FAILED: "X(",
}


class FieldRenderer:
    def __init__(self, scale: int = 4, font_path: str | None = None):
        self.scale = scale
        if font_path:
            self.font = ImageFont.truetype(font=font_path, size=7 * scale, encoding="utf-8")
        else:
            self.font = ImageFont.load_default(size=7 * scale)

    # ========= 对外唯一入口 =========

    def render(self, field: Field) -> bytes:
        bg = Image.new("RGB", self.board_size(field), "silver")

        self._draw_tiles(bg, field)

        bg = bg.resize(
            (bg.width * self.scale, bg.height * self.scale),
            Resampling.NEAREST,
        )

        draw = ImageDraw.Draw(bg)
        self._draw_counts(draw, field)
        self._draw_face(draw, bg, field.state)
        self._draw_labels(draw, field)
        self._draw_glyphs(draw, field)

        output = BytesIO()
        bg.save(output, format="PNG")
        output.seek(0)
        return output.getvalue()

    @staticmethod
    def board_size(field: Field) -> tuple[int, int]:
        """未缩放时的画布尺寸"""
        return (
            max(GUTTER + field.column_count * TILE + BORDER, MIN_WIDTH),
            TOP + field.row_count * TILE + BORDER,
        )

    # ========= 基础工具 =========

    def _tile_box(self, row: int, col: int, scaled: bool = False) -> tuple[int, int, int, int]:
        k = self.scale if scaled else 1
        x = (GUTTER + col * TILE) * k
        y = (TOP + row * TILE) * k
        return x, y, x + TILE * k - 1, y + TILE * k - 1

    def _text_center(self, draw: ImageDraw.ImageDraw, box, text: str, fill: str):
        left, top, right, bottom = draw.textbbox((0, 0), text, font=self.font)
        x = box[0] + (box[2] - box[0] - (right - left)) / 2 - left
        y = box[1] + (box[3] - box[1] - (bottom - top)) / 2 - top
        draw.text((x, y), text, font=self.font, fill=fill)

    @staticmethod
    def _show_as_mine(tile: Tile, state: GameState) -> bool:
        # 失败后画出未标记的雷，不改动雷区本身
        return tile.is_mine and (tile.is_open or (state == GameState.FAILED and tile.is_closed))

    # ========= 具体绘制 =========

    def _draw_tiles(self, bg: IMG, field: Field):
        draw = ImageDraw.Draw(bg)
        for i, row in enumerate(field.tiles):
            for j, t in enumerate(row):
                box = self._tile_box(i, j)
                if t.is_open:
                    fill = "red" if t.is_mine else "gainsboro"
                    draw.rectangle(box, fill=fill, outline="gray")
                else:
                    draw.rectangle(box, fill="silver", outline="gray")
                    draw.line((box[0], box[1], box[2] - 1, box[1]), fill="white")
                    draw.line((box[0], box[1], box[0], box[3] - 1), fill="white")

    def _draw_counts(self, draw: ImageDraw.ImageDraw, field: Field):
        nums = f"{field.remaining_mine_count():03d}"[:3]
        box = tuple(v * self.scale for v in (4, 4, 36, HEADER - 4))
        draw.rectangle(box, fill="black")
        self._text_center(draw, box, nums, "red")

    def _draw_face(self, draw: ImageDraw.ImageDraw, bg: IMG, state: GameState):
        size = (HEADER - 8) * self.scale
        x = (bg.width - size) // 2
        y = 4 * self.scale
        box = (x, y, x + size, y + size)
        draw.rectangle(box, fill="yellow", outline="black")
        self._text_center(draw, box, FACES[state], "black")

    def _draw_labels(self, draw: ImageDraw.ImageDraw, field: Field):
        for j in range(field.column_count):
            box = self._tile_box(0, j, scaled=True)
            box = (box[0], box[1] - TILE * self.scale, box[2], box[1])
            self._text_center(draw, box, str(j), "black")

        for i in range(field.row_count):
            box = self._tile_box(i, 0, scaled=True)
            box = (0, box[1], GUTTER * self.scale, box[3])
            self._text_center(draw, box, row_label(i), "black")

    def _draw_glyphs(self, draw: ImageDraw.ImageDraw, field: Field):
        for i, row in enumerate(field.tiles):
            for j, t in enumerate(row):
                box = self._tile_box(i, j, scaled=True)
                if self._show_as_mine(t, field.state):
                    self._text_center(draw, box, "*", "black")
                elif t.visibility == Visibility.MARKED:
                    self._text_center(draw, box, "M", "red")
                elif t.is_open and t.count:
                    self._text_center(draw, box, str(t.count), NUMBER_COLORS[t.count])
