from .command import row_label
from .field import Field


def render_text(field: Field) -> str:
    """
    文本雷盘：首行为列号，每行以行字母开头
    """
    width = 4 if field.column_count >= 11 else 3

    def cell(value) -> str:
        return f"{value:>{width}}"

    lines = ["".join([cell("")] + [cell(c) for c in range(field.column_count)])]
    for r, row in enumerate(field.tiles):
        lines.append("".join([cell(row_label(r))] + [cell(t.glyph()) for t in row]))

    return "\n".join(lines) + "\n"
