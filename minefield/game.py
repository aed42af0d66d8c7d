from dataclasses import dataclass

from .command import Action, format_position, parse_command, row_label
from .errors import MalformedCommandError, OutOfBoundsError
from .field import Field
from .model import MarkResult, OpenResult

OPEN_MESSAGES = {
    OpenResult.OPENED: "",
    OpenResult.DUP: "{pos} is already open or marked",
    OpenResult.WIN: "You won!",
    OpenResult.FAIL: "You failed!",
    OpenResult.OVER: "The game is already over",
}

MARK_MESSAGES = {
    MarkResult.MARKED: "",
    MarkResult.UNMARKED: "",
    MarkResult.OPENED: "{pos} is already open and cannot be marked",
    MarkResult.OVER: "The game is already over",
}


@dataclass
class Outcome:
    message: str
    game_over: bool
    quit: bool = False


class GameSession:
    """
    一局游戏：解析玩家指令并作用到雷区上
    """

    def __init__(self, field: Field):
        self.field = field

    def usage(self) -> str:
        last_row = row_label(self.field.row_count - 1)
        last_col = self.field.column_count - 1
        return (
            "Input: Operation Row Column\n"
            "Operation: O - open, M - mark, Q - quit\n"
            f"Row: A - {last_row}\n"
            f"Column: 0 - {last_col}\n"
            "e.g. OB2 or Open B 2"
        )

    def execute(self, text: str) -> Outcome:
        try:
            cmd = parse_command(text)
        except MalformedCommandError:
            return Outcome(f"Invalid command: {text.strip()!r}", self.field.is_over)

        if cmd.action == Action.QUIT:
            return Outcome("Game ended", self.field.is_over, quit=True)

        pos = format_position(cmd.row, cmd.column)
        try:
            if cmd.action == Action.OPEN:
                template = OPEN_MESSAGES[self.field.open_tile(cmd.row, cmd.column)]
            else:
                template = MARK_MESSAGES[self.field.mark_tile(cmd.row, cmd.column)]
        except OutOfBoundsError:
            return Outcome(f"{pos} is outside the field", self.field.is_over)

        return Outcome(template.format(pos=pos), self.field.is_over)


class GameManager:
    """
    多局游戏管理，按会话隔离
    """

    def __init__(self):
        self.games: dict[str, GameSession] = {}

    def create(self, key: str, session: GameSession) -> GameSession:
        self.games[key] = session
        return session

    def get(self, key: str) -> GameSession | None:
        return self.games.get(key)

    def stop(self, key: str):
        self.games.pop(key, None)

    def is_running(self, key: str) -> bool:
        return key in self.games
