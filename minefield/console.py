"""
Console Minesweeper

Run ``minefield`` to pick a difficulty and play in the terminal.
"""

from collections.abc import Callable

from .config import DEFAULT_LEVELS, parse_levels, validate_spec
from .errors import InvalidDimensionsError
from .field import Field
from .game import GameSession
from .model import GameSpec, GameState
from .text import render_text


class ConsoleUI:
    """
    Console loop: print the board, read one command, apply it
    """

    def __init__(
        self,
        field: Field,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.session = GameSession(field)
        self.input_fn = input_fn
        self.output = output

    @property
    def field(self) -> Field:
        return self.session.field

    def update(self):
        self.output(render_text(self.field))
        self.output(f"Remaining mines: {self.field.remaining_mine_count()}\n")

    def run(self) -> GameState:
        self.update()
        while not self.field.is_over:
            self.output(self.session.usage())
            try:
                line = self.input_fn("> ")
            except EOFError:
                break

            outcome = self.session.execute(line)
            if outcome.quit:
                self.output(outcome.message)
                break

            self.update()
            if outcome.message and not outcome.game_over:
                self.output(outcome.message)

        if self.field.state == GameState.SOLVED:
            self.output("YOU WON!")
        elif self.field.state == GameState.FAILED:
            self.output("YOU FAILED!")
        return self.field.state


def choose_spec(
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> GameSpec | None:
    levels = parse_levels(DEFAULT_LEVELS)
    names = list(levels)

    output("Difficulty:")
    for i, name in enumerate(names, start=1):
        spec = levels[name]
        output(f"  {i}. {name} ({spec.rows}x{spec.cols}, {spec.mines} mines)")
    output(f"  {len(names) + 1}. custom")

    choice = input_fn(f"Choose difficulty (1-{len(names) + 1}): ").strip()

    if choice.isdigit() and 1 <= int(choice) <= len(names):
        return levels[names[int(choice) - 1]]

    if choice == str(len(names) + 1):
        try:
            spec = GameSpec(
                int(input_fn("Rows: ").strip()),
                int(input_fn("Columns: ").strip()),
                int(input_fn("Mines: ").strip()),
            )
            return validate_spec(spec)
        except InvalidDimensionsError as e:
            output(f"Invalid input: {e}")
            return None
        except ValueError:
            output("Invalid input")
            return None

    output(f"Invalid choice, using {names[0]}")
    return levels[names[0]]


def main():
    print("=" * 50)
    print("Minesweeper")
    print("=" * 50)
    print()

    try:
        spec = choose_spec()
        if spec is None:
            return

        print()
        field = Field(spec.rows, spec.cols, spec.mines)
        ConsoleUI(field).run()
    except (KeyboardInterrupt, EOFError):
        print("\nGame exited")


if __name__ == "__main__":
    main()
