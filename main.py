from pathlib import Path

from astrbot.api import logger
from astrbot.api.event import filter
from astrbot.api.star import Context, Star
from astrbot.core import AstrBotConfig
from astrbot.core.message.components import Image, Plain
from astrbot.core.platform import AstrMessageEvent

from .minefield.command import COMMAND_RE
from .minefield.config import DEFAULT_LEVELS, parse_levels
from .minefield.field import Field
from .minefield.game import GameManager, GameSession
from .minefield.model import GameSpec
from .minefield.renderer import FieldRenderer


class MinefieldPlugin(Star):
    def __init__(self, context: Context, config: AstrBotConfig):
        super().__init__(context)
        self.config = config

        self.level_preset: dict[str, GameSpec] = parse_levels(
            config.get("difficulty_level") or DEFAULT_LEVELS
        )
        self.level_keys = list(self.level_preset.keys())
        if len(self.level_keys) == 0:
            raise ValueError("no difficulty level configured")
        self.default_preset = self.level_preset[self.level_keys[0]]

        font_path = Path(__file__).parent / "font.ttf"
        self.renderer = FieldRenderer(
            scale=config.get("render_scale", 4),
            font_path=str(font_path) if font_path.exists() else None,
        )

        self.game_mgr = GameManager()

    async def initialize(self):
        """插件加载时"""
        logger.info(f"[minefield] plugin loaded, levels: {self.level_keys}")

    async def terminate(self):
        """插件卸载时"""
        self.game_mgr.games.clear()
        logger.info("[minefield] plugin unloaded")

    def _board(self, session: GameSession, text: str = "") -> list:
        chain = [Plain(text)] if text else []
        chain.append(Image.fromBytes(self.renderer.render(session.field)))
        return chain

    @filter.command("minesweeper", alias={"mines"})
    async def start_minesweeper(self, event: AstrMessageEvent, level: str = ""):
        sid = event.session_id

        if self.game_mgr.is_running(sid):
            yield event.plain_result("A game is already running here, send 'Quit' to end it")
            return

        spec = self.level_preset.get(level) if level else self.default_preset
        if spec is None:
            yield event.plain_result(f"Difficulty must be one of: {self.level_keys}")
            return

        session = self.game_mgr.create(sid, GameSession(Field(spec.rows, spec.cols, spec.mines)))
        logger.info(f"[minefield] {sid} started {spec.rows}x{spec.cols} with {spec.mines} mines")

        yield event.chain_result(self._board(session, f"Minesweeper started!\n{session.usage()}"))

    @filter.regex(r"(?i)^\s*board\s*$")
    async def show_minesweeper(self, event: AstrMessageEvent):
        session = self.game_mgr.get(event.session_id)
        if not session:
            return

        remaining = session.field.remaining_mine_count()
        yield event.chain_result(self._board(session, f"Remaining mines: {remaining}"))

    @filter.regex("(?i)" + COMMAND_RE.pattern)
    async def play_minesweeper(self, event: AstrMessageEvent):
        sid = event.session_id
        session = self.game_mgr.get(sid)
        if not session:
            return

        outcome = session.execute(event.message_str)

        if outcome.quit:
            self.game_mgr.stop(sid)
            logger.info(f"[minefield] {sid} quit")
            yield event.plain_result(outcome.message)
            return

        if outcome.game_over:
            self.game_mgr.stop(sid)
            logger.info(f"[minefield] {sid} finished: {session.field.state.name}")

        yield event.chain_result(self._board(session, outcome.message))
