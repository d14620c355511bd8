"""Play tab: Human vs AI with interactive SVG board."""

from __future__ import annotations

import logging
import random as _random
import time as _time
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from moderngomoku.agent.minimax_agent import MinimaxAgent
from moderngomoku.game.board import format_point, parse_coordinate
from moderngomoku.game.state import GomokuGameState
from moderngomoku.game.types import Player
from moderngomoku.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: GomokuGameState = field(default_factory=GomokuGameState)
    human_player: Player = field(default=Player.BLACK)
    agent: MinimaxAgent = field(default_factory=lambda: MinimaxAgent(computer=Player.WHITE))
    _turn_start: float = field(default_factory=_time.time)

    def reset(self, human_player: Optional[Player] = None) -> None:
        self.game = GomokuGameState()
        self._turn_start = _time.time()
        if human_player is not None:
            self.human_player = human_player
        if self.agent.computer is not self.human_player.other:
            self.agent = MinimaxAgent(computer=self.human_player.other)

    def mark_turn_start(self) -> None:
        """Record the moment the current player's clock starts."""
        self._turn_start = _time.time()

    def elapsed_since_turn_start(self) -> float:
        return _time.time() - self._turn_start

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        if g.winner is not None:
            if g.winner == self.human_player:
                return "You win!"
            return "AI wins!"
        return "Draw!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_over:
            if g.winner is not None:
                who = "You win!" if g.winner == self.human_player else "AI wins!"
                return f"Game over — {who} ({g.winner} by 5-in-a-row)"
            return "Game over — Draw!"
        if g.current_player == self.human_player:
            return f"Your turn ({g.current_player})"
        return f"AI is thinking... ({g.current_player})"

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, move in enumerate(self.game.moves):
            t = f"{move.elapsed:.2f}" if move.elapsed is not None else "—"
            rows.append([str(i + 1), str(move.player), format_point(move.point), t])
        return rows


def _make_board_html(session: GameSession) -> str:
    clickable = (
        not session.game.is_over
        and session.game.current_player == session.human_player
    )
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _log_result(session: GameSession) -> None:
    if session.game.is_over:
        logger.info("Game over after %d moves: %s", len(session.game.moves), session.game_over_banner)


def _ai_move(session: GameSession) -> None:
    """Let the AI play if it is its turn and the game is still running."""
    g = session.game
    if g.is_over or g.current_player == session.human_player:
        return
    t0 = _time.time()
    ai_move = session.agent.select_move(g)
    if ai_move is None:
        # Only a full board leaves no move, and a full board already ended the game
        return
    g.apply_move(ai_move, elapsed=_time.time() - t0)
    session.mark_turn_start()  # human's clock starts now
    _log_result(session)


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.move_history_table,
        session,
    )


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.game.is_over:
        return _outputs(session) + ("",)

    if session.game.current_player != session.human_player:
        return _outputs(session, "Wait — it's the AI's turn.") + ("",)

    point = parse_coordinate(coord_text)
    if point is None:
        return _outputs(session, f"Invalid coordinate: '{coord_text}'. Use format like H8.") + ("",)

    if not session.game.board.is_empty(point):
        return _outputs(session, f"{format_point(point)} is already occupied.") + ("",)

    session.game.apply_move(point, elapsed=session.elapsed_since_turn_start())
    _log_result(session)

    _ai_move(session)

    return _outputs(session) + ("",)


def _new_game_with_color(color_choice: str, session: GameSession):
    """Start a new game. color_choice is 'Black', 'White', or 'Random'."""
    if color_choice == "Random":
        human = _random.choice([Player.BLACK, Player.WHITE])
    elif color_choice == "White":
        human = Player.WHITE
    else:
        human = Player.BLACK

    session.reset(human_player=human)
    logger.info("New game, human plays %s", human)

    # Black moves first, so the AI opens when the human is White
    _ai_move(session)
    session.mark_turn_start()

    return _outputs(session) + (f"You are {human}.",)


def _undo_move(session: GameSession):
    """Undo the last move pair (AI + human)."""
    if not session.game.moves:
        return _outputs(session, "Nothing to undo.")

    # If the last move was AI's, undo both AI and human
    last = session.game.moves[-1]
    if last.player != session.human_player:
        session.game.undo_move()  # undo AI
    if session.game.moves:
        session.game.undo_move()  # undo human

    # Undoing the human's first move as White hands the turn back to the AI
    _ai_move(session)
    session.mark_turn_start()
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        # Left: board
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(GomokuGameState()),
                label="Board",
            )
        # Right: controls
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="Your turn (Black)",
                label="Status",
                interactive=False,
                lines=2,
            )
            color_info = gr.Textbox(
                value="You are Black.",
                label="Color",
                interactive=False,
                lines=1,
            )

            gr.Markdown(
                "### Game Rules\n"
                "- Place stones on intersections\n"
                "- Black moves first\n"
                "- Connect 5 stones in a row (horizontally, vertically, or diagonally)\n"
                "- First to connect 5 wins!"
            )

            gr.Markdown("### New Game")
            color_choice = gr.Radio(
                choices=["Random", "Black", "White"],
                value="Black",
                label="Play as",
            )
            new_game_btn = gr.Button("New Game", variant="primary")
            undo_btn = gr.Button("Undo")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Coordinate (e.g. H8)",
                placeholder="H8",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button(
                "Submit Move",
                elem_id="coord-submit",
            )

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move", "Time (s)"],
                datatype=["number", "str", "str", "str"],
                interactive=False,
                column_count=4,
            )

    # Outputs shared by most callbacks
    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )

    new_game_btn.click(
        fn=_new_game_with_color,
        inputs=[color_choice, session_state],
        outputs=board_outputs + [color_info],
    )

    undo_btn.click(
        fn=_undo_move,
        inputs=[session_state],
        outputs=board_outputs,
    )
