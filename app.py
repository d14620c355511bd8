"""Modern Gomoku: Gradio web app entry point."""

import logging
import os

import gradio as gr

from moderngomoku.ui.board_component import BOARD_CLICK_JS
from moderngomoku.ui.play_tab import build_play_tab

logging.basicConfig(
    level=os.environ.get("MODERNGOMOKU_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

with gr.Blocks(title="Modern Gomoku") as demo:
    gr.Markdown("# Modern Gomoku")
    gr.Markdown("Human vs computer — 15x15 board, 5 in a row to win.")

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
