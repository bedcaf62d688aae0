from __future__ import annotations

import arcade
from arcade.gui import UIFlatButton, UIManager

from blockdrop.core.config import Settings
from blockdrop.core.pieces import PIECE_COLORS
from blockdrop.session import CONTROL_BUTTONS, Command, GameSession


# ---------- helpers da estilização 8-bit ----------

def _clamp(x: int) -> int:
    return max(0, min(255, x))


def _shade(rgb: tuple, factor: float) -> tuple:
    r, g, b, *a = rgb
    alpha = a[0] if a else 255
    return (
        _clamp(int(r * factor)),
        _clamp(int(g * factor)),
        _clamp(int(b * factor)),
        alpha,
    )


def _mix(rgb: tuple, other: tuple, t: float) -> tuple:
    r, g, b, *a = rgb
    r2, g2, b2, *_ = other
    alpha = a[0] if a else 255
    return (
        _clamp(int(r + (r2 - r) * t)),
        _clamp(int(g + (g2 - g) * t)),
        _clamp(int(b + (b2 - b) * t)),
        alpha,
    )


def draw_block_8bit(left: float, bottom: float, size: float, base: tuple):
    u = max(1.0, size / 8.0)
    border_col = _shade(base, 0.55)
    light_col = _mix(base, (255, 255, 255, 255), 0.35)
    dark_col = _shade(base, 0.75)

    arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, border_col)
    arcade.draw_lbwh_rectangle_filled(left + u, bottom + u, size - 2 * u, size - 2 * u, base)
    arcade.draw_lbwh_rectangle_filled(left + u, bottom + size - 2 * u, size - 3 * u, u, light_col)
    arcade.draw_lbwh_rectangle_filled(left + u, bottom + u, u, size - 3 * u, light_col)
    arcade.draw_lbwh_rectangle_filled(left + 2 * u, bottom + u, size - 3 * u, u, dark_col)
    arcade.draw_lbwh_rectangle_filled(left + size - 2 * u, bottom + 2 * u, u, size - 3 * u, dark_col)


# ---------- paleta retrô ----------

RETRO_BG = (12, 32, 28, 255)
RETRO_PANEL = (20, 50, 46, 255)
RETRO_PANEL_DARK = (8, 24, 20, 255)
RETRO_ACCENT = (110, 255, 140, 255)
RETRO_TEXT = (200, 255, 210, 255)
RETRO_GRID = (40, 40, 40, 255)
DEFAULT_BLOCK = (120, 140, 250)

RETRO_BUTTON_STYLE = {
    "normal": UIFlatButton.UIStyle(
        font_size=10, font_color=(220, 235, 245, 255), bg=(22, 40, 60, 255),
        border=RETRO_ACCENT, border_width=2,
    ),
    "hover": UIFlatButton.UIStyle(
        font_size=10, font_color=(255, 255, 255, 255), bg=(38, 70, 90, 255),
        border=RETRO_ACCENT, border_width=2,
    ),
    "press": UIFlatButton.UIStyle(
        font_size=9, font_color=(210, 225, 235, 255), bg=(10, 20, 30, 255),
        border=RETRO_ACCENT, border_width=2,
    ),
    "disabled": UIFlatButton.UIStyle(
        font_size=10, font_color=(120, 120, 120, 255), bg=(30, 30, 30, 255),
        border=(60, 60, 60, 255), border_width=2,
    ),
}

KEY_COMMANDS = {
    arcade.key.LEFT: Command.MOVE_LEFT,
    arcade.key.RIGHT: Command.MOVE_RIGHT,
    arcade.key.DOWN: Command.SOFT_DROP,
    arcade.key.UP: Command.ROTATE,
    arcade.key.X: Command.ROTATE,
    arcade.key.W: Command.ROTATE,
}


class PlayfieldView(arcade.View):
    """
    Tabuleiro do jogo. Só lê snapshots da sessão e traduz teclas e botões em comandos.
    """

    def __init__(self, settings: Settings):
        super().__init__()
        self.settings = settings
        self.session = GameSession(settings)
        self.cell = settings.cell_size
        self.ui = UIManager()

        width, height = settings.window_width, settings.window_height
        left = settings.cols * self.cell + 10
        top = height - 20
        self.txt_title = arcade.Text("BLOCKDROP", left, top, RETRO_ACCENT, 16, anchor_x="left", anchor_y="top")

        base_y = 120
        self.txt_controls = [
            arcade.Text("Controles:", left, base_y + 60, RETRO_TEXT, 12, anchor_y="baseline"),
            arcade.Text("← → mover", left, base_y + 40, RETRO_TEXT, 12, anchor_y="baseline"),
            arcade.Text("↑ rotacionar", left, base_y + 24, RETRO_TEXT, 12, anchor_y="baseline"),
            arcade.Text("↓ descer", left, base_y + 8, RETRO_TEXT, 12, anchor_y="baseline"),
            arcade.Text("R: nova partida  |  ESC: sair", left, base_y - 24, RETRO_TEXT, 11, anchor_y="baseline"),
        ]
        self.txt_game_over = arcade.Text(
            "GAME OVER: pressione R para jogar de novo",
            width / 2,
            height / 2,
            RETRO_TEXT,
            14,
            anchor_x="center",
            anchor_y="center",
        )

    def on_show_view(self):
        arcade.set_background_color(RETRO_BG)
        self.window.set_size(self.settings.window_width, self.settings.window_height)
        self.ui.enable()
        self.ui.clear()
        self._build_buttons()

    def _build_buttons(self):
        # grade 2x2 no meio da barra lateral
        panel_left = self.settings.cols * self.cell
        panel_w = self.settings.window_width - panel_left
        btn_w = (panel_w - 30) / 2
        btn_h = 36
        center_y = self.settings.window_height / 2

        for i, (label, command) in enumerate(CONTROL_BUTTONS):
            col, row = i % 2, i // 2
            button = UIFlatButton(
                x=panel_left + 10 + col * (btn_w + 10),
                y=center_y - row * (btn_h + 8),
                width=btn_w,
                height=btn_h,
                text=label,
                style=RETRO_BUTTON_STYLE,
            )

            @button.event("on_click")
            def _on_click(_, command=command):
                self.session.dispatch(command)

            self.ui.add(button)

    def on_hide_view(self):
        self.ui.disable()
        self.session.close()

    def on_draw(self):
        self.clear()
        snapshot = self.session.snapshot()
        self._draw_playfield(snapshot)
        self._draw_sidebar()
        self.ui.draw()

        if snapshot.game_over:
            arcade.draw_lbwh_rectangle_filled(
                0, 0, self.settings.window_width, self.settings.window_height, (0, 0, 0, 160)
            )
            self.txt_game_over.draw()

    def _draw_playfield(self, snapshot):
        cell = self.cell
        pf_w = snapshot.cols * cell
        pf_h = snapshot.rows * cell
        arcade.draw_lbwh_rectangle_filled(0, 0, pf_w, pf_h, RETRO_PANEL_DARK)

        for r in range(snapshot.rows + 1):
            arcade.draw_line(0, r * cell, pf_w, r * cell, RETRO_GRID)
        for c in range(snapshot.cols + 1):
            arcade.draw_line(c * cell, 0, c * cell, pf_h, RETRO_GRID)

        # linha 0 do tabuleiro fica no topo da janela
        for r in range(snapshot.rows):
            for c in range(snapshot.cols):
                val = snapshot.cell(r, c)
                if val:
                    color = PIECE_COLORS.get(val, DEFAULT_BLOCK)
                    draw_block_8bit(c * cell, (snapshot.rows - 1 - r) * cell, cell, color)

    def _draw_sidebar(self):
        left = self.settings.cols * self.cell
        height = self.settings.window_height
        arcade.draw_lbwh_rectangle_filled(left, 0, self.settings.window_width - left, height, RETRO_PANEL)
        arcade.draw_lbwh_rectangle_outline(left, 0, self.settings.window_width - left, height, RETRO_ACCENT, 2)
        self.txt_title.draw()
        for t in self.txt_controls:
            t.draw()

    def on_update(self, delta_time: float):
        self.session.update(delta_time)

    def on_key_press(self, key, modifiers):
        if key == arcade.key.ESCAPE:
            self.session.close()
            self.window.close()
            return

        if self.session.game_over:
            if key == arcade.key.R:
                self.session.restart()
            return

        command = KEY_COMMANDS.get(key)
        if command is not None:
            self.session.dispatch(command)
