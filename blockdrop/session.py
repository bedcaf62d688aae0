# blockdrop/session.py
from __future__ import annotations

import logging
from collections import deque
from enum import Enum

from blockdrop.core.config import Settings
from blockdrop.core.factory import RandomShapeSource, ShapeSource
from blockdrop.models.game import GameEngine, GameState
from blockdrop.snapshot import Snapshot, take_snapshot

logger = logging.getLogger(__name__)


class Command(str, Enum):
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"
    SOFT_DROP = "SOFT_DROP"
    ROTATE = "ROTATE"
    TICK = "TICK"


# botões de tela, na ordem do jogo original
CONTROL_BUTTONS = (
    ("ESQUERDA", Command.MOVE_LEFT),
    ("DIREITA", Command.MOVE_RIGHT),
    ("DESCER", Command.SOFT_DROP),
    ("GIRAR", Command.ROTATE),
)


class GravityTimer:
    """
    Acumula o delta_time dos frames (em segundos) e diz quantos ticks de
    gravidade venceram. Depois de cancel() não dispara mais.
    """

    def __init__(self, interval_ms: int):
        if interval_ms <= 0:
            raise ValueError("o intervalo da gravidade precisa ser positivo")
        self.interval = interval_ms / 1000.0
        self._acc = 0.0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self._acc = 0.0

    def advance(self, delta_time: float) -> int:
        if self._cancelled:
            return 0
        self._acc += delta_time
        due = 0
        while self._acc >= self.interval:
            self._acc -= self.interval
            due += 1
        return due


class GameSession:
    """
    Uma partida: o único dono do GameState. Timer e teclado só enfileiram
    comandos; process() os aplica em ordem, um de cada vez.
    """

    def __init__(self, settings: Settings | None = None, shape_source: ShapeSource | None = None):
        self.settings = settings or Settings()
        self._shape_source = shape_source
        self.queue: deque[Command] = deque()
        self._start(self.settings.seed)

    def _start(self, seed: int | None) -> None:
        source = self._shape_source or RandomShapeSource(seed)
        self.engine = GameEngine(self.settings, source)
        self.state: GameState = self.engine.new_game()
        self.timer = GravityTimer(self.settings.tick_ms)
        self.queue.clear()
        self.closed = False
        logger.info("nova partida %dx%d (seed=%s)", self.engine.rows, self.engine.cols, seed)
        if self.state.game_over:
            self.timer.cancel()

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def submit(self, command: Command) -> None:
        if self.closed or self.state.game_over:
            return
        self.queue.append(Command(command))

    def dispatch(self, command: Command) -> int:
        """Enfileira um comando do jogador e já processa a fila."""
        self.submit(command)
        return self.process()

    def update(self, delta_time: float) -> None:
        for _ in range(self.timer.advance(delta_time)):
            self.submit(Command.TICK)
        self.process()

    def process(self) -> int:
        """Aplica os comandos pendentes na ordem de chegada; devolve quantos mudaram o estado."""
        changed = 0
        while self.queue:
            command = self.queue.popleft()
            if self._apply(command):
                changed += 1
            if self.state.game_over:
                self.queue.clear()
                self.timer.cancel()
                logger.info("partida encerrada (game over)")
        return changed

    def _apply(self, command: Command) -> bool:
        if command is Command.MOVE_LEFT:
            return self.engine.move_lateral(self.state, -1)
        if command is Command.MOVE_RIGHT:
            return self.engine.move_lateral(self.state, 1)
        if command is Command.ROTATE:
            return self.engine.rotate(self.state)
        if command is Command.SOFT_DROP:
            return self.engine.soft_drop(self.state)
        return self.engine.tick(self.state)

    def snapshot(self) -> Snapshot:
        return take_snapshot(self.engine, self.state)

    def restart(self, seed: int | None = None) -> None:
        """
        Nova partida. Com seed, as peças passam a vir de um RandomShapeSource
        com essa seed, mesmo que a sessão tenha sido criada com outra fonte.
        """
        if seed is not None:
            self._shape_source = None
        self._start(seed if seed is not None else self.settings.seed)

    def close(self) -> None:
        self.timer.cancel()
        self.queue.clear()
        self.closed = True
        logger.info("sessão fechada")
