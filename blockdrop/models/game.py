# blockdrop/models/game.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from blockdrop.core.collision import is_valid_move
from blockdrop.core.config import Settings
from blockdrop.core.factory import RandomShapeSource, ShapeSource
from blockdrop.models.board import Board, Position, create_empty, merge
from blockdrop.models.piece import ActivePiece

logger = logging.getLogger(__name__)


class Status(str, Enum):
    RUNNING = "RUNNING"
    GAME_OVER = "GAME_OVER"


class GameOverProbe(str, Enum):
    """Qual peça é testada na posição de spawn depois de travar uma peça."""
    FRESH = "fresh"  # peça recém sorteada, como no jogo de referência
    NEXT = "next"    # a própria peça que vai cair


@dataclass
class GameState:
    board: Board
    piece: ActivePiece
    status: Status = Status.RUNNING

    @property
    def game_over(self) -> bool:
        return self.status is Status.GAME_OVER


class GameEngine:
    """
    Regras do jogo. Não guarda estado de partida: cada operação recebe o
    GameState da sessão e o altera no lugar. Retorna True se algo mudou.
    """

    def __init__(self, settings: Settings | None = None, shape_source: ShapeSource | None = None):
        self.settings = settings or Settings()
        self.rows = self.settings.rows
        self.cols = self.settings.cols
        self.probe = GameOverProbe(self.settings.game_over_probe)
        self.next_shape: ShapeSource = shape_source or RandomShapeSource(self.settings.seed)

    @property
    def spawn_position(self) -> Position:
        return Position(0, self.cols // 2 - 1)

    def new_game(self) -> GameState:
        board = create_empty(self.rows, self.cols)
        piece = ActivePiece(self.next_shape(), self.spawn_position)
        state = GameState(board, piece)
        if not is_valid_move(board, piece.shape, piece.position):
            logger.info("peça inicial %s não cabe no tabuleiro %dx%d", piece.shape.kind, self.rows, self.cols)
            state.status = Status.GAME_OVER
        return state

    # ----- Entradas do jogador -----
    def move_lateral(self, state: GameState, direction: int) -> bool:
        if direction not in (-1, 1):
            raise ValueError(f"direção lateral inválida: {direction}")
        if state.game_over:
            return False
        return self._try_commit(state, state.piece.moved(0, direction))

    def move_left(self, state: GameState) -> bool:
        return self.move_lateral(state, -1)

    def move_right(self, state: GameState) -> bool:
        return self.move_lateral(state, 1)

    def rotate(self, state: GameState) -> bool:
        # sem wall kick: se não couber, fica como estava
        if state.game_over:
            return False
        return self._try_commit(state, state.piece.peek_rotate())

    def soft_drop(self, state: GameState) -> bool:
        if state.game_over:
            return False
        if self._try_commit(state, state.piece.moved(1, 0)):
            return True
        self._lock_piece(state)
        return True

    # o passo da gravidade é o mesmo que a descida manual
    tick = soft_drop

    # ----- Leitura -----
    def display_board(self, state: GameState) -> Board:
        piece = state.piece
        if not is_valid_move(state.board, piece.shape, piece.position):
            return state.board
        return merge(state.board, piece.shape, piece.position)

    # ----- Travamento / spawn -----
    def _try_commit(self, state: GameState, candidate: ActivePiece) -> bool:
        if not is_valid_move(state.board, candidate.shape, candidate.position):
            return False
        state.piece = candidate
        return True

    def _lock_piece(self, state: GameState) -> None:
        locked = state.piece
        state.board = merge(state.board, locked.shape, locked.position)
        logger.debug("peça %s travada em %s", locked.shape.kind, locked.position)
        self._spawn_next(state)

    def _spawn_next(self, state: GameState) -> None:
        spawn = self.spawn_position
        state.piece = ActivePiece(self.next_shape(), spawn)
        logger.debug("spawn de %s em %s", state.piece.shape.kind, spawn)

        if self.probe is GameOverProbe.FRESH:
            probe = self.next_shape()
        else:
            probe = state.piece.shape

        # a peça atribuída também precisa caber, senão ficaria sobreposta ao tabuleiro
        for shape in (state.piece.shape, probe):
            if not is_valid_move(state.board, shape, spawn):
                state.status = Status.GAME_OVER
                logger.info("game over: %s não cabe na posição de spawn %s", shape.kind, spawn)
                return
