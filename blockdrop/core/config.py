# blockdrop/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from . import constants

load_dotenv()

PROBE_MODES = ("fresh", "next")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    rows: int = constants.ROWS
    cols: int = constants.COLS
    tick_ms: int = constants.TICK_INTERVAL_MS
    seed: int | None = None
    game_over_probe: str = constants.GAME_OVER_PROBE
    cell_size: int = constants.CELL_SIZE
    log_level: str = constants.LOG_LEVEL

    @property
    def window_width(self) -> int:
        return self.cols * self.cell_size + constants.SIDEBAR_WIDTH

    @property
    def window_height(self) -> int:
        return self.rows * self.cell_size


def _get_int(env: Mapping[str, str], name: str, default: int | None, minimum: int | None = None) -> int | None:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} precisa ser um inteiro, recebido {raw!r}") from None
    if minimum is not None and value < minimum:
        raise RuntimeError(f"{name} precisa ser >= {minimum}, recebido {value}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Lê a configuração das variáveis de ambiente (e do .env, se existir).
    Valores inválidos geram RuntimeError com o nome da variável.
    """
    env = os.environ if environ is None else environ

    probe = env.get("BLOCKDROP_GAME_OVER_PROBE", constants.GAME_OVER_PROBE).strip().lower()
    if probe not in PROBE_MODES:
        raise RuntimeError(
            f"BLOCKDROP_GAME_OVER_PROBE precisa ser um de {PROBE_MODES}, recebido {probe!r}"
        )

    log_level = env.get("BLOCKDROP_LOG_LEVEL", constants.LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise RuntimeError(
            f"BLOCKDROP_LOG_LEVEL precisa ser um de {LOG_LEVELS}, recebido {log_level!r}"
        )

    return Settings(
        rows=_get_int(env, "BLOCKDROP_ROWS", constants.ROWS, constants.MIN_BOARD_SIDE),
        cols=_get_int(env, "BLOCKDROP_COLS", constants.COLS, constants.MIN_BOARD_SIDE),
        tick_ms=_get_int(env, "BLOCKDROP_TICK_MS", constants.TICK_INTERVAL_MS, 1),
        seed=_get_int(env, "BLOCKDROP_SEED", None),
        game_over_probe=probe,
        cell_size=_get_int(env, "BLOCKDROP_CELL_SIZE", constants.CELL_SIZE, 4),
        log_level=log_level,
    )
