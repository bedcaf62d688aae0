from dataclasses import replace

import pytest

from blockdrop.core.config import Settings
from blockdrop.core.factory import SequenceShapeSource
from blockdrop.models.game import GameEngine


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def make_engine(settings):
    """Motor com sequência fixa de peças, ex.: make_engine("O", "I", game_over_probe="next")."""
    def _make(*kinds, **overrides):
        return GameEngine(replace(settings, **overrides), SequenceShapeSource(kinds or ("O",)))
    return _make
