"""blockdrop: motor de jogo de blocos que caem (estilo Tetris)."""

__version__ = "0.1.0"
