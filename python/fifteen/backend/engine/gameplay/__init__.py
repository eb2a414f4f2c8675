from fifteen.backend.engine.gameplay.game import GamePlay, MoveResult, PuzzleEngine

__all__ = ["GamePlay", "MoveResult", "PuzzleEngine"]
