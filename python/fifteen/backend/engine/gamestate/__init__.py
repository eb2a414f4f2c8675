from fifteen.backend.engine.gamestate.state import GameSession, Phase

__all__ = ["GameSession", "Phase"]
