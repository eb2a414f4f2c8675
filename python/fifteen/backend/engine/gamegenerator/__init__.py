from fifteen.backend.engine.gamegenerator.generator import (
    SHUFFLE_STEPS,
    GameGenerator,
    RandomSource,
)

__all__ = ["SHUFFLE_STEPS", "GameGenerator", "RandomSource"]
