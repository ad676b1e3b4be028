from .level_generator import GeneratorConfig, LevelGenerator, LevelLayout

__all__ = ["GeneratorConfig", "LevelGenerator", "LevelLayout"]
