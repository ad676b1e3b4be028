from .collectible import Collectible

__all__ = ["Collectible"]
