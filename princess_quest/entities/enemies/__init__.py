from .enemy import Enemy

__all__ = ["Enemy"]
