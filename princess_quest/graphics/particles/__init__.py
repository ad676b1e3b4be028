from .particle_manager import Particle, ParticleSystem, ScorePopup

__all__ = ["Particle", "ParticleSystem", "ScorePopup"]
