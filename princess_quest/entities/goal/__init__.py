from .goal_entity import Castle, GoalEntity

__all__ = ["Castle", "GoalEntity"]
