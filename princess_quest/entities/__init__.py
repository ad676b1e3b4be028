from .entity_types import CharacterVariant, EnemyVariant
from .entity_state import Facing
from .base_entity import BaseEntity
