from .province import Province
from .gym import Gym, GymImage
from .trainer import Trainer
from .training_class import TrainingClass
from .tag import Tag
from .admin_user import AdminUser, ADMIN_ROLES
from .associations import gym_tags, trainer_tags, trainer_classes
