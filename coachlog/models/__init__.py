from .tenant import Trainer, Customer
from .workout import Workout
from .exercise import Exercise
from .personal_best import ExercisePB

__all__ = ["Trainer", "Customer", "Workout", "Exercise", "ExercisePB"]
