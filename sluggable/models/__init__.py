__all__ = ["SluggableModel", "SoftDeleteModel"]

from .sluggable import *
from .trashed import *
