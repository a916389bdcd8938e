from .new import New
from .usecase import VexUseCase

__all__ = ["New", "VexUseCase"]
