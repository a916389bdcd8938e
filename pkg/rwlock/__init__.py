from .interface import IRWLock
from .rwlock import RWLock

__all__ = ["IRWLock", "RWLock"]
