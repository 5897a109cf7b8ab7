from . import errors, logger
from .config import settings

__all__ = ['errors', 'logger', 'settings']
