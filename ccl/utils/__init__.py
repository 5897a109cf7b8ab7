from . import process, store, terminal
from .sensitive import is_sensitive_key, mask

__all__ = ['is_sensitive_key', 'mask', 'process', 'store', 'terminal']
