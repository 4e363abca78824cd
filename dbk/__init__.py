"""
Sistema de backup de MySQL y archivos con envío remoto por rsync
"""
__version__ = "1.0.0"

from .config import Config
from .logger import LoggerService

__all__ = ['Config', 'LoggerService']
