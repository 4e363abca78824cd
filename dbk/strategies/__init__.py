"""
Estrategias para cada etapa que delega en una herramienta externa
"""
from .base_strategy import BackupStrategy
from .mysql_strategy import MySQLBackupStrategy
from .remote_strategy import (
    KeyRemoteSyncStrategy,
    PasswordRemoteSyncStrategy,
    RemoteSyncStrategy,
)
from .rsync_strategy import RsyncFileStrategy
from .tar_strategy import TarArchiveStrategy

__all__ = [
    'BackupStrategy',
    'MySQLBackupStrategy',
    'RsyncFileStrategy',
    'TarArchiveStrategy',
    'RemoteSyncStrategy',
    'KeyRemoteSyncStrategy',
    'PasswordRemoteSyncStrategy'
]
