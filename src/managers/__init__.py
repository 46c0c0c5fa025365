"""マネージャーモジュール。"""

from .app_path_resolver import AppPathResolver
from .shell_manager import ShellManager

__all__ = [
    "AppPathResolver",
    "ShellManager",
]
