"""アプリケーションコンテキストの定義。"""

from dataclasses import dataclass

from src.config.settings import Settings
from src.managers.shell_manager import ShellManager


@dataclass
class AppContext:
    """アプリケーションコンテキスト。"""

    settings: Settings
    shells: ShellManager
