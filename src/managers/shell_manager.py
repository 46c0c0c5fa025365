"""ターミナルアプリ（シェル）管理マネージャー。

インストール済みのターミナルアプリを検出し、指定ディレクトリで起動する。
"""

import asyncio
import logging
from typing import TYPE_CHECKING

from src.managers.app_path_resolver import AppPathResolver
from src.models.shell import Shell, get_bundle_identifier

if TYPE_CHECKING:
    from src.config.settings import Settings

logger = logging.getLogger(__name__)


class ShellManager:
    """サポート対象ターミナルアプリの検出と起動を行うマネージャー。"""

    def __init__(
        self,
        settings: "Settings",
        resolver: AppPathResolver | None = None,
    ) -> None:
        """ShellManager を初期化する。

        Args:
            settings: アプリケーション設定
            resolver: アプリパス解決器（None で設定から生成）
        """
        self.settings = settings
        self.resolver = resolver or AppPathResolver(settings.osascript_command)

    async def is_installed(self, shell: Shell) -> bool:
        """指定のシェルがインストールされているか確認する。

        検索に失敗した場合は例外を送出せず False を返す。

        Args:
            shell: 確認するシェル

        Returns:
            空でないインストールパスが得られた場合 True
        """
        bundle_id = get_bundle_identifier(shell)
        try:
            result = await self.resolver.lookup(bundle_id)
        except Exception as e:
            logger.debug(f"'{shell.value}' ({bundle_id}) の検索に失敗: {e}")
            return False

        if result.found:
            logger.debug(f"'{shell.value}' を検出しました: {result.path}")
        else:
            logger.debug(f"'{shell.value}' は見つかりませんでした: {result.error}")
        return result.found

    async def get_available_shells(self) -> list[Shell]:
        """インストール済みのシェル一覧を取得する。

        全シェルを並行して確認し、Shell の宣言順で返す。

        Returns:
            インストール済みシェルのリスト
        """
        shells = list(Shell)
        installed = await asyncio.gather(*(self.is_installed(shell) for shell in shells))
        return [shell for shell, ok in zip(shells, installed) if ok]

    async def launch(self, shell: Shell, path: str) -> None:
        """シェルを起動して指定パスを開く。

        起動したプロセスの終了は待たない。

        Args:
            shell: 起動するシェル
            path: 開くディレクトリのパス
        """
        bundle_id = get_bundle_identifier(shell)
        logger.info(f"{shell.value} で {path} を開きます")
        await asyncio.create_subprocess_exec(
            self.settings.open_command,
            "-b",
            bundle_id,
            path,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
