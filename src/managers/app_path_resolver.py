"""バンドル ID からアプリのインストールパスを解決するモジュール。"""

import asyncio
import logging

from src.models.shell import AppPathLookup

logger = logging.getLogger(__name__)


def _quote_applescript(value: str) -> str:
    """値を AppleScript の文字列リテラルにする。"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class AppPathResolver:
    """macOS のアプリケーション登録情報からアプリのパスを引く。"""

    def __init__(self, osascript_command: str = "osascript") -> None:
        """AppPathResolver を初期化する。

        Args:
            osascript_command: AppleScript 実行コマンド
        """
        self.osascript_command = osascript_command

    async def lookup(self, bundle_id: str) -> AppPathLookup:
        """バンドル ID に対応するアプリのパスを検索する。

        Args:
            bundle_id: アプリのバンドル ID

        Returns:
            検索結果（見つからない場合は path が None）
        """
        script = f"POSIX path of (path to application id {_quote_applescript(bundle_id)})"
        code, stdout, stderr = await self._run_osascript(script)

        if code != 0:
            return AppPathLookup(bundle_id=bundle_id, error=stderr.strip() or "不明なエラー")

        path = stdout.strip()
        if not path:
            return AppPathLookup(bundle_id=bundle_id, error="パスが空です")
        return AppPathLookup(bundle_id=bundle_id, path=path)

    async def _run_osascript(self, script: str) -> tuple[int, str, str]:
        """AppleScript を 1 行実行する。

        osascript 自体を起動できない場合もリターンコード 1 として返す。

        Returns:
            (リターンコード, stdout, stderr) のタプル
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                self.osascript_command,
                "-e",
                script,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.debug(f"{self.osascript_command} を起動できません: {e}")
            return 1, "", str(e)

        stdout, stderr = await proc.communicate()
        return proc.returncode or 0, stdout.decode(), stderr.decode()
