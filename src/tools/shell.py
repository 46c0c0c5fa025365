"""ターミナルアプリ（シェル）管理ツール。"""

import logging
from typing import Any

from mcp.server.fastmcp import Context, FastMCP

from src.models.shell import DEFAULT_SHELL, Shell, get_bundle_identifier, parse_shell
from src.tools.helpers import get_app_ctx, resolve_target_dir

logger = logging.getLogger(__name__)


def register_tools(mcp: FastMCP) -> None:
    """シェル管理ツールを登録する。"""

    @mcp.tool()
    async def list_shells(ctx: Context = None) -> dict[str, Any]:
        """サポート対象の全シェルとインストール状況を取得する。

        Returns:
            シェル一覧（success, shells, available, default）
        """
        app_ctx = get_app_ctx(ctx)
        available = await app_ctx.shells.get_available_shells()

        shells = [
            {
                "shell": shell.value,
                "bundle_id": get_bundle_identifier(shell),
                "installed": shell in available,
            }
            for shell in Shell
        ]

        return {
            "success": True,
            "shells": shells,
            "available": [shell.value for shell in available],
            "default": app_ctx.settings.default_shell.value,
        }

    @mcp.tool()
    async def get_available_shells(ctx: Context = None) -> dict[str, Any]:
        """インストール済みのシェル一覧を取得する。

        Returns:
            シェル一覧（success, shells, count）
        """
        app_ctx = get_app_ctx(ctx)
        available = await app_ctx.shells.get_available_shells()

        return {
            "success": True,
            "shells": [shell.value for shell in available],
            "count": len(available),
        }

    @mcp.tool()
    async def parse_shell_label(label: str) -> dict[str, Any]:
        """ラベル文字列をシェルに変換する。

        未知のラベルはデフォルトシェルになる。

        Args:
            label: シェルのラベル

        Returns:
            変換結果（success, shell, is_default）
        """
        shell = parse_shell(label)
        return {
            "success": True,
            "shell": shell.value,
            "is_default": shell == DEFAULT_SHELL,
        }

    @mcp.tool()
    async def launch_shell(
        path: str,
        shell: str | None = None,
        ctx: Context = None,
    ) -> dict[str, Any]:
        """シェルを起動して指定ディレクトリを開く。

        Args:
            path: 開くディレクトリのパス
            shell: シェルのラベル（省略時は設定のデフォルト）

        Returns:
            起動結果（success, shell, path, message）
        """
        app_ctx = get_app_ctx(ctx)

        target_dir, error = resolve_target_dir(path)
        if error:
            return error

        selected = parse_shell(shell) if shell is not None else app_ctx.settings.default_shell

        try:
            await app_ctx.shells.launch(selected, target_dir)
        except Exception as e:
            logger.error(f"{selected.value} 起動エラー: {e}")
            return {
                "success": False,
                "error": f"{selected.value} 起動エラー: {e}",
            }

        return {
            "success": True,
            "shell": selected.value,
            "path": target_dir,
            "message": f"{selected.value} で {target_dir} を開きました",
        }
