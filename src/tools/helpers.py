"""MCPツール用共通ヘルパー関数。"""

from pathlib import Path
from typing import Any

from src.context import AppContext


def get_app_ctx(ctx: Any) -> AppContext:
    """MCP Context から AppContext を取得する。"""
    return ctx.request_context.lifespan_context


def resolve_target_dir(path: str) -> tuple[str | None, dict[str, Any] | None]:
    """起動先ディレクトリを検証して絶対パスに解決する。

    Args:
        path: 起動先ディレクトリのパス（~ 展開あり）

    Returns:
        (解決済みパス, エラーレスポンス) のタプル。成功時はエラーが None
    """
    if not path or not path.strip():
        return None, {"success": False, "error": "path を指定してください"}

    target = Path(path).expanduser()
    if not target.exists():
        return None, {"success": False, "error": f"パスが存在しません: {target}"}
    if not target.is_dir():
        return None, {"success": False, "error": f"ディレクトリではありません: {target}"}
    return str(target.resolve()), None
