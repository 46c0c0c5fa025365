"""Shell Launcher MCP Server エントリーポイント。"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from src.config.settings import Settings
from src.context import AppContext
from src.managers.shell_manager import ShellManager
from src.tools import register_all_tools

# ログ設定（stderrに出力）
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """サーバーライフサイクルを管理する。

    Args:
        server: FastMCPサーバーインスタンス

    Yields:
        アプリケーションコンテキスト
    """
    settings = Settings()
    logging.getLogger().setLevel(settings.get_log_level())
    logger.info("Shell Launcher MCP Server を起動しています...")

    try:
        yield AppContext(settings=settings, shells=ShellManager(settings))
    finally:
        logger.info("サーバーをシャットダウンしています...")


# FastMCPサーバーを作成
mcp = FastMCP("Shell Launcher MCP", lifespan=app_lifespan)
register_all_tools(mcp)


def main() -> None:
    """MCPサーバーを起動する。"""
    mcp.run()


if __name__ == "__main__":
    main()
