"""MCP Tools モジュール。"""

from mcp.server.fastmcp import FastMCP

from src.tools import shell


def register_all_tools(mcp: FastMCP) -> None:
    """全ツールをMCPサーバーに登録する。

    Args:
        mcp: FastMCPインスタンス
    """
    # シェル検出・起動
    shell.register_tools(mcp)
