"""pytest設定とフィクスチャ。"""

import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config.settings import Settings
from src.context import AppContext
from src.managers.app_path_resolver import AppPathResolver
from src.managers.shell_manager import ShellManager
from src.models.shell import AppPathLookup, Shell, get_bundle_identifier


@pytest.fixture
def temp_dir():
    """一時ディレクトリを作成する。"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings(monkeypatch):
    """テスト用の設定を作成する。"""
    monkeypatch.delenv("MCP_DEFAULT_SHELL", raising=False)
    monkeypatch.delenv("MCP_OPEN_COMMAND", raising=False)
    return Settings(_env_file=None, default_shell=Shell.TERMINAL)


def make_lookup_mock(installed: set[Shell]) -> AsyncMock:
    """指定シェルのみ見つかる lookup モックを作成する。"""
    installed_ids = {get_bundle_identifier(shell): shell for shell in installed}

    async def _lookup(bundle_id: str) -> AppPathLookup:
        shell = installed_ids.get(bundle_id)
        if shell is None:
            return AppPathLookup(bundle_id=bundle_id, error="not found")
        return AppPathLookup(bundle_id=bundle_id, path=f"/Applications/{shell.value}.app/")

    return AsyncMock(side_effect=_lookup)


@pytest.fixture
def mock_resolver():
    """AppPathResolver のモック（全シェル未インストール）。"""
    mock = MagicMock(spec=AppPathResolver)
    mock.lookup = make_lookup_mock(set())
    return mock


@pytest.fixture
def shell_manager(settings, mock_resolver):
    """ShellManager インスタンスを作成する。"""
    return ShellManager(settings, resolver=mock_resolver)


@pytest.fixture
def app_ctx(settings, shell_manager):
    """テスト用の AppContext を作成する。"""
    return AppContext(settings=settings, shells=shell_manager)


@pytest.fixture
def mock_mcp_context(app_ctx):
    """MCPツールのContextをモックする。"""
    mock_ctx = MagicMock()
    mock_ctx.request_context.lifespan_context = app_ctx
    return mock_ctx


def get_tool_fn(mcp, tool_name: str):
    """FastMCP に登録されたツール関数を名前で取得する。"""
    for tool in mcp._tool_manager._tools.values():
        if tool.name == tool_name:
            return tool.fn
    raise KeyError(tool_name)
