"""設定管理モジュール。"""

import logging
import os
from pathlib import Path

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

from src.models.shell import DEFAULT_SHELL, Shell

PROJECT_CONFIG_DIR = ".shell-launcher-mcp"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_project_env_file(project_root: str | os.PathLike[str] | None) -> str | None:
    """指定した project_root から .env ファイルを解決する。

    Args:
        project_root: プロジェクトルートパス

    Returns:
        .env ファイルのパス（存在する場合）、または None
    """
    if not project_root:
        return None

    env_file = Path(project_root) / PROJECT_CONFIG_DIR / ".env"
    if env_file.exists():
        return str(env_file)
    return None


def get_project_env_file() -> str | None:
    """プロジェクト別 .env ファイルのパスを取得。

    MCP_PROJECT_ROOT 環境変数が設定されている場合、
    {project_root}/.shell-launcher-mcp/.env を返す。

    Returns:
        .env ファイルのパス（存在する場合）、または None
    """
    return resolve_project_env_file(os.getenv("MCP_PROJECT_ROOT"))


class Settings(BaseSettings):
    """MCP サーバーの設定。

    環境変数で上書き可能。プレフィックスは MCP_。
    例: MCP_DEFAULT_SHELL=iTerm2

    優先順位:
    1. 環境変数（最優先）
    2. プロジェクト別 .env ファイル（{project}/.shell-launcher-mcp/.env）
    3. デフォルト値
    """

    model_config = ConfigDict(
        env_prefix="MCP_",
        env_file=get_project_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # シェル設定
    default_shell: Shell = DEFAULT_SHELL
    """シェル未指定で起動したときに使うターミナルアプリ"""

    # 外部コマンド設定
    open_command: str = "open"
    """アプリ起動に使うコマンド（macOS の open）"""

    osascript_command: str = "osascript"
    """アプリパス検索に使う AppleScript 実行コマンド"""

    # ログ設定
    log_level: str = "INFO"
    """ログレベル（DEBUG / INFO / WARNING / ERROR / CRITICAL）"""

    @field_validator("open_command", "osascript_command")
    @classmethod
    def validate_command(cls, value: str) -> str:
        """コマンド名が空でないことを確認する。"""
        candidate = value.strip()
        if not candidate:
            raise ValueError("コマンド名に空文字は指定できません")
        return candidate

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """ログレベルを大文字に正規化して検証する。"""
        candidate = value.strip().upper()
        if candidate not in _LOG_LEVELS:
            raise ValueError(
                f"log_level は {' / '.join(_LOG_LEVELS)} のいずれかを指定してください: {value}"
            )
        return candidate

    def get_log_level(self) -> int:
        """logging モジュールのレベル値を返す。"""
        return logging.getLevelName(self.log_level)


def load_settings_for_project(project_root: str | os.PathLike[str] | None) -> Settings:
    """指定 project_root の .env を優先して Settings を生成する。

    優先順位:
    1. プロセス環境変数 MCP_*
    2. {project_root}/.shell-launcher-mcp/.env
    3. デフォルト値

    Args:
        project_root: プロジェクトルートパス

    Returns:
        読み込み済み Settings インスタンス
    """
    env_file = resolve_project_env_file(project_root)
    if env_file:
        return Settings(_env_file=env_file)
    # model_config 側の env_file を使わず、環境変数 + デフォルトのみで構築
    return Settings(_env_file=None)
