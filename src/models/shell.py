"""ターミナルアプリ（シェル）モデル定義。"""

from dataclasses import dataclass
from enum import Enum
from typing import assert_never


class Shell(str, Enum):
    """サポートするターミナルアプリ。

    宣言順がそのまま利用可能シェル一覧の並び順になる。
    """

    TERMINAL = "Terminal"
    """macOS Terminal.app"""

    HYPER = "Hyper"
    """Hyper"""

    ITERM2 = "iTerm2"
    """iTerm2"""


DEFAULT_SHELL = Shell.TERMINAL


def parse_shell(label: object) -> Shell:
    """ラベル文字列をシェルに変換する。

    完全一致しないラベルはすべてデフォルトシェルとして扱う（例外は送出しない）。

    Args:
        label: シェルのラベル（"Terminal" / "Hyper" / "iTerm2"）

    Returns:
        対応するシェル、または DEFAULT_SHELL
    """
    for shell in Shell:
        if label == shell.value:
            return shell
    return DEFAULT_SHELL


def get_bundle_identifier(shell: Shell) -> str:
    """シェルのバンドル ID を取得する。

    Args:
        shell: シェル

    Returns:
        バンドル ID

    Raises:
        AssertionError: Shell 以外の値が渡された場合（内部不整合）
    """
    match shell:
        case Shell.TERMINAL:
            return "com.apple.Terminal"
        case Shell.ITERM2:
            return "com.googlecode.iterm2"
        case Shell.HYPER:
            return "co.zeit.hyper"
        case _:
            assert_never(shell)


@dataclass(frozen=True)
class AppPathLookup:
    """バンドル ID によるアプリパス検索の結果。"""

    bundle_id: str
    path: str | None = None
    error: str | None = None

    @property
    def found(self) -> bool:
        """空でないパスが得られたか。"""
        return bool(self.path)
