"""データモデル定義。"""

from .shell import DEFAULT_SHELL, AppPathLookup, Shell, get_bundle_identifier, parse_shell

__all__ = [
    "DEFAULT_SHELL",
    "AppPathLookup",
    "Shell",
    "get_bundle_identifier",
    "parse_shell",
]
