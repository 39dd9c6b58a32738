from __future__ import annotations

from .host import ScriptHost, SysInfo
from .loader import ScriptLoader

__all__ = [
    "ScriptHost",
    "ScriptLoader",
    "SysInfo",
]
