"""SettingsStore 的具体实现。"""

from .json_store import JsonSettingsStore
from .memory_store import InMemorySettingsStore

__all__ = ["JsonSettingsStore", "InMemorySettingsStore"]
