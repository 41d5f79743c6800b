import threading
from typing import Dict, Mapping, Optional


class InMemorySettingsStore:
    """内存字典实现的 SettingsStore，适合嵌入调用与测试。"""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str:
        return self._data.get(key, "")

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def all(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._data)
