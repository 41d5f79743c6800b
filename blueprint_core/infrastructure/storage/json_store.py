import json
import os
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional
from uuid import uuid4

from blueprint_core.config.settings import settings
from blueprint_core.domain.exceptions import BusinessError
from blueprint_core.domain.settings_store import DEFAULT_SETTINGS


class JsonSettingsStore:
    """以单个 JSON 文件保存的键值配置。

    写入先落到临时文件再 os.replace，读取方总能看到完整快照；
    写入之间用锁串行化，保证读-改-写不丢更新。
    """

    def __init__(self, path: str | Path | None = None, defaults: Optional[Mapping[str, str]] = None):
        self._path = Path(path or settings.settings_file).resolve()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._seed(DEFAULT_SETTINGS if defaults is None else defaults)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str:
        value = self._read().get(key)
        return value if isinstance(value, str) else ""

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def all(self) -> Dict[str, str]:
        return {k: v for k, v in self._read().items() if isinstance(v, str)}

    def _seed(self, defaults: Mapping[str, str]) -> None:
        # 只补齐缺失的键，不覆盖已有值
        with self._lock:
            data = self._read()
            missing = {k: v for k, v in defaults.items() if k not in data}
            if missing or not self._path.exists():
                data.update(missing)
                self._write(data)

    def _read(self) -> Dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise BusinessError(code="STORE_READ_ERROR", message=str(e))
        if not isinstance(data, dict):
            raise BusinessError(code="STORE_READ_ERROR", message=f"{self._path} is not a JSON object")
        return data

    def _write(self, data: Mapping[str, object]) -> None:
        tmp_path = self._path.parent / f"{self._path.stem}.{uuid4().hex}.json.tmp"
        try:
            tmp_path.write_text(json.dumps(dict(data), ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise BusinessError(code="STORE_WRITE_ERROR", message=str(e))
