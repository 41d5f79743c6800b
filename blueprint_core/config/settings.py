"""配置管理模块。

支持从初始化参数、环境变量、.env 以及 config.yaml 加载进程级配置。
用户可编辑的 AI 配置（provider/model/API Key）不在这里，
而是保存在 SettingsStore 中，见 blueprint_core.config.resolver。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("BLUEPRINT_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parents[2] / "config.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if not path or path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Config file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read config file {path}: {exc}")
    return {}


class Settings(BaseSettings):
    """进程级配置（使用 Pydantic）。"""

    # ---- HTTP ----
    http_timeout: float = Field(default=60.0, ge=1.0, description="对话请求超时时间（秒）")
    transcription_timeout: float = Field(
        default=120.0,
        ge=1.0,
        description="语音上传体积更大，单独的超时时间（秒）",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com",
        description="公共 OpenAI 接口基础URL（不含 /v1）",
    )

    # ---- 语音转写 ----
    transcription_language: str = Field(default="ru", description="转写语言提示")

    # ---- 存储与日志 ----
    settings_file: str = Field(default=".storage/settings.json", description="持久化键值配置文件")
    log_dir: str = Field(default="logs", description="日志目录")
    log_redact_content: bool = Field(default=False, description="是否脱敏日志内容")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("openai_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


settings = Settings()
