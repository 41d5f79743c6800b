"""对话编排。

一次调用严格按顺序执行：
配置解析 -> 构建系统提示词 -> 调用选定 Provider -> 提取动作。
编排器本身不持有对话状态；配置解析或 Provider 抛出的异常原样向上传播，
动作提取只会降级，不会失败。
"""

import logging
import time
from datetime import date
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

from blueprint_core.actions.extractor import extract_actions
from blueprint_core.config.resolver import resolve_provider_config
from blueprint_core.config.settings import settings
from blueprint_core.domain.exceptions import BusinessError
from blueprint_core.domain.models import ChatResult, MessageLike, normalize_messages
from blueprint_core.domain.settings_store import SettingsStore
from blueprint_core.infrastructure.logging.logger import logger
from blueprint_core.prompts import build_system_prompt
from blueprint_core.providers import create_provider
from blueprint_core.providers.base import ProviderClient


ProviderFactory = Callable[..., ProviderClient]


class AssistantAgent:
    """Blueprint 助手的对话入口。

    store 只被读取；provider_factory 便于在测试中替换真实 HTTP 适配器。
    """

    def __init__(
        self,
        store: SettingsStore,
        provider_factory: ProviderFactory = create_provider,
        cfg=settings,
    ):
        self._store = store
        self._provider_factory = provider_factory
        self._settings = cfg

    def chat(
        self,
        messages: List[MessageLike],
        provider: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ChatResult:
        """执行一次对话并返回 {content, actions}。

        Args:
            messages: 对话历史（user/assistant），可以是字典或 ConversationMessage。
            provider / model / base_url: 可选覆盖项，未指定时读取持久化配置。
            today: 提示词中的日期，默认当前 UTC 日期。

        Raises:
            MissingCredentialError / UpstreamError / RequestTimeoutError / NetworkError
        """

        start_time = time.time()
        log_ctx: Dict[str, Any] = {"trace_id": f"tr-{uuid4().hex}"}
        try:
            history = normalize_messages(messages)
            config = resolve_provider_config(self._store, provider, model, base_url)
            log_ctx.update(provider=config.provider or "openai", model=config.model)
            self._log(logging.INFO, "Chat request", log_ctx, message_count=len(history))

            system_prompt = build_system_prompt(today)
            client = self._provider_factory(config.provider, self._settings)
            raw_text = client.complete(config, system_prompt, history)
        except BusinessError as e:
            self._log(logging.ERROR, f"Chat failed: {e}", log_ctx, code=e.code)
            raise

        result = extract_actions(raw_text)
        self._log(
            logging.INFO,
            "Chat completed",
            log_ctx,
            action_count=len(result.actions),
            actions=[a.action for a in result.actions],
            elapsed_ms=int((time.time() - start_time) * 1000),
        )
        return result

    @staticmethod
    def _log(level: int, message: str, log_ctx: Dict[str, Any], **fields: Any) -> None:
        payload = dict(log_ctx)
        payload.update(fields)
        logger.log(level, message, extra={"extra": payload})
