"""系统提示词构建。

提示词正文按语言(locale)与版本保存在 prompts/<locale>/ 目录下，
正文固定不变，只在末尾追加当天日期（YYYY-MM-DD），
这样对会缓存/指纹化提示词的 Provider 来说前缀始终稳定。
"""

from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from blueprint_core.actions.definitions import ACTION_SCHEMA_VERSION


PROMPTS_DIR = Path(__file__).resolve().parent


def load_system_template(locale: str = "ru", version: str = ACTION_SCHEMA_VERSION) -> str:
    """加载指定语言与版本的提示词正文（去掉末尾空白）。"""

    fname = PROMPTS_DIR / locale / f"assistant_system_{version}.md"
    return fname.read_text(encoding="utf-8").rstrip()


def build_system_prompt(today: Optional[date] = None, locale: str = "ru") -> str:
    """构建系统提示词：固定正文 + 空格 + 当前 UTC 日期。

    相同的 today 必然得到相同的输出。
    """

    today = today or datetime.now(timezone.utc).date()
    return f"{load_system_template(locale)} {today.isoformat()}"
