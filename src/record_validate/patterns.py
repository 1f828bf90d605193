"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: patterns.py
@DateTime: 2026-02-08
@Docs: Compiled format patterns shared by the engine.
引擎共享的已编译格式正则。

Patterns are compiled once at import and only read afterwards, so a single
instance is safe to share across threads.
正则在导入时编译一次，之后只读，可在多线程间共享。

Matching is case-sensitive and lowercase-only: "A@GG.COM" is rejected.
匹配区分大小写且仅接受小写："A@GG.COM" 会被拒绝。
"""

import re
from dataclasses import dataclass

EMAIL_PATTERN = r"[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,4}"
URL_PATTERN = r"https?://[a-z0-9\-]+(?:\.[a-z0-9\-]+)*\.[a-z]{2,}(?::[0-9]{1,5})?(?:/\S*)?"


@dataclass(frozen=True, slots=True)
class Patterns:
    """Compiled patterns used by format rules.
    格式规则使用的已编译正则。

    Attributes:
        email: Email address pattern.
            邮箱地址正则。
        url: HTTP(S) URL pattern.
            HTTP(S) URL 正则。
    """

    email: re.Pattern[str]
    url: re.Pattern[str]

    @classmethod
    def compile(cls, *, email: str = EMAIL_PATTERN, url: str = URL_PATTERN) -> "Patterns":
        """Compile a pattern set.
        编译一组正则。
        """
        return cls(email=re.compile(email), url=re.compile(url))


DEFAULT_PATTERNS = Patterns.compile()
