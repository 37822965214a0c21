# -*- coding: utf-8 -*-
"""格式化结果 — 成功文本或错误对象，二选一

引擎入口对用户输入错误不抛异常，而是返回 FormatResult(error=...)，
由调用方（面板 / 命令行）决定如何提示。
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FormatError:
    """解析器给出的错误信息（行列号从 1 开始，未知时为 None）。"""
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    kind = "format"

    def __str__(self):
        if self.line is not None and self.column is not None:
            return f"{self.message}: line {self.line} column {self.column}"
        if self.line is not None:
            return f"{self.message}: line {self.line}"
        return self.message


@dataclass(frozen=True)
class ParseError(FormatError):
    """JSON 语法错误"""
    kind = "json"


@dataclass(frozen=True)
class XmlError(FormatError):
    """XML 不是良构文档"""
    kind = "xml"


class FormatFailed(ValueError):
    """unwrap() 失败时抛出，携带原始错误对象。"""

    def __init__(self, error: FormatError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class FormatResult:
    text: str = ""
    error: Optional[FormatError] = None
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise FormatFailed(self.error)
        return self.text

    @classmethod
    def failure(cls, error: FormatError) -> "FormatResult":
        return cls(text="", error=error)
