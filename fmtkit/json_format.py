# -*- coding: utf-8 -*-
"""JSON 格式化引擎 — 纯函数，无 UI 依赖

功能:
    - 美化 / 紧凑 / 排序 / 压缩 多种输出风格
    - 递归排序键名（任意深度）
    - 非 ASCII 字符转义为 \\uXXXX
    - 语法验证
"""

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Tuple

from .results import FormatResult, ParseError
from .values import (
    KIND_ARRAY, KIND_BOOL, KIND_NULL, KIND_NUMBER, KIND_OBJECT, KIND_STRING,
    kind_of,
)

# ── 选项常量 ──────────────────────────────────────────────────
STYLE_PRETTY = "pretty"
STYLE_COMPACT = "compact"
STYLE_SORTED = "sorted"
STYLE_MINIFIED = "minified"
STYLE_TABLE = "table"
STYLE_TREE = "tree"

STYLES = (STYLE_PRETTY, STYLE_COMPACT, STYLE_SORTED,
          STYLE_MINIFIED, STYLE_TABLE, STYLE_TREE)

STYLE_LABELS = {
    STYLE_PRETTY:   "美化（展开）",
    STYLE_COMPACT:  "紧凑",
    STYLE_SORTED:   "键名排序",
    STYLE_MINIFIED: "压缩",
    STYLE_TABLE:    "表格",
    STYLE_TREE:     "交互树",
}

INDENT_WIDTHS = (2, 4, 8)


@dataclass(frozen=True)
class FormatOptions:
    style: str = STYLE_PRETTY
    indent_width: int = 2
    sort_keys: bool = False
    escape_non_ascii: bool = False

    def __post_init__(self):
        if self.style not in STYLES:
            raise ValueError(f"不支持的格式风格: {self.style}")
        if self.indent_width not in INDENT_WIDTHS:
            raise ValueError(f"不支持的缩进宽度: {self.indent_width}")

    @property
    def sorting(self) -> bool:
        return self.sort_keys or self.style == STYLE_SORTED


# ── 解析 ──────────────────────────────────────────────────────
def _reject_constant(name):
    # json 模块默认接受 NaN / Infinity，RFC 8259 不允许
    raise ValueError(f"Invalid literal {name}")


def _finite_float(literal):
    # 1e400 之类会变成 inf，序列化后不再是 JSON
    number = float(literal)
    if math.isinf(number):
        raise ValueError(f"Number out of range: {literal}")
    return number


def parse_json(text: str) -> Any:
    """严格解析 JSON。

    Raises: json.JSONDecodeError / ValueError / RecursionError
    """
    return json.loads(text, parse_constant=_reject_constant,
                      parse_float=_finite_float)


def _parse_error(exc: Exception) -> ParseError:
    if isinstance(exc, json.JSONDecodeError):
        return ParseError(exc.msg, exc.lineno, exc.colno)
    if isinstance(exc, RecursionError):
        return ParseError("Nesting too deep")
    return ParseError(str(exc))


# ── 递归排序键名 ──────────────────────────────────────────────
def sort_keys_deep(value: Any) -> Any:
    """返回新值：每一层对象的键都按字典序升序排列，数组逐元素递归。"""
    kind = kind_of(value)
    if kind == KIND_OBJECT:
        return {k: sort_keys_deep(value[k]) for k in sorted(value)}
    if kind == KIND_ARRAY:
        return [sort_keys_deep(v) for v in value]
    if kind in (KIND_NULL, KIND_BOOL, KIND_NUMBER, KIND_STRING):
        return value
    raise AssertionError(kind)


# ── 非 ASCII 转义 ─────────────────────────────────────────────
_ESCAPE_RE = re.compile("[\u007f-\U0010ffff]")


def _escape_char(m):
    cp = ord(m.group())
    if cp > 0xFFFF:
        # 超出 BMP 的字符拆成 UTF-16 代理对，保证仍是合法 JSON
        cp -= 0x10000
        return "\\u%04x\\u%04x" % (0xD800 + (cp >> 10), 0xDC00 + (cp & 0x3FF))
    return "\\u%04x" % cp


def escape_non_ascii(text: str) -> str:
    """把码位 >= 0x7F 的字符替换为小写 \\uXXXX 转义。"""
    return _ESCAPE_RE.sub(_escape_char, text)


# ── 序列化 ────────────────────────────────────────────────────
def serialize(value: Any, options: FormatOptions) -> str:
    if options.style == STYLE_MINIFIED:
        text = json.dumps(value, ensure_ascii=False, allow_nan=False,
                          separators=(",", ":"))
    elif options.style == STYLE_COMPACT:
        text = json.dumps(value, ensure_ascii=False, allow_nan=False, indent=1)
    else:
        text = json.dumps(value, ensure_ascii=False, allow_nan=False,
                          indent=options.indent_width)
    if options.escape_non_ascii:
        text = escape_non_ascii(text)
    return text


# ── 公共接口 ──────────────────────────────────────────────────
def reformat(text: str, options: FormatOptions = None) -> FormatResult:
    """按 options 重新格式化 JSON 文本。

    空白输入返回空结果；语法错误返回 FormatResult(error=ParseError)。
    """
    if options is None:
        options = FormatOptions()
    if not text.strip():
        return FormatResult(text="")

    try:
        value = parse_json(text)
    except (ValueError, RecursionError) as e:
        return FormatResult.failure(_parse_error(e))

    try:
        shaped = sort_keys_deep(value) if options.sorting else value
        out = serialize(shaped, options)
    except (ValueError, RecursionError) as e:
        return FormatResult.failure(_parse_error(e))
    return FormatResult(text=out, value=shaped)


def minify_json(text: str) -> FormatResult:
    """压缩 JSON（去除空白）"""
    return reformat(text, FormatOptions(style=STYLE_MINIFIED))


def validate_json(text: str) -> Tuple[bool, str]:
    """验证 JSON 是否合法，返回 (ok, message)"""
    try:
        obj = parse_json(text)
    except (ValueError, RecursionError) as e:
        err = _parse_error(e)
        if err.line is None:
            return False, f"JSON 语法错误:\n{err.message}"
        return False, f"JSON 语法错误:\n行 {err.line}, 列 {err.column}: {err.message}"

    kind = kind_of(obj)
    if kind == KIND_OBJECT:
        info = f"有效的 JSON 对象，包含 {len(obj)} 个键"
    elif kind == KIND_ARRAY:
        info = f"有效的 JSON 数组，包含 {len(obj)} 个元素"
    else:
        info = f"有效的 JSON 值 (类型: {kind})"
    return True, info
