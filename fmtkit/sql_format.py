# -*- coding: utf-8 -*-
"""SQL 格式化 — sqlparse 排版 + 行压缩

sqlparse 负责关键字大小写与子句缩进，排出来的结果往往一行一个片段、
纵向过长。compact_sql 在其输出上做纯文本的行合并:

    A. 行尾是逗号             → 与下一行合并（列清单）
    B. 整行只有一个子句关键字  → 与它的第一个参数合并
    C. JOIN / ON / AND 链     → 下一行以 ON / AND 开头时合并
合并后长度须小于 MAX_LINE。最后把内容较短的括号组收到一行。
不做任何语法校验，对非 SQL 文本最坏情况是什么都不合并。
"""

import re

import sqlparse
from sqlparse.exceptions import SQLParseError

MAX_LINE = 120
MAX_PAREN = 100

KEYWORDS = ('SELECT', 'FROM', 'WHERE', 'GROUP BY', 'ORDER BY', 'HAVING',
            'LIMIT', 'OFFSET', 'WITH', 'AS')

KEYWORD_CASES = ('upper', 'lower', 'capitalize', None)


# ── 括号组压缩 ────────────────────────────────────────────────
_OPEN_BREAK = re.compile(r'\(\s*\n\s*')
_CLOSE_BREAK = re.compile(r'\s*\n\s*\)')
_PAREN_GROUP = re.compile(r'\(\s*([^)]+?)\s*\)', re.S)
_INNER_BREAK = re.compile(r'\s*\n\s*')


def _join_group(m):
    joined = _INNER_BREAK.sub(' ', m.group(1))
    return f'({joined})' if len(joined) < MAX_PAREN else m.group(0)


def compact_parentheses(sql: str) -> str:
    """去掉紧贴括号的换行，并把内部短于 MAX_PAREN 的括号组收成一行。"""
    result = _OPEN_BREAK.sub('(', sql)
    result = _CLOSE_BREAK.sub(')', result)
    return _PAREN_GROUP.sub(_join_group, result)


# ── 行合并 ────────────────────────────────────────────────────
def _fits(line: str) -> bool:
    return len(line.strip()) < MAX_LINE


def _is_comment(line: str) -> bool:
    return line.startswith('--')


def _merge_list(line, nxt):
    if line.endswith(',') and nxt and not _is_comment(nxt):
        return line + ' ' + nxt
    return None


def _merge_keyword(line, nxt):
    if not nxt or _is_comment(nxt):
        return None
    if line.strip().upper() not in KEYWORDS:
        return None
    upper_next = nxt.upper()
    if any(upper_next.startswith(k) for k in KEYWORDS):
        return None
    return line + ' ' + nxt


def _merge_condition(line, nxt):
    upper = line.upper()
    if not ('JOIN' in upper or upper.startswith('AND ') or upper.startswith('ON ')):
        return None
    upper_next = nxt.upper()
    if nxt and (upper_next.startswith('ON ') or upper_next.startswith('AND ')):
        return line + ' ' + nxt
    return None


_RULES = (_merge_list, _merge_keyword, _merge_condition)


def compact_sql(sql: str) -> str:
    """单次前向扫描、一行前瞻的贪心合并。

    规则命中时把当前行并入下一行（原地替换下一行），
    后续规则看到的是合并后的结果；没有回溯。
    """
    lines = sql.split('\n')
    result = []
    for i in range(len(lines)):
        line = lines[i].rstrip()
        nxt = lines[i + 1].strip() if i + 1 < len(lines) else ''

        merged = None
        for rule in _RULES:
            candidate = rule(line, nxt)
            if candidate is not None and _fits(candidate):
                merged = candidate
                break
        if merged is not None:
            lines[i + 1] = merged
            continue
        result.append(line)

    return compact_parentheses('\n'.join(result))


# ── 完整流程 ──────────────────────────────────────────────────
def format_sql(text: str, keyword_case='upper', indent_width: int = 2,
               compact: bool = True) -> str:
    """sqlparse 排版，按需再压缩行数。

    Raises: ValueError（sqlparse 拒绝的选项或输入）
    """
    if keyword_case not in KEYWORD_CASES:
        raise ValueError(f"不支持的关键字大小写: {keyword_case}")
    if not text.strip():
        return ''
    try:
        formatted = sqlparse.format(
            text,
            reindent=True,
            indent_width=indent_width,
            keyword_case=keyword_case,
            strip_comments=False,
        )
    except SQLParseError as e:
        raise ValueError(f"SQL 排版失败: {e}") from e
    formatted = formatted.strip()
    return compact_sql(formatted) if compact else formatted
