# -*- coding: utf-8 -*-
"""JSON 表格投影 — 把数组 / 对象展平成 行 × 列

    对象数组   → 列 = 所有元素键名的并集（按首次出现顺序）
    标量数组   → 单列 value
    对象       → 两列 key / value
    空数组     → 空表标记
    标量       → 不成表，直接显示
嵌套的对象 / 数组不展开，用 {...} / [...] 占位。
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .values import (
    KIND_ARRAY, KIND_BOOL, KIND_NULL, KIND_NUMBER, KIND_OBJECT, KIND_STRING,
    kind_of,
)

# 投影类别
TABLE_RECORDS = "records"
TABLE_VALUES = "values"
TABLE_PAIRS = "pairs"
TABLE_EMPTY = "empty"
TABLE_SCALAR = "scalar"

NESTED_OBJECT = "{...}"
NESTED_ARRAY = "[...]"

VALUE_COLUMN = "value"
KEY_COLUMN = "key"


@dataclass
class TableProjection:
    kind: str
    columns: List[str] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)
    scalar: str = ""

    @property
    def numbered(self) -> bool:
        """是否显示 # 行号列"""
        return self.kind in (TABLE_RECORDS, TABLE_VALUES)

    def cell(self, row: int, column: str) -> str:
        # 该行缺失的键显示为空
        return self.rows[row].get(column, "")


def cell_text(value: Any) -> str:
    """单元格文本：标量转字符串，嵌套结构用占位符。"""
    kind = kind_of(value)
    if kind == KIND_OBJECT:
        return NESTED_OBJECT
    if kind == KIND_ARRAY:
        return NESTED_ARRAY
    if kind == KIND_NULL:
        return ""
    if kind == KIND_STRING:
        return value
    if kind == KIND_BOOL:
        return "true" if value else "false"
    if kind == KIND_NUMBER:
        return json.dumps(value)
    raise AssertionError(kind)


def project(value: Any) -> TableProjection:
    kind = kind_of(value)

    if kind == KIND_ARRAY:
        if not value:
            return TableProjection(TABLE_EMPTY)
        # 以第一个元素的形状决定表格类型
        if kind_of(value[0]) == KIND_OBJECT:
            return _project_records(value)
        return TableProjection(
            TABLE_VALUES,
            columns=[VALUE_COLUMN],
            rows=[{VALUE_COLUMN: cell_text(v)} for v in value],
        )

    if kind == KIND_OBJECT:
        return TableProjection(
            TABLE_PAIRS,
            columns=[KEY_COLUMN, VALUE_COLUMN],
            rows=[{KEY_COLUMN: k, VALUE_COLUMN: cell_text(v)}
                  for k, v in value.items()],
        )

    # 单元格里 null 留空，整个文档就是 null 时照原样显示
    scalar = "null" if kind == KIND_NULL else cell_text(value)
    return TableProjection(TABLE_SCALAR, scalar=scalar)


def _project_records(items: List[Any]) -> TableProjection:
    columns = {}  # dict 当作有序集合用
    rows = []
    for item in items:
        row = {}
        if kind_of(item) == KIND_OBJECT:
            for k, v in item.items():
                columns.setdefault(k, None)
                row[k] = cell_text(v)
        rows.append(row)
    return TableProjection(TABLE_RECORDS, columns=list(columns), rows=rows)


def render_table_text(table: TableProjection, sep: str = "\t") -> str:
    """表格的纯文本形式（命令行输出用）。"""
    if table.kind == TABLE_EMPTY:
        return "(空数组)"
    if table.kind == TABLE_SCALAR:
        return table.scalar

    header = (["#"] if table.numbered else []) + table.columns
    lines = [sep.join(header)]
    for i in range(len(table.rows)):
        cells = [table.cell(i, c) for c in table.columns]
        if table.numbered:
            cells.insert(0, str(i + 1))
        lines.append(sep.join(cells))
    return "\n".join(lines)
