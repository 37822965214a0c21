# -*- coding: utf-8 -*-
"""JSON 值分类 — 语言无关的类型标记

json.loads 产出的 Python 对象（None / bool / int / float / str / list / dict）
统一映射为类型标记，供格式化、树形、表格各引擎做穷举分派。
"""

from typing import Any

# 类型标记
KIND_NULL = "null"
KIND_BOOL = "bool"
KIND_NUMBER = "number"
KIND_STRING = "string"
KIND_ARRAY = "array"
KIND_OBJECT = "object"

KINDS = (KIND_NULL, KIND_BOOL, KIND_NUMBER, KIND_STRING,
         KIND_ARRAY, KIND_OBJECT)


def kind_of(value: Any) -> str:
    """返回值的类型标记；非 JSON 类型抛 TypeError。"""
    if value is None:
        return KIND_NULL
    # bool 是 int 的子类，必须先判断
    if isinstance(value, bool):
        return KIND_BOOL
    if isinstance(value, (int, float)):
        return KIND_NUMBER
    if isinstance(value, str):
        return KIND_STRING
    if isinstance(value, list):
        return KIND_ARRAY
    if isinstance(value, dict):
        return KIND_OBJECT
    raise TypeError(f"不是 JSON 值: {type(value).__name__}")


def is_container(value: Any) -> bool:
    return kind_of(value) in (KIND_ARRAY, KIND_OBJECT)


def is_expandable(value: Any) -> bool:
    """非空数组 / 非空对象才可展开。"""
    return is_container(value) and len(value) > 0


# ── 示例数据（“加载示例”按钮）──────────────────────────────────
SAMPLE_JSON = """{
  "user": {
    "id": 12345,
    "name": "João Silva",
    "email": "joao@example.com",
    "active": true,
    "roles": ["admin", "developer"],
    "metadata": {
      "created_at": "2024-01-15T10:30:00Z",
      "last_login": "2024-02-16T15:45:30Z",
      "preferences": {
        "theme": "dark",
        "notifications": true,
        "language": "pt-BR"
      }
    }
  },
  "orders": [
    {"id": 1, "total": 299.99, "status": "completed"},
    {"id": 2, "total": 149.5, "status": "pending"},
    {"id": 3, "total": 599.0, "status": "shipped"}
  ]
}"""

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bookstore>
  <book category="cooking">
    <title lang="en">Everyday Italian</title>
    <author>Giada De Laurentiis</author>
    <year>2005</year>
    <price>30.00</price>
  </book>
  <book category="children">
    <title lang="en">Harry Potter</title>
    <author>J K. Rowling</author>
    <year>2005</year>
    <price>29.99</price>
  </book>
  <book category="web">
    <title lang="en">Learning XML</title>
    <author>Erik T. Ray</author>
    <year>2003</year>
    <price>39.95</price>
  </book>
</bookstore>"""

SAMPLE_SQL = (
    "select u.id, u.name, u.email, count(o.id) as order_count, "
    "sum(o.total) as total_spent from users u left join orders o "
    "on o.user_id = u.id and o.status = 'completed' "
    "where u.active = 1 and u.created_at >= '2024-01-01' "
    "group by u.id, u.name, u.email having count(o.id) > 2 "
    "order by total_spent desc limit 50"
)
