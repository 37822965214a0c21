# -*- coding: utf-8 -*-
"""JSON 交互树投影

把解析后的值投影为可逐层展开的树节点。子节点按需生成（只生成一层），
深层文档在用户展开之前不产生任何开销。
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .values import (
    KIND_ARRAY, KIND_BOOL, KIND_NULL, KIND_NUMBER, KIND_OBJECT, KIND_STRING,
    is_expandable, kind_of,
)

DEFAULT_EXPAND_DEPTH = 2  # depth < 2 的节点初始展开


@dataclass
class TreeNode:
    value: Any
    label: Optional[str] = None
    depth: int = 0
    expanded: bool = False
    _children: Optional[List["TreeNode"]] = field(
        default=None, init=False, repr=False, compare=False)

    @property
    def kind(self) -> str:
        return kind_of(self.value)

    @property
    def expandable(self) -> bool:
        return is_expandable(self.value)

    def toggle(self) -> bool:
        """切换本节点展开状态（不影响兄弟 / 祖先），返回新状态。"""
        if self.expandable:
            self.expanded = not self.expanded
        return self.expanded

    def summary(self) -> str:
        """节点值的单行显示文本。"""
        kind = self.kind
        if kind == KIND_NULL:
            return "null"
        if kind == KIND_STRING:
            return json.dumps(self.value, ensure_ascii=False)
        if kind == KIND_BOOL:
            return "true" if self.value else "false"
        if kind == KIND_NUMBER:
            return json.dumps(self.value)
        if kind == KIND_ARRAY:
            return f"Array [{len(self.value)}]" if self.value else "[]"
        if kind == KIND_OBJECT:
            return f"Object {{{len(self.value)}}}" if self.value else "{}"
        raise AssertionError(kind)

    def children(self) -> List["TreeNode"]:
        """下一层子节点；标签为数组下标或对象键名。

        首次调用时生成并缓存，之后各子节点的展开状态各自保留。
        """
        if self._children is None:
            self._children = self._make_children()
        return self._children

    def _make_children(self) -> List["TreeNode"]:
        kind = self.kind
        if kind == KIND_ARRAY:
            items = ((str(i), v) for i, v in enumerate(self.value))
        elif kind == KIND_OBJECT:
            items = self.value.items()
        else:
            return []
        depth = self.depth + 1
        return [make_node(v, label=k, depth=depth) for k, v in items]


def make_node(value: Any, label: Optional[str] = None, depth: int = 0) -> TreeNode:
    return TreeNode(value=value, label=label, depth=depth,
                    expanded=depth < DEFAULT_EXPAND_DEPTH and is_expandable(value))


def project(value: Any) -> TreeNode:
    """返回根节点（depth 0，无标签）。"""
    return make_node(value)


def render_tree_lines(root: TreeNode, indent: str = "  ") -> List[str]:
    """按当前展开状态把树渲染为文本行（显式栈，深度不受调用栈限制）。

    折叠节点只显示摘要，展开节点的子节点会被缓存在栈里逐个弹出。
    """
    lines = []
    stack = [root]
    while stack:
        node = stack.pop()
        marker = ("▾ " if node.expanded else "▸ ") if node.expandable else "  "
        text = node.summary()
        if node.label is not None:
            text = f"{node.label}: {text}"
        lines.append(indent * node.depth + marker + text)
        if node.expanded and node.expandable:
            stack.extend(reversed(node.children()))
    return lines
