# -*- coding: utf-8 -*-
"""JSON 格式化面板

输出区三种视图:
    文本  — 美化 / 紧凑 / 排序 / 压缩 结果
    表格  — 对象数组按列展开（QTableWidget）
    树    — 逐层展开（QTreeWidget，子节点在首次展开时才创建）
表格 / 树视图下，文本结果仍保留在文本区，复制与导出不受影响。
"""

from PyQt5.QtWidgets import (
    QHBoxLayout, QVBoxLayout, QLabel, QGroupBox, QCheckBox, QComboBox,
    QStackedWidget, QTableWidget, QTableWidgetItem, QTreeWidget,
    QTreeWidgetItem, QHeaderView, QAbstractItemView,
)
from PyQt5.QtGui import QColor

from .base_panel import BasePanel
from fmtkit import json_table, json_tree
from fmtkit.json_format import (
    INDENT_WIDTHS, STYLE_LABELS, STYLE_MINIFIED, STYLE_SORTED, STYLE_TABLE,
    STYLE_TREE, STYLES, FormatOptions, reformat,
)
from fmtkit.values import SAMPLE_JSON

_PAGE_TEXT, _PAGE_TABLE, _PAGE_TREE = 0, 1, 2

_KIND_COLORS = {
    "null":   "#808080",
    "string": "#16a34a",
    "number": "#d97706",
    "bool":   "#2563eb",
}


class _NodeItem(QTreeWidgetItem):
    """树节点条目，持有对应的 TreeNode；子条目首次展开时创建。"""

    def __init__(self, node):
        label = node.label if node.label is not None else "(root)"
        super().__init__([label, node.summary()])
        self.node = node
        self.populated = False
        color = _KIND_COLORS.get(node.kind)
        if color:
            self.setForeground(1, QColor(color))
        if node.expandable:
            self.setChildIndicatorPolicy(QTreeWidgetItem.ShowIndicator)


class JsonPanel(BasePanel):

    def _build_ui(self):
        super()._build_ui()
        self.input_area.setPlaceholderText(
            '粘贴 JSON 文本，例如:\n'
            '{"name": "test", "value": 123, "list": [1, 2, 3]}'
        )

    def sample_text(self):
        return SAMPLE_JSON

    def build_controls(self, layout):
        group = QGroupBox("JSON 选项")
        g = QVBoxLayout(group)

        r1 = QHBoxLayout()
        r1.addWidget(QLabel("风格:"))
        self._style = QComboBox()
        for style in STYLES:
            self._style.addItem(STYLE_LABELS[style], style)
        self._style.setFixedWidth(140)
        self._style.currentIndexChanged.connect(self._on_style_changed)
        r1.addWidget(self._style)
        r1.addSpacing(16)

        r1.addWidget(QLabel("缩进:"))
        self._indent = QComboBox()
        for w in INDENT_WIDTHS:
            self._indent.addItem(f"{w} 空格", w)
        self._indent.setFixedWidth(80)
        r1.addWidget(self._indent)
        r1.addSpacing(16)

        self._sort_keys = QCheckBox("排序键名")
        r1.addWidget(self._sort_keys)
        self._escape = QCheckBox("Unicode 转义")
        r1.addWidget(self._escape)
        r1.addStretch()
        g.addLayout(r1)

        layout.addWidget(group)

    def build_output(self, text_view):
        self._pages = QStackedWidget()
        self._pages.addWidget(text_view)

        self._table = QTableWidget(0, 0)
        self._table.setFont(self._mono)
        self._table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self._table.verticalHeader().setVisible(False)
        self._table.verticalHeader().setDefaultSectionSize(24)
        self._pages.addWidget(self._table)

        self._tree = QTreeWidget()
        self._tree.setFont(self._mono)
        self._tree.setHeaderLabels(["键", "值"])
        self._tree.header().setSectionResizeMode(0, QHeaderView.ResizeToContents)
        self._tree.itemExpanded.connect(self._on_item_expanded)
        self._tree.itemCollapsed.connect(self._on_item_collapsed)
        self._pages.addWidget(self._tree)
        return self._pages

    # ── 选项 ─────────────────────────────────────────────────
    def _on_style_changed(self):
        style = self._style.currentData()
        self._indent.setEnabled(style != STYLE_MINIFIED)
        self._sort_keys.setEnabled(style != STYLE_SORTED)

    def options(self) -> FormatOptions:
        return FormatOptions(
            style=self._style.currentData(),
            indent_width=self._indent.currentData(),
            sort_keys=self._sort_keys.isChecked(),
            escape_non_ascii=self._escape.isChecked(),
        )

    def process(self, text):
        self._pages.setCurrentIndex(_PAGE_TEXT)
        return reformat(text, self.options())

    def show_result(self, result):
        super().show_result(result)
        style = self._style.currentData()
        if style == STYLE_TABLE:
            self._fill_table(json_table.project(result.value))
            self._pages.setCurrentIndex(_PAGE_TABLE)
        elif style == STYLE_TREE:
            self._fill_tree(json_tree.project(result.value))
            self._pages.setCurrentIndex(_PAGE_TREE)

    # ── 表格视图 ─────────────────────────────────────────────
    def _fill_table(self, table):
        self._table.clear()
        if table.kind in (json_table.TABLE_EMPTY, json_table.TABLE_SCALAR):
            text = "(空数组)" if table.kind == json_table.TABLE_EMPTY else table.scalar
            self._table.setRowCount(1)
            self._table.setColumnCount(1)
            self._table.setHorizontalHeaderLabels(["值"])
            self._table.setItem(0, 0, QTableWidgetItem(text))
            self._table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
            return

        headers = (["#"] if table.numbered else []) + table.columns
        offset = 1 if table.numbered else 0
        self._table.setColumnCount(len(headers))
        self._table.setRowCount(len(table.rows))
        self._table.setHorizontalHeaderLabels(headers)
        for r in range(len(table.rows)):
            if table.numbered:
                num = QTableWidgetItem(str(r + 1))
                num.setForeground(QColor("#888888"))
                self._table.setItem(r, 0, num)
            for c, column in enumerate(table.columns):
                text = table.cell(r, column)
                item = QTableWidgetItem(text)
                if text in (json_table.NESTED_OBJECT, json_table.NESTED_ARRAY):
                    item.setForeground(QColor("#888888"))
                self._table.setItem(r, c + offset, item)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeToContents)
        self._table.horizontalHeader().setStretchLastSection(True)

    # ── 树视图 ───────────────────────────────────────────────
    def _fill_tree(self, root):
        self._tree.clear()
        item = _NodeItem(root)
        self._tree.addTopLevelItem(item)
        self._apply_expansion(item)

    def _apply_expansion(self, item):
        if item.node.expanded:
            self._populate(item)
            item.setExpanded(True)

    def _populate(self, item):
        if item.populated:
            return
        item.populated = True
        for child in item.node.children():
            child_item = _NodeItem(child)
            item.addChild(child_item)
            self._apply_expansion(child_item)

    def _on_item_expanded(self, item):
        self._populate(item)
        item.node.expanded = True

    def _on_item_collapsed(self, item):
        item.node.expanded = False
