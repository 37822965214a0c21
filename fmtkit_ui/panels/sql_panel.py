# -*- coding: utf-8 -*-
"""SQL 格式化面板

sqlparse 负责关键字大小写与子句缩进；勾选“压缩行数”时，
再把逗号续行、关键字与首个参数、JOIN / ON / AND 链合并到一行。
"""

from PyQt5.QtWidgets import QHBoxLayout, QLabel, QComboBox, QCheckBox
from .base_panel import BasePanel
from fmtkit.json_format import INDENT_WIDTHS
from fmtkit.sql_format import format_sql
from fmtkit.values import SAMPLE_SQL

_CASES = [("大写", "upper"), ("小写", "lower"), ("首字母大写", "capitalize"),
          ("保持不变", None)]


class SqlPanel(BasePanel):

    def _build_ui(self):
        super()._build_ui()
        self.input_area.setPlaceholderText(
            '粘贴 SQL 语句，例如:\n'
            'select id, name from users where active = 1 order by name'
        )

    def sample_text(self):
        return SAMPLE_SQL

    def build_controls(self, layout):
        row = QHBoxLayout()
        row.addWidget(QLabel("关键字:"))
        self._case = QComboBox()
        for label, case in _CASES:
            self._case.addItem(label, case)
        self._case.setFixedWidth(120)
        row.addWidget(self._case)
        row.addSpacing(16)

        row.addWidget(QLabel("缩进:"))
        self._indent = QComboBox()
        for w in INDENT_WIDTHS:
            self._indent.addItem(f"{w} 空格", w)
        self._indent.setFixedWidth(80)
        row.addWidget(self._indent)
        row.addSpacing(16)

        self._compact = QCheckBox("压缩行数")
        self._compact.setChecked(True)
        row.addWidget(self._compact)
        row.addStretch()
        layout.addLayout(row)

    def process(self, text):
        return format_sql(
            text,
            keyword_case=self._case.currentData(),
            indent_width=self._indent.currentData(),
            compact=self._compact.isChecked(),
        )
