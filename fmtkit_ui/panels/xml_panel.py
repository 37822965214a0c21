# -*- coding: utf-8 -*-
"""XML 格式化面板 — 先做良构性校验，再按标签层级重新缩进"""

from PyQt5.QtWidgets import QHBoxLayout, QLabel, QSpinBox
from .base_panel import BasePanel
from fmtkit.values import SAMPLE_XML
from fmtkit.xml_format import reindent


class XmlPanel(BasePanel):

    def _build_ui(self):
        super()._build_ui()
        self.input_area.setPlaceholderText(
            '粘贴 XML 文本，例如:\n'
            '<note><to>Tove</to><from>Jani</from><body>Hello</body></note>'
        )

    def sample_text(self):
        return SAMPLE_XML

    def build_controls(self, layout):
        row = QHBoxLayout()
        row.addWidget(QLabel("缩进:"))
        self._indent = QSpinBox()
        self._indent.setRange(1, 8)
        self._indent.setValue(2)
        self._indent.setFixedWidth(60)
        row.addWidget(self._indent)
        row.addWidget(QLabel("空格"))
        row.addStretch()
        layout.addLayout(row)

    def process(self, text):
        return reindent(text, indent=" " * self._indent.value())
