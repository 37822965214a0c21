# -*- coding: utf-8 -*-
"""面板基类 — 提供统一的 输入区 / 选项区 / 按钮 / 输出区 骨架"""

import os
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPlainTextEdit,
    QPushButton, QLabel, QFileDialog, QMessageBox,
    QApplication, QShortcut
)
from PyQt5.QtGui import QFont, QKeySequence

from fmtkit.results import FormatResult


class BasePanel(QWidget):
    """所有格式化面板的基类。

    子类需实现:
        build_controls(layout)  — 在输入区与输出区之间添加自己的控件
        process(input_text)     — 返回 FormatResult 或字符串
    可选:
        sample_text()           — 返回示例输入，非 None 时显示“加载示例”
        show_result(result)     — 自定义成功结果的展示方式
    """

    file_filter = "文本文件 (*.txt *.json *.xml *.sql);;所有文件 (*)"

    def __init__(self, parent=None):
        super().__init__(parent)
        self._mono = QFont("Consolas", 10)
        self._mono.setStyleHint(QFont.Monospace)
        self._build_ui()

    # ── 骨架搭建 ────────────────────────────────────────────
    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(10, 8, 10, 6)
        root.setSpacing(6)

        # 输入区
        hdr_in = QHBoxLayout()
        hdr_in.addWidget(QLabel("输入:"))
        hdr_in.addStretch()
        self._char_label = QLabel("")
        hdr_in.addWidget(self._char_label)
        if self.sample_text() is not None:
            sample_btn = QPushButton("加载示例")
            sample_btn.setFixedWidth(90)
            sample_btn.clicked.connect(self._load_sample)
            hdr_in.addWidget(sample_btn)
        import_btn = QPushButton("导入文件")
        import_btn.setFixedWidth(90)
        import_btn.clicked.connect(self._import_file)
        hdr_in.addWidget(import_btn)
        root.addLayout(hdr_in)

        self.input_area = self.make_editor()
        self.input_area.setPlaceholderText("在此输入或粘贴文本…")
        self.input_area.textChanged.connect(self._update_char_count)
        root.addWidget(self.input_area, stretch=3)

        # 子类控件区
        ctrl = QVBoxLayout()
        self.build_controls(ctrl)
        root.addLayout(ctrl)

        # 操作按钮行
        btn_row = QHBoxLayout()
        exec_btn = QPushButton("▶  格式化")
        exec_btn.setFixedHeight(34)
        exec_btn.setStyleSheet(
            "QPushButton{background:#0078d4;color:#fff;font-weight:bold;"
            "font-size:13px;border-radius:4px;padding:0 22px}"
            "QPushButton:hover{background:#106ebe}"
            "QPushButton:pressed{background:#005a9e}")
        exec_btn.clicked.connect(self.run)
        btn_row.addWidget(exec_btn)
        for text, slot in (("⇅ 交换", self._swap), ("清空", self._clear)):
            b = QPushButton(text)
            b.setFixedHeight(30)
            b.clicked.connect(slot)
            btn_row.addWidget(b)
        btn_row.addStretch()
        root.addLayout(btn_row)

        # 输出区
        hdr_out = QHBoxLayout()
        hdr_out.addWidget(QLabel("输出:"))
        hdr_out.addStretch()
        self._out_label = QLabel("")
        hdr_out.addWidget(self._out_label)
        copy_btn = QPushButton("复制")
        copy_btn.setFixedWidth(70)
        copy_btn.clicked.connect(self._copy)
        hdr_out.addWidget(copy_btn)
        export_btn = QPushButton("导出文件")
        export_btn.setFixedWidth(90)
        export_btn.clicked.connect(self._export_file)
        hdr_out.addWidget(export_btn)
        root.addLayout(hdr_out)

        self.output_area = self.make_editor(readonly=True)
        self.output_area.setPlaceholderText("结果将显示在此…")
        root.addWidget(self.build_output(self.output_area), stretch=3)

        self._status_label = QLabel("就绪")
        self._status_label.setStyleSheet("color:#666;font-size:11px")
        root.addWidget(self._status_label)

        QShortcut(QKeySequence("Ctrl+Return"), self, self.run)

    def make_editor(self, readonly=False):
        te = QPlainTextEdit()
        te.setFont(self._mono)
        te.setReadOnly(readonly)
        te.setLineWrapMode(QPlainTextEdit.NoWrap)
        te.setMinimumHeight(100)
        return te

    # ── 子类接口 ────────────────────────────────────────────
    def build_controls(self, layout):
        """子类重写：向 layout 添加自己的控件"""

    def build_output(self, text_view):
        """子类可重写：把文本输出区包进其他视图（如表格 / 树）"""
        return text_view

    def process(self, input_text: str):
        raise NotImplementedError

    def sample_text(self):
        return None

    def show_result(self, result: FormatResult):
        self.output_area.setPlainText(result.text)

    # ── 内部逻辑 ────────────────────────────────────────────
    def run(self):
        text = self.input_area.toPlainText()
        if not text.strip():
            self.output_area.clear()
            self._out_label.setText("")
            self._status("请先输入文本")
            return
        try:
            result = self.process(text)
        except ValueError as e:
            self._show_error(type(e).__name__, str(e))
            return
        if isinstance(result, str):
            result = FormatResult(text=result)
        if not result.ok:
            self._show_error(result.error.kind.upper(), str(result.error))
            return
        self.show_result(result)
        self._out_label.setText(f"{len(result.text)} 字符")
        self._status("格式化完成")

    def _show_error(self, kind, message):
        self.output_area.setPlainText(f"错误 [{kind}]: {message}")
        self._out_label.setText("")
        self._status(f"出错: {kind}")

    def _status(self, msg: str):
        self._status_label.setText(msg)

    def _update_char_count(self):
        t = self.input_area.toPlainText()
        self._char_label.setText(f"{len(t)} 字符 / {len(t.encode('utf-8'))} 字节")

    def _load_sample(self):
        self.input_area.setPlainText(self.sample_text())
        self.output_area.clear()
        self._status("已加载示例")

    def _swap(self):
        o, i = self.output_area.toPlainText(), self.input_area.toPlainText()
        self.input_area.setPlainText(o)
        self.output_area.setPlainText(i)

    def _clear(self):
        self.input_area.clear()
        self.output_area.clear()
        self._out_label.setText("")
        self._char_label.setText("")
        self._status("已清空")

    def _copy(self):
        t = self.output_area.toPlainText()
        if t:
            QApplication.clipboard().setText(t)
            self._status("已复制到剪贴板")

    def _import_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "导入文件", "", self.file_filter)
        if not path:
            return
        try:
            with open(path, 'r', encoding='utf-8') as f:
                self.input_area.setPlainText(f.read())
        except UnicodeDecodeError:
            with open(path, 'r', encoding='gbk', errors='replace') as f:
                self.input_area.setPlainText(f.read())
        except OSError as e:
            QMessageBox.warning(self, "导入失败", str(e))
            return
        self._status(f"已导入: {os.path.basename(path)}")

    def _export_file(self):
        t = self.output_area.toPlainText()
        if not t:
            QMessageBox.information(self, "提示", "输出为空")
            return
        path, _ = QFileDialog.getSaveFileName(self, "导出文件", "output.txt", self.file_filter)
        if not path:
            return
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(t)
            self._status(f"已导出: {os.path.basename(path)}")
        except OSError as e:
            QMessageBox.warning(self, "导出失败", str(e))
