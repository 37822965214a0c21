# -*- coding: utf-8 -*-
"""fmtkit 图形界面 — QApplication 初始化（应用信息、图标、字体、配色）"""

import sys
from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QFont, QPalette, QColor, QIcon, QPixmap, QPainter
from PyQt5.QtCore import Qt

from fmtkit import __version__

ACCENT = "#0078d4"

# (角色, 颜色)
_PALETTE = (
    (QPalette.Window,          "#f0f2f5"),
    (QPalette.WindowText,      "#1e2433"),
    (QPalette.Base,            "#ffffff"),
    (QPalette.AlternateBase,   "#f5f6f8"),
    (QPalette.Text,            "#1e2433"),
    (QPalette.Button,          "#e8eaed"),
    (QPalette.ButtonText,      "#1e2433"),
    (QPalette.Highlight,       ACCENT),
    (QPalette.HighlightedText, "#ffffff"),
)


def _app_icon():
    """运行时绘制的窗口图标：蓝底白色 { }，不依赖图片文件。"""
    pix = QPixmap(64, 64)
    pix.fill(Qt.transparent)
    p = QPainter(pix)
    p.setRenderHint(QPainter.Antialiasing)
    p.setPen(Qt.NoPen)
    p.setBrush(QColor(ACCENT))
    p.drawRoundedRect(0, 0, 64, 64, 12, 12)
    p.setPen(QColor("#ffffff"))
    p.setFont(QFont("Consolas", 26, QFont.Bold))
    p.drawText(pix.rect(), Qt.AlignCenter, "{ }")
    p.end()
    return QIcon(pix)


def main():
    # High-DPI 支持
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setApplicationName("fmtkit")
    app.setApplicationDisplayName("fmtkit 格式化工具箱")
    app.setApplicationVersion(__version__)
    app.setWindowIcon(_app_icon())
    app.setStyle('Fusion')

    font = QFont("Microsoft YaHei UI", 11)
    font.setStyleHint(QFont.SansSerif)
    app.setFont(font)

    palette = QPalette()
    for role, color in _PALETTE:
        palette.setColor(role, QColor(color))
    app.setPalette(palette)

    from .main_window import MainWindow
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())
