# -*- coding: utf-8 -*-
"""主窗口 — 侧边栏导航 + 首页卡片 + 格式化面板

布局:
    ┌─────────────┬──────────────────────────────┐
    │  Sidebar     │  Home Page / Formatter Panel │
    │  210px       │  (QStackedWidget)            │
    └─────────────┴──────────────────────────────┘
"""

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QGridLayout,
    QLabel, QPushButton, QStackedWidget, QFrame, QSizePolicy,
)
from PyQt5.QtGui import QCursor
from PyQt5.QtCore import Qt, pyqtSignal

from .panels.json_panel import JsonPanel
from .panels.xml_panel import XmlPanel
from .panels.sql_panel import SqlPanel

# ── 功能注册表 ───────────────────────────────────────────────
# (显示名, 简介, 色条, Panel类)
FEATURES = [
    ("JSON 格式化", "美化、紧凑、排序、压缩，表格 / 交互树视图", "#0078d4", JsonPanel),
    ("XML 格式化",  "良构性校验并按标签层级重新缩进",           "#107c10", XmlPanel),
    ("SQL 格式化",  "关键字大小写、子句缩进，合并过短的行",       "#ca5010", SqlPanel),
]

_NAV_STYLE = """
    QPushButton {{
        text-align:left; padding:0 20px 0 22px;
        border:none; border-radius:6px;
        margin:1px 10px; color:{color};
        background:{bg};
        font-size:13px; font-weight:{weight};
    }}
    QPushButton:hover {{ background:{hover}; color:#e0e4ea; }}
"""


def _nav_style(active=False, bold=False):
    if active:
        return _NAV_STYLE.format(color="#ffffff", bg="#0078d4",
                                 weight="bold", hover="#106ebe")
    return _NAV_STYLE.format(color="#b0b8c4", bg="transparent",
                             weight="bold" if bold else "normal",
                             hover="rgba(255,255,255,0.07)")


# ═════════════════════════════════════════════════════════════
#  首页卡片
# ═════════════════════════════════════════════════════════════
class FeatureCard(QFrame):
    """可点击的功能卡片"""
    clicked = pyqtSignal()

    def __init__(self, title, description, color, parent=None):
        super().__init__(parent)
        self.setObjectName("featureCard")
        self.setCursor(QCursor(Qt.PointingHandCursor))
        self._color = color

        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 16, 18, 16)
        layout.setSpacing(8)

        bar = QFrame()
        bar.setFixedHeight(4)
        bar.setStyleSheet(f"background:{color}; border-radius:2px; border:none;")
        layout.addWidget(bar)

        t = QLabel(title)
        t.setStyleSheet("font-size:15px; font-weight:bold; color:#1e2433; "
                        "background:transparent; border:none;")
        layout.addWidget(t)

        d = QLabel(description)
        d.setWordWrap(True)
        d.setStyleSheet("font-size:12px; color:#6b7a8d; "
                        "background:transparent; border:none;")
        layout.addWidget(d)
        layout.addStretch()
        self._apply_style(False)

    def _apply_style(self, hovered):
        if hovered:
            self.setStyleSheet(
                f"#featureCard{{background:#f8fbff; "
                f"border:2px solid {self._color}; border-radius:10px;}}")
        else:
            self.setStyleSheet(
                "#featureCard{background:#ffffff; "
                "border:1px solid #dfe2e8; border-radius:10px;}")

    def enterEvent(self, e):
        self._apply_style(True)

    def leaveEvent(self, e):
        self._apply_style(False)

    def mousePressEvent(self, e):
        self.clicked.emit()


# ═════════════════════════════════════════════════════════════
#  主窗口
# ═════════════════════════════════════════════════════════════
class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self._nav_btns = []          # 下标与 stack 下标一致（0 = 主页）
        self._active_btn = None

        self.setWindowTitle("fmtkit — 格式化工具箱")
        self.resize(1100, 720)
        self.setMinimumSize(900, 580)
        self._build_ui()

    def _build_ui(self):
        central = QWidget()
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        root.addWidget(self._build_sidebar())

        self._stack = QStackedWidget()
        self._stack.setObjectName("contentArea")
        self._stack.setStyleSheet("#contentArea{background:#f0f2f5; border:none;}")
        self._stack.addWidget(self._build_home_page())
        for _name, _desc, _color, PanelClass in FEATURES:
            self._stack.addWidget(PanelClass())

        root.addWidget(self._stack, stretch=1)
        self.setCentralWidget(central)
        self._go(0)

    # ── 侧边栏 ──────────────────────────────────────────────
    def _build_sidebar(self):
        sidebar = QWidget()
        sidebar.setFixedWidth(210)
        sidebar.setStyleSheet(
            "background: qlineargradient(x1:0,y1:0,x2:0,y2:1,"
            "stop:0 #1a1f2e, stop:1 #232939);")

        nl = QVBoxLayout(sidebar)
        nl.setContentsMargins(0, 20, 0, 16)
        nl.setSpacing(0)

        title = QLabel("  fmtkit")
        title.setStyleSheet("color:#ffffff; font-size:20px; font-weight:bold; "
                            "padding-left:10px; background:transparent;")
        nl.addWidget(title)
        sub = QLabel("    格式化工具箱")
        sub.setStyleSheet("color:#707d8f; font-size:12px; background:transparent;")
        nl.addWidget(sub)
        nl.addSpacing(14)

        entries = [("  主页", True)] + [(f"  {f[0]}", False) for f in FEATURES]
        for idx, (text, bold) in enumerate(entries):
            btn = QPushButton(text)
            btn.setFixedHeight(38)
            btn.setCursor(QCursor(Qt.PointingHandCursor))
            btn.setStyleSheet(_nav_style(bold=bold))
            btn.clicked.connect(lambda checked, i=idx: self._go(i))
            nl.addWidget(btn)
            self._nav_btns.append(btn)

        nl.addStretch()
        return sidebar

    # ── 首页 ─────────────────────────────────────────────────
    def _build_home_page(self):
        page = QWidget()
        cl = QVBoxLayout(page)
        cl.setContentsMargins(36, 32, 36, 32)
        cl.setSpacing(12)

        welcome = QLabel("fmtkit")
        welcome.setStyleSheet("font-size:28px; font-weight:bold; color:#1e2433;")
        cl.addWidget(welcome)
        welcome_sub = QLabel("选择一种格式开始使用")
        welcome_sub.setStyleSheet("font-size:14px; color:#6b7a8d; margin-bottom:8px;")
        cl.addWidget(welcome_sub)

        grid = QGridLayout()
        grid.setSpacing(16)
        for i, (name, desc, color, _cls) in enumerate(FEATURES):
            card = FeatureCard(name, desc, color)
            card.setMinimumSize(220, 120)
            card.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
            card.clicked.connect(lambda i=i + 1: self._go(i))
            grid.addWidget(card, 0, i)
            grid.setColumnStretch(i, 1)
        cl.addLayout(grid)
        cl.addStretch()
        return page

    # ── 导航 ─────────────────────────────────────────────────
    def _go(self, idx):
        self._stack.setCurrentIndex(idx)
        if self._active_btn is not None:
            prev = self._nav_btns.index(self._active_btn)
            self._active_btn.setStyleSheet(_nav_style(bold=prev == 0))
        self._active_btn = self._nav_btns[idx]
        self._active_btn.setStyleSheet(_nav_style(active=True))
