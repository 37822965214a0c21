# -*- coding: utf-8 -*-
"""fmtkit — JSON / XML / SQL 格式化引擎（纯函数，无 UI 依赖）"""

__version__ = "0.1.0"
