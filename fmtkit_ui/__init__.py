# -*- coding: utf-8 -*-
"""fmtkit 图形界面（PyQt5）"""
