# -*- coding: utf-8 -*-
"""格式化功能面板"""
