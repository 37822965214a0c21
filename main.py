#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""fmtkit — JSON / XML / SQL 格式化工具箱  入口"""

from fmtkit_ui.app import main


if __name__ == '__main__':
    main()
