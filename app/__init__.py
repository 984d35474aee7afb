# -*- coding: utf-8 -*-
"""界面模块：主窗口使用的对话框和信号适配器"""
