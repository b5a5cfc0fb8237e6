# -*- coding: utf-8 -*-
"""
SlimTrack 减脂追踪服务

热量目标计算、饮食 / 运动 / 睡眠 / 体重记录、AI 营养顾问。
"""

__version__ = "1.0.0"
