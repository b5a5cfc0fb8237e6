# -*- coding: utf-8 -*-
"""
代谢计算工具模块

提供 BMR / TDEE / BMI / 运动消耗等纯函数计算，可被各业务模块和 API 调用。
"""

from .calculator import (
    ACTIVITY_MULTIPLIERS,
    BMI_CATEGORY_LABELS_ZH,
    KCAL_PER_KG,
    MET_VALUES,
    ActivityLevel,
    BMICategory,
    Gender,
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_daily_calorie_target,
    calculate_days_to_goal,
    calculate_exercise_calories,
    calculate_tdee,
    calculate_weight_change,
)

__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "BMI_CATEGORY_LABELS_ZH",
    "KCAL_PER_KG",
    "MET_VALUES",
    "ActivityLevel",
    "BMICategory",
    "Gender",
    "bmi_category",
    "calculate_bmi",
    "calculate_bmr",
    "calculate_daily_calorie_target",
    "calculate_days_to_goal",
    "calculate_exercise_calories",
    "calculate_tdee",
    "calculate_weight_change",
]
