# -*- coding: utf-8 -*-
"""
代谢与能量计算器

BMR → TDEE → 每日热量目标 → BMI → 运动消耗 → 目标天数 → 体重变化。
全部为纯函数：不做输入校验，不做 I/O。
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict


# 7700 kcal ≈ 1 kg 脂肪
KCAL_PER_KG = 7700

DEFAULT_CALORIE_FLOOR = 1200
DEFAULT_CALORIE_ADJUSTMENT = 500
DEFAULT_MET = 5.0


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"      # 久坐（很少或不运动）
    light = "light"              # 轻度活动（每周运动1-3天）
    moderate = "moderate"        # 中度活动（每周运动3-5天）
    active = "active"            # 高度活动（每周运动6-7天）
    very_active = "very_active"  # 非常活跃（每天运动，体力劳动）


class BMICategory(str, Enum):
    underweight = "underweight"
    normal = "normal"
    overweight = "overweight"
    obese = "obese"


ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

BMI_CATEGORY_LABELS_ZH: Dict[BMICategory, str] = {
    BMICategory.underweight: "偏瘦",
    BMICategory.normal: "正常",
    BMICategory.overweight: "偏胖",
    BMICategory.obese: "肥胖",
}

# MET 值（代谢当量），中文运动名称为权威词表
MET_VALUES: Dict[str, float] = {
    "跑步": 8.0,
    "快走": 4.5,
    "慢走": 3.5,
    "游泳": 7.0,
    "骑行": 6.0,
    "瑜伽": 3.0,
    "力量训练": 5.0,
    "跳绳": 10.0,
    "爬楼梯": 8.0,
    "打篮球": 6.5,
    "打羽毛球": 5.5,
    "跳舞": 4.5,
    "足球": 7.0,
}

# 英文 slug → 中文名称
EXERCISE_ALIASES: Dict[str, str] = {
    "running": "跑步",
    "walking": "快走",
    "slow_walking": "慢走",
    "swimming": "游泳",
    "cycling": "骑行",
    "yoga": "瑜伽",
    "strength": "力量训练",
    "rope_jumping": "跳绳",
    "stairs": "爬楼梯",
    "basketball": "打篮球",
    "篮球": "打篮球",
    "badminton": "打羽毛球",
    "羽毛球": "打羽毛球",
    "dancing": "跳舞",
    "football": "足球",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_bmr(gender: str, age: float, height_cm: float, weight_kg: float) -> int:
    """
    计算基础代谢率 (BMR) - Mifflin-St Jeor 公式

    Args:
        gender: 性别 ("male" | "female")
        age: 年龄
        height_cm: 身高 (cm)
        weight_kg: 体重 (kg)

    Returns:
        int: BMR (kcal/天)
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if str(getattr(gender, "value", gender)) == Gender.male.value:
        return _round_half_up(base + 5)
    return _round_half_up(base - 161)


def calculate_tdee(bmr: float, activity_level: str) -> int:
    """
    计算每日总消耗 (TDEE) = BMR × 活动系数

    活动水平必须是五档之一，未知值抛出 KeyError。
    """
    multiplier = ACTIVITY_MULTIPLIERS[str(getattr(activity_level, "value", activity_level))]
    return _round_half_up(bmr * multiplier)


def calculate_daily_calorie_target(
    tdee: int,
    current_weight_kg: float,
    target_weight_kg: float,
    *,
    adjustment: int = DEFAULT_CALORIE_ADJUSTMENT,
    floor: int = DEFAULT_CALORIE_FLOOR,
) -> int:
    """
    计算每日热量目标

    减重：TDEE - adjustment，且不低于 floor；
    增重：TDEE + adjustment；
    维持：TDEE。
    """
    if current_weight_kg > target_weight_kg:
        return max(tdee - adjustment, floor)
    if current_weight_kg < target_weight_kg:
        return tdee + adjustment
    return tdee


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    计算体质指数 (BMI)，保留一位小数

    Args:
        weight_kg: 体重 (kg)
        height_cm: 身高 (cm)
    """
    height_m = height_cm / 100
    return _round_half_up((weight_kg / (height_m * height_m)) * 10) / 10


def bmi_category(bmi: float) -> BMICategory:
    if bmi < 18.5:
        return BMICategory.underweight
    if bmi < 24:
        return BMICategory.normal
    if bmi < 28:
        return BMICategory.overweight
    return BMICategory.obese


def resolve_met(exercise_type: str) -> float:
    label = (exercise_type or "").strip()
    label = EXERCISE_ALIASES.get(label.lower(), label)
    return MET_VALUES.get(label, DEFAULT_MET)


def calculate_exercise_calories(exercise_type: str, duration_min: float, weight_kg: float) -> int:
    """
    计算运动消耗热量

    热量 = MET × 体重(kg) × 时间(小时)，未知运动类型使用默认 MET 5.0。
    """
    met = resolve_met(exercise_type)
    hours = duration_min / 60
    return _round_half_up(met * weight_kg * hours)


def calculate_days_to_goal(current_weight_kg: float, target_weight_kg: float, daily_calorie_deficit: float) -> int:
    """
    计算预计达成目标的天数

    daily_calorie_deficit 为 0 时抛出 ZeroDivisionError，由调用方处理。
    """
    weight_diff = abs(current_weight_kg - target_weight_kg)
    total_kcal = weight_diff * KCAL_PER_KG
    return math.ceil(total_kcal / abs(daily_calorie_deficit))


def calculate_weight_change(net_calories: float) -> float:
    """净热量（摄入 - 消耗）对应的体重变化 (kg)，正数为增重。"""
    return net_calories / KCAL_PER_KG
