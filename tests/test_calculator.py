# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from slimtrack.tools.calculator import (
    ACTIVITY_MULTIPLIERS,
    BMICategory,
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_daily_calorie_target,
    calculate_days_to_goal,
    calculate_exercise_calories,
    calculate_tdee,
    calculate_weight_change,
    resolve_met,
)


class TestMetabolicFormulas(unittest.TestCase):
    def test_bmr_reference_values(self) -> None:
        self.assertEqual(calculate_bmr("male", 30, 175, 80), 1749)
        self.assertEqual(calculate_bmr("female", 25, 165, 60), 1345)

    def test_bmr_rounds_half_up(self) -> None:
        # female base 1345.25 -> 1345; male 30y/175cm/80.05kg base 1749.25 -> 1749
        self.assertEqual(calculate_bmr("female", 25, 165, 60), 1345)
        self.assertEqual(calculate_bmr("male", 30, 175, 80.05), 1749)
        # 10 * 50 + 6.25 * 150 - 5 * 20 + 5 = 1342.5 -> 1343 (not banker's 1342)
        self.assertEqual(calculate_bmr("male", 20, 150, 50), 1343)

    def test_tdee_every_tier(self) -> None:
        for level, multiplier in ACTIVITY_MULTIPLIERS.items():
            with self.subTest(level=level):
                self.assertEqual(calculate_tdee(1749, level), int(1749 * multiplier + 0.5))
        self.assertEqual(calculate_tdee(1749, "moderate"), 2711)
        self.assertEqual(calculate_tdee(1345, "light"), 1849)

    def test_tdee_unknown_level_raises(self) -> None:
        with self.assertRaises(KeyError):
            calculate_tdee(1749, "extreme")

    def test_daily_target_policy(self) -> None:
        self.assertEqual(calculate_daily_calorie_target(2711, 80, 70), 2211)
        self.assertEqual(calculate_daily_calorie_target(1000, 80, 70), 1200)
        self.assertEqual(calculate_daily_calorie_target(2711, 60, 70), 3211)
        self.assertEqual(calculate_daily_calorie_target(2711, 70, 70), 2711)

    def test_daily_target_custom_policy(self) -> None:
        self.assertEqual(calculate_daily_calorie_target(2000, 80, 70, adjustment=300, floor=1500), 1700)
        self.assertEqual(calculate_daily_calorie_target(1600, 80, 70, adjustment=300, floor=1500), 1500)

    def test_bmi_and_category(self) -> None:
        bmi = calculate_bmi(70, 175)
        self.assertEqual(bmi, 22.9)
        self.assertEqual(bmi_category(bmi), BMICategory.normal)
        self.assertEqual(bmi_category(17), BMICategory.underweight)
        self.assertEqual(bmi_category(18.5), BMICategory.normal)
        self.assertEqual(bmi_category(24), BMICategory.overweight)
        self.assertEqual(bmi_category(28), BMICategory.obese)

    def test_bmi_zero_height_is_not_guarded(self) -> None:
        with self.assertRaises(ZeroDivisionError):
            calculate_bmi(70, 0)

    def test_exercise_calories(self) -> None:
        self.assertEqual(calculate_exercise_calories("跑步", 30, 80), 320)
        self.assertEqual(calculate_exercise_calories("未知运动", 30, 80), 200)
        self.assertEqual(calculate_exercise_calories("running", 30, 80), 320)
        self.assertEqual(calculate_exercise_calories(" Running ", 30, 80), 320)

    def test_met_aliases(self) -> None:
        self.assertEqual(resolve_met("basketball"), resolve_met("打篮球"))
        self.assertEqual(resolve_met("篮球"), 6.5)
        self.assertEqual(resolve_met("football"), 7.0)
        self.assertEqual(resolve_met(""), 5.0)

    def test_days_to_goal(self) -> None:
        self.assertEqual(calculate_days_to_goal(80, 70, -500), 154)
        self.assertEqual(calculate_days_to_goal(70, 80, 500), 154)
        self.assertEqual(calculate_days_to_goal(80, 79.9, 500), 2)
        with self.assertRaises(ZeroDivisionError):
            calculate_days_to_goal(80, 70, 0)

    def test_weight_change_sign(self) -> None:
        self.assertEqual(calculate_weight_change(7700), 1.0)
        self.assertEqual(calculate_weight_change(-3850), -0.5)
        self.assertEqual(calculate_weight_change(0), 0.0)

    def test_pure_functions_are_idempotent(self) -> None:
        first = (calculate_bmr("male", 30, 175, 80), calculate_bmi(70, 175), calculate_exercise_calories("游泳", 45, 65))
        second = (calculate_bmr("male", 30, 175, 80), calculate_bmi(70, 175), calculate_exercise_calories("游泳", 45, 65))
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
