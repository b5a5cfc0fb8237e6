# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from slimtrack.diet.vision import normalize_items, parse_model_output


class TestDietVisionNormalization(unittest.TestCase):
    def test_foods_key_and_camel_case_grams(self) -> None:
        parsed = {
            "foods": [
                {"name": "米饭", "confidence": 0.95, "estimatedGrams": 200},
                {"name": "鸡胸肉", "confidence": 0.9, "estimated_grams": "150g"},
            ]
        }
        items = normalize_items(parsed)
        self.assertEqual([i.name for i in items], ["米饭", "鸡胸肉"])
        self.assertEqual(items[0].estimated_grams, 200.0)
        self.assertEqual(items[1].estimated_grams, 150.0)
        self.assertEqual(items[1].confidence, 0.9)

    def test_item_aliases_and_percent_confidence(self) -> None:
        parsed = {
            "items": [
                {"food": "番茄", "weight": "120 g", "confidence": 80},
                {"dish": "  ", "confidence": 0.5},
                "not-a-dict",
                {"name": "苹果", "confidence": 250, "grams": -3},
            ]
        }
        items = normalize_items(parsed)
        self.assertEqual(len(items), 2)
        self.assertEqual(items[0].name, "番茄")
        self.assertEqual(items[0].estimated_grams, 120.0)
        self.assertEqual(items[0].confidence, 0.8)
        # Out-of-range values are clamped.
        self.assertEqual(items[1].confidence, 1.0)
        self.assertEqual(items[1].estimated_grams, 0.0)

    def test_bare_list_and_missing_fields(self) -> None:
        items = normalize_items([{"name": "香蕉"}])
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].confidence, 0.0)
        self.assertEqual(items[0].estimated_grams, 0.0)
        self.assertEqual(normalize_items({"foods": "米饭"}), [])
        self.assertEqual(normalize_items(None), [])

    def test_parse_fenced_and_prose_wrapped_output(self) -> None:
        content = '识别结果如下：\n```json\n{"foods": [{"name": "面条", "confidence": 0.7, "estimated_grams": 250,}]}\n```'
        parsed = parse_model_output(content)
        self.assertEqual(parsed["foods"][0]["name"], "面条")

    def test_parse_full_width_punctuation_and_python_literals(self) -> None:
        parsed = parse_model_output("{“foods”：[{“name”：“牛奶”，“confidence”：0.8}]}")
        self.assertEqual(parsed["foods"][0]["name"], "牛奶")
        parsed = parse_model_output("{'foods': [{'name': '酸奶', 'confidence': None}]}")
        self.assertEqual(parsed["foods"][0]["name"], "酸奶")

    def test_parse_failure_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_model_output("抱歉，我无法识别这张图片。")
        with self.assertRaises(ValueError):
            parse_model_output("{broken: [")


if __name__ == "__main__":
    unittest.main()
