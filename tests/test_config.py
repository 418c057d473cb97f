from __future__ import annotations

import unittest

from chartui_layout import DEFAULT_CONFIG, ChartConfigError, LayoutConfig, validate_layout_config


class LayoutConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = validate_layout_config()
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertEqual(config.points_per_segment, 500)
        self.assertEqual(config.minimum_window_ratio, 0.75)
        self.assertEqual(config.open_range_epsilon, 0.01)

    def test_overrides_merge_onto_defaults(self) -> None:
        config = validate_layout_config({"points_per_segment": 50, "legend_padding": 4})
        self.assertIsInstance(config, LayoutConfig)
        self.assertEqual(config.points_per_segment, 50)
        self.assertEqual(config.legend_padding, 4.0)
        self.assertEqual(config.inline_label_height, DEFAULT_CONFIG.inline_label_height)

    def test_unknown_key_rejected(self) -> None:
        with self.assertRaisesRegex(ChartConfigError, "Unknown layout setting"):
            validate_layout_config({"points_per_tile": 10})

    def test_invalid_values_rejected(self) -> None:
        bad = [
            {"points_per_segment": 0},
            {"points_per_segment": True},
            {"points_per_segment": 2.5},
            {"minimum_window_ratio": 1.5},
            {"auto_inner_radius_ratio": -0.1},
            {"legend_padding": -1},
            {"legend_font_size_px": 0},
            {"open_range_epsilon": "small"},
        ]
        for overrides in bad:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ChartConfigError):
                    validate_layout_config(overrides)

    def test_config_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            validate_layout_config({"narrow_sweep_degrees": -5})


if __name__ == "__main__":
    unittest.main()
