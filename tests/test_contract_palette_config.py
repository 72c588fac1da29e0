from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from calgrid.config import DEFAULT_TITLE, palette_from_env, title_from_env
from calgrid.palette import DEFAULT_PALETTE, color_for_index, parse_palette


class TestPaletteContract(unittest.TestCase):
    def test_default_palette(self) -> None:
        self.assertEqual(len(DEFAULT_PALETTE), 7)
        self.assertEqual(DEFAULT_PALETTE[0], "#AAE9E5")

    def test_color_cycles(self) -> None:
        self.assertEqual(color_for_index(0), DEFAULT_PALETTE[0])
        self.assertEqual(color_for_index(7), DEFAULT_PALETTE[0])
        self.assertEqual(color_for_index(9), DEFAULT_PALETTE[2])
        self.assertEqual(color_for_index(3, ("#111111", "#222222")), "#222222")

    def test_color_requires_palette(self) -> None:
        with self.assertRaises(ValueError):
            color_for_index(0, ())

    def test_parse_palette(self) -> None:
        self.assertEqual(parse_palette("#abcdef, #123456,"), ("#ABCDEF", "#123456"))
        self.assertEqual(parse_palette(" , "), ())
        with self.assertRaises(ValueError):
            parse_palette("#abc,red")


class TestConfigContract(unittest.TestCase):
    def test_palette_default_when_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(palette_from_env(), DEFAULT_PALETTE)

    def test_palette_from_env(self) -> None:
        with patch.dict(os.environ, {"CALGRID_PALETTE": "#000000,#FFFFFF"}, clear=True):
            self.assertEqual(palette_from_env(), ("#000000", "#FFFFFF"))

    def test_empty_palette_env_falls_back_with_warning(self) -> None:
        env = {"CALGRID_PALETTE": " ", "CALGRID_OBS_LOG": "1"}
        with patch.dict(os.environ, env, clear=True), patch("calgrid.config.eprint") as ep:
            self.assertEqual(palette_from_env(), DEFAULT_PALETTE)
        self.assertIn("[calgrid.config] WARN:", ep.call_args.args[0])

    def test_invalid_palette_env(self) -> None:
        with patch.dict(os.environ, {"CALGRID_PALETTE": "blue"}, clear=True):
            with self.assertRaises(ValueError):
                palette_from_env()

    def test_title(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(title_from_env(), DEFAULT_TITLE)
        with patch.dict(os.environ, {"CALGRID_TITLE": "  Team plan "}, clear=True):
            self.assertEqual(title_from_env(), "Team plan")


if __name__ == "__main__":
    unittest.main(verbosity=2)
