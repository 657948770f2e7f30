#!/usr/bin/env python3
# flysite/utils/tests/test_directions.py
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from flysite.utils.directions import parse_direction_text, bearing_to_compass_point

class TestParseDirectionText(unittest.TestCase):
    def test_comma_separated_with_german_east(self):
        self.assertEqual(parse_direction_text("O, W"), [90.0, 270.0])

    def test_hyphen_range(self):
        self.assertEqual(parse_direction_text("SSW-WSW"), [202.5, 247.5])

    def test_unknown_tokens_are_skipped(self):
        self.assertEqual(parse_direction_text("N, XYZ, s"), [0.0, 180.0])

    def test_empty_text(self):
        self.assertEqual(parse_direction_text(""), [])
        self.assertEqual(parse_direction_text(None), [])

class TestCompassPoint(unittest.TestCase):
    def test_nearest_point(self):
        self.assertEqual(bearing_to_compass_point(0), 'N')
        self.assertEqual(bearing_to_compass_point(350), 'N')
        self.assertEqual(bearing_to_compass_point(22.5), 'NNE')
        self.assertEqual(bearing_to_compass_point(90), 'E')
        self.assertEqual(bearing_to_compass_point(200), 'SSW')
        self.assertEqual(bearing_to_compass_point(-90), 'W')

if __name__ == '__main__':
    unittest.main()
