#!/usr/bin/env python3
# flysite/site_model/tests/test_editor.py
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from flysite.exceptions import StaleHandleError
from flysite.site_model.data_models import Coordinate, DirectionRange, Landing, Launch, Location, Site
from flysite.site_model.direction_range import Endpoint
from flysite.site_model.editor import SiteEditor

def launch_at(lat, lon, name):
    return Launch(location=Location(Coordinate(lat, lon), name=name), direction=DirectionRange(90, 180))

def landing_at(lat, lon, name):
    return Landing(location=Location(Coordinate(lat, lon), name=name))

class TestSiteEditor(unittest.TestCase):
    def setUp(self):
        self.site = Site(
            name="Hochries",
            country="DE",
            launches=(launch_at(47.75, 12.25, "A"), launch_at(47.76, 12.26, "B"), launch_at(47.77, 12.27, "C")),
            landings=(landing_at(47.77, 12.27, "Field"),),
        )
        self.editor = SiteEditor.from_site(self.site)

    def test_snapshot_round_trip(self):
        self.assertEqual(self.editor.snapshot(), self.site)

    def test_handles_survive_removal(self):
        """Removing the first launch does not invalidate the handle of the third"""
        first, _, third = self.editor.launch_handles
        self.assertEqual(self.editor.index_of(third), 2)
        self.editor.remove_launch(first)
        self.assertEqual(self.editor.launch(third).location.name, "C")
        self.assertEqual(self.editor.index_of(third), 1)

    def test_removed_handle_is_stale(self):
        handle = self.editor.launch_handles[0]
        self.editor.remove_launch(handle)
        with self.assertRaises(StaleHandleError):
            self.editor.launch(handle)
        with self.assertRaises(KeyError):
            self.editor.update_launch(handle, launch_at(0, 0, "ghost"))
        with self.assertRaises(StaleHandleError):
            self.editor.index_of(handle)

    def test_drag_direction(self):
        handle = self.editor.launch_handles[1]
        direction = self.editor.drag_launch_direction(handle, Endpoint.STOP, 270)
        self.assertEqual(direction, DirectionRange(90, 270))
        self.assertEqual(self.editor.snapshot().launches[1].direction, DirectionRange(90, 270))

    def test_add_default_launch(self):
        handle = self.editor.add_launch()
        launch = self.editor.launch(handle)
        self.assertEqual(launch.coordinate, Coordinate(47.75, 12.25))
        self.assertEqual(launch.location.country, "DE")
        self.assertEqual(self.editor.launch_handles[-1], handle)

    def test_landing_edits(self):
        handle = self.editor.add_landing(landing_at(47.8, 12.3, "Second"))
        self.editor.update_landing(handle, landing_at(47.81, 12.31, "Moved"))
        self.assertEqual(self.editor.snapshot().landings[1].location.name, "Moved")
        self.editor.remove_landing(handle)
        with self.assertRaises(StaleHandleError):
            self.editor.landing(handle)

    def test_coincidence_by_handle(self):
        flags = self.editor.coincident_launch_handles()
        a, b, c = self.editor.launch_handles
        self.assertEqual(flags, {a: False, b: False, c: True})
        self.assertEqual(list(self.editor.coincident_landing_handles().values()), [True])

if __name__ == '__main__':
    unittest.main()
