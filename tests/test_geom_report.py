import json
import math
import unittest

from charade.geom.core import Point
from charade.geom.report import ShapeReport, build_shape_report


class ShapeReportTests(unittest.TestCase):
    def test_empty_snapshot(self):
        report = build_shape_report([])
        self.assertTrue(report.is_empty)
        self.assertEqual(report.touch_count, 0)
        self.assertIsNone(report.centroid)
        self.assertIsNone(report.circle)
        self.assertIsNone(report.rect)
        self.assertEqual(report.hull, ())
        self.assertEqual(report.rect_area, 0.0)
        self.assertEqual(report.fill_ratio, 1.0)

    def test_rectangle_snapshot(self):
        report = build_shape_report([(0, 0), (4, 0), (4, 2), (0, 2)], metadata={"layout": "test"})
        self.assertEqual(report.touch_count, 4)
        self.assertEqual(report.centroid, Point(2.0, 1.0))
        self.assertEqual(report.bbox_center, Point(2.0, 1.0))
        self.assertAlmostEqual(report.circle.radius, math.sqrt(5))
        self.assertEqual(len(report.hull), 4)
        self.assertAlmostEqual(report.hull_area, 8.0)
        self.assertAlmostEqual(report.rect_area, 8.0)
        self.assertAlmostEqual(report.fill_ratio, 1.0)
        self.assertEqual(report.metadata, {"layout": "test"})

    def test_single_touch(self):
        report = build_shape_report([(5.0, 5.0)])
        self.assertEqual(report.touch_count, 1)
        self.assertEqual(report.circle.r2, 0.0)
        self.assertEqual(report.rect_area, 0.0)
        self.assertEqual(report.fill_ratio, 1.0)

    def test_to_dict_is_json_serializable(self):
        report = build_shape_report([(0, 0), (3, 0), (0, 4), (1, 1)])
        data = json.loads(json.dumps(report.to_dict()))
        self.assertEqual(data["touch_count"], 4)
        self.assertEqual(len(data["hull"]), 3)
        self.assertAlmostEqual(data["hull_area"], 6.0)
        self.assertAlmostEqual(data["rect_area"], 12.0)
        self.assertAlmostEqual(data["fill_ratio"], 0.5)
        self.assertAlmostEqual(data["circle"]["radius"], 2.5)
        self.assertEqual(len(data["rect"]["corners"]), 4)

    def test_empty_to_dict(self):
        data = ShapeReport(touch_count=0).to_dict()
        self.assertIsNone(data["centroid"])
        self.assertIsNone(data["circle"])
        self.assertIsNone(data["rect"])
        self.assertEqual(data["hull"], [])


if __name__ == "__main__":
    unittest.main()
