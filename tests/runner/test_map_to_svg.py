"""Unit tests for the map to SVG runner.

Authors: tagmap contributors
"""
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tagmap.common.tag_map import TagMap
from tagmap.runner import map_to_svg


class TestMapToSvg(unittest.TestCase):
    """Runs the command line entry point on a small map."""

    def test_main(self) -> None:
        tag_map = TagMap()
        for tag_id, x in [(1, 10.0), (2, 20.0), (3, 30.0)]:
            tag_map.tag_lookup(tag_id).x = x
        tag_map.arc_observe(tag_map.tags[1], 0.0, 10.0, tag_map.tags[2], 0.0, 1.0)
        tag_map.arc_observe(tag_map.tags[3], 0.0, 10.0, tag_map.tags[2], 0.0, 1.0)
        tag_map.arcs[(1, 2)].in_tree = True

        with tempfile.TemporaryDirectory() as tempdir:
            map_file = Path(tempdir) / "map.xml"
            svg_file = Path(tempdir) / "map.svg"
            tag_map.save(map_file)

            map_to_svg.main([str(map_file), str(svg_file), "-cp", "Svg.height", "100.0", "Map.root_tag_id", "3"])

            document = svg_file.read_text()

        self.assertIn('height="100.000000"', document)
        self.assertEqual(document.count("<line"), 2)
        self.assertEqual(document.count("stroke:red"), 1)
        self.assertEqual(document.count("stroke:green"), 1)

    def test_usage_puts_paths_before_options(self) -> None:
        parser = map_to_svg.build_parser().parser
        self.assertIn("MAP_FILE SVG_FILE [-cf FILE ...] [-cp KEY VALUE ...]", parser.format_usage())
        self.assertIn("must come before -cf/-cp", parser.format_help())

    def test_paths_then_options_parse(self) -> None:
        args = map_to_svg.build_parser().parser.parse_args(["map.xml", "map.svg", "-cp", "Svg.width", "2.0"])
        self.assertEqual((args.map_file, args.svg_file), ("map.xml", "map.svg"))
        self.assertEqual(args.config_param, ["Svg.width", "2.0"])

    def test_options_before_paths_are_rejected(self) -> None:
        """`-cp` takes the paths as values, leaving the positionals missing."""
        with mock.patch("sys.stderr"), self.assertRaises(SystemExit):
            map_to_svg.build_parser().parser.parse_args(["-cp", "Svg.width", "2.0", "map.xml", "map.svg"])

    def test_map_to_svg_updates_hop_counts(self) -> None:
        tag_map = TagMap()
        tag_map.arc_observe(tag_map.tag_lookup(1), 0.0, 1.0, tag_map.tag_lookup(2), 0.0, 1.0)

        with tempfile.TemporaryDirectory() as tempdir:
            map_file = Path(tempdir) / "map.xml"
            tag_map.save(map_file)
            config = map_to_svg.TagmapCfgNode(map_to_svg.get_cfg_defaults())
            loaded = map_to_svg.map_to_svg(str(map_file), str(Path(tempdir) / "map.svg"), config)

        self.assertEqual(loaded.tags[1].hop_count, 0)
        self.assertEqual(loaded.tags[2].hop_count, 1)


if __name__ == "__main__":
    unittest.main()
