"""Unit tests for the configuration nodes.

Authors: tagmap contributors
"""
import tempfile
import unittest
from pathlib import Path

from yacs.config import CfgNode as YACS

from tagmap.config.defaults import get_cfg_defaults
from tagmap.utils.tagmap_cfgnode import TagmapArgsCfgNode, TagmapCfgNode

CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "tagmap"


class TestTagmapCfgNode(unittest.TestCase):
    """Main test for configuration management"""

    def test_defaults(self) -> None:
        config = TagmapCfgNode(get_cfg_defaults())

        self.assertIsInstance(config.param.Map, YACS)
        self.assertEqual(config.param.Map.root_tag_id, -1)
        self.assertEqual(config.param.Svg.width, 1000.0)
        self.assertEqual(config.param.Svg.stroke_width, 1.0)

    def test_defaults_are_independent_copies(self) -> None:
        TagmapCfgNode(get_cfg_defaults()).load_list(["Svg.width", "5.0"])
        self.assertEqual(get_cfg_defaults().Svg.width, 1000.0)

    def test_load_files(self) -> None:
        """The second file overrides the first."""
        config = TagmapCfgNode(get_cfg_defaults())
        config.load_file(str(CONFIG_PATH / "config1.yaml"))
        config.load_file(str(CONFIG_PATH / "config2.yaml"))

        self.assertEqual(config.param.Map.root_tag_id, 4)
        self.assertEqual(config.param.Svg.width, 640.0)
        self.assertEqual(config.param.Svg.height, 240.0)
        self.assertEqual(config.param.Svg.stroke_width, 3.0)

    def test_load_list(self) -> None:
        config = TagmapCfgNode(get_cfg_defaults())
        config.load_list(["Map.root_tag_id", "12", "Svg.height", "20.0"])

        self.assertEqual(config.param.Map.root_tag_id, 12)
        self.assertEqual(config.param.Svg.height, 20.0)

    def test_unknown_key(self) -> None:
        config = TagmapCfgNode(get_cfg_defaults())
        with self.assertRaises(AssertionError):
            config.load_list(["Map.no_such_key", "1"])

    def test_unknown_key_in_file(self) -> None:
        config = TagmapCfgNode(get_cfg_defaults())
        with tempfile.TemporaryDirectory() as tempdir:
            file_path = Path(tempdir) / "bad.yaml"
            file_path.write_text("Svg:\n  color: blue\n")
            with self.assertRaises(KeyError):
                config.load_file(str(file_path))

    def test_frozen(self) -> None:
        config = TagmapCfgNode(get_cfg_defaults())
        with self.assertRaises(AttributeError):
            config.param.Svg.width = 10.0


class TestTagmapArgsCfgNode(unittest.TestCase):
    """Test for argparser and configuration interaction"""

    def test_init_config(self) -> None:
        """Command-line parameters override the parameters loaded from config files."""
        parser = TagmapArgsCfgNode("Test for config loading")
        args = [
            "--config-file",
            str(CONFIG_PATH / "config1.yaml"),
            "--config-param",
            "Svg.width",
            "800.0",
        ]

        config = parser.init_config(TagmapCfgNode(get_cfg_defaults()), args)

        self.assertEqual(config.param.Map.root_tag_id, 4)
        self.assertEqual(config.param.Svg.width, 800.0)
        self.assertEqual(config.param.Svg.height, 480.0)

    def test_init_config_without_arguments(self) -> None:
        parser = TagmapArgsCfgNode("Test for config loading")
        config = parser.init_config(TagmapCfgNode(get_cfg_defaults()), [])
        self.assertEqual(config.param.Svg.width, 1000.0)


if __name__ == "__main__":
    unittest.main()
