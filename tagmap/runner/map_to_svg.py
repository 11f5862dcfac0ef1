"""Renders a tag map file as an SVG drawing.

Usage:
    python -m tagmap.runner.map_to_svg map.xml map.svg -cp Svg.width 2000.0 Map.root_tag_id 7

The two paths come first: `-cf` and `-cp` take every value that follows them.

Authors: tagmap contributors
"""
from typing import List, Optional

import tagmap.utils.logger as logger_utils
from tagmap.common.tag_map import TagMap
from tagmap.config.defaults import get_cfg_defaults
from tagmap.utils.tagmap_cfgnode import TagmapArgsCfgNode, TagmapCfgNode
from tagmap.visualization.svg import SVG

logger = logger_utils.get_logger()


def map_to_svg(map_file: str, svg_file: str, config: TagmapCfgNode) -> TagMap:
    """Loads the map in `map_file`, refreshes its hop counts and draws it into `svg_file`."""
    tag_map = TagMap.load(map_file)

    root_tag_id = config.param.Map.root_tag_id
    tag_map.hop_counts_update(None if root_tag_id < 0 else root_tag_id)

    svg = SVG(
        width=config.param.Svg.width,
        height=config.param.Svg.height,
        stroke_width=config.param.Svg.stroke_width,
    )
    tag_map.svg_write(svg)
    svg.write(svg_file)
    logger.info("Drew %d arcs into %s.", len(tag_map), svg_file)
    return tag_map


def build_parser() -> TagmapArgsCfgNode:
    """Returns the command-line parser, with the map and SVG paths ahead of the config options."""
    cfg_parser = TagmapArgsCfgNode("Render a tag map file as SVG.")
    cfg_parser.parser.usage = "%(prog)s MAP_FILE SVG_FILE [-cf FILE ...] [-cp KEY VALUE ...]"
    cfg_parser.parser.epilog = "MAP_FILE and SVG_FILE must come before -cf/-cp, which consume all following values."
    cfg_parser.parser.add_argument("map_file", metavar="MAP_FILE", type=str, help="Path to the map file to read")
    cfg_parser.parser.add_argument("svg_file", metavar="SVG_FILE", type=str, help="Path to the SVG file to write")
    return cfg_parser


def main(argv: Optional[List[str]] = None) -> None:
    cfg_parser = build_parser()
    args = cfg_parser.parser.parse_args(argv)

    config = cfg_parser.init_config(TagmapCfgNode(get_cfg_defaults()), argv)
    map_to_svg(args.map_file, args.svg_file, config)


if __name__ == "__main__":
    main()
