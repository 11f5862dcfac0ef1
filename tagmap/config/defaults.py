from yacs.config import CfgNode as YACS

"""
YACS requires specifying a schema for the YAML config files. In this Python file,
we provide such a schema. Every tagmap YAML config file may override the 2
sections -- parameters for the Map and for its Svg rendering.
"""

_Cfg = YACS(new_allowed=True)

_Cfg.Map = YACS(new_allowed=True)
# Tag that hop counts are measured from; -1 selects the tag with the lowest id.
_Cfg.Map.root_tag_id = -1

_Cfg.Svg = YACS(new_allowed=True)
_Cfg.Svg.width = 1000.0
_Cfg.Svg.height = 1000.0
_Cfg.Svg.stroke_width = 1.0


def get_cfg_defaults() -> YACS:
    """Provides a YACS object with default parameters for tagmap."""
    return _Cfg.clone()
