"""Tag: a single physical fiducial marker in the map.

Authors: tagmap contributors
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

from tagmap.utils.tag_file import TagFileReader, TagFileWriter

if TYPE_CHECKING:
    from tagmap.common.arc import Arc
    from tagmap.common.tag_map import TagMap

ArcKey = Tuple[int, int]  # (lower tag id, higher tag id)

UNREACHED_HOP_COUNT = -1


@dataclass(eq=False)
class Tag:
    """A fiducial marker observed by the cameras.

    Args:
        id: Unique identifier printed on the marker.
        x: X coordinate of the marker center in the map frame.
        y: Y coordinate of the marker center in the map frame.
        twist: Rotation of the marker in the map frame, in radians.
        hop_count: Number of arcs between this tag and the root tag, -1 when unreached.
        arc_keys: Keys of the arcs incident to this tag. The arcs themselves are owned by the map.
    """

    id: int
    x: float = 0.0
    y: float = 0.0
    twist: float = 0.0
    hop_count: int = 0
    arc_keys: List[ArcKey] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Tag(id={self.id})"

    @staticmethod
    def equal(tag1: "Tag", tag2: "Tag") -> bool:
        """Returns True if both tags have the same id."""
        return tag1.id == tag2.id

    @staticmethod
    def less(tag1: "Tag", tag2: "Tag") -> bool:
        """Returns True if `tag1` sorts before `tag2`."""
        return tag1.id < tag2.id

    def arc_append(self, arc: "Arc") -> None:
        """Records `arc` as incident to this tag."""
        key = arc.pair
        if key not in self.arc_keys:
            self.arc_keys.append(key)

    @staticmethod
    def read(reader: TagFileReader, tag_map: "TagMap") -> "Tag":
        """Reads a `<Tag .../>` element and loads it into the matching tag of `tag_map`."""
        reader.tag_match("Tag")
        tag_id = reader.integer_attribute_read("Id")
        x = reader.double_attribute_read("X")
        y = reader.double_attribute_read("Y")
        twist = reader.double_attribute_read("Twist")
        hop_count = reader.integer_attribute_read("Hop_Count")
        reader.string_match("/>\n")

        tag = tag_map.tag_lookup(tag_id)
        tag.x = x
        tag.y = y
        tag.twist = float(np.deg2rad(twist))
        tag.hop_count = hop_count
        return tag

    def write(self, writer: TagFileWriter) -> None:
        """Writes this tag as a `<Tag .../>` element."""
        writer.format(" <Tag")
        writer.format(' Id="%d"', self.id)
        writer.format(' X="%f"', self.x)
        writer.format(' Y="%f"', self.y)
        writer.format(' Twist="%f"', np.rad2deg(self.twist))
        writer.format(' Hop_Count="%d"', self.hop_count)
        writer.format("/>\n")
