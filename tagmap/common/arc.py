"""Arc: the measured relationship between two tags.

An arc stores the twist of each tag and the distance between the tag centers, as measured from a single camera
image. Many images observe the same pair of tags; the map keeps one arc per unordered pair and the reading with the
lowest goodness (camera center to segment midpoint distance) wins.

Arcs are always stored in canonical form: `from_tag` has the lower id. Swapping the endpoints of an observation also
swaps the twists, so `from_twist` always describes `from_tag`.

Authors: tagmap contributors
"""
import functools
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Tuple

import numpy as np

from tagmap.common.tag import ArcKey, Tag
from tagmap.utils.tag_file import TagFileReader, TagFileWriter
from tagmap.visualization.svg import SVG

if TYPE_CHECKING:
    from tagmap.common.tag_map import TagMap

# Goodness of an arc that has not been loaded yet; any real reading is better.
BLANK_GOODNESS = 123456789.0
BLANK_DISTANCE = -1.0


class ArcColor(str, Enum):
    IN_TREE = "red"
    NOT_IN_TREE = "green"


def canonicalize(
    from_tag: Tag, from_twist: float, to_tag: Tag, to_twist: float
) -> Tuple[Tag, float, Tag, float]:
    """Orders an observation so that the first tag has the lower id.

    Returns:
        (from_tag, from_twist, to_tag, to_twist), with tags and twists swapped together if needed.
    """
    if from_tag.id > to_tag.id:
        return to_tag, to_twist, from_tag, from_twist
    return from_tag, from_twist, to_tag, to_twist


@dataclass(eq=False)
class Arc:
    """Measurement edge between two tags.

    Args:
        from_tag: Tag with the lower id.
        to_tag: Tag with the higher id.
        from_twist: Twist of `from_tag` relative to the arc, in radians.
        distance: Distance between the tag centers.
        to_twist: Twist of `to_tag` relative to the arc, in radians.
        goodness: Distance from the camera center to the arc midpoint; lower is better.
        in_tree: True if a tree builder selected this arc for the spanning tree.
    """

    from_tag: Tag
    to_tag: Tag
    from_twist: float = 0.0
    distance: float = BLANK_DISTANCE
    to_twist: float = 0.0
    goodness: float = BLANK_GOODNESS
    in_tree: bool = False

    @property
    def pair(self) -> ArcKey:
        """Order-independent key of the tag pair."""
        return (self.from_tag.id, self.to_tag.id)

    def __repr__(self) -> str:
        return (
            f"Arc({self.from_tag.id}->{self.to_tag.id}, distance={self.distance}, goodness={self.goodness}, "
            f"in_tree={self.in_tree})"
        )

    def __eq__(self, other: object) -> bool:
        """Checks that both arcs connect the same pair of tags."""
        if not isinstance(other, Arc):
            return False
        return Arc.equal(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __lt__(self, other: "Arc") -> bool:
        return Arc.less(self, other)

    def __hash__(self) -> int:
        return hash(self.pair)

    @staticmethod
    def equal(arc1: "Arc", arc2: "Arc") -> bool:
        """Returns True if `arc1` and `arc2` connect the same tags."""
        return Tag.equal(arc1.from_tag, arc2.from_tag) and Tag.equal(arc1.to_tag, arc2.to_tag)

    @staticmethod
    def less(arc1: "Arc", arc2: "Arc") -> bool:
        """Returns True if `arc1` sorts before `arc2`, comparing `from_tag` ids first and then `to_tag` ids."""
        if Tag.less(arc1.from_tag, arc2.from_tag):
            return True
        elif Tag.equal(arc1.from_tag, arc2.from_tag):
            return Tag.less(arc1.to_tag, arc2.to_tag)
        return False

    @classmethod
    def create(
        cls,
        from_tag: Tag,
        from_twist: float,
        distance: float,
        to_tag: Tag,
        to_twist: float,
        goodness: float,
        tag_map: "TagMap",
    ) -> "Arc":
        """Creates a new arc and registers it with both tags and with `tag_map`.

        The endpoints may be given in either order; the stored arc is canonical. No validation is done here, see
        `update` for the checked path.

        Args:
            from_tag: First observed tag.
            from_twist: Twist of `from_tag` in radians.
            distance: Distance between the two tag centers.
            to_tag: Second observed tag.
            to_twist: Twist of `to_tag` in radians.
            goodness: Distance from the camera center to the arc midpoint.
            tag_map: Map that owns the new arc.

        Returns:
            The new arc.
        """
        from_tag, from_twist, to_tag, to_twist = canonicalize(from_tag, from_twist, to_tag, to_twist)
        arc = cls(
            from_tag=from_tag,
            to_tag=to_tag,
            from_twist=from_twist,
            distance=distance,
            to_twist=to_twist,
            goodness=goodness,
            in_tree=False,
        )

        tag_map.arc_append(arc)
        from_tag.arc_append(arc)
        to_tag.arc_append(arc)
        return arc

    def update(self, from_twist: float, distance: float, to_twist: float, goodness: float) -> None:
        """Overwrites the measured values of this arc.

        The caller decides whether the new reading is better; this method always loads it.

        Args:
            from_twist: Twist of `from_tag` in radians.
            distance: Distance between the tag centers, must be positive.
            to_twist: Twist of `to_tag` in radians.
            goodness: Distance from the camera center to the arc midpoint.
        """
        assert self.from_tag.id < self.to_tag.id, f"Arc {self.pair} is not in canonical order."
        assert distance > 0.0, f"Arc {self.pair} given non-positive distance {distance}."
        self.from_twist = from_twist
        self.distance = distance
        self.to_twist = to_twist
        self.goodness = goodness

    @staticmethod
    def read(reader: TagFileReader, tag_map: "TagMap") -> "Arc":
        """Reads an `<Arc .../>` element and merges it into `tag_map`.

        The arc for the tag pair is looked up (and created blank if missing). The file contents are only loaded when
        their goodness is strictly better than what the arc already holds.

        Returns:
            The arc for the tag pair.
        """
        reader.tag_match("Arc")
        from_tag_id = reader.integer_attribute_read("From_Tag_Id")
        from_twist = reader.double_attribute_read("From_Twist")
        distance = reader.double_attribute_read("Distance")
        to_tag_id = reader.integer_attribute_read("To_Tag_Id")
        to_twist = reader.double_attribute_read("To_Twist")
        goodness = reader.double_attribute_read("Goodness")
        in_tree = bool(reader.integer_attribute_read("In_Tree"))
        reader.string_match("/>\n")

        from_twist = float(np.deg2rad(from_twist))
        to_twist = float(np.deg2rad(to_twist))

        from_tag = tag_map.tag_lookup(from_tag_id)
        to_tag = tag_map.tag_lookup(to_tag_id)
        from_tag, from_twist, to_tag, to_twist = canonicalize(from_tag, from_twist, to_tag, to_twist)
        arc = tag_map.arc_lookup(from_tag, to_tag)

        if arc.goodness > goodness:
            arc.update(from_twist, distance, to_twist, goodness)
            arc.in_tree = in_tree
            tag_map.arc_announce(arc, None, 0)
        return arc

    def write(self, writer: TagFileWriter) -> None:
        """Writes this arc as an `<Arc .../>` element, with twists in degrees."""
        from_twist_degrees = np.rad2deg(self.from_twist)
        to_twist_degrees = np.rad2deg(self.to_twist)

        writer.format(" <Arc")
        writer.format(' From_Tag_Id="%d"', self.from_tag.id)
        writer.format(' From_Twist="%f"', from_twist_degrees)
        writer.format(' Distance="%f"', self.distance)
        writer.format(' To_Tag_Id="%d"', self.to_tag.id)
        writer.format(' To_Twist="%f"', to_twist_degrees)
        writer.format(' Goodness="%f"', self.goodness)
        writer.format(' In_Tree="%d"', self.in_tree)
        writer.format("/>\n")

    def svg_write(self, svg: SVG) -> None:
        """Draws this arc into `svg`, red if it is in the spanning tree and green otherwise."""
        color = ArcColor.IN_TREE if self.in_tree else ArcColor.NOT_IN_TREE
        svg.line(self.from_tag.x, self.from_tag.y, self.to_tag.x, self.to_tag.y, color.value)


def priority_less(arc1: Arc, arc2: Arc) -> bool:
    """Returns True if `arc1` should be considered before `arc2` when building the spanning tree.

    Longer arcs come first. Among arcs of exactly equal distance, the arc whose closer endpoint has the larger hop
    count comes first.
    """
    if arc1.distance > arc2.distance:
        return True
    elif arc1.distance == arc2.distance:
        arc1_lowest_hop_count = min(arc1.from_tag.hop_count, arc1.to_tag.hop_count)
        arc2_lowest_hop_count = min(arc2.from_tag.hop_count, arc2.to_tag.hop_count)
        if arc1_lowest_hop_count > arc2_lowest_hop_count:
            return True
    return False


def _priority_compare(arc1: Arc, arc2: Arc) -> int:
    if priority_less(arc1, arc2):
        return -1
    if priority_less(arc2, arc1):
        return 1
    return 0


def sort_by_priority(arcs: Iterable[Arc]) -> List[Arc]:
    """Returns `arcs` in spanning tree priority order (see `priority_less`)."""
    return sorted(arcs, key=functools.cmp_to_key(_priority_compare))
