"""TagMap: the container that owns all tags and arcs of a map.

Arcs are indexed by their order-independent tag pair key, so there is at most one arc per pair of tags. Tags only hold
the keys of their incident arcs.

Authors: tagmap contributors
"""
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import networkx as nx

import tagmap.utils.logger as logger_utils
from tagmap.common.arc import Arc, canonicalize, sort_by_priority
from tagmap.common.tag import UNREACHED_HOP_COUNT, ArcKey, Tag
from tagmap.utils.tag_file import TagFileReader, TagFileWriter
from tagmap.visualization.svg import SVG

logger = logger_utils.get_logger()

ArcListener = Callable[[Arc, Optional[Any], int], None]


class TagMap:
    """Collection of tags and the arcs measured between them."""

    def __init__(self) -> None:
        self.tags: Dict[int, Tag] = {}
        self.arcs: Dict[ArcKey, Arc] = {}
        self.is_changed = False
        self._listeners: List[ArcListener] = []

    def __len__(self) -> int:
        """Number of arcs."""
        return len(self.arcs)

    def tag_lookup(self, tag_id: int) -> Tag:
        """Returns the tag with `tag_id`, creating it if it does not exist yet."""
        tag = self.tags.get(tag_id)
        if tag is None:
            tag = Tag(id=tag_id)
            self.tags[tag_id] = tag
        return tag

    def arc_append(self, arc: Arc) -> None:
        """Adds a newly created arc to the map.

        Raises:
            ValueError: if the map already holds an arc for the same pair of tags, or holds a different tag object
                with the id of one of the arc tags.
        """
        if arc.pair in self.arcs:
            raise ValueError(f"TagMap already contains an arc for tag pair {arc.pair}.")
        for tag in (arc.from_tag, arc.to_tag):
            known_tag = self.tags.get(tag.id)
            if known_tag is not None and known_tag is not tag:
                raise ValueError(f"Arc {arc.pair} refers to tag {tag.id}, which is not the tag held by this TagMap.")
        self.tags.setdefault(arc.from_tag.id, arc.from_tag)
        self.tags.setdefault(arc.to_tag.id, arc.to_tag)
        self.arcs[arc.pair] = arc

    def arc_lookup(self, from_tag: Tag, to_tag: Tag) -> Arc:
        """Returns the arc between two tags, given in either order.

        If there is no such arc yet, a blank one is created and registered. A blank arc has a sentinel goodness so
        that the first real reading always replaces it.
        """
        from_tag, _, to_tag, _ = canonicalize(from_tag, 0.0, to_tag, 0.0)
        arc = self.arcs.get((from_tag.id, to_tag.id))
        if arc is None:
            arc = Arc(from_tag=from_tag, to_tag=to_tag)
            self.arc_append(arc)
            from_tag.arc_append(arc)
            to_tag.arc_append(arc)
        return arc

    def add_announce_listener(self, listener: ArcListener) -> None:
        """Registers `listener(arc, image, sequence_number)` to be called whenever arc data changes."""
        self._listeners.append(listener)

    def arc_announce(self, arc: Arc, image: Optional[Any] = None, sequence_number: int = 0) -> None:
        """Announces that the data of `arc` has changed.

        Args:
            arc: The arc whose data changed.
            image: Optional camera image the new reading came from.
            sequence_number: Sequence number of `image`.
        """
        logger.debug("Arc %s updated (distance=%f, goodness=%f).", arc.pair, arc.distance, arc.goodness)
        self.is_changed = True
        for listener in self._listeners:
            listener(arc, image, sequence_number)

    def arc_observe(
        self,
        from_tag: Tag,
        from_twist: float,
        distance: float,
        to_tag: Tag,
        to_twist: float,
        goodness: float,
        image: Optional[Any] = None,
        sequence_number: int = 0,
    ) -> Arc:
        """Folds a new measurement of a tag pair into the map.

        The first measurement of a pair creates its arc. Later measurements only replace the stored values when their
        goodness is strictly lower.

        Returns:
            The arc for the tag pair.
        """
        from_tag = self.tags.setdefault(from_tag.id, from_tag)
        to_tag = self.tags.setdefault(to_tag.id, to_tag)
        from_tag, from_twist, to_tag, to_twist = canonicalize(from_tag, from_twist, to_tag, to_twist)

        arc = self.arcs.get((from_tag.id, to_tag.id))
        if arc is None:
            arc = Arc.create(from_tag, from_twist, distance, to_tag, to_twist, goodness, self)
            self.arc_announce(arc, image, sequence_number)
        elif goodness < arc.goodness:
            arc.update(from_twist, distance, to_twist, goodness)
            self.arc_announce(arc, image, sequence_number)
        return arc

    def sorted_tags(self) -> List[Tag]:
        """Returns the tags ordered by id."""
        return [self.tags[tag_id] for tag_id in sorted(self.tags)]

    def sorted_arcs(self) -> List[Arc]:
        """Returns the arcs ordered by tag pair."""
        return sorted(self.arcs.values())

    def priority_arcs(self) -> List[Arc]:
        """Returns the arcs in spanning tree priority order."""
        return sort_by_priority(self.arcs.values())

    def incident_arcs(self, tag: Tag) -> List[Arc]:
        """Returns the arcs touching `tag`."""
        return [self.arcs[key] for key in tag.arc_keys]

    def hop_counts_update(self, root_id: Optional[int] = None) -> None:
        """Recomputes the hop count of every tag as its number of arcs from the root tag.

        Args:
            root_id: Id of the root tag. Defaults to the lowest tag id.
        """
        if len(self.tags) == 0:
            return
        if root_id is None:
            root_id = min(self.tags)
        if root_id not in self.tags:
            raise ValueError(f"Root tag {root_id} is not in the map.")

        graph = nx.Graph()
        graph.add_nodes_from(self.tags)
        graph.add_edges_from(self.arcs)
        hop_counts = nx.single_source_shortest_path_length(graph, root_id)

        unreached = []
        for tag_id, tag in self.tags.items():
            tag.hop_count = hop_counts.get(tag_id, UNREACHED_HOP_COUNT)
            if tag.hop_count == UNREACHED_HOP_COUNT:
                unreached.append(tag_id)
        if len(unreached) > 0:
            logger.warning("%d tags are not connected to root tag %d: %s", len(unreached), root_id, unreached)

    def read(self, reader: TagFileReader) -> None:
        """Reads a `<Map>` element and merges its tags and arcs into this map."""
        reader.tag_match("Map")
        tags_count = reader.integer_attribute_read("Tags_Count")
        arcs_count = reader.integer_attribute_read("Arcs_Count")
        reader.string_match(">\n")

        for _ in range(tags_count):
            Tag.read(reader, self)
        for _ in range(arcs_count):
            Arc.read(reader, self)

        reader.whitespace_skip()
        reader.string_match("</Map>")
        logger.info("Read %d tags and %d arcs from %s.", tags_count, arcs_count, reader.file_name)

    def write(self, writer: TagFileWriter) -> None:
        """Writes this map as a `<Map>` element."""
        writer.format('<Map Tags_Count="%d" Arcs_Count="%d">\n', len(self.tags), len(self.arcs))
        for tag in self.sorted_tags():
            tag.write(writer)
        for arc in self.sorted_arcs():
            arc.write(writer)
        writer.format("</Map>\n")

    def save(self, file_path: Union[str, Path]) -> None:
        """Writes this map to `file_path`."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w") as f:
            self.write(TagFileWriter(f))
        self.is_changed = False
        logger.info("Saved %d tags and %d arcs to %s.", len(self.tags), len(self.arcs), file_path)

    @classmethod
    def load(cls, file_path: Union[str, Path]) -> "TagMap":
        """Reads a map from `file_path`."""
        tag_map = cls()
        tag_map.read(TagFileReader.from_path(file_path))
        tag_map.is_changed = False
        return tag_map

    def svg_write(self, svg: SVG) -> None:
        """Draws every arc of this map into `svg`."""
        for arc in self.sorted_arcs():
            arc.svg_write(svg)
