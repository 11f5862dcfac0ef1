"""Reader and writer for the XML-like tag files used to persist maps.

A map file is a sequence of elements such as

    <Map Tags_Count="2" Arcs_Count="1">
     <Tag Id="2" X="0.000000" Y="0.000000" Twist="0.000000" Hop_Count="0"/>
     ...
    </Map>

Attributes are always read in a fixed order, so the reader is a simple cursor over the text rather than a general
XML parser. Any deviation from the expected text is fatal and raises a ValueError.

Authors: tagmap contributors
"""
import re
from typing import IO

INTEGER_PATTERN = re.compile(r"[-+]?\d+")
DOUBLE_PATTERN = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?|[-+]?(inf|nan)")


class TagFileReader:
    """Cursor over the text of a tag file."""

    def __init__(self, text: str, file_name: str = "<string>") -> None:
        """Initializes the reader.

        Args:
            text: Complete contents of the file.
            file_name: Name used in error messages.
        """
        self._text = text
        self._position = 0
        self.file_name = file_name

    @classmethod
    def from_path(cls, file_path: str) -> "TagFileReader":
        """Creates a reader for the file at `file_path`."""
        with open(file_path, "r") as f:
            return cls(f.read(), file_name=str(file_path))

    def _location(self) -> str:
        """Returns a `file:line:column` description of the cursor position."""
        consumed = self._text[: self._position]
        line = consumed.count("\n") + 1
        column = self._position - (consumed.rfind("\n") + 1) + 1
        return f"{self.file_name}:{line}:{column}"

    def _fail(self, expected: str) -> None:
        found = self._text[self._position : self._position + 20]
        raise ValueError(f"{self._location()}: expected {expected}, found {found!r}")

    def at_end(self) -> bool:
        """Returns True if only whitespace remains."""
        return self._text[self._position :].strip() == ""

    def whitespace_skip(self) -> None:
        """Advances the cursor past any whitespace."""
        while self._position < len(self._text) and self._text[self._position].isspace():
            self._position += 1

    def string_match(self, text: str) -> None:
        """Consumes `text` literally, without skipping whitespace first.

        Raises:
            ValueError: if the text at the cursor differs from `text`.
        """
        if not self._text.startswith(text, self._position):
            self._fail(repr(text))
        self._position += len(text)

    def tag_match(self, tag_name: str) -> None:
        """Skips whitespace and consumes the opening of a `<tag_name` element."""
        self.whitespace_skip()
        self.string_match("<" + tag_name)
        # `<Arc` must not match `<Arcs`.
        if self._position < len(self._text) and not (
            self._text[self._position].isspace() or self._text[self._position] in "/>"
        ):
            self._fail(f"end of tag name {tag_name!r}")

    def _attribute_value_read(self, attribute_name: str) -> str:
        """Consumes ` attribute_name="value"` and returns the raw value."""
        self.whitespace_skip()
        self.string_match(attribute_name + '="')
        end = self._text.find('"', self._position)
        if end < 0:
            self._fail(f"closing quote for attribute {attribute_name!r}")
        value = self._text[self._position : end]
        self._position = end + 1
        return value

    def string_attribute_read(self, attribute_name: str) -> str:
        """Reads a string-valued attribute."""
        return self._attribute_value_read(attribute_name)

    def integer_attribute_read(self, attribute_name: str) -> int:
        """Reads an integer-valued attribute.

        Raises:
            ValueError: if the attribute is missing or is not an integer.
        """
        start = self._position
        value = self._attribute_value_read(attribute_name)
        if INTEGER_PATTERN.fullmatch(value) is None:
            self._position = start
            self._fail(f"integer value for attribute {attribute_name!r}")
        return int(value)

    def double_attribute_read(self, attribute_name: str) -> float:
        """Reads a floating point attribute.

        Raises:
            ValueError: if the attribute is missing or is not a number.
        """
        start = self._position
        value = self._attribute_value_read(attribute_name)
        if DOUBLE_PATTERN.fullmatch(value) is None:
            self._position = start
            self._fail(f"floating point value for attribute {attribute_name!r}")
        return float(value)


class TagFileWriter:
    """Formatted writer for tag files."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def format(self, fmt: str, *args) -> None:
        """Writes `fmt % args` to the underlying stream."""
        self._stream.write(fmt % args if args else fmt)
