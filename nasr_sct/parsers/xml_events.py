"""
Forward-only XML parse event cursor.

Wraps ``xml.etree.ElementTree.XMLPullParser`` so that a document can be read
one event at a time: the input is fed to the tokenizer in chunks and only
the events not yet consumed are held in memory. Elements are cleared as soon
as their end event has been read, and finished children of the root are
detached from it.

Example:
    ```python
    cursor = XmlEventCursor.from_path("APT_AIXM.xml")
    while True:
        event = cursor.read_event()
        if event.kind is EventKind.EOF:
            break
    cursor.close()
    ```
"""

import io
import xml.etree.ElementTree as ET
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Deque, Dict, Optional, Union

from ..config import XML_CHUNK_SIZE
from ..exceptions import TruncatedDocumentError


class EventKind(Enum):
    START = "start"
    END = "end"
    EOF = "eof"


@dataclass(frozen=True)
class XmlEvent:
    """
    One parse event.

    ``tag`` and attribute keys use ElementTree's ``{namespace}local`` form.
    END events carry the element's own text; self-closing elements produce a
    START immediately followed by an END.
    """

    kind: EventKind
    tag: str = ""
    attrib: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None

    @property
    def local_name(self) -> str:
        return self.tag.rsplit("}", 1)[-1]

    def is_start(self, tag: str) -> bool:
        return self.kind is EventKind.START and self.tag == tag

    def is_end(self, tag: str) -> bool:
        return self.kind is EventKind.END and self.tag == tag


EOF_EVENT = XmlEvent(EventKind.EOF)


class XmlEventCursor:
    """
    Reads XmlEvents from a binary stream.

    Tokenizer errors (``ET.ParseError``) raised while feeding the input are
    propagated unchanged. Once the input is exhausted every call to
    ``read_event`` returns an EOF event; ``close`` must then be called to
    detect a syntactically incomplete document.
    """

    def __init__(self, source: BinaryIO, chunk_size: int = XML_CHUNK_SIZE):
        self._source = source
        self._chunk_size = chunk_size
        self._parser = ET.XMLPullParser(events=("start", "end"))
        self._pending: Deque[XmlEvent] = deque()
        self._root: Optional[ET.Element] = None
        self._depth = 0
        self._exhausted = False
        self._closed = False

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int = XML_CHUNK_SIZE) -> 'XmlEventCursor':
        return cls(io.BytesIO(data), chunk_size)

    @classmethod
    def from_path(cls, path: Union[str, Path], chunk_size: int = XML_CHUNK_SIZE) -> 'XmlEventCursor':
        """Read a document from disk; the file is read fully into memory."""
        with open(path, "rb") as f:
            return cls.from_bytes(f.read(), chunk_size)

    def _fill(self) -> None:
        chunk = self._source.read(self._chunk_size)
        if not chunk:
            self._exhausted = True
            return
        self._parser.feed(chunk)
        for event, elem in self._parser.read_events():
            if event == "start":
                if self._root is None:
                    self._root = elem
                self._depth += 1
                self._pending.append(XmlEvent(EventKind.START, elem.tag, dict(elem.attrib)))
            else:
                self._depth -= 1
                self._pending.append(XmlEvent(EventKind.END, elem.tag, text=elem.text))
                elem.clear()
                if self._depth == 1:
                    # Detach finished top-level members so the root does not grow
                    del self._root[:]

    def read_event(self) -> XmlEvent:
        """Return the next event, or EOF once the input is exhausted."""
        while not self._pending:
            if self._exhausted:
                return EOF_EVENT
            self._fill()
        return self._pending.popleft()

    def read_text(self, tag: str) -> str:
        """
        Read the text of an element whose START event was just consumed.

        Consumes every event up to and including the matching END.

        Args:
            tag: Qualified tag of the open element

        Returns:
            The element's own text, stripped of surrounding whitespace

        Raises:
            TruncatedDocumentError: If the document ends first
        """
        depth = 0
        while True:
            event = self.read_event()
            if event.kind is EventKind.START:
                depth += 1
            elif event.kind is EventKind.END:
                if depth == 0:
                    return (event.text or "").strip()
                depth -= 1
            else:
                raise TruncatedDocumentError(tag)

    def close(self) -> None:
        """Finalize the tokenizer; raises ET.ParseError for incomplete input."""
        if self._closed:
            return
        self._closed = True
        self._parser.close()
