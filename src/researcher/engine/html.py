# src/researcher/engine/html.py
"""
Tag scanning without a DOM.

Researches need the original markup of an element (outer HTML exactly as the
author wrote it) and the length of its visible text. A parser that rebuilds the
tree loses the first, so elements are located with a small state machine that
walks the raw string, reads tag names and attributes (any order, single,
double or no quotes) and pairs opening and closing tags per tag name.

Malformed input never raises: stray '<' characters are treated as text and an
unterminated tag ends the scan.
"""
import html as html_lib
import re
import unicodedata
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

OPEN = "open"
CLOSE = "close"
SELF_CLOSING = "self_closing"
COMMENT = "comment"
BROKEN = "broken"

PARAGRAPH_TAGS = ("p",)
HEADING_TAGS = tuple(f"h{level}" for level in range(1, 7))

# Contents of these elements are never markup and never visible text
RAW_TEXT_TAGS = {"script", "style"}

# Attribute parser states
_BEFORE_ATTR = 0
_ATTR_NAME = 1
_AFTER_ATTR_NAME = 2
_BEFORE_VALUE = 3
_VALUE_QUOTED = 4
_VALUE_UNQUOTED = 5

_WHITESPACE_RE = re.compile(r"\s+")
# Searched on the original text: str.lower() can change offsets ('İ' becomes two code points).
_RAW_TEXT_END_RE = {name: re.compile(rf"</{name}", re.IGNORECASE | re.ASCII) for name in RAW_TEXT_TAGS}


@dataclass
class TagToken:
    """A single tag (or comment) found in the text, with its [start, end) offsets."""
    kind: str
    name: str
    start: int
    end: int
    attrs: Dict[str, str] = field(default_factory=dict)


@dataclass
class HTMLElement:
    """An element whose opening and closing tag were both found."""
    tag: str
    attrs: Dict[str, str]
    start: int
    end: int
    outer_html: str
    inner_html: str

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    def has_class(self, class_name: str) -> bool:
        """Token match: 'has-text-align-center' does not match 'has-text-align-center-x'."""
        return class_name in self.classes

    @property
    def text(self) -> str:
        return strip_tags(self.inner_html)

    @property
    def is_heading(self) -> bool:
        return self.tag in HEADING_TAGS

    @property
    def level(self) -> int:
        return int(self.tag[1]) if self.is_heading else 0


def _read_tag(text: str, pos: int) -> Tuple[Optional[str], Dict[str, str], bool, int]:
    """
    Reads a tag name and its attributes, starting right after '<' or '</'.

    Returns:
        (name, attrs, self_closing, end) where `end` is the offset after '>'.
        `name` is None when the tag is never terminated.
    """
    n = len(text)
    name_start = pos
    while pos < n and (text[pos].isalnum() or text[pos] in "-_:"):
        pos += 1
    name = text[name_start:pos].lower()

    attrs: Dict[str, str] = {}
    state = _BEFORE_ATTR
    attr_start = value_start = 0
    attr_name = ""
    quote = ""
    self_closing = False

    while pos < n:
        ch = text[pos]

        if state == _BEFORE_ATTR:
            if ch == ">":
                return name, attrs, self_closing, pos + 1
            if ch == "/":
                self_closing = True
            elif not ch.isspace():
                self_closing = False
                attr_start = pos
                state = _ATTR_NAME

        elif state == _ATTR_NAME:
            if ch == "=" or ch.isspace() or ch in "/>":
                attr_name = text[attr_start:pos].lower()
                if ch == "=":
                    state = _BEFORE_VALUE
                elif ch.isspace():
                    state = _AFTER_ATTR_NAME
                else:
                    attrs.setdefault(attr_name, "")
                    state = _BEFORE_ATTR
                    continue

        elif state == _AFTER_ATTR_NAME:
            if ch == "=":
                state = _BEFORE_VALUE
            elif not ch.isspace():
                attrs.setdefault(attr_name, "")
                state = _BEFORE_ATTR
                continue

        elif state == _BEFORE_VALUE:
            if ch in "\"'":
                quote = ch
                value_start = pos + 1
                state = _VALUE_QUOTED
            elif ch == ">":
                attrs.setdefault(attr_name, "")
                state = _BEFORE_ATTR
                continue
            elif not ch.isspace():
                value_start = pos
                state = _VALUE_UNQUOTED

        elif state == _VALUE_QUOTED:
            if ch == quote:
                attrs.setdefault(attr_name, html_lib.unescape(text[value_start:pos]))
                state = _BEFORE_ATTR

        elif state == _VALUE_UNQUOTED:
            if ch.isspace() or ch == ">":
                attrs.setdefault(attr_name, html_lib.unescape(text[value_start:pos]))
                state = _BEFORE_ATTR
                continue

        pos += 1

    return None, attrs, False, n


def scan_tags(text: str) -> Iterator[TagToken]:
    """
    Yields every tag and comment in `text` in document order.

    The body of <script> and <style> is skipped. An unterminated tag or comment
    yields a single BROKEN token covering the rest of the text and ends the scan.
    """
    if not text:
        return

    n = len(text)
    i = 0

    while i < n:
        lt = text.find("<", i)
        if lt == -1:
            return

        # --- Comments ---
        if text.startswith("<!--", lt):
            close = text.find("-->", lt + 4)
            if close == -1:
                yield TagToken(BROKEN, "", lt, n)
                return
            yield TagToken(COMMENT, "", lt, close + 3)
            i = close + 3
            continue

        j = lt + 1
        closing = j < n and text[j] == "/"
        if closing:
            j += 1

        if j >= n or not text[j].isalpha():
            # Doctype / processing instruction: skip. Anything else: a literal '<'.
            if not closing and j < n and text[j] in "!?":
                end = text.find(">", j)
                if end == -1:
                    yield TagToken(BROKEN, "", lt, n)
                    return
                yield TagToken(COMMENT, "", lt, end + 1)
                i = end + 1
            else:
                i = lt + 1
            continue

        name, attrs, self_closing, end = _read_tag(text, j)
        if name is None:
            yield TagToken(BROKEN, "", lt, n)
            return

        if closing:
            yield TagToken(CLOSE, name, lt, end)
            i = end
            continue

        kind = SELF_CLOSING if self_closing else OPEN
        yield TagToken(kind, name, lt, end, attrs)
        i = end

        if kind == OPEN and name in RAW_TEXT_TAGS:
            body_end = _RAW_TEXT_END_RE[name].search(text, i)
            i = n if body_end is None else body_end.start()


def find_elements(text: str, tag_names: Iterable[str]) -> List[HTMLElement]:
    """
    Finds all complete elements with one of the given tag names.

    Opening and closing tags are paired per tag name with a stack, so nested
    elements of the same name pair correctly. Elements that are never closed
    are not returned. The result is in document order (by opening tag).
    """
    wanted = {name.lower() for name in tag_names}
    open_tags: Dict[str, List[TagToken]] = defaultdict(list)
    elements: List[HTMLElement] = []

    for token in scan_tags(text):
        if token.name not in wanted:
            continue

        if token.kind == OPEN:
            open_tags[token.name].append(token)
        elif token.kind == CLOSE and open_tags[token.name]:
            opening = open_tags[token.name].pop()
            elements.append(HTMLElement(
                tag=token.name,
                attrs=opening.attrs,
                start=opening.start,
                end=token.end,
                outer_html=text[opening.start:token.end],
                inner_html=text[opening.end:token.start]
            ))

    elements.sort(key=lambda el: el.start)
    return elements


def strip_tags(html: str) -> str:
    """
    Returns the human-visible text of a markup fragment.

    Tags, comments and script/style bodies are removed, entities are decoded
    and runs of whitespace collapse to a single space.
    """
    if not html:
        return ""

    parts: List[str] = []
    pos = 0
    skip_segment = False

    for token in scan_tags(html):
        if not skip_segment:
            parts.append(html[pos:token.start])
        pos = token.end
        skip_segment = token.kind == OPEN and token.name in RAW_TEXT_TAGS

    if not skip_segment:
        parts.append(html[pos:])

    text = html_lib.unescape("".join(parts))
    return _WHITESPACE_RE.sub(" ", text).strip()


def visible_length(html: str) -> int:
    """Number of visible characters (code points after NFC normalisation, tags excluded)."""
    return len(unicodedata.normalize("NFC", strip_tags(html)))
