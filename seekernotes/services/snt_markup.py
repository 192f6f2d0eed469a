from __future__ import annotations

import html
import re
from html.parser import HTMLParser
from typing import Literal

from seekernotes.settings import EMPTY_NOTE_PLACEHOLDER

FontStyle = Literal["normal", "retro", "stylish"]

FONT_TAGS: dict[str, str] = {
    "normal": "GEIST_SANS",
    "retro": "FIRA_CODE",
    "stylish": "GEIST_STYLISH",
}

FONT_HEADER_RE = re.compile(r"^\[FONT:([^\]]+)\]\s*\n?")
BOLD_RE = re.compile(r"\[BOLD\](.*?)\[/BOLD\]")
ITALIC_RE = re.compile(r"\[ITALIC\](.*?)\[/ITALIC\]")
UNDERLINE_RE = re.compile(r"\[UNDERLINE\](.*?)\[/UNDERLINE\]")
SIZE_RE = re.compile(r"\[SIZE:(\d+)\](.*?)\[/SIZE\]")
FONT_SIZE_RE = re.compile(r"font-size\s*:\s*(-?\d+)")

_VOID_TAGS = {"br", "hr", "img", "input", "meta", "link", "wbr"}


def detect_font_style(snt: str) -> FontStyle | None:
    """Font style named by the [FONT:...] header, None when absent/unknown."""
    m = FONT_HEADER_RE.match(snt or "")
    if not m:
        return None
    tag = m.group(1).strip()
    for style, font_tag in FONT_TAGS.items():
        if font_tag == tag:
            return style  # type: ignore[return-value]
    return None


def snt_to_html(snt: str) -> str:
    """
    SNT markup -> HTML for the editor view.
    Text is escaped first, so only the markup tags below produce HTML.
    Tags never span lines.
    """
    body = FONT_HEADER_RE.sub("", snt or "", count=1)
    body = html.escape(body, quote=False)

    body = BOLD_RE.sub(r"<strong>\1</strong>", body)
    body = ITALIC_RE.sub(r"<em>\1</em>", body)
    body = UNDERLINE_RE.sub(r"<u>\1</u>", body)
    body = SIZE_RE.sub(r'<span style="font-size:\1px;">\2</span>', body)

    lines = [line for line in body.split("\n") if line.strip()]
    if not lines:
        return f"<p>{EMPTY_NOTE_PLACEHOLDER}</p>"
    return "".join(f"<p>{line}</p>" for line in lines)


class _SntBuilder(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        # (tag, closing text) for every open element
        self._stack: list[tuple[str, str]] = []

    def handle_starttag(self, tag, attrs):
        if tag in _VOID_TAGS:
            return

        opening, closing = "", ""
        if tag in ("b", "strong"):
            opening, closing = "[BOLD]", "[/BOLD]"
        elif tag in ("i", "em"):
            opening, closing = "[ITALIC]", "[/ITALIC]"
        elif tag == "u":
            opening, closing = "[UNDERLINE]", "[/UNDERLINE]"
        elif tag == "span":
            style = dict(attrs).get("style") or ""
            m = FONT_SIZE_RE.search(style)
            if m:
                opening, closing = f"[SIZE:{int(m.group(1))}]", "[/SIZE]"
        elif tag in ("p", "div"):
            closing = "\n"

        self.parts.append(opening)
        self._stack.append((tag, closing))

    def handle_endtag(self, tag):
        if not any(t == tag for t, _ in self._stack):
            return
        while self._stack:
            open_tag, closing = self._stack.pop()
            self.parts.append(closing)
            if open_tag == tag:
                break

    def handle_data(self, data):
        self.parts.append(data)

    def close(self):
        super().close()
        while self._stack:
            _, closing = self._stack.pop()
            self.parts.append(closing)


def html_to_snt(html_text: str, font_style: FontStyle = "normal") -> str:
    """Editor HTML -> SNT text with a [FONT:...] header line."""
    font_tag = FONT_TAGS.get(font_style)
    if font_tag is None:
        raise ValueError(f"unknown font style: {font_style!r}")

    builder = _SntBuilder()
    builder.feed(html_text or "")
    builder.close()

    snt = f"[FONT:{font_tag}]\n" + "".join(builder.parts)
    return snt.strip()


class SntRenderer:
    """Renderer the facade uses to fill NoteFile.html_content on demand."""

    def render(self, snt: str) -> str:
        return snt_to_html(snt)

    def to_snt(self, html_text: str, font_style: FontStyle = "normal") -> str:
        return html_to_snt(html_text, font_style)
