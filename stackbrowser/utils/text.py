from __future__ import annotations

import re
import warnings
from datetime import datetime, UTC
from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag, XMLParsedAsHTMLWarning

# Bodies are HTML fragments, never XML
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

_INLINE_WRAPPERS = {
    "strong": "**",
    "b": "**",
    "em": "*",
    "i": "*",
}


def strip_html(html: str | None) -> str:
    """Drop all markup and collapse whitespace, for one-line previews."""
    text = BeautifulSoup(html or "", "html.parser").get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()


def html_to_text(html: str | None) -> str:
    """
    Render a Stack Overflow HTML body as Markdown-flavoured terminal text.

    Code blocks become fenced blocks (with the ``lang-*`` hint when present),
    inline code keeps its backticks, lists are bulleted or numbered and links
    render as ``[text](href)``.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    for t in soup(["script", "style"]):
        t.decompose()

    raw = _render(soup)
    lines = [line.rstrip() for line in raw.splitlines()]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()


def _render(node, indent: int = 0) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    if not isinstance(node, Tag):
        return ""

    name = node.name
    if name == "pre":
        return _render_pre(node)
    if name in {"ul", "ol"}:
        return _render_list(node, indent)

    inner = "".join(_render(child, indent) for child in node.children)

    if name in _INLINE_WRAPPERS:
        mark = _INLINE_WRAPPERS[name]
        return f"{mark}{inner.strip()}{mark}"
    if name in {"h1", "h2", "h3", "h4", "h5", "h6"}:
        return f"{'#' * int(name[1])} {inner.strip()}\n\n"
    if name in {"p", "div"}:
        return f"{inner.strip()}\n\n"
    if name == "br":
        return "\n"
    if name == "hr":
        return "---\n\n"
    if name == "code":
        return f"`{inner}`"
    if name == "blockquote":
        quoted = "\n".join(
            f"> {line}" if line.strip() else ">" for line in inner.strip().splitlines()
        )
        return quoted + "\n\n"
    if name == "a":
        href = (node.get("href") or "").strip()
        label = inner.strip() or href
        return f"[{label}]({href})" if href else label
    if name == "img":
        alt = (node.get("alt") or "").strip() or "image"
        src = (node.get("src") or "").strip()
        return f"![{alt}]({src})" if src else alt
    return inner


def _render_pre(node: Tag) -> str:
    code = node.find("code")
    lang = ""
    if code is not None:
        for cls in code.get("class") or []:
            if cls.startswith(("language-", "lang-")):
                lang = cls.split("-", 1)[1]
                break
    body = (code or node).get_text().strip("\n")
    return f"```{lang}\n{body}\n```\n\n"


def _render_list(node: Tag, indent: int) -> str:
    lines: List[str] = []
    for idx, li in enumerate(node.find_all("li", recursive=False), start=1):
        bullet = "-" if node.name == "ul" else f"{idx}."
        body = "".join(_render(child, indent + 2) for child in li.children).strip()
        lines.append(" " * indent + f"{bullet} {body}")
    return "\n".join(lines) + "\n\n"


def format_timestamp(timestamp: int) -> str:
    """Absolute UTC date, e.g. ``May 03 2021 at 00:00``."""
    return datetime.fromtimestamp(timestamp, UTC).strftime("%b %d %Y at %H:%M")


_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
)


def format_relative(timestamp: int, now: datetime | None = None) -> str:
    """Human friendly age such as ``3 hours ago`` or ``moments ago``."""
    now = now or datetime.now(UTC)
    delta = int(now.timestamp()) - timestamp
    future = delta < 0
    delta = abs(delta)
    for unit, seconds in _UNITS:
        count = delta // seconds
        if count >= 1:
            label = f"{count} {unit}{'s' if count > 1 else ''}"
            return f"{label} from now" if future else f"{label} ago"
    return "moments from now" if future else "moments ago"
