"""General Methods for text"""

import re
from typing import Optional

MARKDOWN_LINK_PATTERN = re.compile(r"\[(.+)]\((\S+)\)")


def markdown_link(text: str, url: str) -> str:
    """Returns a markdown link [text](url)"""
    return f"[{text}]({url})"


def extract_markdown_link(text: str) -> Optional[tuple[str, str]]:
    """Returns the text and url if the whole text is a markdown link"""
    if link := MARKDOWN_LINK_PATTERN.fullmatch(text.strip()):
        return link.group(1), link.group(2)
    return None


def markdown_task(text: str, checked: bool = False) -> str:
    """Returns a markdown task list item"""
    return f"- [{'x' if checked else ' '}] {text}"
