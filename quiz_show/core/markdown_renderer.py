"""Markdown rendering helpers for question prompts and explanations.

Architecture note:
    Qt labels understand a subset of HTML, so markdown is converted once per
    question with markdown-it and displayed as rich text. Raw HTML in quiz
    files is disabled to keep imported content from injecting markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments for Qt rich-text widgets."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_with_font_size(self, markdown_text: str, font_size: int) -> str:
        """Render markdown wrapped in a container using the given point size."""

        fragment = self.render_fragment(markdown_text)
        if not fragment:
            return ""
        return f'<div style="font-size: {font_size}pt;">{fragment}</div>'


renderer = MarkdownRenderer()
# Shared instance; only used from the Qt main thread.
