"""Renderer implementations for endpoint documentation.

This package contains the output formats:
- preview: inline HTML fragment for a live preview
- html: standalone HTML document
- word: Word-compatible HTML document
- md: GitHub Flavoured Markdown

All renderers are automatically registered via decorators.
"""

from .base import Column, EndpointRenderer, renderer_registry
from .html import HtmlExportRenderer, HtmlPreviewRenderer, HtmlRenderer
from .markdown import MarkdownRenderer
from .word import WordHtmlRenderer

__all__ = [
    "Column",
    "EndpointRenderer",
    "renderer_registry",
    "HtmlRenderer",
    "HtmlPreviewRenderer",
    "HtmlExportRenderer",
    "MarkdownRenderer",
    "WordHtmlRenderer",
]
