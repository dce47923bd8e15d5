"""Top level package for the API documentation renderer.

This package turns structured descriptions of API endpoints into
documents.  It is intended for developers who want the same endpoint
description published as a live HTML preview, a standalone HTML page,
Markdown, JSON or a Word document.

Key concepts:

* **Model classes** describe endpoints, their parameters and response
  fields.  See :mod:`apidocs.model`.
* **Formatting** pretty-prints example payloads and escapes HTML.
  See :mod:`apidocs.formatting`.
* **Renderers** provide the output formats (preview, html, md, word).
  See :mod:`apidocs.renderers`.
* **Registry** enables decorator-based format registration.
  See :mod:`apidocs.registry`.
* **Exports** assemble documents and describe export files.
  See :mod:`apidocs.exports` and :mod:`apidocs.delivery`.
"""

from .model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor
from .errors import (
    ApiDocsError,
    DeliveryError,
    ExportCancelled,
    UnknownFormatError,
    ValidationError,
)
from .formatting import escape_html, format_value
from .registry import Registry
from .renderers import (
    EndpointRenderer,
    HtmlExportRenderer,
    HtmlPreviewRenderer,
    MarkdownRenderer,
    WordHtmlRenderer,
    renderer_registry,
)
from .exports import EXPORT_FORMATS, ExportDocument, ExportFormat, assemble, build_export, export_json, render
from .choice import FormatChoice
from .loader import load_records, record_from_dict

__all__ = [
    "DocumentationRecord",
    "FieldDescriptor",
    "ReturnsDescriptor",
    "ApiDocsError",
    "DeliveryError",
    "ExportCancelled",
    "UnknownFormatError",
    "ValidationError",
    "escape_html",
    "format_value",
    "Registry",
    "EndpointRenderer",
    "HtmlExportRenderer",
    "HtmlPreviewRenderer",
    "MarkdownRenderer",
    "WordHtmlRenderer",
    "renderer_registry",
    "EXPORT_FORMATS",
    "ExportDocument",
    "ExportFormat",
    "assemble",
    "build_export",
    "export_json",
    "render",
    "FormatChoice",
    "load_records",
    "record_from_dict",
]
