import unittest

from apidocs.model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor
from apidocs.renderers import HtmlExportRenderer, HtmlPreviewRenderer, WordHtmlRenderer
from apidocs.renderers.html import TEMPLATES_DIR

HOSTILE = "<script>alert('x')</script> & \"quoted\""


def _record(**overrides):
    data = dict(
        method="POST",
        path="/api/v1/orders",
        description="Create order",
        params=[
            FieldDescriptor(name="customerId", type="string", required=True, example="CUST001"),
            FieldDescriptor(name="items", type="array<object>", example='[{"productId":"PROD001"}]'),
        ],
        returns=ReturnsDescriptor(
            description="Created order",
            fields=[FieldDescriptor(name="id", type="string", required=True, example="ORD001")],
        ),
    )
    data.update(overrides)
    return DocumentationRecord(**data)


def _hostile_record():
    return DocumentationRecord(
        method="GET",
        path="/search?q=<term>&page='1'",
        description=HOSTILE,
        notes="- " + HOSTILE,
        params=[
            FieldDescriptor(
                name="<name>",
                type="array<object>",
                description=HOSTILE,
                example='{"html": "<b>bold</b>"}',
                notes=HOSTILE,
            ),
        ],
        returns=ReturnsDescriptor(
            description=HOSTILE,
            fields=[FieldDescriptor(name="O'Reilly", type="string", example=HOSTILE)],
        ),
        request_example=HOSTILE,
        response_example={"text": "<i>"},
    )


class TestHtmlPreviewRenderer(unittest.TestCase):
    def setUp(self):
        self.renderer = HtmlPreviewRenderer()

    def test_heading_uses_method_class(self):
        result = self.renderer.render_endpoint(_record())
        self.assertIn('<span class="method post">POST</span>', result)
        self.assertIn("<code>/api/v1/orders</code>", result)

    def test_unknown_method_gets_default_class(self):
        result = self.renderer.render_endpoint(_record(method="OPTIONS"))
        self.assertIn('<span class="method get">OPTIONS</span>', result)

    def test_method_class_case_insensitive(self):
        result = self.renderer.render_endpoint(_record(method="delete"))
        self.assertIn('class="method delete"', result)

    def test_parameter_table(self):
        result = self.renderer.render_endpoint(_record())
        self.assertIn("Request Parameters", result)
        self.assertIn('<table class="param-table">', result)
        self.assertIn("<th>Field</th><th>Type</th><th>Required</th>", result)
        self.assertIn("<td><code>customerId</code></td>", result)
        self.assertIn("<td>✓</td>", result)
        self.assertIn("<td>✗</td>", result)

    def test_structured_example_pretty_printed_in_pre(self):
        result = self.renderer.render_endpoint(_record())
        self.assertIn(
            "<pre>[\n  {\n    &quot;productId&quot;: &quot;PROD001&quot;\n  }\n]</pre>",
            result,
        )

    def test_type_rendered_as_escaped_code(self):
        result = self.renderer.render_endpoint(_record())
        self.assertIn("<code>array&lt;object&gt;</code>", result)

    def test_response_table_includes_required(self):
        result = self.renderer.render_endpoint(_record(params=()))
        self.assertIn("Response Fields", result)
        self.assertIn("<th>Required</th>", result)
        self.assertIn("<strong>Description:</strong> Created order", result)

    def test_empty_returns_omitted(self):
        result = self.renderer.render_endpoint(_record(params=(), returns=ReturnsDescriptor()))
        self.assertNotIn("Response", result)
        self.assertNotIn('class="returns"', result)

    def test_missing_notes_render_dash(self):
        result = self.renderer.render_endpoint(_record())
        self.assertIn("<small>-</small>", result)

    def test_empty_params_omit_section(self):
        result = self.renderer.render_endpoint(_record(params=(), returns=None))
        self.assertNotIn("Request Parameters", result)
        self.assertNotIn("<table", result)
        self.assertNotIn("<th>", result)

    def test_notes_list(self):
        result = self.renderer.render_endpoint(_record(notes="- One\n- Two"))
        self.assertIn("<h4>Additional Notes</h4>", result)
        self.assertIn("<li>One</li>\n<li>Two</li>", result)

    def test_absent_sections_omitted(self):
        record = DocumentationRecord(method="GET", path="/health")
        result = self.renderer.render_endpoint(record)
        for text in ("description", "notes", "Request", "Response", "<table", "<pre>"):
            with self.subTest(text=text):
                self.assertNotIn(text, result)

    def test_document_is_fragment_with_stylesheet(self):
        result = self.renderer.render_document([_record()])
        self.assertTrue(result.startswith("<style>"))
        self.assertIn(".method.post", result)
        self.assertIn('<div class="documentation-preview">', result)
        self.assertNotIn("<html", result)

    def test_empty_document(self):
        result = self.renderer.render_document([])
        self.assertIn('<div class="documentation-preview">', result)
        self.assertNotIn('class="endpoint"', result)


class TestHtmlExportRenderer(unittest.TestCase):
    def setUp(self):
        self.renderer = HtmlExportRenderer()

    def test_standalone_document(self):
        result = self.renderer.render_document([_record()])
        self.assertTrue(result.startswith("<!DOCTYPE html>"))
        self.assertIn("<title>API Documentation</title>", result)
        self.assertIn("<h1>API Documentation</h1>", result)
        self.assertIn("max-width: 1200px", result)
        self.assertIn('<div class="endpoint">', result)
        self.assertTrue(result.rstrip().endswith("</html>"))

    def test_required_uses_yes_no(self):
        result = self.renderer.render_endpoint(_record())
        self.assertIn("<td>Yes</td>", result)
        self.assertIn("<td>No</td>", result)
        self.assertNotIn("✓", result)

    def test_title_escaped(self):
        result = HtmlExportRenderer(title="A & B <API>").render_document([])
        self.assertIn("<title>A &amp; B &lt;API&gt;</title>", result)

    def test_empty_document(self):
        result = self.renderer.render_document([])
        self.assertIn("<h1>API Documentation</h1>", result)
        self.assertNotIn('class="endpoint"', result)


class TestHtmlEscaping(unittest.TestCase):
    """User-supplied text never reaches HTML output unescaped."""

    RENDERERS = (HtmlPreviewRenderer, HtmlExportRenderer, WordHtmlRenderer)

    def test_no_raw_markup_from_user_text(self):
        for renderer_cls in self.RENDERERS:
            with self.subTest(renderer=renderer_cls.__name__):
                result = renderer_cls().render_document([_hostile_record()])

                self.assertNotIn("<script>", result)
                self.assertNotIn("<name>", result)
                self.assertNotIn("<term>", result)
                self.assertNotIn("<b>bold</b>", result)
                self.assertNotIn("<i>", result)
                self.assertNotIn("O'Reilly", result)
                self.assertNotIn("'1'", result)
                self.assertNotIn('"quoted"', result)
                self.assertNotIn("& ", result)
                self.assertIn("&lt;script&gt;alert(&#039;x&#039;)&lt;/script&gt;", result)
                self.assertIn("O&#039;Reilly", result)
                self.assertIn("&amp;page=&#039;1&#039;", result)


class TestTemplates(unittest.TestCase):
    def test_template_files_exist(self):
        for name in (
            "preview.html.jinja2",
            "export.html.jinja2",
            "word.html.jinja2",
            "preview.css",
            "export.css",
            "word.css",
        ):
            with self.subTest(name=name):
                self.assertTrue((TEMPLATES_DIR / name).is_file())


if __name__ == "__main__":
    unittest.main()
