import os
import tempfile
import unittest
from pathlib import Path

from apidocs.choice import FormatChoice
from apidocs.delivery import BOM, content_type, encode_document, export_with_choice, write_document
from apidocs.errors import DeliveryError
from apidocs.examples import example_record
from apidocs.exports import EXPORT_FORMATS, ExportDocument, build_export


class TestEncoding(unittest.TestCase):
    def test_word_gets_bom(self):
        document = build_export([example_record()], "word")
        data = encode_document(document)

        self.assertTrue(data.startswith(b"\xef\xbb\xbf"))
        text = data.decode("utf-8-sig")
        self.assertEqual(text, document.content)
        self.assertIn("<!--[if gte mso 9]>", text)

    def test_other_formats_have_no_bom(self):
        for key in ("html", "md", "json"):
            with self.subTest(key=key):
                data = encode_document(build_export([example_record()], key))
                self.assertFalse(data.startswith(BOM.encode("utf-8")))

    def test_empty_content_rejected(self):
        with self.assertRaises(DeliveryError):
            encode_document(ExportDocument(EXPORT_FORMATS["md"], ""))

    def test_content_type(self):
        self.assertEqual(content_type(EXPORT_FORMATS["word"]), "application/msword;charset=utf-8")
        self.assertEqual(content_type(EXPORT_FORMATS["md"]), "text/markdown;charset=utf-8")


class TestWriteDocument(unittest.TestCase):
    def test_write_to_directory_uses_standard_filename(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = write_document(build_export([example_record()], "md"), tmp)

            self.assertEqual(path, Path(tmp) / "api-documentation.md")
            self.assertIn("## POST /api/v1/orders", path.read_text(encoding="utf-8"))

    def test_missing_directory_is_created(self):
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp) / "out" / "docs"
            path = write_document(build_export([example_record()], "md"), directory)

            self.assertEqual(path, directory / "api-documentation.md")
            self.assertTrue(directory.is_dir())
            self.assertTrue(path.is_file())

    def test_filename_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = write_document(build_export([example_record()], "word"), tmp, filename="orders.doc")

            self.assertEqual(path, Path(tmp) / "orders.doc")
            self.assertTrue(path.read_bytes().startswith(b"\xef\xbb\xbf"))

    def test_write_failure_is_delivery_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("not a directory")
            with self.assertRaises(DeliveryError) as ctx:
                write_document(build_export([example_record()], "md"), blocker)
            self.assertIn("Failed to write", str(ctx.exception))


class TestExportWithChoice(unittest.TestCase):
    def test_chosen_format_written(self):
        with tempfile.TemporaryDirectory() as tmp:
            choice = FormatChoice()
            choice.choose("json")
            path = export_with_choice([example_record()], choice, tmp)

            self.assertEqual(path.name, "api-documentation.json")
            self.assertTrue(path.exists())

    def test_cancelled_choice_writes_nothing(self):
        with tempfile.TemporaryDirectory() as tmp:
            choice = FormatChoice()
            choice.cancel()
            path = export_with_choice([example_record()], choice, tmp)

            self.assertIsNone(path)
            self.assertEqual(os.listdir(tmp), [])


if __name__ == "__main__":
    unittest.main()
