import unittest
from dataclasses import FrozenInstanceError

from apidocs.errors import ValidationError
from apidocs.model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor


class TestFieldDescriptor(unittest.TestCase):
    def test_defaults(self):
        f = FieldDescriptor(name="id")
        self.assertEqual(f.type, "string")
        self.assertEqual(f.description, "")
        self.assertFalse(f.required)
        self.assertIsNone(f.example)
        self.assertIsNone(f.notes)

    def test_to_dict_drops_absent_values(self):
        f = FieldDescriptor(name="id", required=True)
        self.assertEqual(
            f.to_dict(),
            {"name": "id", "type": "string", "description": "", "required": True},
        )


class TestDocumentationRecord(unittest.TestCase):
    def test_minimal_record(self):
        record = DocumentationRecord(method="GET", path="/api/users")
        self.assertEqual(record.params, ())
        self.assertIsNone(record.returns)
        self.assertEqual(record.title, "GET /api/users")

    def test_missing_method_is_validation_error(self):
        with self.assertRaises(ValidationError) as ctx:
            DocumentationRecord(method="", path="/api/users")
        self.assertIn("method", str(ctx.exception))

    def test_missing_path_is_validation_error(self):
        with self.assertRaises(ValidationError) as ctx:
            DocumentationRecord(method="GET", path="   ")
        self.assertIn("path", str(ctx.exception))

    def test_non_string_method_is_validation_error(self):
        with self.assertRaises(ValidationError):
            DocumentationRecord(method=None, path="/x")

    def test_params_stored_as_tuple_in_order(self):
        params = [FieldDescriptor(name="b"), FieldDescriptor(name="a")]
        record = DocumentationRecord(method="GET", path="/x", params=params)
        self.assertIsInstance(record.params, tuple)
        self.assertEqual([p.name for p in record.params], ["b", "a"])

    def test_record_is_immutable(self):
        record = DocumentationRecord(method="GET", path="/x")
        with self.assertRaises(FrozenInstanceError):
            record.path = "/y"

    def test_to_dict_uses_camel_case(self):
        record = DocumentationRecord(
            method="POST",
            path="/api/v1/orders",
            description="Create order",
            params=[FieldDescriptor(name="customerId", required=True, example="CUST001")],
            returns=ReturnsDescriptor("Created order", [FieldDescriptor(name="id")]),
            request_example={"customerId": "CUST001"},
        )
        data = record.to_dict()
        self.assertEqual(data["requestExample"], {"customerId": "CUST001"})
        self.assertNotIn("responseExample", data)
        self.assertNotIn("notes", data)
        self.assertEqual(data["params"][0]["example"], "CUST001")
        self.assertEqual(data["returns"]["fields"][0]["name"], "id")


if __name__ == "__main__":
    unittest.main()
