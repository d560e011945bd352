"""
Schema writers: Protocol Buffers and Avro

Schemas are inferred by walking a parsed JSON value. Arrays are typed from
their first element only, nested objects become named messages/records
(the field key with its first letter capitalised, plus "Item" for the
elements of an array of objects). CSV input yields all-string schemas.
"""

from typing import Any, Dict, List, Union

from ..core.models import ValueKind, classify
from ..utils.text import capitalize_first, dump_json, sanitize_identifier

AvroType = Union[str, List[str], Dict[str, Any]]


class ProtobufSchemaWriter:
    """Generate proto3 schema text"""

    HEADER = 'syntax = "proto3";\n\npackage generated;\n\n'

    SCALAR_TYPES = {
        ValueKind.NULL: "string",
        ValueKind.STRING: "string",
        ValueKind.INTEGER: "int32",
        ValueKind.FLOAT: "double",
        ValueKind.BOOL: "bool",
    }

    def write_inferred(self, value: Any) -> str:
        """Schema for a JSON value, with "Root" as the top message"""
        return self.HEADER + self._messages(value, "Root")

    def write_columns(self, headers: List[str]) -> str:
        """CsvRow message with one string field per header, wrapped by CsvData"""
        lines = [self.HEADER + "message CsvRow {"]
        for number, header in enumerate(headers, 1):
            lines.append(f"  string {sanitize_identifier(header).lower()} = {number};")
        lines.append("}")
        lines.append("")
        lines.append("message CsvData {")
        lines.append("  repeated CsvRow rows = 1;")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _messages(self, value: Any, name: str) -> str:
        kind = classify(value)
        if kind is ValueKind.ARRAY and value:
            return self._messages(value[0], name)
        if kind is not ValueKind.OBJECT:
            return ""

        lines = [f"message {name} {{"]
        nested = []
        for number, (key, field_value) in enumerate(value.items(), 1):
            field_kind = classify(field_value)
            if field_kind is ValueKind.OBJECT:
                field_type = capitalize_first(key)
                nested.append(self._messages(field_value, field_type))
            elif field_kind is ValueKind.ARRAY and field_value and classify(field_value[0]) is ValueKind.OBJECT:
                item_name = capitalize_first(key) + "Item"
                field_type = f"repeated {item_name}"
                nested.append(self._messages(field_value[0], item_name))
            else:
                field_type = self._field_type(field_value)
            lines.append(f"  {field_type} {key} = {number};")
        lines.append("}")

        return "\n".join(lines) + "\n\n" + "".join(nested)

    def _field_type(self, value: Any) -> str:
        kind = classify(value)
        if kind is ValueKind.ARRAY:
            first = value[0] if value else None
            # Nested arrays have no proto3 equivalent; treat their elements as text
            if classify(first) is ValueKind.ARRAY:
                return "repeated string"
            return "repeated " + self._field_type(first)
        return self.SCALAR_TYPES.get(kind, "string")


class AvroSchemaWriter:
    """Generate Avro record schemas as JSON text"""

    NAMESPACE = "com.example"
    NULLABLE_STRING = ["null", "string"]

    SCALAR_TYPES = {
        ValueKind.STRING: "string",
        ValueKind.INTEGER: "int",
        ValueKind.FLOAT: "double",
        ValueKind.BOOL: "boolean",
    }

    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size

    def write_inferred(self, value: Any) -> str:
        """RootRecord schema for a JSON object (or the first object of an array)"""
        if classify(value) is ValueKind.ARRAY:
            value = value[0] if value else {}
        fields = self._fields(value) if classify(value) is ValueKind.OBJECT else []

        schema = {
            "type": "record",
            "name": "RootRecord",
            "namespace": self.NAMESPACE,
            "fields": fields,
        }
        return dump_json(schema, self.indent_size)

    def write_columns(self, headers: List[str]) -> str:
        """CsvData record with a nullable string field per header"""
        schema = {
            "type": "record",
            "name": "CsvData",
            "namespace": self.NAMESPACE,
            "fields": [
                {"name": sanitize_identifier(header), "type": list(self.NULLABLE_STRING), "default": None}
                for header in headers
            ],
        }
        return dump_json(schema, self.indent_size)

    def _fields(self, obj: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [{"name": key, "type": self._type(value, key)} for key, value in obj.items()]

    def _record(self, obj: Dict[str, Any], name: str) -> Dict[str, Any]:
        return {"type": "record", "name": name, "fields": self._fields(obj)}

    def _type(self, value: Any, key: str) -> AvroType:
        kind = classify(value)
        if kind is ValueKind.NULL:
            return list(self.NULLABLE_STRING)
        if kind is ValueKind.OBJECT:
            return self._record(value, capitalize_first(key))
        if kind is ValueKind.ARRAY:
            if not value:
                items: AvroType = "string"
            elif classify(value[0]) is ValueKind.OBJECT:
                items = self._record(value[0], capitalize_first(key) + "Item")
            else:
                items = self._type(value[0], key)
            return {"type": "array", "items": items}
        return self.SCALAR_TYPES[kind]
