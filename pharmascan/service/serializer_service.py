from __future__ import annotations

import csv
import io
from typing import Dict, Sequence, Type
from xml.sax.saxutils import escape

from pharmascan.domain.ports.Serializer_provider import Serializer_provider
from pharmascan.domain.schemas.record import FIELD_NAMES, ParsedRecord

XML_ROOT_TAG = "Root"
XML_RECORD_TAG = "DataM"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_XML_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str) -> str:
    """Escape &, <, >, " and ' for element text."""
    return escape(value, _XML_QUOTE_ENTITIES)


def generate_csv(records: Sequence[ParsedRecord]) -> str:
    """Header of field names, then one fully quoted row per record.

    An empty sequence produces an empty string.
    """
    if not records:
        return ""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for record in records:
        writer.writerow(record.as_row())
    rows = buf.getvalue()[:-1]  # drop the final line terminator
    return ",".join(FIELD_NAMES) + "\n" + rows


def generate_xml(records: Sequence[ParsedRecord], indent: str = "  ") -> str:
    lines = [XML_DECLARATION, f"<{XML_ROOT_TAG}>"]
    for record in records:
        lines.append(f"{indent}<{XML_RECORD_TAG}>")
        for field, value in zip(FIELD_NAMES, record.as_row()):
            lines.append(f"{indent}{indent}<{field}>{escape_xml(value)}</{field}>")
        lines.append(f"{indent}</{XML_RECORD_TAG}>")
    lines.append(f"</{XML_ROOT_TAG}>")
    return "\n".join(lines)


class CsvSerializer(Serializer_provider):
    media_type = "text/csv"
    filename = "medical_records.csv"

    def serialize(self, records: Sequence[ParsedRecord]) -> str:
        return generate_csv(records)


class XmlSerializer(Serializer_provider):
    media_type = "application/xml"
    filename = "medical_records.xml"

    def serialize(self, records: Sequence[ParsedRecord]) -> str:
        return generate_xml(records)


SERIALIZERS: Dict[str, Type[Serializer_provider]] = {
    "csv": CsvSerializer,
    "xml": XmlSerializer,
}


def get_serializer(fmt: str) -> Serializer_provider:
    try:
        return SERIALIZERS[fmt.strip().lower()]()
    except KeyError:
        raise ValueError(f"unsupported export format: {fmt!r}") from None
