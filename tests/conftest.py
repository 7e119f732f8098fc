"""
pytest configuration: put the project root on sys.path so that
`pharmascan` and `main` import without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


SAMPLE_ORDER_TEXT = "\n".join(
    [
        "ORDER SHEET - PAGE 1",
        "12345 JOHN DOE john.doe@mail.com 555-123-4567",
        "456 Oak Street Springfield IL 62704",
        "MALE 01/02/1980 Rx: XANAX 2 MG x 90",
        "Subtotal $45.00 Shipping $12.50 Total $120.00",
        "67890 Mary-Ann Smith, mary.smith@example.org (555) 987-6543",
        "123 Main Rd CA 90210",
        "FEMALE 3/4/75 created 11-20-2023",
        "Ambien 10mg $60.00",
    ]
)


@pytest.fixture
def sample_order_text() -> str:
    return SAMPLE_ORDER_TEXT
