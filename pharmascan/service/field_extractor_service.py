from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Tuple

from pharmascan.lib.logger import get_logger
from pharmascan.domain.ports.Field_extractor_provider import Field_extractor_provider
from pharmascan.domain.schemas.record import ParsedRecord, aliases_of, empty_record_fields

from .normalizer_service import normalize_text

Draft = Dict[str, str]
Stage = Callable[[str, Draft], None]

# Checked in this order; the first whole-word hit wins.
KNOWN_MEDICINES: Tuple[str, ...] = (
    "PHENTERMINE",
    "VALIUM",
    "XANAX",
    "AMBIEN",
    "ADIPEX",
    "Klonopin",
    "LORAZEPAM",
)

# A city candidate equal to one of these is a street type, not a city.
STREET_SUFFIXES = frozenset({"road", "rd", "st", "street", "ave", "dr", "lane"})


class FieldExtractorService(Field_extractor_provider):
    """Rule-based extractor for one segmented order-form record.

    Stages run in a fixed order over a draft field map; later stages read
    what earlier ones wrote:
    - name needs the identifier and the email;
    - zip filters out the identifier;
    - the state/zip pair only fills the zip when the zip stage found none.
    """

    ID_RE = re.compile(r"^\d{5}$")
    EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
    PHONE_RE = re.compile(
        r"(?<!\d)(?:\+?1[-.\s]?)?(?:\(\d{3}\)|\d{3})[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)"
    )
    FEMALE_RE = re.compile(r"\bFEMALE\b", re.I)
    MALE_RE = re.compile(r"\bMALE\b", re.I)
    DATE_RE = re.compile(r"\b\d{1,2}[/-]\d{1,2}[/-]\d{2,4}\b")
    # Standalone token only: not inside an amount ($15000.00) or a decimal.
    ZIP_RE = re.compile(r"(?<![\w$.,])\d{5}(?:-\d{4})?(?!\w|[.,]\d)")
    AMOUNT_RE = re.compile(r"\$\s?\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?|\$\s?\d+(?:\.\d{1,2})?")
    STATE_ZIP_RE = re.compile(r"\b([A-Z]{2})\s+(\d{5})\b")
    NAME_EDGE_RE = re.compile(r"^[^a-zA-Z]+|[^a-zA-Z]+$")
    CITY_SPLIT_RE = re.compile(r"[\s,]+")
    MEDICINE_RES: Tuple[Tuple[str, re.Pattern[str]], ...] = tuple(
        (med, re.compile(rf"\b{re.escape(med)}\b", re.I)) for med in KNOWN_MEDICINES
    )

    def __init__(self) -> None:
        self.logger = get_logger("extract")
        self.stages: List[Stage] = [
            self._extract_identifier,
            self._extract_email,
            self._extract_name,
            self._extract_phones,
            self._extract_sex,
            self._extract_dates,
            self._extract_zip,
            self._extract_amount,
            self._extract_medicine,
            self._extract_state_city,
        ]

    def extract(self, text: str, image_name: str, record_no: int) -> ParsedRecord:
        cleaned = normalize_text(text)
        draft = empty_record_fields(image_name, record_no)
        for stage in self.stages:
            stage(cleaned, draft)

        record = ParsedRecord(**draft)
        filled = sum(1 for v in draft.values() if v)
        self.logger.debug(
            "extract: record_no=%s user_id=%s filled=%d",
            record.RecordNo,
            record.UserID or "-",
            filled,
        )
        return record

    # ------------------------------------------------------------------
    # Stages

    def _extract_identifier(self, text: str, draft: Draft) -> None:
        tokens = text.split(" ", 1)
        if tokens and self.ID_RE.match(tokens[0]):
            draft["UserID"] = tokens[0]

    def _extract_email(self, text: str, draft: Draft) -> None:
        email = self._first_match(self.EMAIL_RE, text)
        if email:
            draft["EmailAddress"] = email

    def _extract_name(self, text: str, draft: Draft) -> None:
        user_id = draft["UserID"]
        email = draft["EmailAddress"]
        if not user_id or not email:
            return
        id_idx = text.find(user_id)
        email_idx = text.find(email)
        if id_idx == -1 or email_idx <= id_idx:
            return
        raw = text[id_idx + len(user_id):email_idx].strip()
        draft["CustomerName"] = self.NAME_EDGE_RE.sub("", raw)

    def _extract_phones(self, text: str, draft: Draft) -> None:
        phones = self._all_matches(self.PHONE_RE, text)
        if phones:
            draft["PhNo_1"] = phones[0]
        if len(phones) > 1:
            draft["PhNo_2"] = phones[1]

    def _extract_sex(self, text: str, draft: Draft) -> None:
        # "MALE" is a substring of "FEMALE"; test the longer word first.
        if self.FEMALE_RE.search(text):
            draft["Sex_1"] = "FEMALE"
        elif self.MALE_RE.search(text):
            draft["Sex_1"] = "MALE"

    def _extract_dates(self, text: str, draft: Draft) -> None:
        dates = self._all_matches(self.DATE_RE, text)
        if not dates:
            return
        for field in ("D_Birth", *aliases_of("D_Birth")):
            draft[field] = dates[0]
        if len(dates) > 1:
            draft["CreateDate"] = dates[1]

    def _extract_zip(self, text: str, draft: Draft) -> None:
        zips = [z for z in self._all_matches(self.ZIP_RE, text) if z != draft["UserID"]]
        if zips:
            draft["Zip_1"] = zips[0]

    def _extract_amount(self, text: str, draft: Draft) -> None:
        # Running totals come after line items, so the last figure wins.
        amounts = self._all_matches(self.AMOUNT_RE, text)
        if amounts:
            draft["TotalAmount"] = amounts[-1]

    def _extract_medicine(self, text: str, draft: Draft) -> None:
        for name, pattern in self.MEDICINE_RES:
            if pattern.search(text):
                draft["Medicine"] = name
                return

    def _extract_state_city(self, text: str, draft: Draft) -> None:
        m = self.STATE_ZIP_RE.search(text)
        if m is None:
            return
        draft["State_1"] = m.group(1)
        if not draft["Zip_1"]:
            draft["Zip_1"] = m.group(2)

        words = [w for w in self.CITY_SPLIT_RE.split(text[: m.start()].strip()) if w]
        if not words:
            return
        candidate = words[-1]
        if self._is_street_suffix(candidate):
            # Leave the city empty rather than look further back.
            return
        draft["City_1"] = candidate

    # ------------------------------------------------------------------
    # Utilities

    def _first_match(self, pattern: re.Pattern[str], text: str) -> Optional[str]:
        m = pattern.search(text)
        return m.group(0).strip() if m else None

    def _all_matches(self, pattern: re.Pattern[str], text: str) -> List[str]:
        return [m.group(0).strip() for m in pattern.finditer(text)]

    def _is_street_suffix(self, word: str) -> bool:
        return word.rstrip(".").lower() in STREET_SUFFIXES
