from __future__ import annotations

import pytest

from pharmascan.service.field_extractor_service import FieldExtractorService


@pytest.fixture
def extractor() -> FieldExtractorService:
    return FieldExtractorService()


def test_single_line_scenario(extractor: FieldExtractorService) -> None:
    text = "12345 JOHN DOE john.doe@mail.com 555-123-4567 MALE 01/02/1980 90210"
    rec = extractor.extract(text, "scan.png", 1)

    assert rec.UserID == "12345"
    assert rec.CustomerName == "JOHN DOE"
    assert rec.EmailAddress == "john.doe@mail.com"
    assert rec.PhNo_1 == "555-123-4567"
    assert rec.PhNo_2 == ""
    assert rec.Sex_1 == "MALE"
    assert rec.D_Birth == "01/02/1980"
    assert rec.DOB == "01/02/1980"
    assert rec.CreateDate == ""
    assert rec.Zip_1 == "90210"
    assert rec.State_1 == ""
    assert rec.City_1 == ""
    assert rec.ImageName == "scan.png"
    assert rec.RecordNo == "1"
    assert rec.ConfidenceScore == "0%"


def test_empty_text_gives_empty_record(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("", "blank.png", 4)
    assert rec.RecordNo == "4"
    assert rec.UserID == ""
    assert rec.EmailAddress == ""
    assert rec.CustomerName == ""


@pytest.mark.parametrize(
    "text, expected_id",
    [
        ("12345 JOHN", "12345"),
        ("123456 JOHN", ""),
        ("1234 JOHN", ""),
        ("A2345 JOHN", ""),
        ("JOHN 12345", ""),
    ],
)
def test_identifier_is_leading_five_digit_token(extractor: FieldExtractorService, text: str, expected_id: str) -> None:
    assert extractor.extract(text, "x", 1).UserID == expected_id


def test_name_strips_non_letter_edges(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 - Mary-Ann O'Neil, 42 mary@mail.com", "x", 1)
    assert rec.CustomerName == "Mary-Ann O'Neil"


def test_name_requires_email_after_identifier(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 contact: JOHN DOE", "x", 1)
    assert rec.CustomerName == ""


def test_name_empty_when_identifier_missing(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("JOHN DOE john@mail.com 555-123-4567", "x", 1)
    assert rec.EmailAddress == "john@mail.com"
    assert rec.CustomerName == ""


def test_name_empty_when_leading_token_is_email(extractor: FieldExtractorService) -> None:
    # The digits belong to the email token, so there is no identifier.
    rec = extractor.extract("12345@mail.com JOHN DOE", "x", 1)
    assert rec.UserID == ""
    assert rec.CustomerName == ""


@pytest.mark.parametrize(
    "text, phone1, phone2",
    [
        ("call 555-123-4567 or 555.987.6543", "555-123-4567", "555.987.6543"),
        ("tel (555) 123-4567", "(555) 123-4567", ""),
        ("tel +1 555 123 4567", "+1 555 123 4567", ""),
        ("tel 1-555-123-4567", "1-555-123-4567", ""),
        ("tel 5551234567", "5551234567", ""),
        ("a 555-1-4567 b", "", ""),
        ("zip 90210 and id 12345 only", "", ""),
        ("digits 123456789012 here", "", ""),
    ],
)
def test_phones(extractor: FieldExtractorService, text: str, phone1: str, phone2: str) -> None:
    rec = extractor.extract(text, "x", 1)
    assert rec.PhNo_1 == phone1
    assert rec.PhNo_2 == phone2


def test_phone_ignores_third_match(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("555-111-2222 555-333-4444 555-555-6666", "x", 1)
    assert (rec.PhNo_1, rec.PhNo_2) == ("555-111-2222", "555-333-4444")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("sex MALE", "MALE"),
        ("sex male", "MALE"),
        ("sex FEMALE", "FEMALE"),
        ("sex Female", "FEMALE"),
        ("MALE or FEMALE", "FEMALE"),
        ("FEMALE then MALE", "FEMALE"),
        ("MALES and FEMALES", ""),
        ("no sex given", ""),
    ],
)
def test_sex(extractor: FieldExtractorService, text: str, expected: str) -> None:
    assert extractor.extract(text, "x", 1).Sex_1 == expected


def test_dates_fill_birth_alias_and_create_date(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("born 3/4/75 ordered 11-20-2023 shipped 11/22/2023", "x", 1)
    assert rec.D_Birth == "3/4/75"
    assert rec.DOB == "3/4/75"
    assert rec.CreateDate == "11-20-2023"
    assert rec.UpdateDate == ""


def test_zip_skips_identifier(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN john@mail.com Springfield 62704", "x", 1)
    assert rec.UserID == "12345"
    assert rec.Zip_1 == "62704"


def test_zip_skips_digits_of_dollar_amount(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN DOE john@mail.com total $15000.00 Springfield IL 62704", "x", 1)
    assert rec.TotalAmount == "$15000.00"
    assert rec.Zip_1 == "62704"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("weight 62704.5 lb", ""),
        ("count 1,62704 units", ""),
        ("ref 62704, Springfield", "62704"),
        ("ends with 62704.", "62704"),
    ],
)
def test_zip_is_standalone_token(extractor: FieldExtractorService, text: str, expected: str) -> None:
    assert extractor.extract(text, "x", 1).Zip_1 == expected


def test_zip_plus_four(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN john@mail.com 62704-1234", "x", 1)
    assert rec.Zip_1 == "62704-1234"


def test_zip_empty_when_only_identifier(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN john@mail.com", "x", 1)
    assert rec.Zip_1 == ""


def test_amount_takes_last_dollar_value(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("item $45.00 shipping $5 total $120.00", "x", 1)
    assert rec.TotalAmount == "$120.00"


def test_amount_with_thousands_separator(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("subtotal $999.99 total $1,250.50", "x", 1)
    assert rec.TotalAmount == "$1,250.50"


def test_amount_ignores_plain_numbers(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("qty 90 price 45.00", "x", 1)
    assert rec.TotalAmount == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Rx: xanax 2mg", "XANAX"),
        ("Rx: Ambien", "AMBIEN"),
        ("Rx: klonopin 1mg", "Klonopin"),
        ("LORAZEPAM and PHENTERMINE", "PHENTERMINE"),  # list priority, not text order
        ("XANAXR extended", ""),  # whole word only
        ("no drugs", ""),
    ],
)
def test_medicine(extractor: FieldExtractorService, text: str, expected: str) -> None:
    assert extractor.extract(text, "x", 1).Medicine == expected


def test_state_and_city(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN john@mail.com 456 Oak St, Springfield, IL 62704", "x", 1)
    assert rec.State_1 == "IL"
    assert rec.City_1 == "Springfield"
    assert rec.Zip_1 == "62704"


@pytest.mark.parametrize("suffix", ["Rd", "Road", "St", "Street", "Ave", "Dr", "Lane", "rd.", "AVE"])
def test_city_left_empty_after_street_suffix(extractor: FieldExtractorService, suffix: str) -> None:
    rec = extractor.extract(f"12345 JOHN john@mail.com 123 Main {suffix} CA 90210", "x", 1)
    assert rec.State_1 == "CA"
    assert rec.City_1 == ""
    assert rec.Zip_1 == "90210"


def test_state_zip_fills_zip_when_zip_stage_found_none(extractor: FieldExtractorService) -> None:
    # The only five-digit token equals the identifier, so the zip stage skips it.
    rec = extractor.extract("90210 JOHN john@mail.com 123 Main Rd CA 90210", "x", 1)
    assert rec.UserID == "90210"
    assert rec.State_1 == "CA"
    assert rec.City_1 == ""
    assert rec.Zip_1 == "90210"


def test_state_zip_does_not_override_zip_stage(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN john@mail.com ship to 60601 Chicago IL 62704", "x", 1)
    assert rec.Zip_1 == "60601"
    assert rec.State_1 == "IL"
    assert rec.City_1 == "Chicago"


def test_state_requires_uppercase(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("12345 JOHN john@mail.com Springfield il 62704", "x", 1)
    assert rec.State_1 == ""
    assert rec.City_1 == ""


def test_state_at_text_start_gives_no_city(extractor: FieldExtractorService) -> None:
    rec = extractor.extract("CA 90210 only", "x", 1)
    assert rec.State_1 == "CA"
    assert rec.City_1 == ""
    assert rec.Zip_1 == "90210"


def test_extraction_is_deterministic(extractor: FieldExtractorService, sample_order_text: str) -> None:
    first = extractor.extract(sample_order_text, "a.png", 9)
    second = FieldExtractorService().extract(sample_order_text, "a.png", 9)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.parametrize(
    "garbage",
    [
        "\x00\x01\x02",
        "@@@ $$$ ((( )))",
        "12345",
        "$",
        "CA",
        "ÄÖÜ ß 漢字 🙂",
        "12345 @ . 555- (555 FEMALE/MALE 1/1/ $,",
    ],
)
def test_garbage_never_raises(extractor: FieldExtractorService, garbage: str) -> None:
    rec = extractor.extract(garbage, "g.png", 1)
    assert rec.ImageName == "g.png"
