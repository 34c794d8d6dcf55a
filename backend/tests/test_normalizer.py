from types import MappingProxyType

import pytest

from app.processing.canonical import AdvocateRecord, collation_key
from app.processing.normalizer import normalize_row, normalize_rows, parse_specialties


@pytest.mark.parametrize(
    "raw",
    [
        {"specialties": ["Oncology", "Pediatrics"]},
        {"specialties": '["Oncology","Pediatrics"]'},
        {"specialties": "Pediatrics,Oncology"},
        {"specialties": ["Pediatrics", "Oncology"]},
        {"specialties": "Pediatrics | Oncology"},
        {"specialties": None, "payload": ["Pediatrics", "Oncology"]},
    ],
)
def test_specialty_shapes_normalize_to_same_sorted_list(raw):
    assert normalize_row(raw).specialties == ("Oncology", "Pediatrics")


def test_specialties_split_on_mixed_delimiters_and_sort_case_insensitively():
    raw = {"specialties": "Pediatrics | oncology ; Cardiology,,"}
    assert parse_specialties(raw) == ["Cardiology", "oncology", "Pediatrics"]


def test_specialties_drop_empty_and_blank_entries():
    assert parse_specialties({"specialties": ["", "  ", " Trauma "]}) == ["Trauma"]
    assert parse_specialties({"specialties": [None, "Grief"]}) == ["Grief"]


def test_undelimited_non_json_string_is_single_trimmed_entry():
    assert parse_specialties({"specialties": "  Grief counseling  "}) == ["Grief counseling"]


def test_json_scalar_is_wrapped():
    assert parse_specialties({"specialties": '"Oncology"'}) == ["Oncology"]
    assert parse_specialties({"specialties": "42"}) == ["42"]
    assert parse_specialties({"specialties": "null"}) == []


def test_non_standard_json_constants_are_not_parsed():
    assert parse_specialties({"specialties": "NaN"}) == ["NaN"]
    assert parse_specialties({"specialties": "Infinity"}) == ["Infinity"]
    assert parse_specialties({"specialties": "[1, -Infinity]"}) == ["-Infinity]", "[1"]


def test_null_list_elements_are_dropped():
    assert parse_specialties({"payload": [None]}) == []
    assert parse_specialties({"specialties": '["Grief", null]'}) == ["Grief"]


def test_specialties_list_wins_over_payload():
    raw = {"specialties": ["Sleep issues"], "payload": ["Ignored"]}
    assert parse_specialties(raw) == ["Sleep issues"]


def test_unsupported_specialty_shape_is_empty():
    assert parse_specialties({"specialties": {"a": 1}}) == []
    assert parse_specialties({}) == []


def test_accented_specialties_sort_by_base_letters():
    assert parse_specialties({"specialties": ["eczema", "Écologie"]}) == ["Écologie", "eczema"]
    assert collation_key("Écologie")[0] == "ecologie"


def test_years_zero_is_preserved():
    assert normalize_row({"years_of_experience": 0}).years_of_experience == "0"
    assert normalize_row({"yearsOfExperience": 0, "years": 9}).years_of_experience == "0"


def test_years_and_phone_absent_become_empty_strings():
    record = normalize_row({"firstName": "Ann"})
    assert record.years_of_experience == ""
    assert record.phone_number == ""


def test_years_variants_coalesce_in_priority_order():
    assert normalize_row({"yearsOfExperience": None, "years_of_experience": 7}).years_of_experience == "7"
    assert normalize_row({"years": 12}).years_of_experience == "12"
    assert normalize_row({"years": 5.0}).years_of_experience == "5"


def test_camel_case_keys_take_priority_over_snake_case():
    record = normalize_row({"firstName": "Jo", "first_name": "Joanna", "last_name": "Ray"})
    assert record.first_name == "Jo"
    assert record.last_name == "Ray"


def test_empty_string_counts_as_present():
    assert normalize_row({"firstName": "", "first_name": "Joanna"}).first_name == ""


def test_store_row_normalizes_fully():
    row = {
        "id": 3,
        "first_name": "Alice",
        "last_name": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": ["Personal growth", "Bipolar"],
        "years_of_experience": 5,
        "phone_number": 5554567890,
    }
    assert normalize_row(row) == AdvocateRecord(
        id="3",
        first_name="Alice",
        last_name="Johnson",
        city="Chicago",
        degree="MSW",
        specialties=("Bipolar", "Personal growth"),
        years_of_experience="5",
        phone_number="5554567890",
    )


def test_missing_id_stays_none():
    assert normalize_row({"firstName": "Ann"}).id is None


def test_malformed_input_degrades_to_empty_record():
    assert normalize_row(None) == AdvocateRecord()
    assert normalize_row(["not", "a", "mapping"]) == AdvocateRecord()
    assert normalize_rows("nope") == []


def test_read_only_mappings_are_accepted():
    record = normalize_row(MappingProxyType({"lastName": "Doe"}))
    assert record.last_name == "Doe"


def test_normalization_is_deterministic():
    raw = {"firstName": "Sam", "specialties": "b;A;c", "years": 0, "phone": "555"}
    assert normalize_row(raw) == normalize_row(raw)
    assert normalize_row(raw).to_dict() == normalize_row(raw).to_dict()


def test_to_dict_uses_camel_case_and_lists():
    payload = normalize_row({"id": "x", "specialties": ["B", "a"]}).to_dict()
    assert list(payload) == [
        "id",
        "firstName",
        "lastName",
        "city",
        "degree",
        "specialties",
        "yearsOfExperience",
        "phoneNumber",
    ]
    assert payload["specialties"] == ["a", "B"]
