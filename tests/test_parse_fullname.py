# tests/test_parse_fullname.py

from __future__ import annotations

import pytest

from fullname_parser import ParsedName, parse_fullname, parse_many
from fullname_parser.core.context import ParseState
from fullname_parser.core.pipeline import Pipeline
from fullname_parser.utils import tests_data_path


@pytest.mark.parametrize(
    "fullname, expected",
    [
        ("Juan Xavier", ParsedName(first="Juan", last="Xavier")),
        ("Dr. Juan Xavier", ParsedName(title="Dr.", first="Juan", last="Xavier")),
        (
            "Dr. Juan Xavier (Doc Vega)",
            ParsedName(title="Dr.", first="Juan", last="Xavier", nick="Doc Vega"),
        ),
        ("Juan Q. Xavier", ParsedName(first="Juan", middle="Q.", last="Xavier")),
        (
            "Juan Xavier III (Doc Vega), Jr.",
            ParsedName(first="Juan", last="Xavier", nick="Doc Vega", suffix="III, Jr."),
        ),
        (
            "de la Vega, Dr. Juan et Glova (Doc Vega) Q. Xavier III, Jr., Genius",
            ParsedName(
                title="Dr.",
                first="Juan et Glova",
                middle="Q. Xavier",
                last="de la Vega",
                nick="Doc Vega",
                suffix="III, Jr., Genius",
            ),
        ),
        ("Cotter", ParsedName(last="Cotter")),
    ],
)
def test_parse_fullname_scenarios(fullname, expected) -> None:
    assert parse_fullname(fullname) == expected


def test_reordered_last_first() -> None:
    assert parse_fullname("Xavier, Juan Q.") == ParsedName(first="Juan", middle="Q.", last="Xavier")


def test_surname_particles() -> None:
    parsed = parse_fullname("Mr. Jan van der Berg")
    assert parsed == ParsedName(title="Mr.", first="Jan", last="van der Berg")


def test_conjoined_first_names() -> None:
    parsed = parse_fullname("John and Jane Smith")
    assert parsed.first == "John and Jane"
    assert parsed.last == "Smith"


def test_multiple_nicknames_joined_with_comma() -> None:
    parsed = parse_fullname("Juan (Doc) 'JX' Xavier")
    assert parsed.nick == "Doc,JX"
    assert (parsed.first, parsed.last) == ("Juan", "Xavier")


def test_multiple_titles_and_suffixes() -> None:
    parsed = parse_fullname("Prof. Dr. Juan Xavier Jr. Esq.")
    assert parsed.title == "Prof., Dr."
    assert parsed.suffix == "Jr., Esq."
    assert (parsed.first, parsed.last) == ("Juan", "Xavier")


def test_single_token_skips_lexicon_passes() -> None:
    assert parse_fullname("Jr.") == ParsedName(last="Jr.")
    assert parse_fullname("Dr.") == ParsedName(last="Dr.")


@pytest.mark.parametrize("fullname, title", [("Herr Hans Meier", "Herr"), ("Miss Jane Doe", "Miss")])
def test_duplicate_title_entries_reported_once(fullname, title) -> None:
    assert parse_fullname(fullname).title == title


def test_unbalanced_brackets_pass_through() -> None:
    parsed = parse_fullname("Juan (Doc Xavier")
    assert parsed == ParsedName(first="Juan", middle="(Doc", last="Xavier")


@pytest.mark.parametrize("fullname", ["", "   ", "\t", "()", ","])
def test_degenerate_input_never_fails(fullname) -> None:
    parsed = parse_fullname(fullname)
    assert isinstance(parsed, ParsedName)
    assert parsed.first == ""
    assert parsed.middle == ""


def test_empty_input_is_empty() -> None:
    assert parse_fullname("").is_empty


def test_non_string_input_raises() -> None:
    with pytest.raises(TypeError):
        parse_fullname(None)  # type: ignore[arg-type]


CONTACTS = tests_data_path("contacts.txt").read_text(encoding="utf-8").splitlines()


@pytest.mark.parametrize(
    "fullname",
    [line for line in CONTACTS if line.strip()]
    + [
        "Juan (Doc) 'JX' Xavier",
        "Mr. Jan van der Berg",
        "John and Jane Smith",
        "Xavier, Juan Q.",
        "Prof. Dr. Juan Xavier Jr. Esq.",
        "Juan (Doc Xavier",
        "Smith, John, PhD",
        "",
        "   ",
        "\t",
        "()",
        ",",
    ],
)
def test_output_is_built_from_input_text(fullname) -> None:
    parsed = parse_fullname(fullname)
    for value in parsed.to_dict().values():
        for piece in value.replace(",", " ").split():
            assert piece in fullname


def test_pipeline_consumes_all_parts() -> None:
    state = Pipeline(ParseState(raw_name="de la Vega, Dr. Juan Q. Xavier III, Jr.")).run()
    assert state.parts == []
    assert state.raw_name == "de la Vega, Dr. Juan Q. Xavier III, Jr."
    assert state.last == "de la Vega"
    assert state.middle == "Q. Xavier"


def test_parse_many_preserves_order() -> None:
    results = parse_many(["Juan Xavier", "Cotter"])
    assert [r.last for r in results] == ["Xavier", "Cotter"]


def test_to_dict_omit_empty() -> None:
    parsed = parse_fullname("Dr. Juan Xavier")
    assert parsed.to_dict(omit_empty=True) == {"title": "Dr.", "first": "Juan", "last": "Xavier"}
    assert list(parsed.to_dict()) == ["title", "first", "middle", "last", "nick", "suffix"]
