"""Tests for parameter serialisation."""

from twitter_client.enums import Language
from twitter_client.parameters import StatusFilters, StatusFirehoseParameters, StatusSampleParameters
from twitter_client.utils import comma_separated, format_bool


def test_filters_render_comma_separated_lists():
    filters = StatusFilters(
        follow=(783214, 6253282),
        track=("python", "asyncio streams"),
        locations=(-122.75, 36.8, -121.75, 37.8),
        language=(Language.ENGLISH, "es"),
    )
    assert filters.to_params() == {
        "follow": "783214,6253282",
        "track": "python,asyncio streams",
        "locations": "-122.75,36.8,-121.75,37.8",
        "language": "en,es",
        "stall_warnings": "false",
    }


def test_empty_lists_are_omitted():
    assert StatusSampleParameters(stall_warnings=True).to_params() == {"stall_warnings": "true"}


def test_firehose_count():
    assert StatusFirehoseParameters().to_params() == {"stall_warnings": "false"}
    assert StatusFirehoseParameters(count=-500).to_params() == {"count": "-500", "stall_warnings": "false"}


def test_helpers():
    assert comma_separated([]) == ""
    assert comma_separated([Language.GERMAN, 1, 2.5]) == "de,1,2.5"
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"
