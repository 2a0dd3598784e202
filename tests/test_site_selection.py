from __future__ import annotations

import pytest

from harvestrx.core import InputFormatError, InputValueError
from harvestrx.model import CompleteStand, CompleteStandSpreading, PartialStandSpreading, PatchCutting
from harvestrx.model.selection import describe_site_selector
from harvestrx.parsing.site_selection import SITE_SELECTION_METHODS, read_site_selector


@pytest.mark.parametrize(
    "line,expected",
    [
        ("SiteSelection Complete", CompleteStand()),
        ("SiteSelection CompleteStandSpread 1 40", CompleteStandSpreading(1.0, 40.0)),
        ("SiteSelection PartialStandSpread 2.5 2.5", PartialStandSpreading(2.5, 2.5)),
        ("SiteSelection PatchCutting 10% 5", PatchCutting(0.1, 5.0)),
    ],
)
def test_site_selectors(session_for, line, expected):
    session = session_for(line)
    assert read_site_selector(session) == expected
    assert session.reader.at_end


def test_describe_round_trips_the_keyword():
    assert describe_site_selector(PatchCutting(0.1, 5.0)) == "PatchCutting 10% 5"
    assert describe_site_selector(CompleteStandSpreading(1.0, 40.0)) == "CompleteStandSpread 1 40"


@pytest.mark.parametrize(
    "line,message",
    [
        ("SiteSelection PatchCutting 0% 5", "must be > 0% and <= 100%"),
        ("SiteSelection PatchCutting 150% 5", "must be > 0% and <= 100%"),
        ("SiteSelection PatchCutting 50% 0", "target patch size"),
        ("SiteSelection CompleteStandSpread 0 40", "minimum target harvest size"),
        ("SiteSelection PartialStandSpread 10 5", "maximum target harvest size"),
        ("SiteSelection Complete 5", "Extra data after the SiteSelection parameter"),
    ],
)
def test_invalid_site_selection(session_for, line, message):
    with pytest.raises(InputValueError, match=message) as excinfo:
        read_site_selector(session_for(line))
    assert excinfo.value.line_number == 1


def test_unknown_method_lists_choices(session_for):
    with pytest.raises(InputValueError) as excinfo:
        read_site_selector(session_for("SiteSelection Everything"))
    assert excinfo.value.choices == SITE_SELECTION_METHODS


def test_missing_site_selection_line(session_for):
    with pytest.raises(InputFormatError, match='Expected "SiteSelection" but found "CohortsRemoved"'):
        read_site_selector(session_for("CohortsRemoved ClearCut"))
