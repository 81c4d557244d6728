import pytest

from swearfilter.errors import MalformedTextError
from swearfilter.safety.unicode_fold import fold_diacritics


def test_fold_strips_accents():
    assert fold_diacritics("café") == "cafe"
    assert fold_diacritics("Ångström") == "Angstrom"
    assert fold_diacritics("e\u0301") == "e"


def test_fold_keeps_letters_without_marks():
    assert fold_diacritics("straße") == "straße"
    assert fold_diacritics("") == ""


def test_fold_rejects_lone_surrogate():
    with pytest.raises(MalformedTextError, match="Cannot normalize text"):
        fold_diacritics("bad\ud800text")
