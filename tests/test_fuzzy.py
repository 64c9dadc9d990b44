import pytest

from rolodex.search.fuzzy import is_match


@pytest.mark.parametrize("text,term", [
    ("jane doe acme ceo", "acme"),
    ("bob", "bo"),
    ("jane", "jnae"),          # two substitutions
    ("director", "directr"),   # one deletion
])
def test_matches(text, term):
    assert is_match(text, term)


@pytest.mark.parametrize("text,term", [
    ("cfo", "ceo"),            # short terms never fuzzy-match
    ("jane", "mark"),          # four edits
    ("jane doe acme ceo", "jnae"),  # distance is over the whole text
    ("", "jane"),
    (None, "jane"),
    ("jane", ""),
])
def test_no_match(text, term):
    assert not is_match(text, term)


def test_threshold_is_respected():
    assert is_match("jane", "jame", threshold=1)
    assert not is_match("jane", "jnae", threshold=1)
