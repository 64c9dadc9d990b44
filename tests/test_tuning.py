import pytest

from rolodex.search import SearchEngine, SearchTuning, load_tuning
from rolodex.storage import InMemoryRepository
from tests.factories import fixed_clock, make_person


def test_shipped_yaml_matches_defaults():
    assert load_tuning() == SearchTuning()


def test_override_from_file(tmp_path):
    path = tmp_path / "tuning.yaml"
    path.write_text("person:\n  min_match_ratio: 0.4\nmention:\n  coverage_global: 0.9\n", encoding="utf-8")
    tuning = load_tuning(str(path))
    assert tuning.min_match_ratio == 0.4
    assert tuning.coverage_global == 0.9
    assert tuning.name_boost == 2


def test_unknown_key_is_rejected(tmp_path):
    path = tmp_path / "tuning.yaml"
    path.write_text("person:\n  min_match_ratoi: 0.4\n", encoding="utf-8")
    with pytest.raises(KeyError):
        load_tuning(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tuning(str(tmp_path / "absent.yaml"))


def test_looser_ratio_lets_partial_matches_through():
    jane = make_person("p1", "Jane", "Doe", title="CEO", company="Acme")
    repo = InMemoryRepository([jane], [])
    strict = SearchEngine(repo, clock=fixed_clock)
    loose = SearchEngine(repo, tuning=SearchTuning(min_match_ratio=0.4), clock=fixed_clock)
    assert strict.search("ceo tesla") == []
    assert [r["type"] for r in loose.search("ceo tesla")] == ["personName"]
