from src.models.filters import FilterState
from src.models.profile import Profile
from src.state.controller import FilterController

ADA = Profile(
    id="ada", name="Ada", skills=["Go", "SQL"],
    experience=5, pay=80, min_hours_week=20, languages=["Go"],
)
LIN = Profile(
    id="lin", name="Lin", skills=["Rust"],
    experience=12, pay=150, min_hours_week=40, languages=["Rust", "Go"],
)


def test_starts_with_defaults():
    ctrl = FilterController()
    assert ctrl.filters == FilterState()
    assert ctrl.search_term == ""
    assert ctrl.apply([ADA, LIN]) == [ADA, LIN]


def test_setters_replace_snapshot():
    ctrl = FilterController()
    before = ctrl.filters
    ctrl.set_experience([10, 40])
    ctrl.set_pay((100, 200))
    ctrl.set_min_hours_week((30, 50))
    assert before == FilterState()
    assert ctrl.filters.experience == (10, 40)
    assert ctrl.filters.pay == (100, 200)
    assert ctrl.filters.min_hours_week == (30, 50)
    assert ctrl.apply([ADA, LIN]) == [LIN]


def test_range_setters_keep_search_term():
    ctrl = FilterController()
    ctrl.set_search_term("lin")
    ctrl.set_experience((0, 20))
    ctrl.set_pay((0, 200))
    ctrl.set_min_hours_week((0, 45))
    assert ctrl.search_term == "lin"


def test_clearing_languages_clears_search():
    ctrl = FilterController()
    ctrl.set_languages({"Go"})
    ctrl.set_search_term("something unrelated")
    ctrl.set_languages(set())
    assert ctrl.filters.languages == frozenset()
    assert ctrl.search_term == ""


def test_narrowing_languages_keeps_search():
    ctrl = FilterController()
    ctrl.set_languages(["Go", "Rust"])
    ctrl.set_search_term("lin")
    ctrl.set_languages(["Rust"])
    assert ctrl.search_term == "lin"
    assert ctrl.apply([ADA, LIN]) == [LIN]


def test_setting_empty_languages_when_already_empty_keeps_search():
    ctrl = FilterController()
    ctrl.set_search_term("ada")
    ctrl.set_languages([])
    assert ctrl.search_term == "ada"


def test_reset_to_defaults():
    ctrl = FilterController()
    ctrl.set_experience((10, 20))
    ctrl.set_languages(["Go"])
    ctrl.set_search_term("rust")
    ctrl.reset_to_defaults()
    assert ctrl.filters == FilterState()
    assert ctrl.search_term == ""


def test_search_term_none_becomes_empty():
    ctrl = FilterController()
    ctrl.set_search_term(None)
    assert ctrl.search_term == ""
