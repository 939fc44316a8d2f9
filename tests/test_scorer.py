from credential_assistant.assistant.knowledge import KnowledgeBase, make_entry
from credential_assistant.assistant.scorer import ACCEPT_THRESHOLD, score, select_best

TEN = "alpha bravo charlie delta echo foxtrot golf hotel india juliet"


def test_empty_query_and_entry_scores_zero():
    entry = make_entry("what is the", "nothing")
    assert entry.keywords == frozenset()
    assert score(frozenset(), entry) == 0.0


def test_jaccard_value():
    entry = make_entry("alpha bravo charlie", "x")
    assert score({"alpha", "bravo", "zulu"}, entry) == 2 / 4


def test_score_exactly_at_threshold_is_accepted():
    kb = KnowledgeBase.from_mapping({TEN: "ten"})
    query = frozenset({"alpha", "bravo", "charlie"})
    match = select_best(query, kb)
    assert match is not None
    assert match.score == ACCEPT_THRESHOLD
    assert match.entry.answer == "ten"


def test_score_just_below_threshold_is_rejected():
    kb = KnowledgeBase.from_mapping({TEN: "ten"})
    query = frozenset({"alpha", "bravo", "charlie", "zulu"})
    assert score(query, kb.get(TEN)) < ACCEPT_THRESHOLD
    assert select_best(query, kb) is None


def test_ties_go_to_earliest_entry():
    kb = KnowledgeBase.from_mapping(
        {"alpha bravo one": "first", "alpha bravo two": "second"}
    )
    query = frozenset({"alpha", "bravo"})
    for _ in range(5):
        match = select_best(query, kb)
        assert match.entry.answer == "first"


def test_higher_score_later_wins():
    kb = KnowledgeBase.from_mapping(
        {"alpha bravo charlie": "loose", "alpha bravo": "tight"}
    )
    match = select_best(frozenset({"alpha", "bravo"}), kb)
    assert match.entry.answer == "tight"
    assert match.score == 1.0


def test_empty_query_never_matches():
    kb = KnowledgeBase.from_mapping({"alpha bravo": "x"})
    assert select_best(frozenset(), kb) is None


def test_empty_knowledge_base():
    assert select_best(frozenset({"alpha"}), []) is None
