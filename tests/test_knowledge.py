from dataclasses import FrozenInstanceError

import pytest

from credential_assistant.assistant import DEFAULT_RULES, KnowledgeBase, load_default
from credential_assistant.assistant.knowledge import make_entry
from credential_assistant.assistant.scorer import select_best


def test_default_knowledge_base_loads_in_order():
    kb = load_default()
    assert len(kb) == 47
    questions = kb.questions()
    assert questions[0] == "how do i sign up as a student"
    assert questions[-1] == "can i integrate with other systems"
    assert load_default() is kb


def test_default_knowledge_base_has_no_dead_entries():
    assert load_default().unreachable() == []


def test_every_fallback_rule_points_at_an_entry():
    kb = load_default()
    for rule in DEFAULT_RULES:
        assert rule.question in kb


def test_keywords_derived_from_question():
    entry = load_default().get("what information is required to issue a credential")
    assert entry.keywords == {"information", "required", "issue", "credential"}
    assert entry.topic == "issuance"


def test_multiline_answers_preserved():
    answer = load_default().answer("what are the pricing plans")
    assert answer.startswith("• **Basic**: $49/mo")
    assert answer.endswith("Students/Verifiers: Free forever.")
    assert answer.count("\n") == 3


def test_entries_are_frozen():
    entry = make_entry("alpha bravo", "x")
    with pytest.raises(FrozenInstanceError):
        entry.answer = "y"


def test_unknown_question_raises():
    with pytest.raises(KeyError):
        load_default().answer("how do i bake bread")


def test_duplicate_question_rejected():
    entries = [make_entry("alpha bravo", "x"), make_entry("alpha bravo", "y")]
    with pytest.raises(ValueError):
        KnowledgeBase(entries)


def test_stopword_only_question_is_kept_but_unreachable(caplog):
    from loguru import logger

    log_id = logger.add(caplog.handler, level="WARNING")
    try:
        kb = KnowledgeBase.from_mapping({"what is the": "dead", "alpha bravo": "live"})
    finally:
        logger.remove(log_id)
    assert "what is the" in kb
    assert [e.question for e in kb.unreachable()] == ["what is the"]
    assert select_best(frozenset(), kb) is None
    assert select_best(frozenset({"what"}), kb) is None
    assert any("can never be scored" in r.getMessage() for r in caplog.records)


def test_from_yaml(tmp_path):
    path = tmp_path / "kb.yaml"
    path.write_text(
        "entries:\n"
        "  - question: alpha bravo\n"
        "    answer: first\n"
        "  - question: charlie delta\n"
        "    answer: |-\n"
        "      line one\n"
        "      line two\n",
        encoding="utf-8",
    )
    kb = KnowledgeBase.from_yaml(path)
    assert kb.questions() == ["alpha bravo", "charlie delta"]
    assert kb.answer("charlie delta") == "line one\nline two"


def test_from_yaml_malformed(tmp_path):
    path = tmp_path / "kb.yaml"
    path.write_text("entries:\n  - question: only a question\n", encoding="utf-8")
    with pytest.raises(ValueError):
        KnowledgeBase.from_yaml(path)
