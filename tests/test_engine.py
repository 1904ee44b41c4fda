import pytest
from termhack.engine import (
    Record, closeness, consistency_set, filter_candidates, check_uniform_length,
    parse_record, NoWitnessError, ValidationError, ValidationKind,
)

# --- closeness golden tests ---
@pytest.mark.parametrize("a,b,expected", [
    ("abcd", "abcd", 4),
    ("abcd", "abce", 3),
    ("abcd", "wxyz", 0),
    ("abcd", "abdd", 3),
    ("SPINE", "SPIES", 3),
    ("SPINE", "SHINE", 4),
    ("abc", "abcdef", 3),
    ("xbc", "abcdef", 2),
    ("", "abc", 0),
    ("Abcd", "abcd", 3),
])
def test_closeness_golden(a, b, expected):
    assert closeness(a, b) == expected


@pytest.mark.parametrize("a,b", [
    ("abcd", "abdd"), ("SPINE", "TRIES"), ("short", "shorter"), ("x", "yyyy"),
])
def test_closeness_is_symmetric(a, b):
    assert closeness(a, b) == closeness(b, a)
    assert Record.candidate(a).closeness_to(Record.witness(b, 1)) == \
        Record.witness(b, 1).closeness_to(Record.candidate(a))


@pytest.mark.parametrize("w", ["a", "abcd", "TERMINAL", "aaaa"])
def test_self_closeness_is_length(w):
    assert closeness(w, w) == len(w)


def test_closeness_ignores_excess_length():
    # positions past the shorter word never count, whatever they hold
    assert closeness("ab", "abzzzz") == closeness("ab", "abab") == 2


def test_record_accessors():
    c = Record.candidate("abcd")
    w = Record.witness("wxyz", 2)
    assert (c.word, c.distance, c.is_candidate, c.is_witness) == ("abcd", None, True, False)
    assert (w.word, w.distance, w.is_candidate, w.is_witness) == ("wxyz", 2, False, True)
    assert str(c) == "abcd" and str(w) == "wxyz 2"


# --- filtering ---
POOL = ["abcd", "abce", "wxyz", "abdd", "abxy", "zbcz"]


def _records(candidates, witnesses):
    return [Record.candidate(w) for w in candidates] + [Record.witness(w, d) for w, d in witnesses]


def test_single_witness_consistency_set():
    records = _records(POOL, [("abcd", 2)])
    # abce/abdd -> 3, wxyz -> 0, abcd -> 4; only abxy and zbcz match exactly 2
    assert consistency_set(records, Record.witness("abcd", 2)) == {"abxy", "zbcz"}
    assert filter_candidates(records) == {"abxy", "zbcz"}


def test_consistency_set_requires_a_witness():
    with pytest.raises(ValueError):
        consistency_set([Record.candidate("abcd")], Record.candidate("abcd"))


def test_multi_witness_intersection():
    words = ["SPIES", "SPITE", "SHINE", "SWINE", "TRIES", "CRIES"]
    records = _records(words, [("SPINE", 3), ("SHINE", 2)])
    assert filter_candidates(records) == {"SPIES"}


def test_disjoint_witnesses_give_empty_result():
    records = _records(["abbb", "bbbb"], [("aaaa", 1), ("bbbb", 4)])
    assert consistency_set(records, Record.witness("aaaa", 1)) == {"abbb"}
    assert consistency_set(records, Record.witness("bbbb", 4)) == {"bbbb"}
    assert filter_candidates(records) == set()


def test_unsatisfiable_distance_is_empty_not_error():
    records = _records(["abcd", "abce"], [("abcd", 9)])
    assert filter_candidates(records) == set()


def test_no_witness_raises_informational_error():
    with pytest.raises(NoWitnessError) as ei:
        filter_candidates(_records(POOL, []))
    assert str(ei.value) == "At least one word must have a known distance"


def test_filter_is_idempotent():
    records = _records(POOL, [("abcd", 2), ("wxyz", 0)])
    assert filter_candidates(records) == filter_candidates(records)
    assert filter_candidates(iter(records)) == filter_candidates(records)


def test_duplicate_survivors_appear_once():
    records = _records(["abxy", "abxy", "zbcz"], [("abcd", 2)])
    out = filter_candidates(records)
    assert out == {"abxy", "zbcz"}
    assert len(out) == 2


def test_witness_is_member_of_its_own_set_only_at_full_length():
    records = _records(["abce"], [("abcd", 4)])
    assert consistency_set(records, Record.witness("abcd", 4)) == {"abcd"}


# --- parsing ---
@pytest.mark.parametrize("line,expected", [
    ("abcd", Record.candidate("abcd")),
    ("abcd\n", Record.candidate("abcd")),
    ("abcd\r\n", Record.candidate("abcd")),
    ("abcd 2", Record.witness("abcd", 2)),
    ("abcd 0\n", Record.witness("abcd", 0)),
    ("abcd 2 extra tokens here", Record.witness("abcd", 2)),
    ("abcd 12", Record.witness("abcd", 12)),
])
def test_parse_record(line, expected):
    assert parse_record(line) == expected


@pytest.mark.parametrize("line", ["", "\n", "   ", "\r\n"])
def test_parse_empty_line_is_no_input(line):
    with pytest.raises(ValidationError) as ei:
        parse_record(line)
    assert ei.value.kind is ValidationKind.NO_INPUT


@pytest.mark.parametrize("line", ["abcd x", "abcd -1", "abcd 2.5", "abcd +2", "abcd 1_0", "abcd ²"])
def test_parse_bad_distance(line):
    with pytest.raises(ValidationError) as ei:
        parse_record(line)
    assert ei.value.kind is ValidationKind.BAD_DISTANCE


# --- uniform length ---
def test_check_uniform_length_accepts_same_length():
    check_uniform_length(_records(["abcd", "wxyz"], [("abce", 1)]))
    check_uniform_length([])


def test_check_uniform_length_flags_mismatch():
    with pytest.raises(ValidationError) as ei:
        check_uniform_length(_records(["abcd", "wxy", "abce"], []))
    assert ei.value.kind is ValidationKind.LENGTH_MISMATCH
    assert ei.value.line == 2
    assert "'wxy'" in str(ei.value)
