import pytest

from core.strength import MODERATE, STRONG, WEAK, StrengthAssessment, analyze, categorize


def test_empty_string_is_weak_with_every_hint():
    r = analyze("")
    assert r.score == 0
    assert r.category == WEAK
    assert r.suggestions == (
        "Use at least 8 characters",
        "Include uppercase letters",
        "Include lowercase letters",
        "Include numbers",
        "Include special characters",
    )


def test_strong_password_clamps_to_100():
    r = analyze("Tr0ub4dor&3XyZ")
    assert r.score == 100
    assert r.category == STRONG
    assert r.suggestions == ()


def test_common_word_is_penalised():
    r = analyze("password")
    # 15 (length 8) + 20 (lowercase) - 20 (pattern)
    assert r.score == 15
    assert r.category == WEAK
    assert r.suggestions == (
        "Include uppercase letters",
        "Include numbers",
        "Include special characters",
        "Avoid common password patterns",
    )


def test_repeated_runs_are_penalised_once():
    r = analyze("aaaAAA111!!!")
    # 25 + 4 * 20 - 10
    assert r.score == 95
    assert r.category == STRONG
    assert r.suggestions == ("Avoid repeating characters",)


def test_penalties_can_drop_category():
    # 85 before penalties would be strong
    r = analyze("Abc111defGhi")
    assert r.score == 25 + 60 - 20 - 10
    assert r.category == MODERATE
    assert r.suggestions == (
        "Include special characters",
        "Avoid common password patterns",
        "Avoid repeating characters",
    )


def test_category_boundary_at_50_is_moderate():
    r = analyze("Aa1111")
    # length < 8, upper + lower + digit = 60, repeat -10
    assert r.score == 50
    assert r.category == MODERATE


def test_category_boundary_at_80_is_strong():
    r = analyze("Aa1!")
    assert r.score == 80
    assert r.category == STRONG


@pytest.mark.parametrize(
    "score,expected",
    [(0, WEAK), (49, WEAK), (50, MODERATE), (79, MODERATE), (80, STRONG), (100, STRONG)],
)
def test_categorize_thresholds(score, expected):
    assert categorize(score) == expected


def test_leading_123_only_counts_at_start():
    assert "Avoid common password patterns" in analyze("123Xyz!q").suggestions
    assert "Avoid common password patterns" not in analyze("Xy!q123").suggestions


def test_patterns_are_case_insensitive():
    assert "Avoid common password patterns" in analyze("xxQWERTYxx").suggestions
    assert "Avoid common password patterns" in analyze("WeLcOmE").suggestions


def test_score_never_negative():
    # only lowercase credit (20) against both penalties (-30)
    r = analyze("abcccc")
    assert r.score == 0
    assert r.category == WEAK


def test_non_ascii_input_is_handled():
    r = analyze("ÄÖÜ密码пароль✓✓✓")
    assert 0 <= r.score <= 100
    # non-ASCII letters earn no case credit
    assert "Include uppercase letters" in r.suggestions
    assert "Avoid repeating characters" in r.suggestions


def test_symbol_set_is_fixed():
    assert "Include special characters" in analyze("Abcdefg1-_+=").suggestions
    assert "Include special characters" not in analyze("Xyzdefg1<").suggestions


def test_deterministic():
    for s in ["", "password", "Tr0ub4dor&3XyZ", "aaaAAA111!!!"]:
        assert analyze(s) == analyze(s)
        assert isinstance(analyze(s), StrengthAssessment)
