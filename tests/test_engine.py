import pytest
from mastermind.engine import Score, score, filter_candidates, parse_score, validate_guess
from mastermind.engine.codespace import alphabet, generate_all, opening_code, random_code

# --- scoring golden tests (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("abcd", "abcd", (4, 0)),
    ("abcd", "aaab", (1, 1)),
    ("abcd", "dcba", (0, 4)),
    ("aabb", "abab", (2, 2)),
    ("aaaa", "abcd", (1, 0)),
    ("abcd", "bbbb", (1, 0)),
    ("aabc", "caab", (1, 3)),
    ("abcd", "efef", (0, 0)),
])
def test_score_golden(secret, guess, expected):
    assert score(secret, guess) == expected

def test_score_fields():
    s = score("abcd", "aaab")
    assert s.right == 1 and s.wrong == 1

@pytest.mark.parametrize("a,b", [
    ("abcd", "aaab"), ("aabb", "bbaa"), ("fedc", "cdef"), ("aaae", "eaaa"),
])
def test_score_symmetric_and_bounded(a, b):
    assert score(a, b) == score(b, a)
    r, w = score(a, b)
    assert r + w <= 4

def test_score_self_is_full_match():
    for code in generate_all()[:50]:
        assert score(code, code) == (4, 0)

# --- code space ---
def test_generate_all_classic():
    codes = generate_all(6, 4)
    assert len(codes) == 6 ** 4
    assert len(set(codes)) == len(codes)
    assert codes[0] == "abcd"
    assert codes[1] == "aaaa"
    assert codes[-1] == "ffff"

@pytest.mark.parametrize("k,n,opening", [
    (2, 4, "abab"), (3, 1, "a"), (6, 4, "abcd"), (4, 4, "abcd"), (3, 5, "abcab"),
])
def test_generate_all_small(k, n, opening):
    codes = generate_all(k, n)
    assert len(codes) == k ** n
    assert len(set(codes)) == len(codes)
    assert codes[0] == opening == opening_code(k, n)

def test_generate_all_deterministic():
    assert generate_all(3, 3) == generate_all(3, 3)
    assert generate_all(3, 1) == ["a", "b", "c"]

def test_alphabet_bounds():
    assert alphabet(6) == "abcdef"
    with pytest.raises(ValueError):
        alphabet(1)
    with pytest.raises(ValueError):
        alphabet(27)

def test_random_code_uses_alphabet():
    import random
    rng = random.Random(0)
    for _ in range(20):
        code = random_code(rng)
        assert len(code) == 4 and set(code) <= set("abcdef")

# --- score parser ---
@pytest.mark.parametrize("text", ["", "2", "123", "5a", "50", "05", "32", "-1", " 2", "2 ", "٢٢"])
def test_parse_score_rejects(text):
    assert parse_score(text, 4) is None

@pytest.mark.parametrize("text,expected", [
    ("40", (4, 0)), ("04", (0, 4)), ("22", (2, 2)), ("00", (0, 0)), ("31", (3, 1)),
])
def test_parse_score_accepts(text, expected):
    assert parse_score(text, 4) == Score(*expected)

def test_validate_guess_length_only():
    assert validate_guess("abcd", 4) is True
    assert validate_guess("zzzz", 4) is True
    assert validate_guess("abc", 4) is False
    assert validate_guess("abcde", 4) is False
    assert validate_guess("", 4) is False

# --- candidate filter ---
def test_filter_candidates_keeps_secret_and_order():
    codes = generate_all()
    secret = "ffee"
    cand = filter_candidates(codes, [("abcd", score(secret, "abcd"))], N=4)
    assert secret in cand
    assert len(cand) == 16  # only e/f codes survive a 0-0 score
    assert cand == [c for c in codes if c in set(cand)]
    assert len(codes) == 1296  # input untouched

def test_filter_candidates_history():
    codes = ["abcd", "aaab", "abce", "fffa", "dcba"]
    history = [("abcd", Score(3, 0))]
    cand = filter_candidates(codes, history, N=4)
    assert cand == ["abce"]

def test_filter_candidates_truthful_never_drops_secret():
    codes = generate_all()
    for secret in ["aaaa", "fedc", "bbaf", "cece"]:
        cand = codes
        for guess in ["abcd", "eeff", "acef"]:
            before = len(cand)
            cand = filter_candidates(cand, [(guess, score(secret, guess))], N=4)
            assert secret in cand
            assert len(cand) <= before

def test_score_properties_exhaustive_small_space():
    codes = generate_all(3, 3)
    for a in codes:
        for b in codes:
            r, w = score(a, b)
            assert (r, w) == score(b, a)
            assert r + w <= 3
            assert (r == 3) == (a == b)
