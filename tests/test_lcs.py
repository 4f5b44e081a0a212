import random

from algorithms.lcs import lcs_length


def _full_table(a, b):
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a)):
        for j in range(len(b)):
            dp[i + 1][j + 1] = dp[i][j] + 1 if a[i] == b[j] else max(dp[i][j + 1], dp[i + 1][j])
    return dp[len(a)][len(b)]

def test_lcs_length():
    assert lcs_length("longest", "stone") == 3
    assert lcs_length("abcde", "ace") == 3
    assert lcs_length("abc", "xyz") == 0

def test_lcs_empty():
    assert lcs_length("", "abc") == 0
    assert lcs_length("abc", "") == 0
    assert lcs_length("", "") == 0

def test_lcs_symmetric_and_identity():
    for a, b in [("longest", "stone"), ("fight", "night"), ("aab", "abaa")]:
        assert lcs_length(a, b) == lcs_length(b, a)
        assert lcs_length(a, a) == len(a)

def test_lcs_matches_full_table():
    rng = random.Random(7)
    for _ in range(200):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 12)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 12)))
        n = lcs_length(a, b)
        assert n == _full_table(a, b)
        assert 0 <= n <= min(len(a), len(b))

def test_lcs_sequences_and_unicode():
    assert lcs_length("the quick brown fox".split(), ["the", "brown", "dog"]) == 2
    assert lcs_length("naïve café", "naive cafe") == 8

def test_lcs_does_not_mutate():
    a, b = list("abcab"), list("bab")
    lcs_length(a, b)
    assert a == list("abcab") and b == list("bab")
