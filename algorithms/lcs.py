from typing import Sequence


def lcs_length(a: Sequence, b: Sequence) -> int:
    """
    Length of the longest common subsequence of `a` and `b`.

    Works on any sequences (for str: code points). Uses a single row sized to
    the shorter input plus a carried diagonal, so memory is O(min(n, m)).
    """
    if len(a) < len(b):
        a, b = b, a
    n, m = len(a), len(b)
    if m == 0:
        return 0
    dp = [0] * (m + 1)
    for i in range(1, n + 1):
        x = a[i - 1]
        prev = 0
        for j in range(1, m + 1):
            cur = dp[j]
            if x == b[j - 1]:
                dp[j] = prev + 1
            elif dp[j - 1] > cur:
                dp[j] = dp[j - 1]
            prev = cur
    return dp[m]
