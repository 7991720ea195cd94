"""
rabin_karp.py — Rabin–Karp
===========================
Rolling polynomial hash over a sliding window.  Equal hashes are
confirmed character by character, so spurious hits (hash collisions)
are shown and rejected.

    hash(s) = (s[0]·d^(m-1) + … + s[m-1]) mod q      d = 256, q = 101
"""

from typing import Iterator, List

from algorithms.step import StringStep


BASE    = 256
MODULUS = 101

PSEUDOCODE: List[str] = [
    "def rabin_karp(text, p):",                              # 0
    "    h ← d^(m-1) mod q",                                 # 1
    "    hp ← hash(p); ht ← hash(text[0:m])",                # 2
    "    for i in 0..n-m:",                                  # 3
    "        if hp == ht:",                                  # 4
    "            if text[i:i+m] == p: report i",             # 5
    "            else: spurious hit",                        # 6
    "        ht ← (d·(ht - text[i]·h) + text[i+m]) mod q",   # 7
]


def rabin_karp(text: str, pattern: str, base: int = BASE, modulus: int = MODULUS) -> Iterator[StringStep]:
    text, pattern = str(text or ""), str(pattern or "")
    n, m = len(text), len(pattern)

    if m == 0:
        yield StringStep(text=text, message="The pattern is empty: nothing to search for.", line_number=0)
        return
    if n < m:
        yield StringStep(
            text=text, pattern=pattern, line_number=0,
            message="The text is shorter than the pattern: no match is possible.",
        )
        return
    if modulus <= 1 or base <= 1:
        yield StringStep(text=text, pattern=pattern, message="Base and modulus must both exceed 1.", line_number=0)
        return

    h = pow(base, m - 1, modulus)
    hp = ht = 0
    for k in range(m):
        hp = (base * hp + ord(pattern[k])) % modulus
        ht = (base * ht + ord(text[k])) % modulus

    yield StringStep(
        text=text, pattern=pattern, window_start=0, hash_text=ht, hash_pattern=hp, line_number=2,
        message=f"Initial hashes: pattern = {hp}, text[0..{m - 1}] = {ht}.",
    )

    matches: List[int] = []
    for i in range(n - m + 1):
        yield StringStep(
            text=text, pattern=pattern, window_start=i, text_index=i, hash_text=ht, hash_pattern=hp,
            comparing=True, matches=matches, line_number=4,
            message=f"Window at {i}: pattern hash {hp} vs window hash {ht}.",
        )

        if hp == ht:
            if text[i:i + m] == pattern:
                matches.append(i)
                yield StringStep(
                    text=text, pattern=pattern, window_start=i, text_index=i + m - 1, pattern_index=m - 1,
                    hash_text=ht, hash_pattern=hp, matches=matches, line_number=5,
                    message=f"Hashes match and the characters agree: pattern found at index {i}!",
                )
            else:
                yield StringStep(
                    text=text, pattern=pattern, window_start=i, text_index=i,
                    hash_text=ht, hash_pattern=hp, matches=matches, line_number=6,
                    message=f"Spurious hit at {i}: hashes are equal but \"{text[i:i + m]}\" != \"{pattern}\".",
                )

        if i < n - m:
            old = ht
            ht = (base * (ht - ord(text[i]) * h) + ord(text[i + m])) % modulus
            yield StringStep(
                text=text, pattern=pattern, window_start=i + 1, text_index=i + m,
                hash_text=ht, hash_pattern=hp, matches=matches, line_number=7,
                message=f"Roll: drop '{text[i]}', add '{text[i + m]}'. Hash {old} → {ht}.",
            )

    yield StringStep(
        text=text, pattern=pattern, hash_pattern=hp, matches=matches, line_number=3,
        message=f"Search complete: {len(matches)} match(es) at {matches}." if matches
        else "Search complete: the pattern does not occur in the text.",
    )
