"""
kmp.py — Knuth–Morris–Pratt
============================
Two phases, both visible:
  1. Build the LPS (longest proper prefix that is also a suffix) table.
  2. Scan the text; on a mismatch the pattern pointer falls back via LPS
     instead of re-reading text characters.

All match start indices are collected in `matches` (overlaps included).
"""

from typing import Iterator, List

from algorithms.step import StringStep


PSEUDOCODE: List[str] = [
    "def build_lps(p):",                                 # 0
    "    length ← 0; lps[0] ← 0",                        # 1
    "    for i in 1..m-1:",                              # 2
    "        while length > 0 and p[i] != p[length]:",   # 3
    "            length ← lps[length - 1]",              # 4
    "        if p[i] == p[length]: length += 1",         # 5
    "        lps[i] ← length",                           # 6
    "def kmp(text, p):",                                 # 7
    "    j ← 0",                                         # 8
    "    for i in 0..n-1:",                              # 9
    "        while j > 0 and text[i] != p[j]:",          # 10
    "            j ← lps[j - 1]",                        # 11
    "        if text[i] == p[j]: j += 1",                # 12
    "        if j == m: report i - m + 1; j ← lps[j-1]", # 13
]


def kmp(text: str, pattern: str) -> Iterator[StringStep]:
    text, pattern = str(text or ""), str(pattern or "")
    n, m = len(text), len(pattern)

    if m == 0:
        yield StringStep(text=text, message="The pattern is empty: nothing to search for.", line_number=7)
        return

    # --- phase 1: LPS ---
    lps = [0] * m
    yield StringStep(
        text=text, pattern=pattern, lps=lps, lps_index=0, line_number=1,
        message="Build the LPS table. lps[0] is always 0.",
    )

    length = 0
    for i in range(1, m):
        while length > 0 and pattern[i] != pattern[length]:
            yield StringStep(
                text=text, pattern=pattern, lps=lps, lps_index=i, pattern_index=length,
                comparing=True, line_number=4,
                message=f"p[{i}]='{pattern[i]}' != p[{length}]='{pattern[length]}': fall back to lps[{length - 1}] = {lps[length - 1]}.",
            )
            length = lps[length - 1]

        if pattern[i] == pattern[length]:
            length += 1
            line, verdict = 5, f"p[{i}] == p[{length - 1}]: extend the border to {length}."
        else:
            line, verdict = 6, f"p[{i}]='{pattern[i]}' has no matching border."
        lps[i] = length
        yield StringStep(
            text=text, pattern=pattern, lps=lps, lps_index=i, pattern_index=length,
            comparing=True, line_number=line,
            message=f"{verdict} lps[{i}] = {length}.",
        )

    yield StringStep(
        text=text, pattern=pattern, lps=lps, line_number=7,
        message=f"LPS table built: {lps}. Start searching.",
    )

    # --- phase 2: search ---
    matches: List[int] = []
    j = 0
    for i in range(n):
        while j > 0 and text[i] != pattern[j]:
            yield StringStep(
                text=text, pattern=pattern, lps=lps, text_index=i, pattern_index=j,
                window_start=i - j, comparing=True, matches=matches, line_number=11,
                message=f"Mismatch text[{i}]='{text[i]}' vs p[{j}]='{pattern[j]}': shift pattern using lps[{j - 1}] = {lps[j - 1]}.",
            )
            j = lps[j - 1]

        yield StringStep(
            text=text, pattern=pattern, lps=lps, text_index=i, pattern_index=j,
            window_start=i - j, comparing=True, matches=matches, line_number=12,
            message=f"Compare text[{i}]='{text[i]}' with p[{j}]='{pattern[j]}'.",
        )
        if text[i] == pattern[j]:
            j += 1

        if j == m:
            start = i - m + 1
            matches.append(start)
            yield StringStep(
                text=text, pattern=pattern, lps=lps, text_index=i, pattern_index=m - 1,
                window_start=start, matches=matches, line_number=13,
                message=f"Pattern found at index {start}!",
            )
            j = lps[j - 1]

    yield StringStep(
        text=text, pattern=pattern, lps=lps, matches=matches, line_number=9,
        message=f"Search complete: {len(matches)} match(es) at {matches}." if matches
        else "Search complete: the pattern does not occur in the text.",
    )
