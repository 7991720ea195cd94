"""
algorithms/strings/
-------------------
String-matching producers (KMP, Rabin–Karp).
"""
