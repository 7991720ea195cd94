"""
algorithms/bits/
----------------
Bit-family producers.
"""
