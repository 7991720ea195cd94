"""
algorithms/sorting/
-------------------
Array-family sorting producers.  Each module exports one generator plus
its PSEUDOCODE list.
"""
