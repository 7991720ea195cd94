"""
algorithms/searching/
---------------------
Array-family search producers.
"""
