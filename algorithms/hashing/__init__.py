"""
algorithms/hashing/
-------------------
Probing-family (open addressing) and chaining-family producers.
"""
