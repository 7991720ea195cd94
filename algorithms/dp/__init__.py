"""
algorithms/dp/
--------------
Grid-family dynamic-programming producers.
"""
