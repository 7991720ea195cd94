"""
algorithms/linked_list/
-----------------------
Linked-list family producers.
"""
