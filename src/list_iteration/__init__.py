"""
Micro-benchmark comparing indexed and sequential iteration over a Python
``list`` and a doubly linked list.
"""

from .harness import LIST_SIZE, IterationHarness, SupportsListOps, container_kind
from .linked_list import LinkedList
from .main import main

__all__ = [
    "LIST_SIZE",
    "IterationHarness",
    "LinkedList",
    "SupportsListOps",
    "container_kind",
    "main",
]
