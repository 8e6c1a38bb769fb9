from .heap import Heap, MinHeap, MaxHeap, min_priority, max_priority

__all__ = [
    "Heap",
    "MinHeap",
    "MaxHeap",
    "min_priority",
    "max_priority",
]
