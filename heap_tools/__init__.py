from .heap import (
    HeapType,
    BinaryHeap, MinHeap, MaxHeap,
    EmptyHeapError, InvalidRankError,
    natural_order, reverse_order, heap_from_type
)
from .operations import build_from_sequence, nth_largest, merge_heaps
