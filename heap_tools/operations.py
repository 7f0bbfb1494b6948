from typing import Any, Iterable, Optional
from multiprocessing_logger import Logger
from .heap import BinaryHeap, MaxHeap, HeapType, InvalidRankError, heap_from_type

def build_from_sequence(
        items: Iterable,
        name: str = '',
        logger: Optional[Logger] = None
    ) -> MaxHeap:
    '''
    Max-heap holding every item, inserted one at a time in input order.
    Accepts any iterable, e.g. a list or a 1D numpy array.
    '''

    heap = MaxHeap(name=name, logger=logger)
    for item in items:
        heap.insert(item)
    return heap

def nth_largest(heap: BinaryHeap, n: int) -> Any:
    '''
    Return the n-th element in priority order (n=1 is the root).
    The heap passed as argument is left untouched.
    '''

    if n < 1 or n > heap.size():
        raise InvalidRankError(f'rank {n} outside of [1, {heap.size()}]')

    # removals happen on a copy of the storage
    heap_copy = heap.copy()
    for i in range(n):
        element = heap_copy.remove()
    return element

def merge_heaps(
        heap_a: BinaryHeap,
        heap_b: BinaryHeap,
        name: str = '',
        logger: Optional[Logger] = None
    ) -> BinaryHeap:
    '''
    New heap containing the elements of both heaps, duplicates included.
    The result is a max-heap if the first two stored elements of heap_a
    are in decreasing order under heap_a's comparator, a min-heap otherwise.
    heap_b's ordering is never inspected.
    '''

    heaptype = HeapType.MINHEAP
    if heap_a.size() > 1 and heap_a.compare(heap_a.elements[0], heap_a.elements[1]) > 0:
        heaptype = HeapType.MAXHEAP

    merged = heap_from_type(heaptype, name=name, logger=logger)

    # stored array order, not priority order
    for element in heap_a.elements:
        merged.insert(element)
    for element in heap_b.elements:
        merged.insert(element)

    return merged
