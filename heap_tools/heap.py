from enum import Enum
from typing import Any, Callable, List, Optional
from multiprocessing_logger import Logger
import time

class HeapType(Enum):
    MAXHEAP = -1
    MINHEAP = 1
    CUSTOM = 0

    # this is useful for argparse
    def __str__(self):
        return self.name

class EmptyHeapError(IndexError):
    pass

class InvalidRankError(ValueError):
    pass

def natural_order(a: Any, b: Any) -> int:
    '''-1 if a < b, 0 if a == b, 1 if a > b'''
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

def reverse_order(a: Any, b: Any) -> int:
    return natural_order(b, a)

class BinaryHeap:
    '''
    Array-backed binary heap ordered by a three-way comparator:
    - the element that compares lower than or equal to all others sits at the root
    - children of index i live at 2i+1 and 2i+2, its parent at (i-1)//2
    - compare(elements[i], elements[child]) <= 0 holds after every mutation
    - not thread-safe, concurrent access must be serialized by the caller
    '''

    def __init__(
            self,
            compare: Callable[[Any, Any], int],
            name: str = '',
            logger: Optional[Logger] = None,
            heaptype: HeapType = HeapType.CUSTOM
        ) -> None:

        if not callable(compare):
            raise TypeError('compare should be a callable taking two elements')

        self.elements: List[Any] = []
        self.compare = compare
        self.heaptype = heaptype
        self.name = name
        self.logger = logger
        self.local_logger = None
        if self.logger:
            self.local_logger = self.logger.get_logger(self.name)

    def size(self) -> int:
        return len(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def insert(self, element: Any) -> None:
        """Push element onto heap, maintaining the heap invariant."""

        t_start = time.perf_counter_ns() * 1e-6

        self.elements.append(element)
        self._sift_up(len(self.elements)-1)

        t_stop = time.perf_counter_ns() * 1e-6

        if self.local_logger:
            self.local_logger.info(f'insert, {t_start}, {t_stop}, {len(self.elements)}')

    def remove(self) -> Any:
        """Pop the root off the heap, maintaining the heap invariant."""

        if not self.elements:
            raise EmptyHeapError('remove from empty heap')

        t_start = time.perf_counter_ns() * 1e-6

        returnitem = self.elements[0]
        lastelt = self.elements.pop()
        if self.elements:
            self.elements[0] = lastelt
            self._sift_down(0)

        t_stop = time.perf_counter_ns() * 1e-6

        if self.local_logger:
            self.local_logger.info(f'remove, {t_start}, {t_stop}, {len(self.elements)}')

        return returnitem

    def copy(self) -> 'BinaryHeap':
        '''independent heap sharing only the comparator, not logged'''
        clone = BinaryHeap(self.compare, name=self.name, heaptype=self.heaptype)
        clone.elements = list(self.elements)
        return clone

    # pos is the index of a leaf with a possibly out-of-order value.
    # Restore the heap invariant on the path to the root.
    def _sift_up(self, pos: int) -> None:
        newitem = self.elements[pos]
        # Follow the path to the root, moving parents down until finding
        # a parent that wins over newitem. Ties keep moving up.
        while pos > 0:
            parentpos = (pos - 1) >> 1
            parent = self.elements[parentpos]
            if self.compare(newitem, parent) > 0:
                break
            self.elements[pos] = parent
            pos = parentpos
        self.elements[pos] = newitem

    def _sift_down(self, pos: int) -> None:
        endpos = len(self.elements)
        newitem = self.elements[pos]
        childpos = 2*pos + 1    # leftmost child position
        while childpos < endpos:
            # Set childpos to index of the better child, left wins ties.
            rightpos = childpos + 1
            if rightpos < endpos and self.compare(self.elements[rightpos], self.elements[childpos]) < 0:
                childpos = rightpos
            if not self.compare(self.elements[childpos], newitem) < 0:
                break
            # Move the better child up.
            self.elements[pos] = self.elements[childpos]
            pos = childpos
            childpos = 2*pos + 1
        self.elements[pos] = newitem

    def __str__(self):
        return str(self.elements)

    def __repr__(self):
        return f'{self.__class__.__name__}(heaptype={self.heaptype}, name={self.name!r}, elements={self.elements})'

class MinHeap(BinaryHeap):

    def __init__(self, name: str = '', logger: Optional[Logger] = None) -> None:
        super().__init__(natural_order, name=name, logger=logger, heaptype=HeapType.MINHEAP)

class MaxHeap(BinaryHeap):

    def __init__(self, name: str = '', logger: Optional[Logger] = None) -> None:
        super().__init__(reverse_order, name=name, logger=logger, heaptype=HeapType.MAXHEAP)

def heap_from_type(
        heaptype: HeapType,
        name: str = '',
        logger: Optional[Logger] = None
    ) -> BinaryHeap:

    if heaptype == HeapType.MINHEAP:
        return MinHeap(name=name, logger=logger)
    elif heaptype == HeapType.MAXHEAP:
        return MaxHeap(name=name, logger=logger)
    else:
        raise ValueError('Unknown heap type')
