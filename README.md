# linearkit

linearkit is a set of small, well-known algorithms and data structures for
linear collections of integers. It has no dependencies outside the standard
library.

| Module | Contents |
| --- | --- |
| `linearkit.arrays` | Array exercises: reversing, summing, duplicates, frequencies, sorting, inserting |
| `linearkit.sorting` | Bubble sort, insertion sort, selection sort |
| `linearkit.searching` | Linear search and binary search |
| `linearkit.stack` | `FixedStack`, a stack with a fixed number of slots, and an interactive menu |
| `linearkit.queues` | `LinearQueue`, a bounded queue that does not wrap around, and an interactive menu |
| `linearkit.singly` | `SinglyLinkedList` |
| `linearkit.doubly` | `DoublyLinkedList` |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Array exercises

Each function takes an iterable of integers and returns a new value. The
input is never changed.

```python
from linearkit.arrays import (
    count_duplicates, frequencies, insert_at, insert_sorted, merge_descending,
    min_max, sort_ascending, split_even_odd, sum_elements, unique_elements,
)

sort_ascending([2, 7, 4, 5, 9])          # [2, 4, 5, 7, 9]
sum_elements([2, 5, 8])                  # 15
count_duplicates([5, 1, 1])              # 1
unique_elements([3, 2, 2, 5])            # [3, 5]
frequencies([25, 12, 25])                # {25: 2, 12: 1}
merge_descending([1, 2, 3], [1, 2, 3])   # [3, 3, 2, 2, 1, 1]
split_even_odd([25, 47, 42, 56, 32])     # EvenOdd(even=[42, 56, 32], odd=[25, 47])
min_max([45, 25, 21])                    # MinMax(minimum=21, maximum=45)
insert_sorted([2, 3, 4, 7, 8], 5)        # [2, 3, 4, 5, 7, 8]
insert_at([1, 8, 7, 10], 5, 2)           # [1, 5, 8, 7, 10]
```

The module also has `reverse_elements`, `copy_elements` and
`sort_descending`.

Some inputs are rejected:

- `min_max` raises `ValueError` for an empty input.
- `merge_descending` raises `ValueError` when the two sequences differ in
  length.
- `insert_at` uses a 1-based position, which may be one past the last
  element. Any other position raises `IndexError`.

## Sorting and searching

```python
from linearkit.sorting import bubble_sort, insertion_sort, selection_sort
from linearkit.searching import binary_search, linear_search

bubble_sort([5, 58, 48, 6, 54, 47])      # [5, 6, 47, 48, 54, 58]
selection_sort([9, 13, 6, 21, 17])       # [6, 9, 13, 17, 21]

linear_search([2, 4, 0, 1, 9], 9)        # 4
linear_search([2, 4, 0, 1, 9], 3)        # None

ordered = [0, 1, 2, 4, 5, 7, 8, 9]
binary_search(ordered, 8)                # 6
binary_search(ordered, 8, 0, 3)          # None, searches only ordered[0..3]
```

Each sorting function returns a new list in ascending order.

`binary_search` takes an optional inclusive range `low`..`high`, which
covers the whole sequence by default. The sequence must be sorted in
ascending order. Both search functions return `None` when the target is
not found.

## FixedStack

```python
from linearkit.stack import FixedStack, StackOverflow, StackUnderflow

stack = FixedStack(5)        # capacity defaults to 5
stack.push(10)
stack.push(20)
len(stack)                   # 2
stack.peek()                 # 20, the top value
stack.peek(0)                # 10, 0-based position from the bottom
stack.change(0, 15)
stack.slots()                # [0, 0, 0, 20, 15], highest slot first
stack.pop()                  # 20
stack.is_empty(), stack.is_full()
```

The stack raises these errors:

- `push` on a full stack raises `StackOverflow`.
- `pop` or `peek` on an empty stack raises `StackUnderflow`.
- `StackOverflow` and `StackUnderflow` both derive from `StackError`.
- `peek` and `change` raise `IndexError` for a position that holds no value.
- A capacity below 1 raises `ValueError`.

## LinearQueue

```python
from linearkit.queues import LinearQueue, QueueOverflow, QueueUnderflow

queue = LinearQueue(3, reset_when_empty=True)
queue.enqueue(1)
queue.enqueue(2)
queue.peek()        # 1
queue.dequeue()     # 1
list(queue)         # [2]
len(queue)          # 1
```

Every `enqueue` uses up one of the `capacity` slots, which defaults to 1000.
Slots are not freed by `dequeue`. When `reset_when_empty` is true (the
default), all slots are reclaimed as soon as the queue becomes empty.
Without it, a queue that has taken `capacity` values stays full.

The queue raises these errors:

- `enqueue` on a full queue raises `QueueOverflow`.
- `dequeue` or `peek` on an empty queue raises `QueueUnderflow`.
- Both derive from `QueueError`.

## Linked lists

```python
from linearkit.singly import SinglyLinkedList
from linearkit.doubly import DoublyLinkedList

items = SinglyLinkedList([1, 5, 4, 8, 9, 7, 2])
items.delete_at(4)       # 8
list(items)              # [1, 5, 4, 9, 7, 2]
items.push_front(0)
items.insert_at(3, 2)    # 3 now sits at 1-based position 2
items.append(6)

chain = DoublyLinkedList([1, 2, 3])
chain.forward()          # [1, 2, 3]
chain.backward()         # [3, 2, 1]
list(reversed(chain))    # [3, 2, 1]
```

`SinglyLinkedList.insert_at` and `delete_at` use 1-based positions. Both
raise `IndexError` when the position is out of range. The insertion
methods and `DoublyLinkedList.append` return the new node, which is a
`SinglyNode` or a `DoublyNode`.

## Interactive menus

Two commands read numbered choices from standard input.

```
linearkit-stack [--capacity N]
linearkit-queue [--capacity N] [--reset]
```

`linearkit-stack` offers these operations on a `FixedStack` of 5 slots by
default:

- push, pop, isEmpty, isFull
- peek by position, count
- change, display of all slots
- clearing the screen

Enter `0` to leave.

`linearkit-queue` offers these operations on a `LinearQueue` of 1000 slots
by default:

- isfull, isempty
- enqueue, dequeue, peek
- display

Enter `7` to leave. In this command, slots are reclaimed when the queue
empties only if `--reset` is given.

Both menus also stop at the end of input.

## What is not included

The array, sorting, searching and linked-list modules have no command-line
interface. They are used from Python only.