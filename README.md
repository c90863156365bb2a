# ticketdesk

ticketdesk is a console desk for technical support. You register clients and
view the waiting list. The package also ships the small containers the desk
is built on: a cursor linked list, a max-heap, maps, multimaps, sets, a queue
and a stack. It also has a few text helpers.

## Installing

```
pip install .
```

The package has no third-party dependencies.

## Running the desk

```
ticketdesk
```

The command calls `ticketdesk.app:main`. Its prompts and messages are in
Spanish. Before each menu the screen is cleared by running the `clear`
command; if that command is missing, nothing happens. The menu offers:

1. Register a client. The desk asks for a name and a whole-number age and
   appends a `Ticket` to the waiting list. An empty name or a bad age prints
   an error, and no client is added.
2. Assign a priority to a client
3. Show the waiting list. This prints the name of each client in order.
4. Attend the next client
5. Show clients by priority
6. Exit

Any other entry prints an "invalid option" message. After each choice the desk
waits for you to press Enter. The desk also stops when input ends.

### What the desk does not do

Options 2, 4 and 5 are in the menu but do nothing. You cannot yet assign
priorities, attend clients or list clients by priority, although `Ticket` has
a `priority` field. Clients live only in memory and are lost when the desk
exits. Nothing is saved to disk.

## Using the containers

```python
from ticketdesk.linked_list import LinkedList
from ticketdesk.heap import Heap
from ticketdesk.maps import Map, MultiMap, Set
from ticketdesk.adapters import Queue, Stack
from ticketdesk.extra import read_csv_line, split_string

items = LinkedList()
items.push_back("b")
items.push_front("a")
print(list(items), len(items))      # ['a', 'b'] 2

heap = Heap()
heap.push("low", 1)
heap.push("high", 3)
print(heap.top())                   # high
print(heap.pop())                   # high

ages = Map(lower_than=lambda a, b: a < b)
ages.insert("bob", 40)
ages.insert("ana", 30)
print([pair.key for pair in ages])  # ['ana', 'bob']

queue = Queue()
queue.insert(1)
queue.insert(2)
print(queue.remove())               # 1

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.pop())                  # 2

print(split_string(" a , b ,c", ","))  # ['a', 'b', 'c']
```

### `LinkedList`

This is a singly linked list with an internal cursor.

- `first()` moves the cursor to the head and returns its data.
- `next()` advances the cursor and returns its data.
- Insertion: `push_front`, `push_back`, `push_current` (inserts after the
  cursor) and `sorted_insert(data, lower_than)`.
- Removal: `pop_front`, `pop_back` and `pop_current`.
- `clean()` removes every element.
- `len()` and iteration are supported.

When there is nothing to return, these methods give `None`.

### `Heap`

This is a max-heap keyed by integer priority.

- `push(data, priority)` adds an item.
- `top()` returns the data with the highest priority, or `None` if the heap is
  empty.
- `pop()` removes the top item and returns its data. It raises `IndexError` on
  an empty heap.

### `Map`, `MultiMap`, `Set`

A `Map` is built with `is_equal` or `lower_than`, and at least one of them is
required, otherwise it raises `ValueError`.

- With `lower_than`, pairs stay sorted by key. Two keys are equal when neither
  is lower than the other.
- `insert(key, value)` does nothing if the key is already present.
- `remove(key)` and `search(key)` return a `MapPair` (`key`, `value`) or
  `None`.
- `first()` and `next()` walk the pairs with a cursor.
- `clean()` removes every pair.
- `len()` and iteration over pairs are supported.

`MultiMap` keeps every inserted pair, duplicate keys included.

`Set` stores distinct values. It has `insert`, `remove`, `search`, `clean` and
`len()`. `remove` and `search` return the stored value or `None`.

### `Queue` and `Stack`

`Queue` is first-in, first-out, with `insert`, `remove`, `front`, `clean` and
`len()`.

`Stack` is last-in, first-out, with `push`, `top`, `pop`, `clean` and `len()`.

When they are empty, `remove`, `front`, `top` and `pop` return `None`.

### Text helpers

`read_csv_line(file, separator=",")` reads one line from an open text file and
splits it into fields.

- A field may be wrapped in double quotes and may then contain the separator.
- Two separators in a row count as one.
- At most 1023 characters are read per call and at most 299 fields are
  returned.
- It returns `None` at end of file.
- A separator longer than one character raises `ValueError`.

`split_string(text, delim)` splits on any character of `delim`, trims spaces
from each piece and drops empty pieces.

`clear_screen()` clears the terminal. `wait_for_key()` prompts, then waits for
a line of input.

## Tests

```
pip install .[test]
pytest
```