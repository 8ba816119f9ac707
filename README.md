# dsadrills

Classic data-structure and algorithm exercises, written as plain Python
functions and classes. It has no runtime dependencies.

## Modules

### `dsadrills.numbers`

- `fibonacci(n)` returns the first `n` Fibonacci terms, starting from 0.
  `fibonacci_after_seed(n)` returns 0 and 1 followed by `n` further terms.
- `is_prime(n)` checks for a divisor between 2 and `n - 1`. Values below 2
  have no such divisor, so they are reported as prime.
- `factorial(n)` and `n_cr(n, r)` use integer arithmetic.
- `power(base, exponent)` uses exponentiation by squaring. It raises
  `ValueError` for a negative exponent.
- `is_power_of_two(n)` is true only for positive powers of two.
- `classify_char(ch)` returns a `CharKind`, which is one of `LOWER`, `UPPER`,
  `DIGIT` or `INVALID`. Only ASCII letters and digits count. It raises
  `ValueError` unless it is given exactly one character.
- `sum_to(n)` returns `1 + ... + n`, or 0 when `n` is below 1.
- `subtract_product_and_sum(n)` returns the product of the digits of `n`
  minus their sum.
- `reverse_digits(n)` reverses the digits of `n` and keeps its sign.
  `is_palindrome_number(n)` checks whether that reversal equals `n`.
- `square_pattern(n)` returns an `n` by `n` square of `*`, one row per line.

### `dsadrills.arrays`

- `reverse_in_place(items)` reverses a list in place.
- `swap_alternate(items)` swaps each pair of neighbours in place. A trailing
  odd element stays where it is.
- `min_max(values)` returns `(minimum, maximum)`. It raises `ValueError` when
  there are no values.
- `array_sum(values)` returns the sum of the values. `contains(values, key)`
  is a linear search.
- `catch_thieves(cells, k)` does a greedy matching over cells marked `'P'` for
  police and `'T'` for thieves. Each policeman catches at most one thief who
  is no more than `k` cells away.

### `dsadrills.sorting`

- `merge_sort(items)` and `quick_sort(items)` sort a mutable sequence in
  place and return `None`.
- `merge(items, start, end)` merges the two sorted halves of
  `items[start:end + 1]`.
- `partition(items, start, end)` moves the first element of the range to its
  sorted position and returns that position.
- Both `merge` and `partition` raise `IndexError` for a range outside the
  sequence.

### `dsadrills.text`

- `is_valid_brackets(s)` checks that `()`, `{}` and `[]` are nested correctly.
  Any other character makes the string invalid.
- `has_redundant_brackets(s)` is true when some pair of parentheses encloses
  none of `+ - * /`.
- `reverse_string(s)` returns `s` reversed. `reverse_with_stack(chars)`
  reverses a list of characters in place by way of a stack.
  `is_palindrome_string(s)` checks whether `s` reads the same both ways.
- `read_until(stream, delimiter="$")` reads a text stream up to the
  delimiter. The delimiter is consumed and left out of the result.
- `swap_steps(s)` returns the character pairs that are swapped, outermost
  first, when `s` is reversed.
- `read_pairs(tokens)` reads integer pairs until it meets `-1 -1`, a token
  that is not an integer, or the end of the input. It accepts a
  whitespace-separated string or an iterable of tokens.

### `dsadrills.linkedlist`

`Node` and `LinkedList` together make a singly linked list that tracks both
its head and its tail. Positions are 1-based.

- Build a list with `LinkedList.from_iterable(values)`.
- Change it with `add_at_begin`, `add_at_end`, `insert_at(position, value)`
  and `delete_at(position)`. A position that is out of range raises
  `IndexError`.
- `reverse()` reverses the list in place. `reverse_in_groups(k)` reverses
  every run of `k` nodes, and a short final run is reversed as well. Both
  raise `ValueError` when the list contains a loop.
- `close_loop(node)` points the tail at a node of the list, and
  `close_loop(None)` opens the loop again.
- To detect loops, use `has_loop()`, which remembers the nodes it has
  visited, or `has_loop_floyd()`, which uses a slow and a fast pointer.
  `loop_start()` returns the node where the loop begins, or `None` when there
  is no loop. `is_circular()` is true when the tail links back to the head.
- `is_palindrome()` checks whether the values read the same both ways.
- Iterating over a list yields its values from the head to the tail, even
  when it has a loop.

### `dsadrills.stacks`

- `BoundedStack(capacity)` provides `push`, `pop`, `peek`, `is_empty` and
  `len()`. Iterating over it goes from the top to the bottom. It raises
  `StackOverflowError` when it is full and `StackUnderflowError` when it is
  empty.
- `TwoStacks(size=3)` holds two stacks in one fixed array. It provides
  `push1`, `push2`, `pop1` and `pop2`, and raises the same two errors.
- The helpers below treat a list as a stack whose top is its last item:
  - `delete_middle(stack)` removes and returns the middle item.
  - `insert_at_bottom(stack, value)` places the value beneath every item.
  - `reverse_stack(stack)` reverses the stack.
  - `sort_stack(stack)` sorts the stack so that the largest item is on top.
  - `insert_at_bottom`, `reverse_stack` and `sort_stack` are recursive.

## Example

```python
from dsadrills.numbers import power, n_cr
from dsadrills.sorting import merge_sort
from dsadrills.linkedlist import LinkedList

power(2, 10)        # 1024
n_cr(5, 2)          # 10

values = [5, 4, 3, 2, 1]
merge_sort(values)
values              # [1, 2, 3, 4, 5]

lst = LinkedList.from_iterable([1, 2, 3, 2, 1])
lst.is_palindrome() # True
```

## What it does not do

The package has no command-line programs. It reads no console input and
prints nothing. Every drill takes its input as arguments and returns its
result, or changes the sequence it is given. The exceptions are `read_until`,
which reads from a stream you pass to it, and `read_pairs`, which reads from
the tokens you pass to it.

## Running the tests

```
pip install -e ".[test]"
pytest
```