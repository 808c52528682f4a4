# lotools

Small, dependency-free helpers for everyday Python work with lists, dicts,
conditional expressions, error handling, threads and channels.

It is a library only: there is no command-line program. All durations are
given and returned in seconds, as floats.

## Installation

```
pip install lotools
```

## Searching sequences (`lotools.find`)

```python
from lotools.find import index_of, find, find_duplicates, min_by, nth, samples

index_of([0, 1, 2, 1, 2, 3], 2)                 # 2
find(["a", "b", "c"], lambda s: s == "b")       # ("b", True)
find_duplicates([1, 2, 2, 1, 2, 3])             # [1, 2]
min_by(["s1", "string2", "s3"], lambda a, b: len(a) < len(b))  # "s1"
nth([0, 1, 2, 3], -2)                           # 2; raises IndexError when out of bounds
samples(["a", "b", "c"], 2)                     # two distinct random items
```

Functions that look for a value return `None` (together with `False` or
`-1` where they report success or an index) when nothing is found or the
collection is empty. `earliest`, `latest`, `earliest_by` and `latest_by`
work on `datetime` values.

## Partial application (`lotools.func`)

```python
from lotools.func import partial

add = partial(lambda x, y, z: x + y + z, 5)
add(10, 9)                                      # 24
```

## Sets of values (`lotools.intersect`)

```python
from lotools.intersect import intersect, difference, union, without, without_nth

intersect([0, 1, 2, 3], [0, 2])                 # [0, 2]
difference([0, 1, 2], [0, 2, 6])                # ([1], [6])
union([0, 1, 2], [0, 2, 10])                    # [0, 1, 2, 10]
without([0, 2, 10], 0, 1, 2)                    # [10]
without_nth([5, 6, 7], 1, 0)                    # [7]
```

Results keep the sequence type of the input where it is a list or tuple
subclass.

## Mappings (`lotools.mapping`)

```python
from lotools.mapping import pick_by, omit_by_keys, invert, assign, chunk_entries

pick_by({"foo": 1, "bar": 2}, lambda k, v: v % 2 == 1)   # {"foo": 1}
omit_by_keys({"foo": 1, "bar": 2}, ["foo"])              # {"bar": 2}
invert({"a": 1, "b": 2})                                 # {1: "a", 2: "b"}
assign({"a": 1, "b": 2}, {"b": 3, "c": 4})               # {"a": 1, "b": 3, "c": 4}
chunk_entries({"a": 1, "b": 2, "c": 3}, 2)               # [{"a": 1, "b": 2}, {"c": 3}]
```

`chunk_entries` raises `ValueError` when the size is not positive.

## Conditions (`lotools.condition`)

```python
from lotools.condition import ternary, if_, switch

ternary(True, "a", "b")                          # "a"
if_(False, 1).else_if(True, 2).else_(3)          # 2
switch(42).case(1, "one").case(42, "answer").default("other")  # "answer"
```

`ternary_f`, `if_f`, `else_if_f`, `else_f`, `case_f` and `default_f` take
callables and only call the one that is chosen.

## Errors (`lotools.errors`)

```python
from lotools.errors import must, try_, try_or, try_with_error_value, MustError

must("foo", None)                                # "foo"
must(1, False)                                   # raises MustError("not ok")
try_(lambda: 1 / 0)                              # False
try_or(lambda: int("x"), 42)                     # (42, False)
try_or(lambda: (1, "a"), 0, "")                  # (1, "a", True)
```

`validate(ok, fmt, *args)` returns a `ValueError` (or `None` when `ok`), and
`errors_as(err, SomeError)` searches an exception's cause/context chain.

## Concurrency (`lotools.concurrency`)

```python
from lotools.concurrency import synchronize, run_async, wait_for, WaitGroup

lock = synchronize()
lock.do(lambda: print("one at a time"))

future = run_async(lambda: 10)
future.result()                                  # 10

wg = WaitGroup()
wg.go(lambda: print("in a thread"))
errors = wg.wait()                               # exceptions raised by the tasks

iterations, elapsed, found = wait_for(lambda i: i >= 5, timeout=0.2, heartbeat_delay=0.001)
```

`wait_for_with_context` and the `WaitGroup.go_with_context*` methods take a
`threading.Event` as the context; setting it cancels the wait.

## Channels (`lotools.channel`)

`Channel` is a thread-safe FIFO with optional buffering (capacity 0 makes
sends wait for a receiver). `send`, `receive` and `close` raise
`ChannelClosedError` where a closed channel forbids them; iterating yields
items until the channel is closed and drained.

```python
from lotools.channel import (
    slice_to_channel, channel_to_slice, buffer, fan_out,
    channel_dispatcher, dispatching_strategy_round_robin,
)

ch = slice_to_channel(2, [1, 2, 3])
buffer(ch, 2)                                    # ([1, 2], 2, elapsed, True)

children = channel_dispatcher(
    slice_to_channel(10, [0, 1, 2, 3]), 4, 10, dispatching_strategy_round_robin
)
[channel_to_slice(c) for c in children]          # [[0], [1], [2], [3]]
```

Also available: `generator`, `buffer_with_context`, `buffer_with_timeout`,
`fan_in`, `fan_out`, and the dispatching strategies `random`,
`weighted_random`, `first`, `least` and `most`.

## Running the tests

```
pip install "lotools[test]"
pytest
```