# kernprims

Small building blocks of the kind found inside a microcontroller operating
system kernel, written as plain Python with no dependencies beyond the
standard library.

## Modules

- `kernprims.rbi`: `RingBufferIndex`, a FIFO index queue over a
  power-of-two number of slots with 8-bit wrapping counters, and
  `next_smaller_power_of_two`. Sizes must fit in an unsigned byte; only the
  largest power of two not above the size is used, and a size of 0 gives an
  index that is always full and always empty.
- `kernprims.ringbuffer`: `RingBuffer`, a FIFO of elements built on the
  index queue. It can be created with no storage (capacity 0) and given
  some later with `set_backing_size`, which drops anything already stored.
- `kernprims.clist`: `Link`, `List` and `TypedList`, a circular singly
  linked intrusive list. `lpush`, `rpush`, `lpop`, `lpoprpush`, `lpeek`
  and `rpeek` are O(1); `rpop`, `contains` and `remove` walk the list.
  `TypedList` takes the name of the attribute that holds each object's
  `Link` and works on the objects themselves.
- `kernprims.channel`: `BufferedChannel`, a blocking multi-producer,
  multi-consumer channel for Python threads. Items are queued while there
  is room; otherwise senders wait until a receiver takes their item. A
  channel of size 0 is a pure rendezvous. `set_backing_size` raises
  `ChannelBusyError` while any thread is waiting.
- `kernprims.mutex`: `Lock` (a blocking lock any thread may release), a
  data-carrying `Mutex` whose `lock()` and `try_lock()` return a
  `MutexGuard` usable as a context manager, and `RawMutex`, built from a
  two-byte initializer (`b"\x00\x00"` unlocked, `b"\xff\xff"` locked) and
  set up lazily on first use.
- `kernprims.msg`: `Msg` and `MessageQueues`, one channel per thread id
  (8 by default). Sending blocks until the target receives, unless the
  target has attached a queue with `init_queue`.
- `kernprims.threadinfo`: `ThreadStatus`, `CreateFlags`, and helpers
  `status_to_string`, `pid_is_valid`, `align_stack`,
  `measure_stack_free`, `wakeup_result` and `getpid_result`.
- `kernprims.boards`: `select_board` chooses a board from enabled feature
  names, `board_init_chain` lists the init messages a board emits, and
  `nrf52_memory_layout` returns the RAM and FLASH `MemorySection`s for the
  nrf52832 or nrf52840. Bad selections raise `BoardError`.
- `kernprims.buildgen`: `buildinfo_source` / `write_buildinfo` produce the
  build-info source naming the board, `arch_cfgs` maps a target triple to
  architecture cfg names, and `core_makefile_snippet` /
  `write_core_makefile` produce the core makefile snippet.

## Install

    pip install .

## Example

    from kernprims.rbi import RingBufferIndex
    from kernprims.ringbuffer import RingBuffer
    from kernprims.mutex import Mutex

    index = RingBufferIndex(4)
    index.put()        # 0
    index.get()        # 0

    rb = RingBuffer(16)
    rb.put("0")
    rb.peek()          # "0"
    rb.get()           # "0"

    counter = Mutex(0)
    with counter.lock() as guard:
        guard.value += 1

## What it does not do

There is no scheduler and no way to create or run kernel threads here.
Thread ids in `MessageQueues` are plain integers chosen by the caller, and
blocking is done with ordinary Python threads. `kernprims.threadinfo` only
names states and computes values; it does not inspect real threads or
stacks. `kernprims.buildgen` writes text files only; it does not generate
C headers or drive a build.

## Tests

    pip install ".[test]"
    pytest