import pytest

from kernprims.threadinfo import (
    THREADS_NUMOF,
    CreateFlags,
    ThreadStatus,
    align_stack,
    getpid_result,
    measure_stack_free,
    pid_is_valid,
    status_to_string,
    wakeup_result,
)


@pytest.mark.parametrize(
    "status,name",
    [
        (ThreadStatus.RUNNING, "pending"),
        (ThreadStatus.ZOMBIE, "zombie"),
        (ThreadStatus.PAUSED, "sleeping"),
        (ThreadStatus.MUTEX_BLOCKED, "bl mutex"),
        (ThreadStatus.FLAG_BLOCKED_ANY, "bl anyfl"),
        (ThreadStatus.FLAG_BLOCKED_ALL, "bl allfl"),
        (ThreadStatus.CHANNEL_TX_BLOCKED, "bl send"),
        (ThreadStatus.CHANNEL_RX_BLOCKED, "bl rx"),
        (ThreadStatus.CHANNEL_TX_REPLY_BLOCKED, "bl txrx"),
        (ThreadStatus.CHANNEL_REPLY_BLOCKED, "bl reply"),
        (ThreadStatus.INVALID, "unknown"),
    ],
)
def test_status_names(status, name):
    assert status_to_string(status) == name


def test_status_accepts_int():
    assert status_to_string(int(ThreadStatus.PAUSED)) == "sleeping"


@pytest.mark.parametrize(
    "value,member",
    [
        (1 << 0, CreateFlags.SLEEPING),
        (1 << 1, CreateFlags.WITHOUT_YIELD),
        (1 << 2, CreateFlags.STACKTEST),
    ],
)
def test_create_flags_from_bits(value, member):
    assert CreateFlags(value) is member
    assert int(CreateFlags(value)) == value


def test_pid_is_valid():
    assert all(pid_is_valid(p) for p in range(THREADS_NUMOF))
    assert not pid_is_valid(THREADS_NUMOF)
    assert not pid_is_valid(0xFF)
    assert not pid_is_valid(-1)


@pytest.mark.parametrize("address", range(0x1000, 0x1010))
@pytest.mark.parametrize("size", [64, 100, 1023])
def test_align_stack_invariants(address, size):
    new_address, new_size = align_stack(address, size)
    assert new_address % 8 == 0
    assert new_size % 8 == 0
    assert new_address >= address
    assert new_address + new_size <= address + size
    assert address + size - (new_address + new_size) < 8


def test_align_stack_keeps_aligned_region():
    assert align_stack(0x2000, 1024) == (0x2000, 1024)


def test_align_stack_too_small():
    with pytest.raises(ValueError):
        align_stack(0x1001, 3)


@pytest.mark.parametrize("untouched", [0, 1, 5, 20])
def test_measure_stack_free(untouched):
    start = 0x1000
    memory = {start + i * 4: start + i * 4 for i in range(untouched)}
    memory[start + untouched * 4] = 0xDEAD
    assert measure_stack_free(memory.__getitem__, start) == untouched * 4


def test_measure_stack_free_word_size():
    start = 0x2000
    memory = {start: start, start + 8: start + 8, start + 16: 0}
    assert measure_stack_free(memory.__getitem__, start, 8) == 16


def test_measure_stack_free_rejects_unaligned():
    with pytest.raises(ValueError):
        measure_stack_free(lambda addr: addr, 0x1002)


def test_wakeup_result():
    assert wakeup_result(True) == 1
    assert wakeup_result(False) == 0xFF


def test_getpid_result():
    assert getpid_result(None) == 0xFF
    assert getpid_result(3) == 3