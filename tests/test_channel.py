import threading
import time

import pytest

from kernprims.channel import BufferedChannel, ChannelBusyError


def _wait_until_busy(channel, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            channel.set_backing_size(channel.capacity())
        except ChannelBusyError:
            return True
        time.sleep(0.005)
    return False


def test_buffered_fifo_order():
    channel = BufferedChannel(4)
    for item in "abcd":
        channel.send(item)
    assert channel.available() == 4
    assert [channel.recv() for _ in range(4)] == list("abcd")
    assert channel.available() == 0


def test_capacity_follows_ring_buffer():
    assert BufferedChannel(4).capacity() == 4
    assert BufferedChannel(3).capacity() == 2
    assert BufferedChannel(0).capacity() == 0
    assert BufferedChannel().capacity() == 0


def test_try_send_fails_when_full():
    channel = BufferedChannel(2)
    assert channel.try_send(1) is True
    assert channel.try_send(2) is True
    assert channel.try_send(3) is False
    assert channel.try_recv() == 1
    assert channel.try_recv() == 2
    assert channel.try_recv() is None


def test_try_recv_empty_returns_none():
    channel = BufferedChannel(4)
    assert channel.try_recv() is None


def test_zero_sized_try_send_without_receiver_fails():
    channel = BufferedChannel(0)
    assert channel.try_send("x") is False
    assert channel.try_recv() is None


def test_rendezvous_receiver_waits_for_sender():
    channel = BufferedChannel(0)
    results = []
    receiver = threading.Thread(target=lambda: results.append(channel.recv()))
    receiver.start()
    assert _wait_until_busy(channel)
    channel.send("hello")
    receiver.join(timeout=5)
    assert not receiver.is_alive()
    assert results == ["hello"]


def test_try_send_hands_to_waiting_receiver():
    channel = BufferedChannel(0)
    results = []
    receiver = threading.Thread(target=lambda: results.append(channel.recv()))
    receiver.start()
    assert _wait_until_busy(channel)
    assert channel.try_send(42) is True
    receiver.join(timeout=5)
    assert results == [42]


def test_try_recv_takes_from_blocked_sender():
    channel = BufferedChannel(0)
    sender = threading.Thread(target=channel.send, args=("item",))
    sender.start()
    assert _wait_until_busy(channel)
    assert channel.try_recv() == "item"
    sender.join(timeout=5)
    assert not sender.is_alive()


def test_blocked_sender_item_joins_queue_in_order():
    channel = BufferedChannel(2)
    channel.send(1)
    channel.send(2)
    sender = threading.Thread(target=channel.send, args=(3,))
    sender.start()
    assert _wait_until_busy(channel)
    assert channel.recv() == 1
    sender.join(timeout=5)
    assert not sender.is_alive()
    assert channel.available() == 2
    assert channel.recv() == 2
    assert channel.recv() == 3


def test_try_send_fails_while_senders_wait():
    channel = BufferedChannel(0)
    sender = threading.Thread(target=channel.send, args=("first",))
    sender.start()
    assert _wait_until_busy(channel)
    assert channel.try_send("second") is False
    assert channel.recv() == "first"
    sender.join(timeout=5)


def test_set_backing_size_when_idle_resets_queue():
    channel = BufferedChannel(2)
    channel.send("old")
    channel.set_backing_size(8)
    assert channel.capacity() == 8
    assert channel.available() == 0
    channel.set_backing_size(None)
    assert channel.capacity() == 0


def test_set_backing_size_busy_raises():
    channel = BufferedChannel(0)
    results = []
    receiver = threading.Thread(target=lambda: results.append(channel.recv()))
    receiver.start()
    assert _wait_until_busy(channel)
    with pytest.raises(ChannelBusyError):
        channel.set_backing_size(4)
    channel.send("done")
    receiver.join(timeout=5)
    assert results == ["done"]


def test_many_producers_consumers_deliver_everything():
    channel = BufferedChannel(4)
    received = []
    lock = threading.Lock()

    def consume():
        for _ in range(25):
            item = channel.recv()
            with lock:
                received.append(item)

    consumers = [threading.Thread(target=consume) for _ in range(4)]
    producers = [
        threading.Thread(target=lambda base=base: [channel.send(base + i) for i in range(25)])
        for base in (0, 100, 200, 300)
    ]
    for t in consumers + producers:
        t.start()
    for t in consumers + producers:
        t.join(timeout=10)
    expected = sorted(base + i for base in (0, 100, 200, 300) for i in range(25))
    assert sorted(received) == expected