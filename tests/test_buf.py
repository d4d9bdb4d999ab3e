"""Tests for the growable buffer."""

import pytest

from lazi.buf import GrowBuffer


class TestEmpty:
    def test_new_buffer_is_unallocated(self):
        buf = GrowBuffer()
        assert len(buf) == 0
        assert buf.capacity == 0

    def test_index_into_empty_raises(self):
        with pytest.raises(IndexError):
            GrowBuffer()[0]


class TestPush:
    def test_many_pushes_keep_order(self):
        buf: GrowBuffer[int] = GrowBuffer()
        for i in range(1024):
            buf.push(i)
        assert len(buf) == 1024
        for i in range(len(buf)):
            assert buf[i] == i

    def test_length_never_exceeds_capacity(self):
        buf: GrowBuffer[int] = GrowBuffer()
        for i in range(100):
            buf.push(i)
            assert len(buf) <= buf.capacity

    def test_growth_rule(self):
        buf: GrowBuffer[str] = GrowBuffer()
        caps = []
        for _ in range(8):
            buf.push("x")
            caps.append(buf.capacity)
        # 0 -> 1 -> 3 -> 7 -> 15
        assert caps == [1, 3, 3, 7, 7, 7, 7, 15]

    def test_capacity_never_shrinks(self):
        buf: GrowBuffer[int] = GrowBuffer()
        last = 0
        for i in range(50):
            buf.push(i)
            assert buf.capacity >= last
            last = buf.capacity

    def test_iteration(self):
        buf: GrowBuffer[str] = GrowBuffer()
        for ch in "abc":
            buf.push(ch)
        assert list(buf) == ["a", "b", "c"]


class TestIndexing:
    def test_negative_index(self):
        buf: GrowBuffer[int] = GrowBuffer()
        buf.push(1)
        buf.push(2)
        assert buf[-1] == 2

    def test_unused_capacity_not_readable(self):
        buf: GrowBuffer[int] = GrowBuffer()
        buf.push(1)
        buf.push(2)
        assert buf.capacity == 3
        with pytest.raises(IndexError):
            buf[2]

    def test_slice(self):
        buf: GrowBuffer[int] = GrowBuffer()
        for i in range(5):
            buf.push(i)
        assert buf[1:3] == [1, 2]
        assert buf[:] == [0, 1, 2, 3, 4]

    def test_sequence_helpers(self):
        buf: GrowBuffer[str] = GrowBuffer()
        buf.push("a")
        buf.push("b")
        assert "b" in buf
        assert buf.index("b") == 1


class TestFree:
    def test_free_resets(self):
        buf: GrowBuffer[int] = GrowBuffer()
        for i in range(10):
            buf.push(i)
        buf.free()
        assert len(buf) == 0
        assert buf.capacity == 0
        assert list(buf) == []

    def test_push_after_free(self):
        buf: GrowBuffer[int] = GrowBuffer()
        buf.push(1)
        buf.free()
        buf.push(7)
        assert list(buf) == [7]
        assert buf.capacity == 1
