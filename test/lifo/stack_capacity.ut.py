# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from lifo.stack import Stack
from utest import utest, utest_call, utest_val


utest(0, Stack().capacity)
utest(3, Stack([1, 2, 3]).capacity)


@utest_call
def test_growth():
  s = Stack[int]()
  caps = []
  for i in range(100):
    s.push(i)
    caps.append(s.capacity())
    if s.capacity() < s.size():
      utest_val(s.size(), s.capacity(), f'capacity after {i+1} pushes')
  utest_val(caps, sorted(caps), 'capacity is nondecreasing')
  utest_val([1, 2, 4, 4, 8], caps[:5])
  utest(100, s.size)
  utest(128, s.capacity)


@utest_call
def test_pop_keeps_capacity():
  s = Stack(range(10))
  for _ in range(10): s.pop()
  utest(True, s.is_empty)
  utest(10, s.capacity)
  s.push(0)
  utest(10, s.capacity)


@utest_call
def test_clear_releases_buffer():
  s = Stack(range(4))
  s.push(4)
  utest(8, s.capacity)
  s.clear()
  utest(0, s.capacity)


@utest_call
def test_clone_capacity():
  s = Stack(range(4))
  s.push(4)
  c = s.clone()
  utest(5, c.capacity)
  utest(8, s.capacity)
