# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from copy import copy, deepcopy
from operator import eq, ge, gt, le, lt, ne

from hay.default import Raise
from hay.exceptions import EmptyStackError
from hay.stack import Stack
from utest import utest, utest_call, utest_exc, utest_repr, utest_seq, utest_val


utest_repr('Stack([])', Stack)
utest_repr("Stack(['a', 'b'])", Stack, 'ab')

utest(True, lt, Stack([1, 2]), Stack([1, 3]))
utest(True, lt, Stack([1]), Stack([1, 0]))
utest(False, lt, Stack([1]), Stack([1]))
utest(True, le, Stack([1]), Stack([1]))
utest(True, gt, Stack([2]), Stack([1, 9]))
utest(True, ge, Stack(), Stack())
utest_exc(TypeError, lt, Stack([1]), [1])
utest_exc(TypeError, ge, (1,), Stack([1]))
utest(False, eq, Stack([1]), [1])
utest(True, ne, Stack([1]), (1,))
utest_seq([Stack([1]), Stack([1, 0]), Stack([2])], sorted, [Stack([2]), Stack([1, 0]), Stack([1])])

utest_exc(TypeError, hash, Stack())
utest_exc(AttributeError, setattr, Stack(), 'extra', 1)


@utest_call
def test_copy() -> None:
  s = Stack([[1], [2]])
  for c in (copy(s), s.copy()):
    utest_val(s, c, 'copy equal')
    utest_val(True, c[0] is s[0], 'shallow')
    c.push([3])
    utest(2, len, s)
    utest(3, len, c)


@utest_call
def test_deepcopy() -> None:
  s = Stack([[1], [2]])
  d = deepcopy(s)
  utest_val(s, d, 'deepcopy equal')
  utest_val(False, d[0] is s[0], 'deep')
  d[0].append(9)
  utest_seq([[1], [2]], list, s)

  r = Stack()
  r.push(r)
  dr = deepcopy(r)
  utest_val(True, dr.top() is dr, 'self reference')


@utest_call
def test_pop_default() -> None:
  s = Stack()
  utest('empty', s.pop, default='empty')
  utest('empty', s.top, default='empty')
  utest_exc(EmptyStackError, s.pop, default=Raise._)
  utest_exc(IndexError, s.top, default=Raise._)

  s = Stack([None])
  utest(None, s.top, default=Raise._)
  utest(None, s.pop, default=Raise._)
  utest_exc(EmptyStackError, s.pop, default=Raise._)
  utest(0, len, s)
