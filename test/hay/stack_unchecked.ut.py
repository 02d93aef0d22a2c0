# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hay.exceptions import UncheckedAccessError
from hay.stack import Stack
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


s = Stack([0, 1, 2])
utest_seq([0, 1, 2], s.as_list, unchecked=True)
utest_seq([0, 1, 2], s.as_mut_list, unchecked=True)
utest_exc(TypeError, s.as_list)
utest_exc(TypeError, s.as_mut_list)
utest_exc(UncheckedAccessError, s.as_list, unchecked=False)
utest_exc(UncheckedAccessError, s.as_mut_list, unchecked=False)
utest_exc(UncheckedAccessError, s.as_mut_list, unchecked=1)
utest_exc(ValueError, s.as_list, unchecked='yes')


@utest_call
def test_shared_storage() -> None:
  s = Stack([0, 1, 2])
  l = s.as_list(unchecked=True)
  utest_val(True, l is s.as_mut_list(unchecked=True), 'same list')
  s.push(3)
  utest_seq([0, 1, 2, 3], list, l)
  s.clear()
  utest_seq([], list, l)


@utest_call
def test_insert_below() -> None:
  s = Stack()
  s.push(2)
  s.as_mut_list(unchecked=True).insert(0, 1)
  utest(2, len, s)
  utest(2, s.pop)
  utest(1, s.pop)
  utest(None, s.pop)


@utest_call
def test_insert_front() -> None:
  s = Stack()
  s.push(0)
  s.push(1)
  s.push(2)
  s.as_mut_list(unchecked=True).insert(0, 1)
  utest_seq([1, 0, 1, 2], list, s)
  utest(2, s.top)


@utest_call
def test_reorder_moves_top() -> None:
  s = Stack([1, 2, 3])
  s.as_mut_list(unchecked=True).reverse()
  utest(1, s.pop)
  utest_seq([3, 2], list, s)
