# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from utest import utest, utest_call, utest_exc, utest_repr, utest_seq, utest_val, utest_val_ne


utest(True, lambda: True)
utest(True, lambda b: b, True)
utest(3, lambda a, b=0: a + b, 1, b=2)

def raise_expected(*args): raise Exception('expected')

utest_exc(Exception('expected'), raise_expected)
utest_exc(Exception, raise_expected)
utest_exc("Exception('expected')", raise_expected)

utest_repr("'x'", str, 'x')

utest_seq([0, 1], range, 2)
utest_seq('ab', iter, 'ab')

utest_val(True, True, 'boolean test')
utest_val((0, 1), (0, 1), 'tuple test')
utest_val_ne(0, 1, 'ne test')

calls = []

@utest_call
def called_immediately() -> None:
  calls.append(None)

utest_val(1, len(calls), 'utest_call')

from utest import _utest_failure

# A failure report without a subject is rejected before it is counted.
utest_exc(ValueError('utest failure requires a subject'), _utest_failure, 0, 'value', 1)
