# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
hay provides `Stack`, a growable and shrinkable stack backed by a list.
'''

from .default import Raise, RaiseOr
from .exceptions import EmptyStackError, LengthChangeError, StaleRefError, UncheckedAccessError
from .stack import Stack, TopRef


__all__ = [
  'EmptyStackError',
  'LengthChangeError',
  'Raise',
  'RaiseOr',
  'Stack',
  'StaleRefError',
  'TopRef',
  'UncheckedAccessError',
]
