# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by `Stack` and its views.
'''


class EmptyStackError(IndexError):
  'Raised by `Stack.pop` or `Stack.top` on an empty stack when the caller passes `default=Raise._`.'


class LengthChangeError(ValueError):
  '''
  Raised when a slice assignment through the sequence view of a stack would change its length.
  Elements can only be added and removed with push, pop, extend and clear.
  The stack is left unmodified.
  '''
  def __init__(self, *, expected:int, actual:int) -> None:
    self.expected = expected
    self.actual = actual
    super().__init__(f'cannot assign {actual} elements to a stack slice of length {expected}')


class StaleRefError(IndexError):
  'Raised when a `TopRef` is accessed after its slot is no longer the top of the stack.'


class UncheckedAccessError(ValueError):
  '''
  Raised when the backing list of a stack is requested without passing `unchecked=True`.
  The flag acknowledges that mutating the list can break the ordering that the stack otherwise maintains.
  '''
