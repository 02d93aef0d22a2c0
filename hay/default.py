# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum
from typing import final, TypeVar, Union


_T = TypeVar('_T')


@final
class Raise(Enum):
  '''
  Singleton class and value to pass as a `default` argument,
  for cases where the caller wants an exception rather than a fallback value.
  For example: `stack.pop(default=Raise._)`.
  None cannot serve this purpose because it is both the usual fallback and a legitimate element.
  '''
  _ = 0


RaiseOr = Union[Raise,_T]
