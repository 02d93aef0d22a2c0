# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections.abc import Sequence
from copy import copy as _copy, deepcopy
from typing import Generic, Iterable, Iterator, overload, TypeVar

from typing_extensions import Any, Self

from .default import Raise, RaiseOr
from .exceptions import EmptyStackError, LengthChangeError, StaleRefError, UncheckedAccessError


_El = TypeVar('_El')
_D = TypeVar('_D')


class Stack(Sequence[_El]):
  '''
  A growable and shrinkable stack of elements.
  This is implemented as a list, which stores the elements in push order;
  the top of the stack is the last element of the list.

  The stack is also a read-only sequence: indexing, slicing and iteration run from the bottom (first pushed)
  to the top (last pushed), so `stack[-1]` is the top.
  Existing elements can be replaced in place by index or by a slice of equal length,
  but elements are only added and removed with `push`, `pop`, `extend` and `clear`.
  '''
  __slots__ = ('_list',)

  _list:list[_El]


  def __init__(self, iterable:Iterable[_El]=()) -> None:
    self._list = []
    self.extend(iterable)


  def __len__(self) -> int:
    return len(self._list)


  def __repr__(self) -> str:
    return f'{type(self).__qualname__}({self._list!r})'


  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Stack) and self._list == other._list

  __hash__ = None # type: ignore[assignment] # Mutable, like list.


  def __lt__(self, other:Any) -> bool:
    if not isinstance(other, Stack): return NotImplemented
    return self._list < other._list

  def __le__(self, other:Any) -> bool:
    if not isinstance(other, Stack): return NotImplemented
    return self._list <= other._list

  def __gt__(self, other:Any) -> bool:
    if not isinstance(other, Stack): return NotImplemented
    return self._list > other._list

  def __ge__(self, other:Any) -> bool:
    if not isinstance(other, Stack): return NotImplemented
    return self._list >= other._list


  def __copy__(self) -> Self:
    return self.copy()


  def __deepcopy__(self, memo:dict[int,Any]) -> Self:
    c = type(self)()
    memo[id(self)] = c
    c._list = deepcopy(self._list, memo)
    return c


  def copy(self) -> Self:
    'Return a shallow copy of the stack, with its own backing list.'
    c = type(self)()
    c._list = self._list.copy()
    return c


  @overload
  def __getitem__(self, index:int, /) -> _El: ...

  @overload
  def __getitem__(self, index:slice, /) -> list[_El]: ...

  def __getitem__(self, index:int|slice) -> _El|list[_El]:
    return self._list[index]


  @overload
  def __setitem__(self, index:int, value:_El, /) -> None: ...

  @overload
  def __setitem__(self, index:slice, value:Iterable[_El], /) -> None: ...

  def __setitem__(self, index:int|slice, value:Any) -> None:
    if isinstance(index, slice):
      els = list(value)
      slice_len = len(range(*index.indices(len(self._list))))
      if len(els) != slice_len: raise LengthChangeError(expected=slice_len, actual=len(els))
      self._list[index] = els
    else:
      self._list[index] = value


  def __delitem__(self, index:int|slice) -> None:
    raise TypeError(f'{type(self).__qualname__} does not support item deletion; use pop or clear')


  def __iter__(self) -> Iterator[_El]:
    return iter(self._list)


  def __reversed__(self) -> Iterator[_El]:
    return reversed(self._list)


  def __contains__(self, value:Any) -> bool:
    return value in self._list


  def count(self, value:Any) -> int:
    return self._list.count(value)


  def index(self, value:Any, start:int=0, stop:int|None=None) -> int:
    if stop is None: return self._list.index(value, start)
    return self._list.index(value, start, stop)


  def push(self, value:_El, /) -> None:
    '''
    Push `value` onto the top of the stack.
    If the backing list cannot grow, the MemoryError or OverflowError raised by the list propagates.
    '''
    self._list.append(value)


  @overload
  def pop(self) -> _El|None: ...

  @overload
  def pop(self, *, default:RaiseOr[_D]) -> _El|_D: ...

  def pop(self, *, default:Any=None) -> Any:
    '''
    Remove and return the top element of the stack.
    If the stack is empty, return `default`, which is None unless specified.
    If `default` is `Raise._`, raise EmptyStackError instead.
    '''
    if self._list: return self._list.pop()
    if isinstance(default, Raise): raise EmptyStackError('pop from empty Stack')
    return default


  @overload
  def top(self) -> _El|None: ...

  @overload
  def top(self, *, default:RaiseOr[_D]) -> _El|_D: ...

  def top(self, *, default:Any=None) -> Any:
    'Return the top element without removing it. The empty case is handled as for `pop`.'
    if self._list: return self._list[-1]
    if isinstance(default, Raise): raise EmptyStackError('top of empty Stack')
    return default


  def top_mut(self) -> 'TopRef[_El]|None':
    'Return a mutable reference to the top slot of the stack, or None if the stack is empty.'
    if not self._list: return None
    return TopRef(self._list, len(self._list) - 1)


  def clear(self) -> None:
    'Remove all elements from the stack.'
    self._list.clear()


  def extend(self, iterable:Iterable[_El]) -> None:
    '''
    Push each element of `iterable` in the order produced.
    The first element produced ends up deepest and the last ends up on top.
    The stack itself and its backing list are copied before iterating.
    Any other iterator over the stack, such as `iter(stack)` or a generator over it, must be materialized first;
    otherwise the extension never terminates, as with `list.extend`.
    '''
    push = self.push
    for el in self._snapshot_if_self(iterable):
      push(el)


  def extend_copies(self, iterable:Iterable[_El]) -> None:
    'Push a shallow copy of each element of `iterable`, in the order produced.'
    push = self.push
    for el in self._snapshot_if_self(iterable):
      push(_copy(el))


  def as_list(self, *, unchecked:bool) -> Sequence[_El]:
    '''
    Return the backing list of the stack, typed as a read-only sequence.
    This is unchecked access: the result is the storage of the stack, not a copy,
    and it reflects every subsequent push and pop.
    The caller must pass `unchecked=True` to acknowledge this.
    '''
    if unchecked is not True: raise UncheckedAccessError('as_list requires unchecked=True')
    return self._list


  def as_mut_list(self, *, unchecked:bool) -> list[_El]:
    '''
    Return the backing list of the stack for arbitrary mutation.
    This is unchecked access: inserting, removing or reordering elements through the list
    can break the guarantee that the top is the most recently pushed element,
    and the stack does nothing to restore it. The caller takes responsibility for the resulting order.
    The caller must pass `unchecked=True` to acknowledge this.
    '''
    if unchecked is not True: raise UncheckedAccessError('as_mut_list requires unchecked=True')
    return self._list


  def _snapshot_if_self(self, iterable:Iterable[_El]) -> Iterable[_El]:
    # Iterating the backing list while pushing onto it would never terminate.
    if iterable is self or iterable is self._list: return list(self._list)
    return iterable



class TopRef(Generic[_El]):
  '''
  A mutable reference to the top slot of a `Stack`, as returned by `Stack.top_mut`.
  Reading `val` returns the element; assigning `val` replaces it in place,
  without changing the length or order of the stack.
  The reference is only valid while its slot remains the top of the stack and still holds the element it refers to;
  after a push, pop or clear that moves the top, or a replacement of the top by any other means,
  accessing `val` raises StaleRefError.
  '''
  __slots__ = ('_list', '_idx', '_el')

  _list:list[_El]
  _idx:int
  _el:_El


  def __init__(self, list_:list[_El], idx:int) -> None:
    self._list = list_
    self._idx = idx
    self._el = list_[idx]


  def __repr__(self) -> str:
    return f'{type(self).__qualname__}(idx={self._idx})'


  @property
  def is_live(self) -> bool:
    return self._idx == len(self._list) - 1 and self._list[self._idx] is self._el


  @property
  def val(self) -> _El:
    if not self.is_live: raise StaleRefError(self._idx)
    return self._list[self._idx]

  @val.setter
  def val(self, val:_El) -> None:
    if not self.is_live: raise StaleRefError(self._idx)
    self._list[self._idx] = val
    self._el = val
