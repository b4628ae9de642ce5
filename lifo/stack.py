# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A generic last-in-first-out stack.
'''

from typing import Iterable

from typing_extensions import Any, Self


class EmptyStackError(IndexError):
  'Raised when the top of an empty stack is requested.'

  def __init__(self) -> None:
    super().__init__('stack empty')



class Stack[El]:
  '''
  A mutable LIFO stack of elements.
  Elements are stored bottom to top in a buffer of slots; the top is the last live slot.
  The buffer doubles when a push finds it full and is never shrunk by `pop`,
  so `capacity()` is always at least `size()`.
  '''
  _slots:list[Any]
  _len:int


  def __init__(self, iterable:Iterable[El]=()) -> None:
    self._slots = list(iterable)
    self._len = len(self._slots)


  def __len__(self) -> int:
    return self._len


  def __bool__(self) -> bool:
    return self._len > 0


  def __contains__(self, value:Any) -> bool:
    return self.contains(value)


  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Stack) and self.to_list() == other.to_list()


  def __repr__(self) -> str:
    return f'Stack({self.to_list()})'


  def __str__(self) -> str:
    items = ' '.join(str(el) for el in self._slots[:self._len])
    return f'Stack: [{items}]'


  def __copy__(self) -> Self:
    return self.clone()


  def push(self, value:El, /) -> None:
    if self._len == len(self._slots):
      self._slots.extend([None] * (self._len or 1))
    self._slots[self._len] = value
    self._len += 1


  def pop(self) -> El:
    'Remove and return the top element. Raises `EmptyStackError` if the stack is empty.'
    if not self._len: raise EmptyStackError()
    self._len -= 1
    value = self._slots[self._len]
    self._slots[self._len] = None # Drop the reference; the slot remains allocated.
    return value


  def peek(self) -> El:
    'Return the top element without removing it. Raises `EmptyStackError` if the stack is empty.'
    if not self._len: raise EmptyStackError()
    return self._slots[self._len - 1]


  def try_pop(self) -> tuple[El|None, EmptyStackError|None]:
    '''
    Like `pop`, but return `(element, None)` on success and `(None, error)` on an empty stack.
    The `None` element that accompanies an error is a placeholder and carries no meaning.
    '''
    try: return self.pop(), None
    except EmptyStackError as e: return None, e


  def try_peek(self) -> tuple[El|None, EmptyStackError|None]:
    'Like `peek`, with errors returned as in `try_pop`.'
    try: return self.peek(), None
    except EmptyStackError as e: return None, e


  def is_empty(self) -> bool:
    return self._len == 0


  def size(self) -> int:
    return self._len


  def capacity(self) -> int:
    'The number of allocated slots, live or free. This is a diagnostic and not part of the LIFO contract.'
    return len(self._slots)


  def clear(self) -> None:
    self._slots = []
    self._len = 0


  def contains(self, value:Any) -> bool:
    slots = self._slots
    for i in range(self._len):
      if slots[i] == value: return True
    return False


  def clone(self) -> Self:
    'Return an independent stack holding the same elements in the same order.'
    return type(self)(self._slots[:self._len])


  def reverse(self) -> None:
    'Reverse the stack in place, so that the bottom element becomes the top.'
    slots = self._slots
    i = 0
    j = self._len - 1
    while i < j:
      slots[i], slots[j] = slots[j], slots[i]
      i += 1
      j -= 1


  def to_list(self) -> list[El]:
    'Return a new list of the elements, bottom to top.'
    return self._slots[:self._len]
