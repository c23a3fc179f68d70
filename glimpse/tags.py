# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Concrete tag types.

Each entry of `semantics.tag_catalogue` becomes a `Tag` subtype that only fixes the tag name,
e.g. `Div`, `Paragraph`, `ListItem`. The types are generated once at import time,
registered in `Tag.tag_types`, and are accessible as attributes of this module.
'''

from typing import Any, Iterable, Mapping, Self

from .semantics import tag_catalogue
from .tag import is_empty_attr_val, Tag, TagContent


def _define(name:str, tag:str) -> type[Tag]:
  'Create the `Tag` subtype `name` for `tag`, and register it.'
  TagType = type(name, (Tag,), {'tag': tag, '__slots__': (), '__module__': __name__, '__qualname__': name})
  Tag.tag_types[tag] = TagType
  return TagType


tag_types:dict[str,type[Tag]] = { name: _define(name, tag) for name, tag in tag_catalogue }


class Option(Tag):
  'A <select> option. The optional `value` is set as the `value` attribute, unless it is empty.'

  tag = 'option'

  __slots__ = ()

  def __init__(self, content:TagContent=None, value:Any=None, **kwargs:Any) -> None:
    super().__init__(content, **kwargs)
    if not is_empty_attr_val(value):
      self.set_attribute('value', value)


  @classmethod
  def collection(cls, items:Iterable[Any]|Mapping[Any,Any]) -> list[Self]:
    '''
    Create one option per item.
    A mapping is treated as `value -> label` pairs; any other iterable is treated as labels without values.
    Existing `Option` instances are kept as-is.
    '''
    if isinstance(items, Mapping):
      return [label if isinstance(label, cls) else cls(label, value) for value, label in items.items()]
    return [item if isinstance(item, cls) else cls(item) for item in items]


Tag.tag_types[Option.tag] = Option
tag_types['Option'] = Option


def __getattr__(name:str) -> type[Tag]:
  try: return tag_types[name]
  except KeyError: pass
  raise AttributeError(f'module {__name__!r} has no attribute {name!r}')


def __dir__() -> list[str]:
  return sorted([*globals(), *tag_types])
