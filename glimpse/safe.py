# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Safe HTML escaping.

Markup that is known to be safe is carried either as a `SafeHtml` value or by any object implementing `__html__`
(the protocol shared with Jinja and markupsafe). Everything else is text, and is escaped when rendered.
'''

from html import escape as _escape
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable


class SafeHtml:
  '''
  A `str` wrapper that signifies that the content is markup that has already been properly escaped.
  `escape` passes the string through unchanged, so nested rendered tags are never escaped twice.
  '''

  __slots__ = ('string',)

  string:str

  def __init__(self, string:str) -> None:
    if not isinstance(string, str): raise TypeError(f'SafeHtml requires a `str`; received: {string!r}')
    self.string = string

  def __repr__(self) -> str: return f'SafeHtml({self.string!r})'

  def __str__(self) -> str: return self.string

  def __html__(self) -> str: return self.string

  def __eq__(self, other:Any) -> bool:
    if isinstance(other, SafeHtml): return self.string == other.string
    return NotImplemented

  def __hash__(self) -> int: return hash((SafeHtml, self.string))


@runtime_checkable
class SafeHtmlProducer(Protocol):
  'Any object that can produce markup that is safe to emit without escaping.'

  def __html__(self) -> str: ...


def is_content_seq(val:Any) -> bool:
  '''
  Predicate testing whether `val` should be treated as a sequence of children rather than a single child.
  Strings, bytes, mappings and safe html producers are single values.
  '''
  if isinstance(val, (list, tuple)): return True
  return (isinstance(val, Iterable) and not isinstance(val, (str, bytes, bytearray, Mapping))
    and not isinstance(val, SafeHtmlProducer))


def prefer_int(v:float) -> int|float:
  'Convert integral floats to int.'
  i = int(v)
  return i if i == v else v


def text_for(val:Any) -> str:
  'Return the plain text representation of a scalar value. `None` and `False` are empty.'
  if val is None or val is False: return ''
  if isinstance(val, str): return val
  if isinstance(val, float): return str(prefer_int(val))
  return str(val)


def esc_html(text:str) -> str:
  'HTML-escape `text`, including quote characters, so that the result is safe in both text and attribute values.'
  return _escape(text, quote=True)


def escape(val:Any, sep:str='') -> str:
  '''
  Return the markup string for `val`.
  `SafeHtml` values and safe html producers (including tags) are emitted as-is;
  sequences are escaped element-wise and joined with `sep`;
  all other values are converted to text and HTML-escaped.
  '''
  if isinstance(val, SafeHtml): return val.string
  if isinstance(val, SafeHtmlProducer): return val.__html__()
  if is_content_seq(val): return sep.join(escape(el, sep) for el in val)
  return esc_html(text_for(val))


def safe_html(val:Any, sep:str='') -> SafeHtml:
  'Escape `val` and wrap the result as `SafeHtml`.'
  return SafeHtml(escape(val, sep))
