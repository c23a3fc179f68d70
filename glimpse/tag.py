# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`tag` provides the `Tag` class, which renders a single HTML element in a way that treats user content as unsafe by default.

Rendering implements two security rules that cannot be disabled:
* an `href` attribute may not begin with `javascript:`; rendering raises `UnsafeHrefError`.
* only the tags in `semantics.self_closing_tags` render in the self-closed form, and only when they have no content.

IMPORTANT: the tag name and the attribute keys are trusted blindly and are never escaped.
Do not pass user data in these positions.
'''

import re
from typing import Any, Callable, ClassVar, Iterable, Iterator, Mapping, Self

from .exceptions import UnsafeHrefError
from .logfmt import log_error
from .safe import escape, is_content_seq, SafeHtml, SafeHtmlProducer, text_for
from .semantics import self_closing_tags


TagAttrs = dict[str,Any]
TagContent = Any # None, a single child, or a list of children.
TagPrepare = Callable[['Tag'],'Tag']
ClassSet = dict[str,None] # Insertion-ordered set of class names.


def is_empty_attr_val(val:Any) -> bool:
  '''
  Predicate for the "empty" values that `set_or_remove_attribute` treats as removal:
  `None`, `False`, the empty string, and empty collections.
  Numeric zero and the string '0' are not empty.
  '''
  if val is None or val is False: return True
  if isinstance(val, (int, float)): return False
  try: return len(val) == 0
  except TypeError: return False


def is_anchor_href(href:str) -> bool:
  'Predicate testing whether `href` refers to a fragment of the current document.'
  return href.startswith('#')


def is_same_origin_href(href:str) -> bool:
  'Predicate testing whether `href` is a path on the same origin. Protocol-relative "//host" hrefs are excluded.'
  return href.startswith('/') and not href.startswith('//')


def check_href(href:Any) -> None:
  '''
  Raise `UnsafeHrefError` if `href` is a `javascript:` URI.
  The value may be a URL object, so it is converted to a string first.
  Anchor and same-origin hrefs cannot begin with a scheme, and cover nearly all hrefs,
  so the normalizing regex only runs on the remainder.
  '''
  if is_empty_attr_val(href): return
  href_str = str(href)
  if is_anchor_href(href_str) or is_same_origin_href(href_str): return
  # Browsers interpret "javascript\n:" and "  javascript:" as JavaScript URIs,
  # so strip everything but letters, digits, '/' and ':' before matching.
  normalized = _href_strip_re.sub('', href_str)
  if _javascript_scheme_re.match(normalized): raise UnsafeHrefError(href)

_href_strip_re = re.compile(r'[^a-z0-9/:]+', re.IGNORECASE | re.ASCII)
_javascript_scheme_re = re.compile(r'javascript:', re.IGNORECASE | re.ASCII)


def iter_class_names(classes:Iterable[Any]) -> Iterator[str]:
  '''
  Yield individual class names from a sequence of class arguments.
  Each argument may be a name or a sequence of names (one level of nesting is flattened).
  Names are split on whitespace; numbers become their text; `None` and booleans add no class.
  '''
  for c in classes:
    if not _is_class_seq(c):
      yield from _class_words(c)
      continue
    for el in c:
      if _is_class_seq(el):
        for name in el: yield from _class_words(name)
      else:
        yield from _class_words(el)


def _is_class_seq(val:Any) -> bool: return isinstance(val, Mapping) or is_content_seq(val)


def _class_words(val:Any) -> list[str]:
  if val is None or isinstance(val, bool): return []
  return text_for(val).split()


def class_set(val:Any) -> ClassSet:
  'Convert an attribute value into the ordered set representation of the `class` attribute.'
  if val is None: return {}
  return dict.fromkeys(iter_class_names([val]))


def content_text(content:TagContent) -> str:
  '''
  Concatenate content into plain text with no separator, flattening nested sequences.
  Tags and other safe html producers contribute their markup; render errors propagate.
  '''
  if isinstance(content, SafeHtmlProducer): return content.__html__()
  if is_content_seq(content): return ''.join(content_text(c) for c in content)
  return text_for(content)


def attr_key_for_kw(key:str) -> str:
  '''
  Convert a Python keyword argument name into an attribute key.
  A single trailing underscore is dropped (`for_` -> `for`) and remaining underscores become hyphens (`data_id` -> `data-id`).
  '''
  if key.endswith('_'): key = key[:-1]
  return key.replace('_', '-')


def fmt_attrs(attrs:Mapping[str,Any]) -> str:
  '''
  Format `attrs` as a string that is either empty or has a leading space, in insertion order.
  `None` and `True` values render as bare attribute names; all other values are escaped.
  The class set renders as a single space-joined value, and is omitted when empty.
  '''
  parts:list[str] = []
  for k, v in attrs.items():
    if k == 'class' and isinstance(v, dict):
      if not v: continue
      v = ' '.join(v)
    if v is None or v is True:
      parts.append(f' {k}')
    else:
      parts.append(f' {k}="{escape(v)}"')
  return ''.join(parts)


class Tag:
  '''
  Base type for HTML elements.

  Every concrete type defines a class-level `tag` string; for example `Div` defines `tag = 'div'`.
  The catalogue of concrete types lives in `glimpse.tags`; `Tag.for_tag` returns a type for any other tag name.

  Attributes are stored in insertion order, which determines the rendered order.
  The `class` attribute is stored as an ordered set of names, and is managed with `add_class` and friends.

  Content is `None`, a single child, or a list of children.
  Children are text (escaped when rendered), numbers, `SafeHtml`, other tags, or any object implementing `__html__`.

  Mutators return `self` so that calls can be chained.
  '''

  tag:ClassVar[str] = '' # Concrete subclasses override this.

  tag_types:ClassVar[dict[str,type['Tag']]] = {} # Registry mapping tag names to Tag subtypes.

  __slots__ = ('attrs', 'content', 'prepare')

  attrs:TagAttrs
  content:TagContent
  prepare:TagPrepare|None

  def __init__(self,
   content:TagContent=None,
   *,
   cl:Any=None,
   attrs:Mapping[str,Any]|None=None,
   prepare:TagPrepare|None=None,
   **kw_attrs:Any # Additional attrs; see `attr_key_for_kw`. These are set after `attrs`.
   ) -> None:
    '''
    Note: unlike `attrs`, which are keyed by exact attribute names, keyword attributes are converted with `attr_key_for_kw`.
    Use `content_=...` to set an attribute named `content`, e.g. for `Meta`.

    `prepare` is an optional function that adjusts a copy of the tag just before it is serialized.
    '''
    if not self.tag:
      raise ValueError(f'{type(self).__name__} does not define a tag name; use `Tag.for_tag` to obtain a concrete type.')
    self.attrs = {}
    self.content = None
    self.prepare = prepare
    if attrs is not None: self.set_attributes(attrs)
    for k, v in kw_attrs.items():
      self.set_attribute(attr_key_for_kw(k), v)
    if cl is not None: self.add_class(cl)
    self.set_content(content)


  @classmethod
  def create(cls, content:TagContent=None, **kwargs:Any) -> Self:
    'Create a new instance of this type.'
    return cls(content, **kwargs)


  @classmethod
  def collection(cls, items:Iterable[Any]) -> list[Self]:
    'Create one instance of this type per item, with the item as content. Existing instances of this type are kept as-is.'
    return [item if isinstance(item, cls) else cls(item) for item in items]


  @classmethod
  def for_tag(cls, tag:str) -> type['Tag']:
    '''
    Return the registered type for `tag`.
    If no type is registered, create a generic subtype and register it.
    '''
    try: return Tag.tag_types[tag]
    except KeyError: pass
    name = ''.join(part.capitalize() for part in _non_word_re.split(tag)) or 'Generic'
    TagType = type(f'{name}Tag', (Tag,), {'tag': tag, '__slots__': (), '__module__': __name__})
    Tag.tag_types[tag] = TagType
    return TagType


  def __repr__(self) -> str:
    attrs = ''.join(f' {k}={v!r}' for k, v in self.get_attributes().items())
    return f'{type(self).__name__}<{self.tag}{attrs}: {self.content!r}>'


  def __str__(self) -> str:
    '''
    Render the tag as a plain string, containing any failure.

    Implicit string conversion (`str`, f-strings, `print`) has no sensible way to propagate an error,
    so this is the one place where render failures are caught:
    the failure is logged to stderr and its message is returned in place of the markup.
    Use `render` or `render_str` to observe failures.
    '''
    try: return self.render_str()
    except Exception as exc:
      log_error('render failed', tag=self.tag, exc=type(exc).__name__, msg=str(exc))
      return str(exc)


  def __html__(self) -> str:
    'Safe html producer protocol. Errors propagate.'
    return self.render().string


  # Attributes.

  def set_attribute(self, key:str, val:Any) -> Self:
    'Set `key` to `val`. An existing key keeps its position in the attribute order.'
    if key == 'class': val = class_set(val)
    self.attrs[key] = val
    return self


  def set_or_remove_attribute(self, key:str, val:Any) -> Self:
    'Set `key` to `val` if `val` is not empty (see `is_empty_attr_val`); otherwise remove `key`.'
    if is_empty_attr_val(val): return self.remove_attribute(key)
    return self.set_attribute(key, val)


  def remove_attribute(self, key:str) -> Self:
    self.attrs.pop(key, None)
    return self


  def get_attribute(self, key:str, default:Any=None) -> Any:
    'Return the value for `key`, or `default`. The class attribute is returned as a space-joined string.'
    try: val = self.attrs[key]
    except KeyError: return default
    if key == 'class' and isinstance(val, dict): return ' '.join(val)
    return val


  def has_attribute(self, key:str) -> bool: return key in self.attrs


  def get_attributes(self) -> TagAttrs:
    'Return a copy of the attributes, with the class attribute as a space-joined string.'
    return {k: (' '.join(v) if k == 'class' and isinstance(v, dict) else v) for k, v in self.attrs.items()}


  def set_attributes(self, attrs:Mapping[str,Any]) -> Self:
    'Replace all attributes, including classes.'
    self.attrs = {}
    for k, v in attrs.items():
      self.set_attribute(k, v)
    return self


  def add_attributes(self, attrs:Mapping[str,Any], overwrite:bool=False) -> Self:
    '''
    Merge `attrs` using `set_or_remove_attribute`.
    Keys that are already present are only updated if `overwrite` is true.
    '''
    for k, v in attrs.items():
      if overwrite or k not in self.attrs:
        self.set_or_remove_attribute(k, v)
    return self


  def set_id(self, id:Any) -> Self: return self.set_or_remove_attribute('id', id)

  def get_id(self) -> Any: return self.get_attribute('id')


  # Classes.

  def add_class(self, *classes:Any) -> Self:
    '''
    Add one or more classes. Each argument may be a name or a sequence of names.
    Adding a class that is already present has no effect.
    '''
    try: cls_set = self.attrs['class']
    except KeyError: cls_set = self.attrs['class'] = {}
    else:
      if not isinstance(cls_set, dict): cls_set = self.attrs['class'] = class_set(cls_set)
    for name in iter_class_names(classes):
      cls_set[name] = None
    return self


  def remove_class(self, *classes:Any) -> Self:
    'Remove one or more classes, accepting the same arguments as `add_class`. Absent classes are ignored.'
    cls_set = self.attrs.get('class')
    if not cls_set: return self
    if not isinstance(cls_set, dict): cls_set = self.attrs['class'] = class_set(cls_set)
    for name in iter_class_names(classes):
      cls_set.pop(name, None)
    return self


  def has_class(self, name:str) -> bool: return name in self.get_classes()


  def get_classes(self) -> list[str]:
    cls_set = self.attrs.get('class')
    if cls_set is None: return []
    if isinstance(cls_set, dict): return list(cls_set)
    return list(class_set(cls_set))


  # Content.

  def set_content(self, content:TagContent) -> Self:
    'Replace the content. Sequences are copied into a new list; any other value is stored as a single child.'
    self.content = list(content) if is_content_seq(content) else content
    return self


  def get_content(self, as_list:bool=True) -> Any:
    '''
    If `as_list` is true, return the content as a new list.
    Otherwise return list content concatenated into a single string (see `content_text`), or single-child content as-is.
    '''
    content = self.content
    if as_list:
      if content is None: return []
      if isinstance(content, list): return list(content)
      return [content]
    if isinstance(content, list): return content_text(content)
    return content


  def append_content(self, content:TagContent) -> Self:
    self.content = self.get_content()
    self.content.append(content)
    return self


  def prepend_content(self, content:TagContent) -> Self:
    self.content = self.get_content()
    self.content.insert(0, content)
    return self


  # Copying.

  def copy_from(self, other:'Tag') -> Self:
    'Replace the content, attributes and classes of this tag with shallow copies of those of `other`.'
    content = other.content
    self.content = list(content) if isinstance(content, list) else content
    self.attrs = {k: (dict(v) if isinstance(v, dict) else v) for k, v in other.attrs.items()}
    return self


  def copy(self) -> Self:
    'Return a shallow copy of this tag, with the same type and `prepare` function.'
    dup = object.__new__(type(self))
    dup.attrs = {}
    dup.content = None
    dup.prepare = self.prepare
    return dup.copy_from(self)


  # Rendering.

  def prepare_for_render(self) -> 'Tag':
    '''
    Return the tag to serialize; called at the start of `render`.
    By default this is `self`, or the result of applying the `prepare` function to a copy.
    Overrides may derive attributes or content, but must not mutate `self`, so that rendering remains idempotent.
    '''
    if self.prepare is None: return self
    return self.prepare(self.copy())


  def content_for_render(self) -> TagContent:
    'Return the content to serialize. Subclasses can override this to synthesize content.'
    return self.content


  def render(self) -> SafeHtml:
    '''
    Render the tag as `SafeHtml`.
    Raises `UnsafeHrefError` if the `href` attribute is a `javascript:` URI.
    '''
    el = self.prepare_for_render()
    tag = el.tag
    check_href(el.attrs.get('href'))
    attrs_str = fmt_attrs(el.attrs)
    content = el.content_for_render()
    if is_empty_attr_val(content):
      if tag in self_closing_tags: return SafeHtml(f'<{tag}{attrs_str} />')
      inner = ''
    else:
      inner = escape(content, '')
    return SafeHtml(f'<{tag}{attrs_str}>{inner}</{tag}>')


  def render_str(self) -> str:
    'Render the tag as a plain string. Errors propagate.'
    return self.render().string


_non_word_re = re.compile(r'[^0-9A-Za-z]+')
