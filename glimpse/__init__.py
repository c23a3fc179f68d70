# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Glimpse builds HTML markup from tag objects, treating user content as unsafe by default.

Example:
  from glimpse import Div, Link, Paragraph
  div = Div([Paragraph('Fish & chips'), Link('Home', href='/')], cl='menu')
  div.render_str() == '<div class="menu"><p>Fish &amp; chips</p><a href="/">Home</a></div>'
'''

from typing import Any

from .exceptions import UnsafeHrefError
from .safe import escape, safe_html, SafeHtml, SafeHtmlProducer
from .semantics import self_closing_tags
from .tag import is_empty_attr_val, Tag
from .tags import Option, tag_types


_convenience_exports = (UnsafeHrefError, escape, safe_html, SafeHtml, SafeHtmlProducer, self_closing_tags,
  is_empty_attr_val, Tag, Option)


def __getattr__(name:str) -> Any:
  'Re-export the generated tag types of `glimpse.tags`.'
  try: return tag_types[name]
  except KeyError: pass
  raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
