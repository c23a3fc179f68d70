# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
'''

from typing import Any


class UnsafeHrefError(ValueError):
  '''
  Raised when rendering a tag whose `href` attribute begins with a `javascript:` scheme.
  Such hrefs are never permitted: no well-designed application should use them, and they are a potent attack vector.
  The value is not sanitized; rendering fails instead.
  '''

  def __init__(self, href:Any) -> None:
    self.href = href
    super().__init__(
      "Attempting to render a tag with an 'href' attribute that begins with 'javascript:'. "
      'This is either a serious security concern or a serious architecture concern. Seek urgent remedy.')
