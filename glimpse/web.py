# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Starlette integration.
'''

from typing import Any, Mapping

from starlette.background import BackgroundTask
from starlette.responses import HTMLResponse

from .safe import escape


class TagResponse(HTMLResponse):

  def __init__(self,
    content:Any,
    *,
    status_code:int=200,
    headers:Mapping[str,str]|None=None,
    background:BackgroundTask|None=None,
    **kwargs:Any) -> None:

    '''
    An HTML response whose body is a rendered tag, `SafeHtml`, or a sequence of these.
    Plain text content is escaped. Render errors such as `UnsafeHrefError` propagate to the caller.
    '''

    super().__init__(
      status_code=status_code,
      content=escape(content),
      headers=headers,
      background=background,
      **kwargs)
