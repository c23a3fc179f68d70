# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Diagnostic lines for stderr, in logfmt (`key=value` pairs separated by spaces).
'''

import sys
from typing import Any


def fmt_log_val(value:Any) -> str:
  'Format a value, quoting it if it is empty or contains spaces or `=`.'
  text = '' if value is None else str(value).replace('"', '\\"').replace('\n', '\\n')
  return f'"{text}"' if (not text or ' ' in text or '=' in text) else text


def log_error(event:str, **items:Any) -> None:
  '''
  Write a single `level=error` line for `event` to stderr; keys of `items` are used as-is.
  `sys.stderr` is looked up on each call so that redirection (e.g. `contextlib.redirect_stderr`) is respected.
  '''
  fields = [('level', 'error'), ('event', event), *items.items()]
  print(' '.join(f'{k}={fmt_log_val(v)}' for k, v in fields), file=sys.stderr, flush=True)
