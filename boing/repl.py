# --                                                            ; {{{1
#
# File        : boing/repl.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2026-10-17
#
# Copyright   : Copyright (C) 2026  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Read-Eval-Print loop.

>>> import io
>>> from unittest import mock
>>> lines = iter(["factorial 5", "", "nope 1", "even? 0x10"])
>>> def fake_prompt(s = PROMPT):
...   try: return next(lines)
...   except StopIteration: raise EOFError
>>> with mock.patch(__name__ + ".prompt", fake_prompt):
...   repl()
120
*** Error *** unknown step: nope
True
<BLANKLINE>
"""                                                             # }}}1

import logging, sys

from . import eval as E

from .data import BoingError

log = logging.getLogger(__name__)

PROMPT = ">>> "

def prompt(s = PROMPT): return input(s)

def repl(limit = None, on_result = None):                       # {{{1
  """
    Read-Eval-Print loop.  Every line is a command; we print its
    value, or the error if evaluating it failed.
  """
  if sys.stdin.isatty():
    try:
      import readline                                           # noqa
    except ImportError:
      pass
  while True:
    try:
      line = prompt()
    except EOFError:
      print(); break
    try:
      E.eval_str(line, out = E.print_value, limit = limit,
                 on_result = on_result)
    except (BoingError, RecursionError, ValueError) as e:
      log.debug("command failed: %r", line, exc_info = True)
      print("*** Error ***", e)
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
