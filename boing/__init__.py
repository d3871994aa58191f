# --                                                            ; {{{1
#
# File        : boing/__init__.py
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
boing - trampolines for Python

Write recursive computations as steps that return either Done(value)
or Pending(thunk); the trampoline then runs them in constant stack
space.

>>> from boing.data import bounce, done
>>> from boing.eval import trampoline
>>> def count(n, acc = 0):
...   return done(acc) if n == 0 else bounce(count, n - 1, acc + 1)
>>> trampoline(count(100000))
100000

Or from the command line:

>>> from boing.__main__ import main
>>> main("-e", "factorial 5, 7")
*** Error *** factorial expects 1 argument(s), got 2
1
>>> main("-e", "fibonacci 30")
832040
0
"""                                                             # }}}1

__version__ = "0.1.0"

def main_():
  """Entry point for main program."""
  from .__main__ import main_
  return main_()

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
