# --                                                            ; {{{1
#
# File        : boing/data.py
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
Results & thunks.

A computation step returns a Result: either Pending (holding a thunk
to run next) or Done (holding the final value).

>>> def step(n): return done(n) if n == 0 else bounce(step, n - 1)
>>> r = step(2); r
Pending(step(1))
>>> r = r.thunk(); r
Pending(step(0))
>>> r.thunk()
Done(0)
"""                                                             # }}}1

import sys

from collections import namedtuple

# === Exceptions ===

class BoingError(Exception):
  """Base class for boing errors"""

class MalformedResultError(BoingError, TypeError):
  """Result that is neither Pending nor Done."""
  def __init__(self, x):
    super().__init__("malformed result: {!r}".format(x))

class BounceLimitError(BoingError):
  """Bounce limit exceeded."""
  def __init__(self, limit):
    super().__init__("bounce limit exceeded: {}".format(limit))

class UnknownStepError(BoingError):
  """Unknown step."""
  def __init__(self, name):
    super().__init__("unknown step: {}".format(name))

class ArityError(BoingError):
  """Wrong number of arguments."""
  def __init__(self, name, expected, got):
    super().__init__("{} expects {} argument(s), got {}"
                     .format(name, expected, got))

class InvalidNameError(BoingError):
  """Invalid step name."""
  def __init__(self, name):
    super().__init__("invalid step name: {!r}".format(name))

class ReadError(BoingError):
  """Syntax error."""

# === Data Types ===

class Thunk(namedtuple("Thunk", "f args kwargs".split())):      # {{{1
  """
  Function plus its bound arguments.

  >>> t = Thunk(max, (1, 3), {}); t
  max(1, 3)
  >>> t()
  3
  >>> Thunk(sorted, ([2, 1],), dict(reverse = True))
  sorted([2, 1], reverse=True)
  """

  def __call__(self):
    return self.f(*self.args, **self.kwargs)

  def __repr__(self):
    a = [ repr(x) for x in self.args ] + \
        [ "{}={!r}".format(k, v) for k, v in self.kwargs.items() ]
    return "{}({})".format(_name(self.f), ", ".join(a))
                                                                # }}}1

class Pending(namedtuple("Pending", "thunk".split())):
  """Unfinished computation."""
  def __repr__(self): return "Pending({!r})".format(self.thunk)

class Done(namedtuple("Done", "value".split())):
  """Finished computation."""
  def __repr__(self): return "Done({!r})".format(self.value)

def bounce(f, *args, **kwargs):
  """
  Defer calling f.

  >>> bounce(pow, 2, 10).thunk()
  1024
  """
  return Pending(Thunk(f, args, kwargs))

def done(value):
  """
  Finish with value.

  >>> done(42)
  Done(42)
  >>> done(done(42))
  Done(Done(42))
  """
  return Done(value)

def _name(f):
  return getattr(f, "__qualname__", None) or repr(f)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
