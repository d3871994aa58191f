# --                                                            ; {{{1
#
# File        : boing/steps.py
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
Computation steps & the step registry.

Each step does one bit of work and returns a Result: Done when it
hits its base case, Pending (via bounce) with updated accumulator
arguments otherwise.

>>> from .eval import trampoline
>>> [ trampoline(factorial(n)) for n in (0, 1, 3, 5) ]
[1, 1, 6, 120]
>>> trampoline(start("fibonacci", 10))
55
>>> trampoline(start("even?", 100001))
False

Naive recursion runs out of stack, bouncing does not:

>>> factorial_naive(100000)   # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
  ...
RecursionError: maximum recursion depth exceeded
>>> trampoline(sum_to(100000))
5000050000
"""                                                             # }}}1

import logging, sys

from collections import namedtuple

from . import data as D
from . import misc as M

from .data import bounce, done

log = logging.getLogger(__name__)

# === Steps ===

def _check_nat(n):
  if n < 0: raise ValueError("expected n >= 0, got {}".format(n))

def factorial(n, acc = 1):                                      # {{{1
  """
  Factorial w/ accumulator.

  >>> factorial(0)
  Done(1)
  >>> factorial(3)
  Pending(factorial(2, 3))
  """
  _check_nat(n)
  if n == 0: return done(acc)
  return bounce(factorial, n - 1, acc * n)
                                                                # }}}1

def factorial_naive(n):
  """
  Factorial w/o accumulator or trampoline.

  >>> factorial_naive(5)
  120
  """
  _check_nat(n)
  return 1 if n == 0 else n * factorial_naive(n - 1)

def factorial_cps(n, k = done):                                 # {{{1
  """
  Factorial in continuation-passing style.

  Instead of returning, every step passes its result on to the
  continuation k; both the recursive calls and the calls to the
  continuations bounce.

  >>> from .eval import trampoline
  >>> trampoline(factorial_cps(5))
  120
  >>> trampoline(factorial_cps(4, lambda v: done(v + 1)))
  25
  """
  _check_nat(n)
  if n == 0: return bounce(k, 1)
  return bounce(factorial_cps, n - 1, lambda v: bounce(k, n * v))
                                                                # }}}1

def is_even(n):
  """
  >>> is_even(0), is_even(1)
  (Done(True), Pending(is_odd(0)))
  """
  _check_nat(n)
  return done(True) if n == 0 else bounce(is_odd, n - 1)

def is_odd(n):
  _check_nat(n)
  return done(False) if n == 0 else bounce(is_even, n - 1)

def fibonacci(n, a = 0, b = 1):                                 # {{{1
  """
  Fibonacci w/ accumulators.

  >>> from .eval import trampoline
  >>> [ trampoline(fibonacci(n)) for n in range(10) ]
  [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
  """
  _check_nat(n)
  if n == 0: return done(a)
  return bounce(fibonacci, n - 1, b, a + b)
                                                                # }}}1

def sum_to(n, acc = 0):
  """0 + 1 + ... + n."""
  _check_nat(n)
  return done(acc) if n == 0 else bounce(sum_to, n - 1, acc + n)

def forever(n = 0):
  """Never done."""
  return bounce(forever, n + 1)

# === Registry ===

Step = namedtuple("Step", "name entry arity doc".split())

STEPS = {}

def register(name, entry, arity, doc):                          # {{{1
  """
  Register a step under name.

  >>> register("'oops", forever, 0, "...")
  Traceback (most recent call last):
    ...
  boing.data.InvalidNameError: invalid step name: "'oops"
  """
  if not M.isident(name): raise D.InvalidNameError(name)
  log.debug("registering step %s/%d", name, arity)
  STEPS[name] = s = Step(name, entry, arity, doc)
  return s
                                                                # }}}1

def lookup(name):
  """
  Look up step by name.

  >>> lookup("sum").entry is sum_to
  True
  >>> lookup("nope")
  Traceback (most recent call last):
    ...
  boing.data.UnknownStepError: unknown step: nope
  """
  try:
    return STEPS[name]
  except KeyError:
    raise D.UnknownStepError(name) from None

def start(name, *args):                                         # {{{1
  """
  Call the named step once w/ args; returns the initial Result.

  >>> start("factorial", 3)
  Pending(factorial(2, 3))
  >>> start("factorial-naive", 3)
  Done(6)
  >>> start("factorial", 1, 2)
  Traceback (most recent call last):
    ...
  boing.data.ArityError: factorial expects 1 argument(s), got 2
  """
  s = lookup(name)
  if len(args) != s.arity: raise D.ArityError(name, s.arity, len(args))
  r = s.entry(*args)
  return r if isinstance(r, (D.Pending, D.Done)) else done(r)
                                                                # }}}1

def _register_builtins():
  for name, entry, arity, doc in [
    ("factorial"      , factorial       , 1, "n! w/ accumulator"       ),
    ("factorial-naive", factorial_naive , 1, "n! w/o trampoline"       ),
    ("factorial-cps"  , factorial_cps   , 1, "n! in CPS"               ),
    ("even?"          , is_even         , 1, "is n even?"              ),
    ("odd?"           , is_odd          , 1, "is n odd?"               ),
    ("fibonacci"      , fibonacci       , 1, "n-th Fibonacci number"   ),
    ("sum"            , sum_to          , 1, "0 + 1 + ... + n"         ),
    ("forever"        , forever         , 0, "never done"              ),
  ]:
    register(name, entry, arity, doc)

_register_builtins()

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
