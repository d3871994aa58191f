# --                                                            ; {{{1
#
# File        : boing/eval.py
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
Trampoline & command evaluation.

The trampoline keeps invoking the thunk of the current Result until it
is Done; the stack does not grow however many times a step bounces.

>>> import math
>>> from . import steps as S
>>> trampoline(S.factorial(5))
120
>>> all( trampoline(S.factorial(n)) == math.prod(range(1, n + 1))
...      for n in range(50) )
True
>>> trampoline(S.factorial(30)) == trampoline(S.factorial(30))
True
>>> trampoline(S.is_odd(250001))
True

>>> _vs = eval_str("factorial 3\nsum 10 ; 0 + ... + 10", out = print)
6
55
>>> _vs
[6, 55]
"""                                                             # }}}1

import functools, logging, sys

from . import data as D
from . import read as R
from . import steps as S

log = logging.getLogger(__name__)

def trampoline(result):                                         # {{{1
  """
  Evaluate result: bounce until done.

  >>> trampoline(D.done(42))
  42
  >>> trampoline(D.bounce(D.done, len)) is len
  True

  Failures propagate; anything that is not a Result is an error.

  >>> from . import steps as S
  >>> trampoline(D.bounce(S.factorial, -1))
  Traceback (most recent call last):
    ...
  ValueError: expected n >= 0, got -1
  >>> trampoline(D.bounce(lambda: 42))
  Traceback (most recent call last):
    ...
  boing.data.MalformedResultError: malformed result: 42
  """

  while isinstance(result, D.Pending):
    result = result.thunk()
  if isinstance(result, D.Done): return result.value
  raise D.MalformedResultError(result)
                                                                # }}}1

def trace(result):                                              # {{{1
  """
  Iterate over all results, up to and including the final one.

  >>> from . import steps as S
  >>> for r in trace(S.factorial(3)): print(r)
  Pending(factorial(2, 3))
  Pending(factorial(1, 6))
  Pending(factorial(0, 6))
  Done(6)
  >>> import itertools
  >>> len(list(itertools.islice(trace(S.forever()), 1000)))
  1000
  >>> list(trace(D.bounce(lambda: 42)))
  Traceback (most recent call last):
    ...
  boing.data.MalformedResultError: malformed result: 42
  """

  while isinstance(result, D.Pending):
    yield result
    result = result.thunk()
  if not isinstance(result, D.Done):
    raise D.MalformedResultError(result)
  yield result
                                                                # }}}1

def trampoline_limited(result, limit, on_result = None):        # {{{1
  """
  Evaluate result, bouncing at most limit times (None = no limit);
  calls on_result (if any) w/ each result.

  >>> from . import steps as S
  >>> trampoline_limited(S.factorial(3), 3)
  6
  >>> trampoline_limited(S.factorial(3), 2)
  Traceback (most recent call last):
    ...
  boing.data.BounceLimitError: bounce limit exceeded: 2
  >>> trampoline_limited(S.forever(), 10000)
  Traceback (most recent call last):
    ...
  boing.data.BounceLimitError: bounce limit exceeded: 10000
  >>> trampoline_limited(S.fibonacci(2), None, print)
  Pending(fibonacci(1, 1, 1))
  Pending(fibonacci(0, 1, 2))
  Done(1)
  1
  """

  for i, r in enumerate(trace(result)):
    if on_result: on_result(r)
    if isinstance(r, D.Done): return r.value
    if limit is not None and i >= limit:
      log.debug("giving up after %d bounces at %r", i, r)
      raise D.BounceLimitError(limit)
                                                                # }}}1

def trampolined(step):
  """
  Turn a step into a function that returns the final value.

  >>> from . import steps as S
  >>> fact = trampolined(S.factorial)
  >>> fact(5), fact.step is S.factorial
  (120, True)
  """
  @functools.wraps(step)
  def f(*args, **kwargs):
    return trampoline(step(*args, **kwargs))
  f.step = step
  return f

def eval_command(cmd, limit = None, on_result = None):          # {{{1
  """
  Evaluate command.

  >>> eval_command(R.read("factorial-cps 5"))
  120
  >>> eval_command(R.read("forever"), limit = 5)
  Traceback (most recent call last):
    ...
  boing.data.BounceLimitError: bounce limit exceeded: 5

  Traced evaluation classifies results the same way:

  >>> from unittest import mock
  >>> seen = []
  >>> with mock.patch.dict(S.STEPS):
  ...   _ = S.register("broken", lambda: D.bounce(lambda: 42), 0, "")
  ...   eval_command(R.read("broken"), on_result = seen.append)
  Traceback (most recent call last):
    ...
  boing.data.MalformedResultError: malformed result: 42
  >>> seen
  [Pending(<lambda>())]
  >>> "broken" in S.STEPS
  False
  """

  log.debug("evaluating %s %s", cmd.name, cmd.args)
  r = S.start(cmd.name, *cmd.args)
  if limit is None and on_result is None: return trampoline(r)
  return trampoline_limited(r, limit, on_result)
                                                                # }}}1

def eval_stream(lines, out = None, **kw):                       # {{{1
  r"""
  Evaluate commands (one per line); returns values.

  >>> import io
  >>> eval_stream(io.StringIO("sum 4\n; skip\n\nfactorial 3\n"), print)
  10
  6
  [10, 6]
  >>> eval_stream(io.StringIO("sum 4\nnope\nsum 5\n"), print)
  Traceback (most recent call last):
    ...
  boing.data.UnknownStepError: unknown step: nope
  """
  vs = []
  for line in lines:
    cmd = R.read(line)
    if cmd is None: continue
    v = eval_command(cmd, **kw); vs.append(v)
    if out: out(v)
  return vs
                                                                # }}}1

def eval_str(s, out = None, **kw):
  """Evaluate string."""
  return eval_stream(s.splitlines(), out = out, **kw)

def eval_file(name, out = None, **kw):
  r"""
  Evaluate file contents.

  >>> import os, tempfile
  >>> with tempfile.TemporaryDirectory() as d:
  ...   path = os.path.join(d, "script.bng")
  ...   with open(path, "w") as f: _ = f.write("fibonacci 10\neven? 4\n")
  ...   eval_file(path, limit = 100)
  [55, True]
  """
  with open(name) as f:
    return eval_stream(f, out = out, **kw)

def print_value(v):
  print(v)

def print_result(r):
  print("  " + repr(r))

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
