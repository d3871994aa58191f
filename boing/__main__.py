# --                                                            ; {{{1
#
# File        : boing/__main__.py
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
Command-line interface.

>>> main("-e", "factorial 5")
120
0
>>> main("-e", "sum 3", "--trace")
  Pending(sum_to(2, 3))
  Pending(sum_to(1, 5))
  Pending(sum_to(0, 6))
  Done(6)
6
0
>>> main("-e", "forever", "--limit", "100")
*** Error *** bounce limit exceeded: 100
1
>>> main("-e", "factorial-naive 100000")   # doctest: +ELLIPSIS
*** Error *** maximum recursion depth exceeded...
1
>>> main("-e", "factorial 2", "--limit", "-1")
Traceback (most recent call last):
  ...
SystemExit: 2

Scripts and non-interactive stdin:

>>> import io, os, tempfile
>>> from unittest import mock
>>> with tempfile.TemporaryDirectory() as d:
...   path = os.path.join(d, "script.bng")
...   with open(path, "w") as f: _ = f.write("factorial 5\nsum 10 ; c\n")
...   print(main(path))
120
55
0
>>> with mock.patch("sys.stdin", io.StringIO("sum 4\nnope\nsum 5\n")):
...   print(main())
10
*** Error *** unknown step: nope
1
>>> with mock.patch("sys.stdin", io.StringIO("even? 3\n\nodd? 3\n")):
...   print(main("--trace"))
  Pending(is_odd(2))
  Pending(is_even(1))
  Pending(is_odd(0))
  Done(False)
False
  Pending(is_even(2))
  Pending(is_odd(1))
  Pending(is_even(0))
  Done(True)
True
0
"""                                                             # }}}1

import argparse, logging, sys

from . import __version__
from . import eval as E
from . import repl as R
from . import steps as S

from .data import BoingError

log = logging.getLogger(__name__)

_me   = "boing"
_desc = "trampolined evaluation of recursive computation steps"

def main(*args):                                                # {{{1
  """Main program."""
  p = _argument_parser(); n = p.parse_args(args)
  _setup_logging(n.verbose)
  if n.test: return test(verbose = n.verbose)
  if n.list: return list_steps()
  sys.set_int_max_str_digits(0)
  kw = dict(out = E.print_value, limit = n.limit,
            on_result = E.print_result if n.trace else None)
  if n.script or n.eval:
    try:
      if n.script: E.eval_file(n.script, **kw)
      else: E.eval_str(n.eval, **kw)
    except (BoingError, RecursionError, ValueError) as e:
      log.debug("evaluation failed", exc_info = True)
      print("*** Error ***", e)
      return 1
  if n.interactive or not (n.script or n.eval):
    if not sys.stdin.isatty() and not n.interactive:
      try:
        E.eval_stream(sys.stdin, **kw)
      except (BoingError, RecursionError, ValueError) as e:
        print("*** Error ***", e)
        return 1
    else:
      R.repl(limit = kw["limit"], on_result = kw["on_result"])
  return 0
                                                                # }}}1

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  g = p.add_mutually_exclusive_group()
  g.add_argument("script", metavar = "SCRIPT", nargs = "?",
                 help = "file of commands to run")
  g.add_argument("--eval", "-e", metavar = "CODE",
                 help = "command(s) to run (instead of a script)")
  p.add_argument("--interactive", "-i", action = "store_true",
                 help = "force interactive mode")
  p.add_argument("--trace", action = "store_true",
                 help = "print every intermediate result")
  p.add_argument("--limit", metavar = "N", type = _nat,
                 help = "give up after N bounces")
  p.add_argument("--list", action = "store_true",
                 help = "list available steps")
  p.add_argument("--version", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of the interpreter)")
  p.add_argument("--verbose", "-v", action = "store_true",
                 help = "debug logging; run tests verbosely")
  return p
                                                                # }}}1

def _nat(s):
  """
  >>> _nat("42")
  42
  >>> _nat("-1")
  Traceback (most recent call last):
    ...
  argparse.ArgumentTypeError: expected N >= 0, got -1
  """
  n = int(s)
  if n < 0:
    raise argparse.ArgumentTypeError("expected N >= 0, got {}".format(n))
  return n

def _setup_logging(verbose):
  logging.basicConfig(
    level   = logging.DEBUG if verbose else logging.WARNING,
    format  = "%(levelname)s:%(name)s: %(message)s"
  )

def list_steps():
  """
  Print available steps.

  >>> list_steps()
  factorial        n! w/ accumulator
  factorial-naive  n! w/o trampoline
  factorial-cps    n! in CPS
  even?            is n even?
  odd?             is n odd?
  fibonacci        n-th Fibonacci number
  sum              0 + 1 + ... + n
  forever          never done
  0
  """
  for s in S.STEPS.values():
    print("{:16} {}".format(s.name, s.doc))
  return 0

def test(verbose = False):                                      # {{{1
  """Run doctest on all modules."""
  import doctest, importlib, pkgutil
  tot_f, tot_t = 0, 0
  for x in pkgutil.iter_modules(sys.modules[__package__].__path__):
    m = importlib.import_module("."+x.name, __package__)
    if verbose: print("Testing module {} ...".format(x.name))
    f, t = doctest.testmod(m, verbose = verbose)
    tot_f += f; tot_t += t
    if verbose: print()
  if verbose:
    print("Summary:")
    print("{} passed and {} failed.".format(tot_t - tot_f, tot_f))
    if tot_f == 0: print("Test passed.")
    else: print("***Test Failed*** {} failures.".format(tot_f))
  return 0 if tot_f == 0 else 1
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
