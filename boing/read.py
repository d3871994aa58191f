# --                                                            ; {{{1
#
# File        : boing/read.py
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
Command reader.

A command is a step name followed by zero or more integer arguments,
separated by whitespace and/or commas; ; starts a comment.

>>> read("factorial 5")
Command(name='factorial', args=(5,))
>>> read("fibonacci 0x10 ; sixteen")
Command(name='fibonacci', args=(16,))
>>> read("; nothing") is None
True
"""                                                             # }}}1

import sys

from collections import namedtuple

import pyparsing as P

from . import data as D
from . import misc as M

Command = namedtuple("Command", "name args".split())

def _make_parser():                                             # {{{1
  # NB: ints must not be followed by token chars, so e.g. 4x2 is not
  # read as 4 followed by x2.

  r, zm       = P.Regex, P.ZeroOrMore
  w           = lambda x: x.set_whitespace_chars(M.S_SPACE)
  n           = lambda x, name: x.set_name(name)      # name it
  tchar       = r(M.RX_TOKEN_CHAR).leave_whitespace()
  k           = lambda x: w(r(x)) + ~tchar            # whole token

  comm        = w(n(r(M.RX_COMMENT), "comment"))

  hexint      = k(M.RX_HEXINT).set_parse_action(_to_int(16))
  binint      = k(M.RX_BININT).set_parse_action(_to_int(2))
  decint      = k(M.RX_DECINT).set_parse_action(_to_int(10))
  int_        = n(hexint | binint | decint, "int")

  ident       = n(w(r(M.RX_TOKEN)), "identifier") \
                .set_parse_action(_check_ident)

  return w(ident + zm(int_)).ignore(comm)
                                                                # }}}1

def _check_ident(s, loc, t):
  if not M.isident(t[0]):
    raise P.ParseException(s, loc, "expected identifier")
  return [str(t[0])]

def _to_int(base):
  def f(s, loc, t):
    try:
      return int(t[0], base)
    except ValueError as e:
      raise P.ParseFatalException(s, loc, "invalid int: {}".format(e))
  return f

_parser = _make_parser()

def parse(s):                                                   # {{{1
  """
  Parse code into a list of tokens.

  >>> parse("factorial 5")
  ['factorial', 5]
  >>> parse("  sum 0x10, 0b11 -3 ; comment")
  ['sum', 16, 3, -3]
  >>> parse("forever")
  ['forever']
  >>> parse("")
  []
  >>> parse(" , ; nothing")
  []
  >>> parse("42 factorial")   # doctest: +ELLIPSIS
  Traceback (most recent call last):
    ...
  boing.data.ReadError: expected identifier...
  >>> parse("sum 4x2")        # doctest: +ELLIPSIS
  Traceback (most recent call last):
    ...
  boing.data.ReadError: Expected end of text...

  Decimal literals too long for int() are read errors too:

  >>> import sys; old = sys.get_int_max_str_digits()
  >>> sys.set_int_max_str_digits(4300)
  >>> parse("factorial " + "1" * 5000)   # doctest: +ELLIPSIS
  Traceback (most recent call last):
    ...
  boing.data.ReadError: invalid int: Exceeds the limit (4300 digits)...
  >>> sys.set_int_max_str_digits(old)
  """

  if M.isblank(s): return []
  try:
    return list(_parser.parse_string(s.strip(M.S_SPACE), parse_all = True))
  except P.ParseBaseException as e:
    raise D.ReadError(str(e)) from e
                                                                # }}}1

def read(s):
  """Parse code into a Command (or None if there is none)."""
  t = parse(s)
  return Command(t[0], tuple(t[1:])) if t else None

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
