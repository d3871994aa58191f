# --                                                            ; {{{1
#
# File        : boing/misc.py
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
Character classes & regexes for the command language.
"""                                                             # }}}1

import regex, sys

                                                                # {{{1
S_IDENT_SPECIAL   = "~!@$%^&*-_=+|<>/?"

RX_L, RX_N        = r"\p{L}", r"\p{N}"
RX_IDENT          = "[" + RX_L + RX_N + \
                    "".join( "\\" + c for c in S_IDENT_SPECIAL ) + "]+"
RX_IDENT_C        = regex.compile(RX_IDENT)

RX_TOKEN_CHAR     = r"[^\s,;]"
RX_TOKEN          = RX_TOKEN_CHAR + "+"
RX_COMMENT        = ";.*"
RX_HEXINT         = r"[+-]?0x[0-9a-fA-F]+"
RX_BININT         = r"[+-]?0b[01]+"
RX_DECINT         = r"[+-]?[0-9]+"

S_SPACE           = " \n\t\r,"
                                                                # }}}1

def isident(s):                                                 # {{{1
  """
  Is the string an identifier?

  >>> isident("factorial")
  True
  >>> isident("even?")
  True
  >>> isident("factorial-cps")
  True
  >>> isident("")
  False
  >>> isident("42")
  False
  >>> isident("-42")
  False
  >>> isident("猫")
  True
  >>> isident("foo,bar")
  False
  >>> isident("'foo")
  False
  """

  return not isint(s) and bool(RX_IDENT_C.fullmatch(s))
                                                                # }}}1

def isint(s):
  """
  Is the string an integer literal?

  >>> [ isint(x) for x in "42 -7 0x2a 0b101 4x2 +".split() ]
  [True, True, True, True, False, False]
  """
  return any( regex.fullmatch(rx, s)
              for rx in (RX_HEXINT, RX_BININT, RX_DECINT) )

def isblank(s):
  r"""
  Is the string empty apart from whitespace and comments?

  >>> [ isblank(x) for x in ["", " ,\t", "; foo", "foo ; bar"] ]
  [True, True, True, False]
  """
  return not regex.sub(RX_COMMENT, "", s).strip(S_SPACE)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
