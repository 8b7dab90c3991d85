# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Terminal control sequences used to display UCD records.

SGR (Select Graphic Rendition) strings can be printed directly to stdout, e.g. `RST`, `BOLD`, `TXT_C`.
Compound sequences are built with `sgr`.
'''

import re as _re
from sys import stdout
from typing import Any


is_out_tty = stdout.isatty()

# ANSI control sequence indicator.
CSI = '\x1B['

# regex for detecting control sequences in strings, including the DEC line attributes below.
ctrl_seq_re = _re.compile(r'\x1B(?:\[[\d;]*[A-Za-z]|#\d)')


def ctrl_seq(c:str, *args:int) -> str:
  'Format a control sequence string for command character `c` and integer arguments.'
  return f'{CSI}{";".join(str(a) for a in args)}{c}'


def strip_ctrl_seq(text:str) -> str:
  'Strip control sequences from a string.'
  return ctrl_seq_re.sub('', text)


def sgr(*seq:int) -> str:
  'Select Graphic Rendition control sequence string.'
  return ctrl_seq('m', *seq)


RST = sgr() # The empty sgr sequence is equivalent to sgr(0).
BOLD = sgr(1)
TXT_C = sgr(36) # Cyan text.


# DEC line attributes: the current line is drawn as the top or bottom half of double-height text.
DEC_DOUBLE_TOP = '\x1B#3'
DEC_DOUBLE_BOTTOM = '\x1B#4'


def double_height_lines(text:str) -> tuple[str, str]:
  'Return the two lines that render `text` at double height on a DEC-compatible terminal.'
  return (f'{DEC_DOUBLE_TOP}{text}', f'{DEC_DOUBLE_BOTTOM}{text}')


def styled(text:Any, *seqs:str, is_tty:bool=is_out_tty) -> str:
  'Wrap `text` in the given SGR sequences and a reset, or return it plain if `is_tty` is false.'
  if not is_tty or not seqs: return str(text)
  return f'{"".join(seqs)}{text}{RST}'
