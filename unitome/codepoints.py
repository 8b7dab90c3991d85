# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Parsing and formatting of the code point notations used across the UCD files:
a bare hex string, a `U+` prefixed hex string, an inclusive range `XXXX..YYYY`,
and a space-separated sequence of the above.
'''

from math import isfinite
from typing import Any, Iterable, TypeAlias

from .exceptions import BadCodePoint


__all__ = [
  'CodeRange',
  'CodeSeq',
  'CodeValue',
  'codes_for_range',
  'fmt_code_point',
  'fmt_code_range',
  'fmt_code_seq',
  'max_code',
  'parse_code_point',
  'parse_code_seq',
]


# use pairs instead of real range objects because they are sortable, and faster to load in the interpreter.
# As in pithy's unicode package, the pairs are half-open: (start, end).
CodeRange:TypeAlias = tuple[int, int]
CodeSeq:TypeAlias = tuple[int, ...]
CodeValue:TypeAlias = 'int|CodeRange|list[CodeValue]'

max_code = 0x10FFFF

_hex_digits = frozenset('0123456789ABCDEF')


def parse_code_point(input:Any) -> Any:
  '''
  Parse `input` into a canonical code point value:
  * an `int` for a single code point;
  * a half-open `CodeRange` pair for an inclusive `XXXX..YYYY` range;
  * a `list` for a space-separated sequence or a list of tokens.
  A `CodeRange` pair is already canonical and is returned as is.
  Malformed input yields None; this function never raises for bad text.
  '''
  if isinstance(input, bool): return None
  if isinstance(input, int): return input
  if isinstance(input, float):
    return int(input) if isfinite(input) and input.is_integer() else None
  if isinstance(input, str): return _parse_code_str(input)
  if isinstance(input, list):
    return [parse_code_point(el) for el in input if el is not None and el != '']
  if isinstance(input, tuple) and len(input) == 2 and all(isinstance(el, int) for el in input):
    start, end = input
    return input if start < end else None
  return None


def _parse_code_str(text:str) -> Any:
  text = text.strip().upper()
  if text.startswith('U+'): text = text[2:]
  if not text: return None
  if ' ' in text or '\t' in text:
    seq = [parse_code_point(t) for t in text.split()]
    if any(el is None for el in seq): return None
    return seq
  if '..' in text:
    lo_text, _, hi_text = text.partition('..')
    lo = parse_code_point(lo_text)
    hi = parse_code_point(hi_text)
    if not isinstance(lo, int) or not isinstance(hi, int) or hi < lo: return None
    return (lo, hi + 1) # UCD ranges are inclusive.
  if not _hex_digits.issuperset(text): return None
  code = int(text, 16)
  return code if code <= max_code else None


def parse_code_seq(text:str) -> CodeSeq:
  '''
  Parse a space-separated code point sequence; an empty field is the empty sequence.
  Raises BadCodePoint if any element is malformed.
  '''
  if not text.strip(): return ()
  codes = parse_code_point(text)
  if isinstance(codes, int): return (codes,)
  if isinstance(codes, list) and all(isinstance(c, int) for c in codes): return tuple(codes)
  raise BadCodePoint(f'invalid code point sequence: {text!r}')


def codes_for_range(r:CodeRange) -> range:
  return range(*r)


def fmt_code_point(value:Any) -> str:
  'Format a code point as `U+` followed by at least four upper-case hex digits.'
  if isinstance(value, str):
    value = value.upper()
    return value if value.startswith('U+') else 'U+' + value
  return f'U+{int(value):04X}'


def fmt_code_range(r:CodeRange) -> str:
  'Format a half-open range in the inclusive UCD notation.'
  start, end = r
  if start + 1 == end: return f'{start:04X}'
  return f'{start:04X}..{end-1:04X}'


def fmt_code_seq(seq:Iterable[int]) -> str:
  return ' '.join(fmt_code_point(c) for c in seq)
