# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from typing import Any, Iterable, Iterator


# std out.

def outL(*items: Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, flush=flush)


# std err.
# `sys.stderr` is resolved on each call.

def errL(*items: Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=sys.stderr, flush=flush)

def errSL(*items: Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=sys.stderr, flush=flush)


# UCD line source.

def split_lines(lines:Iterable[str], delimiter:str|None=';', comment:str|None='#') -> Iterator[tuple[int,list[str]]]:
  '''
  Split an iterable of raw text lines into logical lines.
  Yields `(line_num, fields)` pairs, numbered from 1 over the raw lines.
  Everything from `comment` to the end of the line is removed, blank lines are skipped,
  and the remainder is split on `delimiter`, with each field stripped of surrounding white space.
  If `delimiter` is None, the whole line is yielded as a single field.
  '''
  for line_num, line in enumerate(lines, 1):
    if comment:
      line = line.partition(comment)[0]
    line = line.strip()
    if not line: continue
    if delimiter is None:
      yield line_num, [line]
    else:
      yield line_num, [field.strip() for field in line.split(delimiter)]


def read_numbered_lines(path:str, delimiter:str|None=';', comment:str|None='#') -> Iterator[tuple[int,list[str]]]:
  'Lazily read the logical lines of the UTF-8 file at `path` as `(line_num, fields)` pairs; see `split_lines`.'
  with open(path, encoding='utf-8') as f:
    yield from split_lines(f, delimiter=delimiter, comment=comment)


def read_lines(path:str, delimiter:str|None=';', comment:str|None='#') -> Iterator[list[str]]:
  'Lazily read the logical lines of the UTF-8 file at `path` as lists of fields.'
  for _, fields in read_numbered_lines(path, delimiter=delimiter, comment=comment):
    yield fields
