# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Look up characters in the Unicode Character Database.'

import re
from argparse import ArgumentParser
from sys import stdin

from ..codepoints import parse_code_point
from ..display import show, show_string
from ..exceptions import UCDError
from ..handlers import handler_files
from ..io import errL
from ..ucd import UCD, ucd_root_env_var


code_item_re = re.compile(r'(?:[Uu]\+[0-9A-Fa-f]+|[0-9A-Fa-f]{4,6})')


def is_code_item(item:str) -> bool:
  'An item that is `U+` prefixed hex or at least four hex digits names a code point; anything else is text.'
  return bool(code_item_re.fullmatch(item))


def main(argv:list[str]|None=None) -> None:
  parser = ArgumentParser(description='Show Unicode Character Database records for code points and strings.')
  parser.add_argument('-ucd', metavar='DIR', help=f'UCD root directory; defaults to ${ucd_root_env_var}.')
  parser.add_argument('-files', nargs='+', metavar='NAME', help='Load only the named UCD files (e.g. UnicodeData Blocks).')
  parser.add_argument('-list-files', action='store_true', help='List the UCD files that can be loaded and exit.')
  parser.add_argument('-short', action='store_true', help='Show one line per character.')
  parser.add_argument('-verbose', action='store_true', help='Report load progress to stderr.')
  parser.add_argument('items', nargs='*', help='Code points (U+0041, 0041) or strings to show.')
  args = parser.parse_args(argv)

  if args.list_files:
    for file in handler_files(): print(file)
    return

  for item in args.items:
    if is_code_item(item) and not isinstance(parse_code_point(item), int):
      exit(f'unitome: invalid code point: {item!r}')

  try: ucd = UCD(root=args.ucd, files=args.files, verbose=args.verbose)
  except KeyError as e: exit(f'unitome: unknown UCD file: {e.args[0]!r}')

  try: ucd.load()
  except (UCDError, OSError) as e:
    errL(f'unitome: error: {e}')
    for note in getattr(e, '__notes__', ()): errL('  ', note)
    exit(1)

  style = 'short' if args.short else 'full'
  if not args.items:
    if stdin.isatty(): return
    for line in stdin:
      show_string(ucd, line.rstrip('\n'), style='short')
    return

  for item in args.items:
    if is_code_item(item): show(ucd, item, style=style)
    else: show_string(ucd, item, style=style)


if __name__ == '__main__': main()
