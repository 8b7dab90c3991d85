# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Unitome loads the Unicode Character Database into a single in-memory record per code point.

Typical use:
| ucd = UCD(root='path/to/ucd')
| ucd.load()
| ucd.get(0x41)['name'] # 'LATIN CAPITAL LETTER A'.
'''

from .__about__ import __version__
from .codepoints import CodeRange, CodeSeq, fmt_code_point, parse_code_point, parse_code_seq
from .exceptions import (BadCodePoint, BadFraction, ConflictingValues, StoreFrozen, UCDError, UCDFormatError, UCDNotLoaded,
  UnknownProperty)
from .records import CharRecord, RecordStore
from .ucd import UCD
