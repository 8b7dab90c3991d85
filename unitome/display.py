# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Text rendering of UCD records for the terminal.
'''

from typing import TYPE_CHECKING, Any, Iterator, Mapping

from .ansi import BOLD, TXT_C, double_height_lines, is_out_tty, styled
from .codepoints import fmt_code_point, fmt_code_seq, parse_code_point
from .io import outL
from .records import CharRecord, Decomposition, ShiftJISCodes, SpecialCasing

if TYPE_CHECKING:
  from .ucd import UCD


# Fields whose values are single code points.
code_point_fields = frozenset({
  'bidi_mirroring_glyph',
  'bidi_paired_bracket',
  'equivalent_unified_ideograph',
  'lower_case_mapping',
  'title_case_mapping',
  'upper_case_mapping',
})


def fmt_value(field:str, value:Any) -> str:
  'Format a record value, rendering code points and code point sequences in `U+` notation.'
  if field in code_point_fields: return fmt_code_point(value)
  if isinstance(value, Decomposition):
    mapping = fmt_code_seq(value.mapping)
    return f'<{value.tag}> {mapping}' if value.tag else mapping
  if isinstance(value, SpecialCasing):
    s = f'lower: {fmt_code_seq(value.lower)}; title: {fmt_code_seq(value.title)}; upper: {fmt_code_seq(value.upper)}'
    return f'{s}; condition: {value.condition}' if value.condition else s
  if isinstance(value, ShiftJISCodes):
    return ', '.join(f'{vendor}: {code:04X}' for vendor, code in zip(value._fields, value) if code is not None)
  if field == 'case_folding':
    return ', '.join(f'{status}: {fmt_code_seq(seq)}' for status, seq in value.items())
  if field == 'script_extensions': return ' '.join(value)
  if isinstance(value, (list, tuple)): return ' | '.join(fmt_value(field, el) for el in value)
  if isinstance(value, Mapping):
    return '{' + ', '.join(f'{k}: {fmt_value(k, v)}' for k, v in value.items()) + '}'
  return str(value)


def fmt_record_short(code:int, record:Mapping[str,Any]) -> str:
  'Format a record as a single line: `U+0041 LATIN CAPITAL LETTER A`.'
  name = record.get('name')
  return f'{fmt_code_point(code)} {name}' if name else fmt_code_point(code)


def fmt_record_full(code:int, record:Mapping[str,Any], is_tty:bool=is_out_tty) -> Iterator[str]:
  'Yield one `key: value` line per field, sorted by key, preceded by the code point itself.'
  yield styled(fmt_code_point(code), BOLD, is_tty=is_tty)
  for field in sorted(record):
    yield f'{styled(field, TXT_C, is_tty=is_tty)}: {fmt_value(field, record[field])}'


def has_visible_glyph(record:CharRecord) -> bool:
  return record.get('general_category') != 'Control' and not record.get('white_space')


def show(ucd:'UCD', code:Any, style:str='full', is_tty:bool=is_out_tty) -> None:
  'Write the record for `code` to stdout, in either `full` or `short` style.'
  c = parse_code_point(code)
  if not isinstance(c, int): raise ValueError(f'expected a single code point; received {code!r}')
  record = ucd.get(c)
  if style == 'short':
    outL(fmt_record_short(c, record))
    return
  if is_tty and has_visible_glyph(record):
    for line in double_height_lines(chr(c)): outL(line)
  for line in fmt_record_full(c, record, is_tty=is_tty): outL(line)


def show_string(ucd:'UCD', text:str, style:str='full', is_tty:bool=is_out_tty) -> None:
  'Show each character of `text` in turn.'
  for char in text:
    show(ucd, ord(char), style=style, is_tty=is_tty)
