# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The UCD file handler table.

Each `FileHandler` names a source file relative to the UCD root (without the `.txt` suffix),
its field delimiter, its load phase, and a function that applies one row of fields to the UCD.
Handlers of the same phase write disjoint or idempotently mergeable properties,
so they may run in any order.
'''

import re
from enum import Enum
from math import isfinite
from typing import TYPE_CHECKING, Callable, Iterable, Mapping, NamedTuple

from .codepoints import CodeRange, codes_for_range, parse_code_point, parse_code_seq
from .exceptions import BadCodePoint, BadFraction, UCDFormatError, UnknownProperty
from .records import (CharRecord, Decomposition, Radical, ShiftJISCodes, SpecialCasing, VariationSequence, fmt_record_key,
  idemput)
from .string import field_name_for_property, field_name_for_unihan_tag, snakecase_from_camelcase
from .tables import (bidi_class_names, bidi_paired_bracket_types, case_folding_statuses, dflt_east_asian_width,
  dflt_general_category, dflt_vertical_orientation, east_asian_widths, expand, general_categories, joining_types,
  nushu_source_tags, shift_jis_vendors, tangut_source_tags, unihan_categories, unihan_variant_types, vertical_orientations)

if TYPE_CHECKING:
  from .ucd import UCD


class Phase(Enum):
  base = 1
  derived = 2 # Runs after every base handler has completed.


HandlerFn = Callable[['UCD', list[str]], None]


class FileHandler(NamedTuple):
  file:str
  fn:HandlerFn
  delimiter:str|None = ';'
  phase:Phase = Phase.base


file_handlers:dict[str,FileHandler] = {}


def add_handler(handler:FileHandler) -> None:
  if handler.file in file_handlers: raise KeyError(f'duplicate handler for file: {handler.file!r}')
  file_handlers[handler.file] = handler


def handler(file:str, delimiter:str|None=';', phase:Phase=Phase.base) -> Callable[[HandlerFn], HandlerFn]:
  'Decorator to register a row function as the handler for `file`.'
  def register(fn:HandlerFn) -> HandlerFn:
    add_handler(FileHandler(file=file, fn=fn, delimiter=delimiter, phase=phase))
    return fn
  return register


# Field helpers.

def req_code(text:str) -> int:
  'Parse a mandatory single code point column.'
  code = parse_code_point(text)
  if not isinstance(code, int): raise BadCodePoint(f'invalid code point: {text!r}')
  return code


def opt_code(text:str) -> int|None:
  'Parse an optional single code point column; an empty or malformed column is skipped.'
  code = parse_code_point(text)
  return code if isinstance(code, int) else None


def req_range(text:str) -> CodeRange:
  'Parse a mandatory column that is either a single code point or an inclusive range.'
  code = parse_code_point(text)
  if isinstance(code, int): return (code, code + 1)
  if isinstance(code, tuple): return code
  raise BadCodePoint(f'invalid code point or range: {text!r}')


def req_fields(fields:list[str], count:int) -> None:
  if len(fields) < count: raise UCDFormatError(f'expected at least {count} fields; received {len(fields)}: {fields!r}')


def req_int(text:str) -> int:
  'Parse a decimal integer column.'
  try: return int(text)
  except ValueError: raise UCDFormatError(f'invalid integer: {text!r}') from None


def parse_numeric(text:str) -> float:
  '''
  Parse a numeric value, which is either a decimal or a rational of the form `numerator/denominator`.
  Rationals are converted to a floating point approximation; a degenerate fraction raises BadFraction.
  '''
  text = text.strip()
  if '/' in text:
    num, _, den = text.partition('/')
    try: value = float(num) / float(den)
    except (ValueError, ZeroDivisionError) as e: raise BadFraction(text) from e
    if not isfinite(value): raise BadFraction(text)
    return value
  try: return float(text)
  except ValueError as e: raise UCDFormatError(f'invalid numeric value: {text!r}') from e


# Base phase.

_decomposition_re = re.compile(r'(?:<(?P<tag>[^>]+)>\s*)?(?P<mapping>\S.*)')

_range_label_re = re.compile(r'<(?P<label>.+), (?P<end>First|Last)>')

_unicode_data_field_count = 15


@handler('UnicodeData')
def unicode_data(ucd:'UCD', fields:list[str]) -> None:
  '''
  A pair of rows named `<label, First>` and `<label, Last>` denotes a range of code points with identical properties;
  the properties are applied to the whole range and the label is not recorded as a name.
  '''
  req_fields(fields, 2)
  if len(fields) < _unicode_data_field_count:
    fields = fields + [''] * (_unicode_data_field_count - len(fields))
  code = req_code(fields[0])
  name = fields[1]
  record = CharRecord(
    general_category=expand(general_categories, fields[2], dflt_general_category),
    combining_class=req_int(fields[3] or '0'),
    mirrored=(fields[9].upper() == 'Y'))
  if fields[4]: record['bidi_class'] = expand(bidi_class_names, fields[4])
  if m := _decomposition_re.fullmatch(fields[5]):
    record['decomposition'] = Decomposition(mapping=parse_code_seq(m['mapping']), tag=m['tag'])
  if fields[6]: record['decimal_digit_value'] = req_int(fields[6])
  if fields[7]: record['digit_value'] = req_int(fields[7])
  if fields[8]: record['numeric_value'] = parse_numeric(fields[8])
  if fields[10]: record['unicode_1_name'] = fields[10]
  if fields[11]: record['iso_comment'] = fields[11]
  for field, text in zip(('upper_case_mapping', 'lower_case_mapping', 'title_case_mapping'), fields[12:15]):
    mapping = opt_code(text)
    if mapping is not None: record[field] = mapping # type: ignore[literal-required]

  if m := _range_label_re.fullmatch(name):
    label = m['label']
    if m['end'] == 'First':
      ucd.open_ranges[label] = code
      return
    try: start = ucd.open_ranges.pop(label)
    except KeyError: raise UCDFormatError(f'range end without a range start: {name!r}') from None
    ucd.records.set((start, code + 1), record)
    return

  record['name'] = name
  ucd.records.set(code, record)


def _mk_value_handler(field:str, table:Mapping[str,str]|None=None, dflt:str|None=None) -> HandlerFn:
  'Create a handler for the common `code_or_range; value` layout.'
  def value_handler(ucd:'UCD', fields:list[str]) -> None:
    req_fields(fields, 2)
    value = fields[1] if table is None else expand(table, fields[1], dflt)
    ucd.records.set(req_range(fields[0]), field, value)
  value_handler.__name__ = f'set_{field}'
  return value_handler


_value_handlers:Iterable[tuple[str, str, Mapping[str,str]|None, str|None]] = (
  ('auxiliary/GraphemeBreakProperty', 'grapheme_cluster_break', None, None),
  ('auxiliary/SentenceBreakProperty', 'sentence_break', None, None),
  ('auxiliary/WordBreakProperty', 'word_break', None, None),
  ('DerivedAge', 'age', None, None),
  ('EastAsianWidth', 'east_asian_width', east_asian_widths, dflt_east_asian_width),
  ('HangulSyllableType', 'hangul_syllable_type', None, None),
  ('IndicPositionalCategory', 'indic_positional_category', None, None),
  ('IndicSyllabicCategory', 'indic_syllabic_category', None, None),
  ('Jamo', 'jamo_short_name', None, None),
  ('LineBreak', 'line_break', None, None),
  ('Scripts', 'script', None, None),
  ('VerticalOrientation', 'vertical_orientation', vertical_orientations, dflt_vertical_orientation),
)

for _file, _field, _table, _dflt in _value_handlers:
  add_handler(FileHandler(file=_file, fn=_mk_value_handler(_field, _table, _dflt)))


# Enumerated (non-binary) properties that share a file with binary properties, e.g. `094D ; InCB; Linker`.
enumerated_core_properties:Mapping[str,str] = {
  'InCB': 'indic_conjunct_break',
}


def binary_properties(ucd:'UCD', fields:list[str]) -> None:
  'Set the binary property named in the second column, or an enumerated property if a third column is present.'
  req_fields(fields, 2)
  name = fields[1]
  if len(fields) > 2 and fields[2]:
    try: field = enumerated_core_properties[name]
    except KeyError: raise UnknownProperty(name) from None
    ucd.records.set(req_range(fields[0]), field, fields[2])
  else:
    ucd.records.set(req_range(fields[0]), field_name_for_property(name))

for _file in ('DerivedCoreProperties', 'emoji/emoji-data', 'PropList'):
  add_handler(FileHandler(file=_file, fn=binary_properties))


@handler('CompositionExclusions')
def composition_exclusions(ucd:'UCD', fields:list[str]) -> None:
  ucd.records.set(req_range(fields[0]), 'composition_exclusion')


@handler('ArabicShaping')
def arabic_shaping(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 4)
  ucd.records.set(req_code(fields[0]), {
    'joining_type': expand(joining_types, fields[2]),
    'joining_group': fields[3],
  })


@handler('BidiBrackets')
def bidi_brackets(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 3)
  code = req_code(fields[0])
  pair = req_code(fields[1])
  if fields[2] == 'o':
    ucd.brackets[chr(code)] = chr(pair)
  ucd.records.set(code, {
    'bidi_paired_bracket': pair,
    'bidi_paired_bracket_type': expand(bidi_paired_bracket_types, fields[2]),
  })


@handler('BidiMirroring')
def bidi_mirroring(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  code = req_code(fields[0])
  glyph = req_code(fields[1])
  ucd.mirrored[chr(code)] = chr(glyph)
  ucd.records.set(code, 'bidi_mirroring_glyph', glyph)


@handler('Blocks')
def blocks(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  r = req_range(fields[0])
  name = fields[1]
  ucd.blocks[name] = r
  ucd.records.set(r, 'block', name)


@handler('CaseFolding')
def case_folding(ucd:'UCD', fields:list[str]) -> None:
  'Case foldings accumulate per status, since a code point can have both a full and a simple folding.'
  req_fields(fields, 3)
  code = req_code(fields[0])
  status = expand(case_folding_statuses, fields[1])
  record = ucd.records.get(code)
  record.setdefault('case_folding', {})[status] = parse_code_seq(fields[2])


@handler('CJKRadicals')
def cjk_radicals(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 3)
  num = fields[0]
  char = opt_code(fields[1])
  ideograph = opt_code(fields[2])
  ucd.radicals[num] = Radical(character=char, unified_ideograph=ideograph)
  if char is not None:
    ucd.records.set(char, 'cjk_radical', num)


@handler('emoji/emoji-variation-sequences')
def emoji_variation_sequences(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  ucd.variation_sequences[parse_code_seq(fields[0])] = VariationSequence(description=fields[1])


@handler('StandardizedVariants')
def standardized_variants(ucd:'UCD', fields:list[str]) -> None:
  'A sequence that is listed once per shaping environment accumulates the environments.'
  req_fields(fields, 2)
  seq = parse_code_seq(fields[0])
  environments = frozenset(fields[2].split()) if len(fields) > 2 else frozenset()
  if existing := ucd.variation_sequences.get(seq):
    environments |= existing.environments
  ucd.variation_sequences[seq] = VariationSequence(description=fields[1], environments=environments)


@handler('EmojiSources')
def emoji_sources(ucd:'UCD', fields:list[str]) -> None:
  'Only rows for single code points are recorded; rows for sequences have no record to attach to.'
  code = parse_code_point(fields[0])
  if isinstance(code, list): return
  if not isinstance(code, int): raise BadCodePoint(f'invalid code point: {fields[0]!r}')
  vendor_fields = fields[1:] + [''] * (len(shift_jis_vendors) + 1 - len(fields))
  codes = { vendor: opt_code(text) for vendor, text in zip(shift_jis_vendors, vendor_fields) }
  ucd.records.set(code, 'shift_jis_codes', ShiftJISCodes(**codes))


@handler('EquivalentUnifiedIdeograph')
def equivalent_unified_ideograph(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  ucd.records.set(req_range(fields[0]), 'equivalent_unified_ideograph', req_code(fields[1]))


@handler('NameAliases')
def name_aliases(ucd:'UCD', fields:list[str]) -> None:
  'Aliases accumulate per type; a repeated alias is recorded once.'
  req_fields(fields, 3)
  code = req_code(fields[0])
  alias = fields[1]
  aliases = ucd.records.get(code).setdefault('aliases', {}).setdefault(fields[2], [])
  if alias not in aliases: aliases.append(alias)


@handler('NamedSequences')
def named_sequences(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  ucd.named_sequences['approved'][fields[0]] = parse_code_seq(fields[1])


@handler('NamedSequencesProv')
def named_sequences_prov(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  ucd.named_sequences['provisional'][fields[0]] = parse_code_seq(fields[1])


def _mk_source_handler(tags:Mapping[str,str]) -> HandlerFn:
  'Create a handler for the tab-separated `U+code tag value` layout of the Nushu and Tangut source files.'
  def source_handler(ucd:'UCD', fields:list[str]) -> None:
    req_fields(fields, 3)
    tag = fields[1]
    field = tags.get(tag) or field_name_for_unihan_tag(tag)
    ucd.records.set(req_code(fields[0]), field, fields[2])
  return source_handler

add_handler(FileHandler(file='NushuSources', fn=_mk_source_handler(nushu_source_tags), delimiter='\t'))
add_handler(FileHandler(file='TangutSources', fn=_mk_source_handler(tangut_source_tags), delimiter='\t'))


@handler('PropertyAliases')
def property_aliases(ucd:'UCD', fields:list[str]) -> None:
  'Every name on a line maps to the other names on that line; a lone name maps to itself.'
  names = [f for f in fields if f]
  for alias in names:
    ucd.property_aliases[alias] = tuple(n for n in names if n != alias) or (alias,)


@handler('ScriptExtensions')
def script_extensions(ucd:'UCD', fields:list[str]) -> None:
  req_fields(fields, 2)
  ucd.records.set(req_range(fields[0]), 'script_extensions', tuple(fields[1].split()))


@handler('SpecialCasing')
def special_casing(ucd:'UCD', fields:list[str]) -> None:
  'Special casings accumulate; a repeated row is recorded once.'
  req_fields(fields, 4)
  code = req_code(fields[0])
  entry = SpecialCasing(
    lower=parse_code_seq(fields[1]),
    title=parse_code_seq(fields[2]),
    upper=parse_code_seq(fields[3]),
    condition=(fields[4] if len(fields) > 4 and fields[4] else None))
  cases = ucd.records.get(code).setdefault('special_casing', [])
  if entry not in cases: cases.append(entry)


def _mk_unihan_handler(category:str) -> HandlerFn:
  cat_key = snakecase_from_camelcase(category)
  def unihan_handler(ucd:'UCD', fields:list[str]) -> None:
    req_fields(fields, 3)
    han = ucd.records.get(req_code(fields[0])).setdefault('han', {})
    han.setdefault(cat_key, {})[field_name_for_unihan_tag(fields[1])] = fields[2]
  unihan_handler.__name__ = f'unihan_{cat_key}'
  return unihan_handler

for _category in unihan_categories:
  add_handler(FileHandler(file=f'unihan/Unihan_{_category}', fn=_mk_unihan_handler(_category), delimiter='\t'))


@handler('unihan/Unihan_Variants', delimiter='\t')
def unihan_variants(ucd:'UCD', fields:list[str]) -> None:
  'Each variant type is one-shot per code point: a second, different value is a data error.'
  req_fields(fields, 3)
  code = req_code(fields[0])
  variant_type = unihan_variant_types.get(fields[1], fields[1])
  variants = ucd.records.get(code).setdefault('han', {}).setdefault('variants', {})
  idemput(variants, variant_type, fields[2], desc=fmt_record_key(code, f'han.variants.{variant_type}'))


# Derived phase.

def is_placeholder_name(name:str|None) -> bool:
  'Labels such as `<control>` are not character names.'
  return not name or name.startswith('<')


def _set_derived_name(ucd:'UCD', code:int, name:str) -> None:
  record = ucd.records.get(code)
  if not is_placeholder_name(record.get('name')): return # Explicit names from the base phase win.
  record['name'] = name


@handler('extracted/DerivedName', phase=Phase.derived)
def derived_name(ucd:'UCD', fields:list[str]) -> None:
  '''
  A name containing `*` is a template over a range:
  each code point gets the name with `*` replaced by its upper-case hex, zero-padded to at least four digits.
  '''
  req_fields(fields, 2)
  r = req_range(fields[0])
  name = fields[1]
  if '*' in name:
    for code in codes_for_range(r):
      _set_derived_name(ucd, code, name.replace('*', f'{code:04X}'))
  else:
    for code in codes_for_range(r):
      _set_derived_name(ucd, code, name)


@handler('extracted/DerivedNumericValues', phase=Phase.derived)
def derived_numeric_values(ucd:'UCD', fields:list[str]) -> None:
  '''
  The exact rational column is preferred when it holds a fraction; otherwise the decimal column is used.
  Numeric values already set in the base phase are kept.
  '''
  req_fields(fields, 2)
  rational = fields[3] if len(fields) > 3 else ''
  value = parse_numeric(rational if '/' in rational else fields[1])
  for code in codes_for_range(req_range(fields[0])):
    record = ucd.records.get(code)
    if 'numeric_value' not in record: record['numeric_value'] = value


def handlers_for_files(files:Iterable[str]|None=None) -> list[FileHandler]:
  'Return the handlers for `files`, or all handlers if `files` is None. Unknown file names raise KeyError.'
  if files is None: return list(file_handlers.values())
  return [file_handlers[f] for f in files]


def handler_files() -> list[str]:
  return sorted(file_handlers)


