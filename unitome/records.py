# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The per-code-point property model and the record store that the file handlers populate.
'''

from types import MappingProxyType
from typing import Any, Iterator, Mapping, NamedTuple, TypedDict, cast

from .codepoints import CodeSeq, codes_for_range, fmt_code_point, parse_code_point
from .exceptions import BadCodePoint, ConflictingValues, StoreFrozen, UnknownProperty


class Decomposition(NamedTuple):
  mapping:CodeSeq
  tag:str|None = None # Compatibility formatting tag, e.g. 'compat', 'font'; None for canonical decompositions.


class SpecialCasing(NamedTuple):
  lower:CodeSeq
  title:CodeSeq
  upper:CodeSeq
  condition:str|None = None


class ShiftJISCodes(NamedTuple):
  docomo:int|None
  kddi:int|None
  softbank:int|None


class Radical(NamedTuple):
  character:int|None
  unified_ideograph:int|None


class VariationSequence(NamedTuple):
  description:str
  environments:frozenset[str] = frozenset()


class CharRecord(TypedDict, total=False):
  # UnicodeData.
  name:str
  general_category:str
  combining_class:int
  bidi_class:str
  decomposition:Decomposition
  decimal_digit_value:int
  digit_value:int
  numeric_value:float
  mirrored:bool
  unicode_1_name:str
  iso_comment:str
  upper_case_mapping:int
  lower_case_mapping:int
  title_case_mapping:int

  # Enumerated and catalog properties.
  age:str
  block:str
  east_asian_width:str
  grapheme_cluster_break:str
  hangul_syllable_type:str
  indic_conjunct_break:str
  indic_positional_category:str
  indic_syllabic_category:str
  jamo_short_name:str
  joining_group:str
  joining_type:str
  line_break:str
  script:str
  script_extensions:tuple[str, ...]
  sentence_break:str
  vertical_orientation:str
  word_break:str

  # Bidi and case data.
  bidi_mirroring_glyph:int
  bidi_paired_bracket:int
  bidi_paired_bracket_type:str
  case_folding:dict[str, CodeSeq]
  special_casing:list[SpecialCasing]

  # Names and sources.
  aliases:dict[str, list[str]]
  cjk_radical:str
  equivalent_unified_ideograph:int
  han:dict[str, dict[str, str]]
  nushu_common_reading:str
  nushu_source:str
  radical_stroke_indexes:str
  shift_jis_codes:ShiftJISCodes
  tangut_merged_source:str

  # Binary properties: CompositionExclusions.txt.
  composition_exclusion:bool

  # Binary properties: PropList.txt.
  white_space:bool
  bidi_control:bool
  join_control:bool
  dash:bool
  hyphen:bool
  quotation_mark:bool
  terminal_punctuation:bool
  other_math:bool
  hex_digit:bool
  ascii_hex_digit:bool
  other_alphabetic:bool
  ideographic:bool
  diacritic:bool
  extender:bool
  other_lowercase:bool
  other_uppercase:bool
  noncharacter_code_point:bool
  other_grapheme_extend:bool
  ids_binary_operator:bool
  ids_trinary_operator:bool
  ids_unary_operator:bool
  radical:bool
  unified_ideograph:bool
  other_default_ignorable_code_point:bool
  deprecated:bool
  soft_dotted:bool
  logical_order_exception:bool
  other_id_start:bool
  other_id_continue:bool
  id_compat_math_continue:bool
  id_compat_math_start:bool
  sentence_terminal:bool
  variation_selector:bool
  pattern_white_space:bool
  pattern_syntax:bool
  prepended_concatenation_mark:bool
  regional_indicator:bool
  modifier_combining_mark:bool

  # Binary properties: DerivedCoreProperties.txt.
  math:bool
  alphabetic:bool
  lowercase:bool
  uppercase:bool
  cased:bool
  case_ignorable:bool
  changes_when_lowercased:bool
  changes_when_uppercased:bool
  changes_when_titlecased:bool
  changes_when_casefolded:bool
  changes_when_casemapped:bool
  id_start:bool
  id_continue:bool
  xid_start:bool
  xid_continue:bool
  default_ignorable_code_point:bool
  grapheme_extend:bool
  grapheme_base:bool
  grapheme_link:bool

  # Binary properties: emoji-data.txt.
  emoji:bool
  emoji_presentation:bool
  emoji_modifier:bool
  emoji_modifier_base:bool
  emoji_component:bool
  extended_pictographic:bool


record_fields:frozenset[str] = frozenset(CharRecord.__annotations__)


def check_patch(patch:Mapping[str,Any]) -> None:
  'Raise UnknownProperty if `patch` names a field that `CharRecord` does not define.'
  for name in patch:
    if name not in record_fields: raise UnknownProperty(name)


class RecordStore:
  '''
  An insertion-ordered mapping from code point to `CharRecord`.
  The store is mutable while loading; `freeze` makes it read-only for consumers.
  '''

  def __init__(self) -> None:
    self._records:dict[int,CharRecord] = {}
    self.is_frozen = False


  def __len__(self) -> int: return len(self._records)

  def __contains__(self, code:Any) -> bool:
    return _parse_single(code) in self._records

  def __iter__(self) -> Iterator[tuple[int,CharRecord]]:
    if self.is_frozen:
      return ((c, cast(CharRecord, MappingProxyType(r))) for c, r in self._records.items())
    return iter(self._records.items())


  def get(self, code:Any) -> CharRecord:
    '''
    Get-or-create: return the record for `code`, creating and inserting an empty record if none exists yet.
    Handlers rely on this to read-then-append nested values.
    Once the store is frozen, return a read-only view instead, and never insert.
    '''
    c = _parse_single(code)
    if self.is_frozen:
      return cast(CharRecord, MappingProxyType(self._records.get(c, {})))
    try: return self._records[c]
    except KeyError: pass
    record = self._records[c] = CharRecord()
    return record


  def lookup(self, code:Any) -> CharRecord|None:
    'Pure lookup: return the record for `code` or None; never creates a record.'
    record = self._records.get(_parse_single(code))
    if record is None or not self.is_frozen: return record
    return cast(CharRecord, MappingProxyType(record))


  def set(self, code:Any, patch:str|tuple[str,Any]|Mapping[str,Any], *value:Any) -> None:
    '''
    Merge `patch` into the record(s) for `code`.
    `patch` is either a property name, which is set to True, a property name followed by a value
    (as a second argument or as a pair), or a mapping of names to values.
    If `code` is a range, the patch is applied to every code point in it.
    The merge is shallow: fields named in the patch are overwritten; other fields are kept.
    '''
    if self.is_frozen: raise StoreFrozen(code)
    props:Mapping[str,Any]
    if isinstance(patch, str):
      if len(value) > 1: raise TypeError(f'set: expected at most one value; received {value!r}')
      props = { patch: value[0] if value else True }
    elif isinstance(patch, tuple):
      if value: raise TypeError(f'set: a pair patch takes no value; received {value!r}')
      name, val = patch
      props = { name: val }
    else:
      if value: raise TypeError(f'set: a mapping patch takes no value; received {value!r}')
      props = patch
    check_patch(props)
    c = parse_code_point(code)
    if isinstance(c, int):
      self.get(c).update(props) # type: ignore[typeddict-item]
    elif isinstance(c, tuple):
      for i in codes_for_range(c):
        self.get(i).update(props) # type: ignore[typeddict-item]
    elif isinstance(c, list):
      raise TypeError(f'set: code point sequences are not record keys: {code!r}')
    else:
      raise BadCodePoint(f'set: invalid code point: {code!r}')


  def freeze(self) -> None:
    '''
    Make the store read-only. Nested dicts in each record become read-only views and nested lists become tuples,
    so consumers cannot alter records through the values they are given.
    '''
    if self.is_frozen: return
    for record in self._records.values():
      for field, value in record.items():
        record[field] = _freeze_value(value) # type: ignore[literal-required]
    self.is_frozen = True


def _freeze_value(value:Any) -> Any:
  if isinstance(value, dict): return MappingProxyType({ k: _freeze_value(v) for k, v in value.items() })
  if isinstance(value, list): return tuple(_freeze_value(el) for el in value)
  return value


def _parse_single(code:Any) -> int:
  c = parse_code_point(code)
  if not isinstance(c, int): raise BadCodePoint(f'expected a single code point; received {code!r}')
  return c


def fmt_record_key(code:int, field:str) -> str:
  'Describe a single field of a single record, for error messages.'
  return f'{fmt_code_point(code)}.{field}'


def idemput(d:dict[str,Any], k:str, v:Any, desc:str) -> None:
  '''
  Put a new key and value in the dictionary;
  raise `ConflictingValues` if the key already exists and the existing value is not equal to the incoming one.
  `desc` names the conflicting field in the error.
  '''
  try: existing = d[k]
  except KeyError: pass
  else:
    if v != existing: raise ConflictingValues(key=desc, existing=existing, incoming=v)
  d[k] = v
