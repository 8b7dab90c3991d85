# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Fixed enumeration tables used to expand the abbreviated property values found in the UCD files.
Long value names follow PropertyValueAliases.txt.
'''

from types import MappingProxyType
from typing import Mapping, NamedTuple


class UnicodeCategory(NamedTuple):
  key:str
  name:str
  desc:str
  subcategories:tuple[str, ...]


def _mk_cat(key:str, name:str, desc:str) -> UnicodeCategory:
  subs = desc.split(' | ')
  return UnicodeCategory(key=key, name=name, desc=desc, subcategories=tuple(subs if len(subs) > 1 else []))


unicode_categories:tuple[UnicodeCategory, ...] = ( # taken directly from: http://www.unicode.org/reports/tr44/#General_Category_Values.
  _mk_cat('Lu', 'Uppercase_Letter',      'An uppercase letter'),
  _mk_cat('Ll', 'Lowercase_Letter',      'A lowercase letter'),
  _mk_cat('Lt', 'Titlecase_Letter',      'A digraphic character, with first part uppercase'),
  _mk_cat('LC', 'Cased_Letter',          'Lu | Ll | Lt'),
  _mk_cat('Lm', 'Modifier_Letter',       'A modifier letter'),
  _mk_cat('Lo', 'Other_Letter',          'other letters, including syllables and ideographs'),
  _mk_cat('L',  'Letter',                'Lu | Ll | Lt | Lm | Lo'),
  _mk_cat('Mn', 'Nonspacing_Mark',       'A nonspacing combining mark (zero advance width)'),
  _mk_cat('Mc', 'Spacing_Mark',          'A spacing combining mark (positive advance width)'),
  _mk_cat('Me', 'Enclosing_Mark',        'An enclosing combining mark'),
  _mk_cat('M',  'Mark',                  'Mn | Mc | Me'),
  _mk_cat('Nd', 'Decimal_Number',        'A decimal digit'),
  _mk_cat('Nl', 'Letter_Number',         'A letterlike numeric character'),
  _mk_cat('No', 'Other_Number',          'A numeric character of other type'),
  _mk_cat('N',  'Number',                'Nd | Nl | No'),
  _mk_cat('Pc', 'Connector_Punctuation', 'A connecting punctuation mark, like a tie'),
  _mk_cat('Pd', 'Dash_Punctuation',      'A dash or hyphen punctuation mark'),
  _mk_cat('Ps', 'Open_Punctuation',      'An opening punctuation mark (of a pair)'),
  _mk_cat('Pe', 'Close_Punctuation',     'A closing punctuation mark (of a pair)'),
  _mk_cat('Pi', 'Initial_Punctuation',   'An initial quotation mark'),
  _mk_cat('Pf', 'Final_Punctuation',     'A final quotation mark'),
  _mk_cat('Po', 'Other_Punctuation',     'A punctuation mark of other type'),
  _mk_cat('P',  'Punctuation',           'Pc | Pd | Ps | Pe | Pi | Pf | Po'),
  _mk_cat('Sm', 'Math_Symbol',           'A symbol of mathematical use'),
  _mk_cat('Sc', 'Currency_Symbol',       'A currency sign'),
  _mk_cat('Sk', 'Modifier_Symbol',       'A non-letterlike modifier symbol'),
  _mk_cat('So', 'Other_Symbol',          'A symbol of other type'),
  _mk_cat('S',  'Symbol',                'Sm | Sc | Sk | So'),
  _mk_cat('Zs', 'Space_Separator',       'A space character (of various non-zero widths)'),
  _mk_cat('Zl', 'Line_Separator',        'U+2028 LINE SEPARATOR only'),
  _mk_cat('Zp', 'Paragraph_Separator',   'U+2029 PARAGRAPH SEPARATOR only'),
  _mk_cat('Z',  'Separator',             'Zs | Zl | Zp'),
  _mk_cat('Cc', 'Control',               'A C0 or C1 control code'),
  _mk_cat('Cf', 'Format',                'A format control character'),
  _mk_cat('Cs', 'Surrogate',             'A surrogate code point'),
  _mk_cat('Co', 'Private_Use',           'A private-use character'),
  _mk_cat('Cn', 'Unassigned',            'A reserved unassigned code point or a noncharacter'),
  _mk_cat('C',  'Other',                 'Cc | Cf | Cs | Co | Cn'),
)

general_categories:Mapping[str,str] = MappingProxyType({ cat.key : cat.name for cat in unicode_categories })

dflt_general_category = 'Cn'


class BidiClass(NamedTuple):
  key:str
  name:str
  type:str # strong, weak, neutral, or explicit.


bidi_class_list:tuple[BidiClass, ...] = (
  BidiClass('L',   'Left_To_Right',            'strong'),
  BidiClass('R',   'Right_To_Left',            'strong'),
  BidiClass('AL',  'Arabic_Letter',            'strong'),
  BidiClass('EN',  'European_Number',          'weak'),
  BidiClass('ES',  'European_Separator',       'weak'),
  BidiClass('ET',  'European_Terminator',      'weak'),
  BidiClass('AN',  'Arabic_Number',            'weak'),
  BidiClass('CS',  'Common_Separator',         'weak'),
  BidiClass('NSM', 'Nonspacing_Mark',          'weak'),
  BidiClass('BN',  'Boundary_Neutral',         'weak'),
  BidiClass('B',   'Paragraph_Separator',      'neutral'),
  BidiClass('S',   'Segment_Separator',        'neutral'),
  BidiClass('WS',  'White_Space',              'neutral'),
  BidiClass('ON',  'Other_Neutral',            'neutral'),
  BidiClass('LRE', 'Left_To_Right_Embedding',  'explicit'),
  BidiClass('LRO', 'Left_To_Right_Override',   'explicit'),
  BidiClass('RLE', 'Right_To_Left_Embedding',  'explicit'),
  BidiClass('RLO', 'Right_To_Left_Override',   'explicit'),
  BidiClass('PDF', 'Pop_Directional_Format',   'explicit'),
  BidiClass('LRI', 'Left_To_Right_Isolate',    'explicit'),
  BidiClass('RLI', 'Right_To_Left_Isolate',    'explicit'),
  BidiClass('FSI', 'First_Strong_Isolate',     'explicit'),
  BidiClass('PDI', 'Pop_Directional_Isolate',  'explicit'),
)

bidi_classes:Mapping[str,BidiClass] = MappingProxyType({ bc.key : bc for bc in bidi_class_list })

bidi_class_names:Mapping[str,str] = MappingProxyType({ bc.key : bc.name for bc in bidi_class_list })

#^ Keyed by long name, for consumers that hold a record's `bidi_class` value.
bidi_class_types:Mapping[str,str] = MappingProxyType({ bc.name : bc.type for bc in bidi_class_list })


joining_types:Mapping[str,str] = MappingProxyType({
  'C': 'Join_Causing',
  'D': 'Dual_Joining',
  'L': 'Left_Joining',
  'R': 'Right_Joining',
  'T': 'Transparent',
  'U': 'Non_Joining',
})

bidi_paired_bracket_types:Mapping[str,str] = MappingProxyType({
  'o': 'Open',
  'c': 'Close',
  'n': 'None',
})

case_folding_statuses:Mapping[str,str] = MappingProxyType({
  'C': 'common',
  'F': 'full',
  'S': 'simple',
  'T': 'turkic',
})

east_asian_widths:Mapping[str,str] = MappingProxyType({
  'A':  'Ambiguous',
  'F':  'Fullwidth',
  'H':  'Halfwidth',
  'N':  'Neutral',
  'Na': 'Narrow',
  'W':  'Wide',
})

dflt_east_asian_width = 'N'

vertical_orientations:Mapping[str,str] = MappingProxyType({
  'R':  'Rotated',
  'Tr': 'Transformed_Rotated',
  'Tu': 'Transformed_Upright',
  'U':  'Upright',
})

dflt_vertical_orientation = 'R'

# EmojiSources.txt columns after the unicode sequence.
shift_jis_vendors:tuple[str, ...] = ('docomo', 'kddi', 'softbank')

unihan_variant_types:Mapping[str,str] = MappingProxyType({
  'kSemanticVariant':            'semantic',
  'kSimplifiedVariant':          'simplified',
  'kSpecializedSemanticVariant': 'specialised_semantic',
  'kSpoofingVariant':            'spoofing',
  'kTraditionalVariant':         'traditional',
  'kZVariant':                   'z',
})

nushu_source_tags:Mapping[str,str] = MappingProxyType({
  'kSrc_NushuDuben': 'nushu_source',
  'kReading':        'nushu_common_reading',
})

tangut_source_tags:Mapping[str,str] = MappingProxyType({
  'kTGT_MergedSrc': 'tangut_merged_source',
  'kRSTUnicode':    'radical_stroke_indexes',
})

# Unihan files whose rows are stored as `han[category][key]`; the variants file is handled separately.
unihan_categories:tuple[str, ...] = (
  'DictionaryIndices',
  'DictionaryLikeData',
  'IRGSources',
  'NumericValues',
  'OtherMappings',
  'RadicalStrokeCounts',
  'Readings',
)


def expand(table:Mapping[str,str], abbr:str, dflt:str|None=None) -> str:
  '''
  Expand an abbreviated property value using `table`.
  An empty `abbr` is replaced by `dflt` if given; unknown abbreviations are returned unchanged.
  '''
  if not abbr and dflt is not None: abbr = dflt
  return table.get(abbr, abbr)
