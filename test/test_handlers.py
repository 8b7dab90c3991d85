# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import isclose

import pytest

from unitome.exceptions import BadCodePoint, BadFraction, ConflictingValues, UCDFormatError, UnknownProperty
from unitome.handlers import Phase, file_handlers, handler_files, handlers_for_files, parse_numeric
from unitome.records import Decomposition, ShiftJISCodes
from unitome.string import field_name_for_property, field_name_for_unihan_tag, snakecase_from_camelcase


def test_handler_table() -> None:
  assert len(file_handlers) == 45
  assert handler_files() == sorted(file_handlers)
  derived = sorted(h.file for h in file_handlers.values() if h.phase == Phase.derived)
  assert derived == ['extracted/DerivedName', 'extracted/DerivedNumericValues']
  tab_files = { h.file for h in file_handlers.values() if h.delimiter == '\t' }
  assert 'NushuSources' in tab_files
  assert 'unihan/Unihan_Variants' in tab_files
  assert 'UnicodeData' not in tab_files


def test_handlers_for_files() -> None:
  assert [h.file for h in handlers_for_files(['Blocks', 'UnicodeData'])] == ['Blocks', 'UnicodeData']
  with pytest.raises(KeyError): handlers_for_files(['NotAFile'])


def test_parse_numeric() -> None:
  assert parse_numeric('1') == 1.0
  assert parse_numeric('-0.5') == -0.5
  assert isclose(parse_numeric('1/3'), 0.333333, abs_tol=1e-6)
  assert parse_numeric('1/2') == 0.5
  for text in ('1/0', '0/0', 'a/2', '1/'):
    with pytest.raises(BadFraction) as info: parse_numeric(text)
    assert info.value.text == text
  with pytest.raises(UCDFormatError): parse_numeric('one')


def test_field_names() -> None:
  assert field_name_for_property('ASCII_Hex_Digit') == 'ascii_hex_digit'
  assert field_name_for_property(' White_Space ') == 'white_space'
  assert field_name_for_unihan_tag('kRSUnicode') == 'rs_unicode'
  assert field_name_for_unihan_tag('kIRG_GSource') == 'irg_g_source'
  assert field_name_for_unihan_tag('kDefinition') == 'definition'
  assert snakecase_from_camelcase('DictionaryLikeData') == 'dictionary_like_data'
  assert snakecase_from_camelcase('IRGSources') == 'irg_sources'


def test_unicode_data_row(make_ucd) -> None:
  ucd = make_ucd(UnicodeData='0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;\n')
  ucd.load()
  r = ucd.get(0x41)
  assert r['name'] == 'LATIN CAPITAL LETTER A'
  assert r['general_category'] == 'Uppercase_Letter'
  assert r['bidi_class'] == 'Left_To_Right'
  assert r['lower_case_mapping'] == 0x61
  assert r['mirrored'] is False
  assert 'upper_case_mapping' not in r
  assert 'decomposition' not in r


def test_unicode_data_decomposition_and_numeric(make_ucd) -> None:
  ucd = make_ucd(UnicodeData=(
    '00BD;VULGAR FRACTION ONE HALF;No;0;ON;<fraction> 0031 2044 0032;;;1/2;N;FRACTION ONE HALF;;;;\n'
    '00C5;LATIN CAPITAL LETTER A WITH RING ABOVE;Lu;0;L;0041 030A;;;;N;;;;00E5;\n'
    '0378;;;;;;;;;;;;;;\n'))
  ucd.load()
  half = ucd.get(0xBD)
  assert half['decomposition'] == Decomposition(mapping=(0x31, 0x2044, 0x32), tag='fraction')
  assert half['numeric_value'] == 0.5
  assert half['unicode_1_name'] == 'FRACTION ONE HALF'
  assert ucd.get(0xC5)['decomposition'] == Decomposition(mapping=(0x41, 0x30A))
  assert ucd.get(0x378)['general_category'] == 'Unassigned'


def test_unicode_data_range(make_ucd) -> None:
  ucd = make_ucd(UnicodeData='AC00;<Hangul Syllable, First>;Lo;0;L;;;;;N;;;;;\nAC03;<Hangul Syllable, Last>;Lo;0;L;;;;;N;;;;;\n')
  ucd.load()
  assert [c for c, _ in ucd] == [0xAC00, 0xAC01, 0xAC02, 0xAC03]
  assert all(r['general_category'] == 'Other_Letter' and 'name' not in r for _, r in ucd)


def test_unicode_data_range_without_start(make_ucd) -> None:
  ucd = make_ucd(UnicodeData='AC03;<Hangul Syllable, Last>;Lo;0;L;;;;;N;;;;;\n')
  with pytest.raises(UCDFormatError): ucd.load()


def test_bad_code_point_aborts(make_ucd) -> None:
  ucd = make_ucd(Blocks='0000..007F; Basic Latin\nzzzz; Bogus\n')
  with pytest.raises(BadCodePoint) as info: ucd.load()
  assert any('Blocks.txt:2: Blocks handler failed' in note for note in info.value.__notes__)
  assert not ucd.is_loaded


def test_unicode_data_bad_integer_columns(make_ucd) -> None:
  ucd = make_ucd(UnicodeData='0041;LATIN CAPITAL LETTER A;Lu;x;L;;;;;N;;;;0061;\n')
  with pytest.raises(UCDFormatError) as info: ucd.load()
  assert 'UnicodeData.txt:1: UnicodeData handler failed' in info.value.__notes__[-1]
  ucd = make_ucd(UnicodeData='0031;DIGIT ONE;Nd;0;EN;;1;one;1;N;;;;;\n')
  with pytest.raises(UCDFormatError): ucd.load()


def test_unicode_data_bad_decomposition(make_ucd) -> None:
  ucd = make_ucd(UnicodeData='00C5;LATIN CAPITAL LETTER A WITH RING ABOVE;Lu;0;L;0041 0zz;;;;N;;;;00E5;\n')
  with pytest.raises(BadCodePoint): ucd.load()


def test_emoji_sources(make_ucd) -> None:
  ucd = make_ucd(EmojiSources='0023 20E3;F985;F489;F7B0\n1F600;;F649;F7B8\n')
  ucd.load()
  assert ucd.get(0x1F600)['shift_jis_codes'] == ShiftJISCodes(docomo=None, kddi=0xF649, softbank=0xF7B8)
  assert ucd.lookup(0x23) is None


def test_emoji_sources_bad_code_point(make_ucd) -> None:
  ucd = make_ucd(EmojiSources='zzzz;F985;F489;F7B0\n')
  with pytest.raises(BadCodePoint): ucd.load()


def test_unknown_binary_property(make_ucd) -> None:
  ucd = make_ucd(PropList='0020 ; Not_A_Property\n')
  with pytest.raises(UnknownProperty): ucd.load()


def test_enumerated_core_property(make_ucd) -> None:
  ucd = make_ucd(DerivedCoreProperties='094D ; InCB; Linker\n0915..0916 ; InCB; Consonant\n0041 ; Alphabetic\n')
  ucd.load()
  assert ucd.get(0x94D)['indic_conjunct_break'] == 'Linker'
  assert ucd.get(0x916)['indic_conjunct_break'] == 'Consonant'
  assert ucd.get(0x41)['alphabetic'] is True


def test_value_defaults(make_ucd) -> None:
  ucd = make_ucd(EastAsianWidth='0041 ; Na\n0042 ; \n0043 ; Q\n', VerticalOrientation='0041 ; Tu\n0042;\n')
  ucd.load()
  assert ucd.get(0x41)['east_asian_width'] == 'Narrow'
  assert ucd.get(0x42)['east_asian_width'] == 'Neutral'
  assert ucd.get(0x43)['east_asian_width'] == 'Q' # Unknown abbreviations are kept raw.
  assert ucd.get(0x41)['vertical_orientation'] == 'Transformed_Upright'
  assert ucd.get(0x42)['vertical_orientation'] == 'Rotated'


def test_derived_name_template(make_ucd) -> None:
  ucd = make_ucd(extracted__DerivedName='4E00..9FFF ; CJK UNIFIED IDEOGRAPH-*\n')
  ucd.load()
  assert ucd.get(0x4E00)['name'] == 'CJK UNIFIED IDEOGRAPH-4E00'
  assert ucd.get(0x9FFF)['name'] == 'CJK UNIFIED IDEOGRAPH-9FFF'
  names = [r['name'] for _, r in ucd]
  assert len(names) == 0x9FFF - 0x4E00 + 1
  assert len(set(names)) == len(names)
  assert 0x4DFF not in ucd
  assert 0xA000 not in ucd


def test_derived_name_short_hex(make_ucd) -> None:
  ucd = make_ucd(extracted__DerivedName='0041..0042 ; TEST-*\n')
  ucd.load()
  assert ucd.get(0x41)['name'] == 'TEST-0041'


def test_explicit_names_win(make_ucd) -> None:
  ucd = make_ucd(
    UnicodeData='0000;<control>;Cc;0;BN;;;;;N;NULL;;;;\n0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;\n',
    extracted__DerivedName='0000..0041 ; PLACEHOLDER-*\n')
  ucd.load()
  assert ucd.get(0x41)['name'] == 'LATIN CAPITAL LETTER A'
  assert ucd.get(0x0)['name'] == 'PLACEHOLDER-0000'
  assert ucd.get(0x20)['name'] == 'PLACEHOLDER-0020'


def test_derived_numeric_values(make_ucd) -> None:
  ucd = make_ucd(
    UnicodeData='00BD;VULGAR FRACTION ONE HALF;No;0;ON;;;;1/2;N;;;;;\n',
    extracted__DerivedNumericValues=(
      '00BD ; 0.5 ; ; 1/2\n'
      '2153 ; 0.33333333 ; ; 1/3\n'
      '4E09 ; 3.0 ; ; 3\n'
      '0F33 ; -0.5 ; ; -1/2\n'))
  ucd.load()
  assert ucd.get(0xBD)['numeric_value'] == 0.5
  assert isclose(ucd.get(0x2153)['numeric_value'], 1/3)
  assert ucd.get(0x4E09)['numeric_value'] == 3.0
  assert ucd.get(0xF33)['numeric_value'] == -0.5


def test_bad_fraction_aborts(make_ucd) -> None:
  ucd = make_ucd(extracted__DerivedNumericValues='2153 ; 0.0 ; ; 1/0\n')
  with pytest.raises(BadFraction) as info: ucd.load()
  assert info.value.text == '1/0'
  assert any('DerivedNumericValues.txt:1:' in note for note in info.value.__notes__)


def test_unihan_variant_conflict(make_ucd) -> None:
  ucd = make_ucd(unihan__Unihan_Variants='U+4E07\tkTraditionalVariant\tU+842C\nU+4E07\tkTraditionalVariant\tU+5104\n')
  with pytest.raises(ConflictingValues) as info: ucd.load()
  assert info.value.existing == 'U+842C'
  assert info.value.incoming == 'U+5104'


def test_unihan_variant_repeat(make_ucd) -> None:
  ucd = make_ucd(unihan__Unihan_Variants='U+4E07\tkTraditionalVariant\tU+842C\nU+4E07\tkTraditionalVariant\tU+842C\n')
  ucd.load()
  assert ucd.get(0x4E07)['han'] == { 'variants': { 'traditional': 'U+842C' } }


def test_accumulating_fields_do_not_duplicate(make_ucd) -> None:
  ucd = make_ucd(
    NameAliases='0000;NULL;control\n0000;NULL;control\n0000;NUL;abbreviation\n',
    SpecialCasing='00DF; 00DF; 0053 0073; 0053 0053; # SHARP S\n00DF; 00DF; 0053 0073; 0053 0053;\n')
  ucd.load()
  r = ucd.get(0)
  assert r['aliases'] == { 'control': ('NULL',), 'abbreviation': ('NUL',) }
  (casing,) = ucd.get(0xDF)['special_casing']
  assert casing.upper == (0x53, 0x53)
  assert casing.condition is None


def test_missing_file(make_ucd) -> None:
  ucd = make_ucd(Blocks='0000..007F; Basic Latin\n')
  ucd.handlers = handlers_for_files(['Blocks', 'Scripts'])
  with pytest.raises(FileNotFoundError) as info: ucd.load()
  assert any('Scripts handler failed' in note for note in info.value.__notes__)
  assert not ucd.is_loaded


def test_tables() -> None:
  from unitome.tables import bidi_class_types, bidi_classes, expand, general_categories, unicode_categories
  assert general_categories['Lu'] == 'Uppercase_Letter'
  assert bidi_classes['AL'].name == 'Arabic_Letter'
  assert bidi_class_types['Left_To_Right'] == 'strong'
  letter = next(cat for cat in unicode_categories if cat.key == 'L')
  assert letter.subcategories == ('Lu', 'Ll', 'Lt', 'Lm', 'Lo')
  assert expand(general_categories, '', 'Cn') == 'Unassigned'
  assert expand(general_categories, 'Xx') == 'Xx'
