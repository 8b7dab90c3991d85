# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'String utilities for converting UCD property and tag names into record field names.'

import re


def split_camelcase(string:str) -> list[str]:
  '''
  Split a camel-case string (e.g. "camelCase", "CamelCase") into a list of chunks (e.g. ["camel", "Case"]).
  Acronyms end before a digit run, so "XHC1983" splits into ["XHC", "1983"].
  '''
  return [chunk for chunk in re.split(r'([A-Z](?:[a-z]+|[A-Z]*(?=[A-Z0-9]|$)))', string) if chunk]


def snakecase_from_camelcase(string:str) -> str:
  '''
  Convert a camel-case string (e.g. "camelCase", "CamelCase") to snake-case (e.g. "snake_case").
  Existing underscores separate words as well, so "IRG_GSource" becomes "irg_g_source".
  '''
  return '_'.join(s.lower() for part in string.split('_') for s in split_camelcase(part))


def field_name_for_property(name:str) -> str:
  'Convert a UCD property name (e.g. "ASCII_Hex_Digit") to a record field name (e.g. "ascii_hex_digit").'
  return name.strip().lower()


def field_name_for_unihan_tag(tag:str) -> str:
  'Convert a Unihan tag (e.g. "kRSUnicode") to a record key (e.g. "rs_unicode"), dropping the "k" prefix.'
  if tag.startswith('k') and tag[1:2].isupper(): tag = tag[1:]
  return snakecase_from_camelcase(tag)
