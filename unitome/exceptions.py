# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised while loading the UCD.
Every failure is fatal to a load; there is no partial-success mode.
'''

from typing import Any


class UCDError(Exception):
  'Base class for all unitome errors.'


class UCDFormatError(UCDError, ValueError):
  'Raised when a source row is structurally malformed, e.g. a mandatory column is missing.'


class BadCodePoint(UCDError, ValueError):
  'Raised when a mandatory code point column does not parse.'


class BadFraction(UCDError, ValueError):
  'Raised when a rational numeric value is degenerate, e.g. "1/0".'

  def __init__(self, text:str) -> None:
    self.text = text
    super().__init__(f'bad fraction: {text!r}')


class ConflictingValues(UCDError, KeyError):
  '''
  Raised when an incoming value collides with an existing one-shot value.
  Since it arises from a key lookup, it subclasses KeyError.
  '''
  def __init__(self, *, key:Any, existing:Any, incoming:Any) -> None:
    self.key = key
    self.existing = existing
    self.incoming = incoming
    super().__init__(key) # Initialized like a KeyError.

  def __str__(self) -> str:
    return f'conflicting values for {self.key!r}: existing: {self.existing!r}; incoming: {self.incoming!r}'


class UnknownProperty(UCDError, KeyError):
  'Raised when a patch names a property outside of the `CharRecord` field set.'


class StoreFrozen(UCDError):
  'Raised when a record store is mutated after loading completed.'


class UCDNotLoaded(UCDError):
  'Raised when records are read from a UCD that has not finished loading.'
