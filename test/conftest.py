# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os.path import dirname, join as path_join
from pathlib import Path
from typing import Callable

import pytest

from unitome.ucd import UCD


fixture_root = path_join(dirname(__file__), 'ucd')


@pytest.fixture(scope='session')
def ucd() -> UCD:
  'The miniature UCD tree under test/ucd, loaded once per session.'
  u = UCD(root=fixture_root)
  u.load()
  return u


@pytest.fixture
def make_ucd(tmp_path:Path) -> Callable[..., UCD]:
  '''
  Return a factory that writes the given files under a temporary root and returns an unloaded UCD for exactly those files.
  Keyword arguments map file names (without `.txt`; `/` may be written as `__`) to file contents.
  '''
  def make(files:dict[str,str]|None=None, **kw_files:str) -> UCD:
    contents = dict(files or {})
    contents.update((k.replace('__', '/'), v) for k, v in kw_files.items())
    for name, text in contents.items():
      path = tmp_path / f'{name}.txt'
      path.parent.mkdir(parents=True, exist_ok=True)
      path.write_text(text, encoding='utf-8')
    return UCD(root=str(tmp_path), files=list(contents))
  return make
