# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The aggregate UCD loader.

`UCD.load` runs every file handler against a fresh record store in two phases.
Within a phase, each handler reads and splits its file in a worker thread,
then applies its rows on the event loop thread, so the store only ever has one writer at a time.
The derived phase starts once every base handler has completed.
'''

from asyncio import TaskGroup, run as aio_run, to_thread
from bisect import bisect_right
from os import environ
from os.path import dirname, join as path_join
from typing import Any, Iterable, Iterator, Mapping

from .codepoints import CodeRange, CodeSeq
from .exceptions import UCDNotLoaded
from .handlers import FileHandler, Phase, handlers_for_files
from .io import errSL, read_numbered_lines
from .records import CharRecord, Radical, RecordStore, VariationSequence


ucd_root_env_var = 'UNITOME_UCD'


def dflt_ucd_root() -> str:
  'The UCD root used when none is specified: $UNITOME_UCD, or the `ucd` directory beside this package.'
  return environ.get(ucd_root_env_var) or path_join(dirname(__file__), 'ucd')


class UCD:
  '''
  The Unicode Character Database, consolidated into one record per code point.
  Records become readable once `load` (or `load_async`) completes, after which the store is frozen.
  '''

  def __init__(self, root:str|None=None, files:Iterable[str]|None=None, verbose=False) -> None:
    self.root = root or dflt_ucd_root()
    self.handlers = handlers_for_files(files)
    self.verbose = verbose
    self.is_loaded = False
    self.records = RecordStore()
    # Auxiliary tables populated by the handlers.
    self.blocks:dict[str,CodeRange] = {}
    self.brackets:dict[str,str] = {}
    self.mirrored:dict[str,str] = {}
    self.radicals:dict[str,Radical] = {}
    self.named_sequences:dict[str,dict[str,CodeSeq]] = { 'approved': {}, 'provisional': {} }
    self.property_aliases:dict[str,tuple[str, ...]] = {}
    self.variation_sequences:dict[CodeSeq,VariationSequence] = {}
    # Pending `<label, First>` rows of UnicodeData, keyed by label.
    self.open_ranges:dict[str,int] = {}
    self._block_starts:list[int] = []
    self._block_list:list[tuple[CodeRange,str]] = []


  def __repr__(self) -> str:
    return f'{type(self).__name__}(root={self.root!r}, loaded={self.is_loaded})'


  def path_for(self, file:str) -> str:
    return path_join(self.root, file + '.txt')


  def load(self) -> None:
    'Load all selected files synchronously.'
    aio_run(self.load_async())


  async def load_async(self) -> None:
    '''
    Load all selected files. Any failure aborts the whole load and propagates the first error raised;
    the remaining handlers of the phase are cancelled and the UCD is left unloaded.
    '''
    if self.is_loaded: return
    for phase in Phase:
      handlers = [h for h in self.handlers if h.phase == phase]
      if not handlers: continue
      if self.verbose: errSL(f'unitome: {phase.name} phase: {len(handlers)} files')
      try:
        async with TaskGroup() as tg:
          for handler in handlers:
            tg.create_task(self._run_handler(handler))
      except ExceptionGroup as eg:
        raise _first_leaf(eg) from None
    if self.open_ranges:
      label = next(iter(self.open_ranges))
      errSL(f'unitome: warning: UnicodeData range without an end: {label!r}')
    self._index_blocks()
    self.records.freeze()
    self.is_loaded = True
    if self.verbose: errSL(f'unitome: loaded {len(self.records)} records from {self.root}')


  async def _run_handler(self, handler:FileHandler) -> None:
    path = self.path_for(handler.file)
    try: rows = await to_thread(list, read_numbered_lines(path, delimiter=handler.delimiter))
    except OSError as e:
      e.add_note(f'{path}: {handler.file} handler failed')
      raise
    if self.verbose: errSL(f'unitome: {handler.file}: {len(rows)} lines')
    for line_num, fields in rows:
      try: handler.fn(self, fields)
      except Exception as e:
        e.add_note(f'{path}:{line_num}: {handler.file} handler failed')
        raise


  def _index_blocks(self) -> None:
    self._block_list = sorted((r, name) for name, r in self.blocks.items())
    self._block_starts = [r[0] for r, _ in self._block_list]


  def _check_loaded(self) -> None:
    if not self.is_loaded: raise UCDNotLoaded(f'UCD has not been loaded: {self.root}')


  def __len__(self) -> int:
    self._check_loaded()
    return len(self.records)


  def __contains__(self, code:Any) -> bool:
    self._check_loaded()
    return code in self.records


  def __iter__(self) -> Iterator[tuple[int,CharRecord]]:
    'Iterate over `(code, record)` pairs in insertion order.'
    self._check_loaded()
    return iter(self.records)


  def get(self, code:Any) -> CharRecord:
    'Return a read-only view of the record for `code`; the view is empty for code points with no data.'
    self._check_loaded()
    return self.records.get(code)


  def lookup(self, code:Any) -> CharRecord|None:
    self._check_loaded()
    return self.records.lookup(code)


  def set(self, code:Any, patch:str|tuple[str,Any]|Mapping[str,Any], *value:Any) -> None:
    'Merge `patch` into the record(s) for `code`; see `RecordStore.set`. Raises StoreFrozen once loaded.'
    self.records.set(code, patch, *value)


  def block_of(self, code:int) -> str|None:
    'Return the name of the block containing `code`, or None.'
    self._check_loaded()
    i = bisect_right(self._block_starts, code) - 1
    if i < 0: return None
    (start, end), name = self._block_list[i]
    return name if start <= code < end else None


def _first_leaf(eg:BaseExceptionGroup) -> BaseException:
  e:BaseException = eg
  while isinstance(e, BaseExceptionGroup): e = e.exceptions[0]
  return e
