import pandas as pd
from METABIO.protocols import Category, SupportsReadUCI, SupportsReadTS, SupportsWriteTS, SupportsWriteLogging
from typing import Union, List

from METAB.uci import UCI

class IOManager:
	"""Routes the METAB run's control, forcing, results and log IO to backends

	A single backend implementing every protocol may be passed as
	io_combined; uci, input, output and log override it per role.
	Forcing tables are read once and served from memory as copies.
	"""

	def __init__(self,
			io_combined: Union[SupportsReadUCI, SupportsReadTS, SupportsWriteTS, None] = None,
			uci: Union[SupportsReadUCI,None]=None,
			input: Union[SupportsReadTS,None]=None,
			output: Union[SupportsWriteTS,None]=None,
			log: Union[SupportsWriteLogging,None]=None,) -> None:
		self._uci = uci or io_combined
		self._input = input or io_combined
		self._output = output or io_combined
		self._log = log or io_combined

		self._forcing = None

	def read_uci(self, *args, **kwargs) -> UCI:
		return self._uci.read_uci()

	def read_ts(self, category:Category, *args, **kwargs) -> pd.DataFrame:
		"""Forcing table (DOOBS, WTEMP, PAR); each call gets its own copy"""
		if category != Category.INPUTS:
			raise ValueError(f'IOManager reads only {Category.INPUTS}, not {category}')
		if self._forcing is None:
			self._forcing = self._input.read_ts(Category.INPUTS)
		return self._forcing.copy(deep=True)

	def write_ts(self,
			data_frame:pd.DataFrame,
			save_columns: List[str],
			category:Category,
			operation:Union[str,None]=None,
			segment:Union[str,None]=None,
			activity:Union[str,None]=None,
			*args, **kwargs) -> None:
		"""Writes the columns listed in save_columns to the output backend"""
		data_frame = data_frame[[c for c in data_frame.columns if c in save_columns]]
		self._output.write_ts(data_frame, category, operation, segment, activity)

	def write_log(self, data_frame)-> None:
		if self._log: self._log.write_log(data_frame)

	def write_versioning(self, data_frame)-> None:
		if self._log: self._log.write_versioning(data_frame)
