import json
from pathlib import Path
import pandas as pd
from pandas import read_csv, to_numeric
from METABIO.protocols import Category
from typing import Union, Any

from METAB.uci import UCI

# sensor "no data" codes masked to NaN unless the control file lists its own
SENTINELS = (-99999.0, -9999.0)

class CSV():
	"""Control file (JSON) plus delimited forcing table; results written as CSV

	Control file layout::

		{"SIMINFO": {"start": "...", "stop": "...", "delt": 30, "steps": null},
		 "SEGMENT": "LAKE",
		 "FLAGS": {...}, "PARAMETERS": {...}, "STATES": {...},
		 "TIMESERIES": {"file": "forcing.csv", "datetime": "datetime", "sep": ",",
			"columns": {"DOOBS": "do", "WTEMP": "wtemp", "PAR": "par"},
			"sentinels": [-99999], "ranges": {"WTEMP": [-5, 40]}},
		 "OUTPUT": "results"}

	Relative paths are resolved against the control file directory.
	"""

	def __init__(self, file_path:str, output:Union[str,None]=None) -> None:
		self.file_path = Path(file_path)
		with open(self.file_path) as f:
			self._control = json.load(f)
		self._root = self.file_path.parent

		if output is None:
			output = self._control.get('OUTPUT', f'{self.file_path.stem}_results')
		self.output = self._root / output

	def read_uci(self) -> UCI:
		"""Read control, parameters, states and flags

		Parameters: None

		Returns: UCI

		"""
		uci = UCI()
		for name in ('FLAGS', 'PARAMETERS', 'STATES'):
			uci.uci[name] = dict(self._control.get(name, {}))
		if 'SAVE' in self._control:
			uci.uci['SAVE'] = list(self._control['SAVE'])
		uci.segment = self._control.get('SEGMENT', uci.segment)

		temp = self._control.get('SIMINFO', {})
		uci.siminfo['delt'] = int(temp.get('delt', 30))
		if temp.get('steps') is not None:
			uci.siminfo['steps'] = int(temp['steps'])
		if 'start' in temp and 'stop' in temp:
			uci.siminfo['start'] = pd.Timestamp(temp['start'])
			uci.siminfo['stop']  = pd.Timestamp(temp['stop'])
		else:    # simulation period from the forcing table
			index = self.read_ts(Category.INPUTS).index
			uci.siminfo['start'] = pd.Timestamp(temp.get('start', index[0]))
			uci.siminfo['stop']  = pd.Timestamp(temp.get('stop', index[-1]))
		return uci

	def read_ts(self,
			category:Category,
			operation:Union[str,None]=None,
			segment:Union[str,None]=None,
			activity:Union[str,None]=None) -> pd.DataFrame:
		if category == Category.INPUTS:
			return read_forcing(self._root, self._control['TIMESERIES'])
		path = self.output / f'{operation}_{segment}_{activity}.csv'
		if not path.exists():
			return pd.DataFrame()
		return read_csv(path, index_col=0, parse_dates=True)

	def write_ts(self,
			data_frame:pd.DataFrame,
			category: Category,
			operation:str,
			segment:str,
			activity:str,
			*args:Any,
			**kwargs:Any) -> None:
		"""Saves timeseries to CSV"""
		self.output.mkdir(parents=True, exist_ok=True)
		data_frame.to_csv(self.output / f'{operation}_{segment}_{activity}.csv')

	def write_log(self, metab_log:pd.DataFrame) -> None:
		self.output.mkdir(parents=True, exist_ok=True)
		metab_log.to_csv(self.output / 'LOGFILE.csv', index=False)

	def write_versioning(self, versioning:pd.DataFrame) -> None:
		self.output.mkdir(parents=True, exist_ok=True)
		versioning.to_csv(self.output / 'VERSIONS.csv')


def read_forcing(root, info) -> pd.DataFrame:
	'''
	Reads the forcing table and returns DOOBS, WTEMP, PAR columns on a
	DatetimeIndex. Non-numeric tokens, sentinel codes and values outside
	the optional valid ranges become NaN.
	'''

	path = Path(root) / info['file']
	if not path.exists():
		raise FileNotFoundError(f'{path} forcing file not found')

	sep = info.get('sep', ',')
	df = read_csv(path, sep=sep)
	dtcol = info.get('datetime', df.columns[0])
	df.index = pd.to_datetime(df.pop(dtcol))
	df.index.name = 'Datetime'

	columns = info.get('columns', {'DOOBS': 'DOOBS', 'WTEMP': 'WTEMP', 'PAR': 'PAR'})
	df = df.rename(columns={v: k for k, v in columns.items()})
	df = df[[c for c in columns if c in df.columns]].copy()

	sentinels = [float(x) for x in info.get('sentinels', SENTINELS)]
	ranges = info.get('ranges', {})
	for name in df.columns:
		series = to_numeric(df[name], errors='coerce').astype(float)
		series = series.mask(series.isin(sentinels))
		if name in ranges:
			low, high = ranges[name]
			series = series.mask((series < low) | (series > high))
		df[name] = series
	return df
