import pandas as pd
from pandas.io.pytables import read_hdf
from METABIO.protocols import Category
from typing import Union, Any

from METAB.uci import UCI

class HDF5():

	def __init__(self, file_path:str) -> None:
		self.file_path = file_path
		self._store = pd.HDFStore(file_path)

	def __del__(self):
		self.close()

	def __enter__(self):
		return self

	def __exit__(self, exc_type, exc_value, trace):
		self.close()

	def close(self) -> None:
		store = getattr(self, '_store', None)
		if store is not None and store.is_open:
			store.close()

	def read_uci(self) -> UCI:
		"""Read control, parameters, states and flags tables

		Parameters: None

		Returns: UCI

		"""
		uci = UCI()
		for path in self._store.keys():   # finds ALL data sets into HDF5 file
			op, module, *other = path[1:].split(sep='/', maxsplit=2)
			if op == 'CONTROL' and module == 'GLOBAL':
				temp = self._store[path].to_dict()['Info']
				uci.siminfo['start'] = pd.Timestamp(temp['Start'])
				uci.siminfo['stop']  = pd.Timestamp(temp['Stop'])
				uci.siminfo['delt']  = int(temp['Delt'])
				if temp.get('Steps', ''):
					uci.siminfo['steps'] = int(temp['Steps'])
				uci.segment = temp.get('Segment', uci.segment)
			elif op == 'LAKE' and module in {'FLAGS', 'PARAMETERS', 'STATES'}:
				for id, vdict in self._store[path].to_dict('index').items():
					uci.uci[module] = {k: v for k, v in vdict.items() if pd.notna(v)}
			elif op == 'LAKE' and module == 'SAVE':
				uci.uci['SAVE'] = list(self._store[path]['SAVE'])
		return uci

	def write_uci(self, uci:UCI) -> None:
		"""Writes control, parameters, states and flags tables"""
		siminfo = uci.siminfo
		info = {'Start': str(siminfo['start']), 'Stop': str(siminfo['stop']),
			'Delt': str(siminfo.get('delt', 30)), 'Steps': str(siminfo.get('steps') or ''),
			'Segment': uci.segment}
		self._store.put('CONTROL/GLOBAL', pd.DataFrame({'Info': info}))
		for module in ('FLAGS', 'PARAMETERS', 'STATES'):
			if uci.uci.get(module):
				df = pd.DataFrame(uci.uci[module], index=[uci.segment], dtype=float)
				self._store.put(f'LAKE/{module}', df)
		if 'SAVE' in uci.uci:
			self._store.put('LAKE/SAVE', pd.DataFrame({'SAVE': list(uci.uci['SAVE'])}))

	def read_ts(self,
			category:Category,
			operation:Union[str,None]=None,
			segment:Union[str,None]=None,
			activity:Union[str,None]=None) -> pd.DataFrame:
		try:
			path = ''
			if category == category.INPUTS:
				path = 'TIMESERIES/FORCING'
			elif category == category.RESULTS:
				path = f'RESULTS/{operation}_{segment}/{activity}'
			return read_hdf(self._store, path)
		except KeyError:
			return pd.DataFrame()

	def write_ts(self,
			data_frame:pd.DataFrame,
			category: Category,
			operation:str=None,
			segment:str=None,
			activity:str=None,
			*args:Any,
			**kwargs:Any) -> None:
		"""Saves timeseries to HDF5"""
		if category == Category.INPUTS:
			path = 'TIMESERIES/FORCING'
		else:
			path = f'RESULTS/{operation}_{segment}/{activity}'
		complevel = None
		if 'compress' in kwargs:
			if kwargs['compress']:
				complevel = 9
		data_frame.to_hdf(self._store, key=path, format='t', data_columns=True, complevel=complevel)

	def write_log(self, metab_log:pd.DataFrame) -> None:
		metab_log.to_hdf(self._store, key='RUN_INFO/LOGFILE', data_columns=True, format='t')

	def write_versioning(self, versioning:pd.DataFrame) -> None:
		versioning.to_hdf(self._store, key='RUN_INFO/VERSIONS', data_columns=True, format='t')
