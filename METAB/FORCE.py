''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2

Forcing preprocessor: fills sensor gaps in the water temperature and
PAR series before the METAB simulation.'''


from math import isnan
from numpy import zeros, int64, asarray, float64, count_nonzero
from numpy import isnan as isnan_
from numba import njit


ERRMSGS = ('WTEMP missing values carried forward',   # MSG0
		'PAR missing values carried forward')          # MSG1

FORCING = ('WTEMP', 'PAR')


def force(io_manager, siminfo, uci, ts):
	'''fill missing forcing values with the last good value'''

	for name in FORCING:    # every series checked before any is filled
		if len(ts[name]) > 0 and isnan(ts[name][0]):
			raise ValueError(f'{name}: first value is missing, no prior value to carry forward')

	errors = zeros(len(ERRMSGS), dtype=int64)
	for k, name in enumerate(FORCING):
		series = ts[name]
		errors[k] = count_nonzero(isnan_(series))
		ts[name] = gapfill(series, name)
	return errors, ERRMSGS


def gapfill(series, name='series'):
	'''
	Forward carry of the last defined value over NaN entries, in place.

	Every NaN at position i > 0 takes the value at i - 1, so a run of
	missing values all take the value immediately preceding the run.

	Parameters
	----------
	series : numpy array of float64
		Forcing series, modified in place.
	name : str
		Series name used in the error message.

	Returns
	-------
	series : numpy array
		The same array, gap filled.

	Raises
	------
	ValueError
		The first value is missing; nothing is modified.
	'''

	series = asarray(series, dtype=float64)
	if len(series) > 0 and isnan(series[0]):
		raise ValueError(f'{name}: first value is missing, no prior value to carry forward')
	_gapfill_(series)
	return series


@njit(cache=True)
def _gapfill_(series):
	for i in range(1, len(series)):
		if isnan(series[i]):
			series[i] = series[i - 1]
	return series
