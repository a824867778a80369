''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2
General routines for METAB '''

import pandas as pd
import numpy as np
from pandas import DataFrame, Timedelta, date_range
from pandas.tseries.offsets import Minute
from numpy import full, float64, nan
from numba import types
from numba.typed import Dict

from METABIO.protocols import Category, SupportsReadTS, SupportsWriteTS


# input series, in the order they are read
TSNAMES = ('DOOBS', 'WTEMP', 'PAR')

# output table columns; DOOBS is passed through for comparison
OUTPUTS = ('DOOBS', 'DOX', 'PHYTO', 'DOSAT', 'FATM', 'NPP', 'RDOC',
  'RPHYTO', 'RTOT', 'SETTLE')


def make_numba_dict(uci):
    '''
    Move UCI dictionary data to Numba dict for FLAGS, STATES, PARAMETERS.

    Parameters
    ----------
    uci : Python dictionary
        The uci dictionary contains the control file data

    Returns
    -------
    ui : Numba dictionary
        Same content as uci except for strings

    '''

    ui = Dict.empty(key_type=types.unicode_type, value_type=types.float64)
    for name in set(uci.keys()) & {'FLAGS', 'PARAMETERS', 'STATES'}:
        for key, value in uci[name].items():
            if type(value) in {int, float, np.int64, float64}:
                ui[key] = float(value)
    return ui


def make_ts_dict(series={}):
    ''' explicit creation of Numba dictionary with signatures, filled from series'''
    ts = Dict.empty(key_type=types.unicode_type, value_type=types.float64[:])
    for name, values in series.items():
        ts[name] = np.asarray(values, dtype=float64)
    return ts


def init_siminfo(siminfo):
    ''' adds the simulation time index and step count to siminfo'''
    start, stop = pd.Timestamp(siminfo['start']), pd.Timestamp(siminfo['stop'])
    delt = siminfo.setdefault('delt', 30)
    siminfo['start'], siminfo['stop'] = start, stop
    siminfo['tindex'] = date_range(start, stop, freq=Minute(delt))
    if siminfo.get('steps') is None:
        siminfo['steps'] = len(siminfo['tindex'])
    return siminfo


def transform(ts, siminfo):
    '''
    align ts to the simulation time index
    aggregate (MEAN) when ts is sampled more often than delt, otherwise
    reindex; timestamps without data become NaN for the FORCE gap fill
    '''

    tindex = siminfo['tindex']
    ts = ts[~ts.index.duplicated(keep='first')].sort_index()

    if len(ts) > 1 and ts.index.to_series().diff().min() < Timedelta(minutes=siminfo['delt']):
        ts = ts.resample(Minute(siminfo['delt']), origin=tindex[0]).mean()

    return ts.reindex(tindex).to_numpy().astype(float64)


def get_timeseries(timeseries_inputs:SupportsReadTS, siminfo):
    ''' makes timeseries at the simulation timestep and trucated to the sim interval'''
    data_frame = timeseries_inputs.read_ts(category=Category.INPUTS)

    ts = make_ts_dict()
    for name in TSNAMES:
        if name in data_frame.columns:
            ts[name] = transform(data_frame[name], siminfo)
        elif name == 'DOOBS':    # observations are optional when STATES has DOX
            ts[name] = full(len(siminfo['tindex']), nan)
        else:
            raise KeyError(f'Input timeseries {name} not found')
    return ts


def make_results(ts, siminfo):
    ''' output table, one row per simulation step'''
    steps = int(siminfo['steps'])
    df = DataFrame(index=siminfo['tindex'][:steps])
    for name in OUTPUTS:
        if name in ts:
            df[name] = ts[name][:steps]
    df.index.name = 'Datetime'
    return df


def save_timeseries(timeseries:SupportsWriteTS, df, saveall, save, operation, segment, activity):
    if saveall:
        save_columns = list(df.columns)
    else:
        save_columns = [c for c in df.columns if c in save]

    if not df.empty:
        timeseries.write_ts(
            data_frame=df,
            save_columns=save_columns,
            category = Category.RESULTS,
            operation=operation,
            segment=segment,
            activity=activity,
        )
    else:
        print(f'DataFrame Empty for {operation}|{activity}|{segment}')
    return


def versions(import_list=[]):
    '''
    Versions of libraries required by METAB

    Parameters
    ----------
    import_list : list of strings, optional
        DESCRIPTION. The default is [].

    Returns
    -------
    Pandas DataFrame
        Libary verson strings.
    '''

    import sys
    import platform
    import importlib
    import datetime

    names = ['Python']
    data  = [sys.version]
    import_list = ['METAB', 'numpy', 'numba', 'pandas'] + list(import_list)
    for import_ in import_list:
        imodule = importlib.import_module(import_)
        names.append(import_)
        data.append(imodule.__version__)
    names.extend(['os', 'processor', 'Date/Time'])
    data.extend([platform.platform(), platform.processor(),
      str(datetime.datetime.now())[0:19]])
    return DataFrame(data, index=names, columns=['version'])
