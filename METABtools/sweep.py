''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2
'''

from copy import deepcopy
from concurrent.futures import ThreadPoolExecutor, as_completed
from pandas import DataFrame

from METAB.main import run_model
from METAB.configuration import defaults
from METAB.utilities import make_ts_dict
from METABtools.compare import fit_stats


def sweep(uci_obj, ts, name, values, threads=1):
    '''
    Parameter sensitivity sweep; one METAB run for each value of name.

    Every run gets its own copy of the control data and of the input
    series, so runs never share parameters or arrays.

    Parameters
    ----------
    uci_obj : UCI
        Base control data; not modified.
    ts : Numba dictionary or dict of arrays
        Input series DOOBS, WTEMP, PAR at the simulation timestep.
    name : str
        PARAMETERS or STATES key to vary.
    values : iterable of float
        Values to run; a repeated value is run once.
    threads : int
        Number of concurrent runs.

    Returns
    -------
    pandas DataFrame
        Indexed by value: final DOX and PHYTO, minimum DOX and PHYTO and the
        fit statistics against DOOBS.
    '''

    values = list(dict.fromkeys(float(value) for value in values))
    section = 'STATES' if name in defaults['STATES'] or name == 'DOX' else 'PARAMETERS'

    def one(value):
        run_uci = deepcopy(uci_obj)
        run_uci.uci.setdefault(section, {})[name] = float(value)
        run_ts = make_ts_dict({k: v.copy() for k, v in ts.items()})
        df = run_model(run_uci, run_ts)
        row = {'DOX_END': df['DOX'].iloc[-1], 'PHYTO_END': df['PHYTO'].iloc[-1],
          'DOX_MIN': df['DOX'].min(), 'PHYTO_MIN': df['PHYTO'].min()}
        row.update(fit_stats(df).to_dict())
        return row

    rows = {}
    with ThreadPoolExecutor(max_workers=threads) as executor:
        futures = {executor.submit(one, value): value for value in values}
        for future in as_completed(futures):
            rows[futures[future]] = future.result()

    df = DataFrame.from_dict(rows, orient='index').sort_index()
    df.index.name = name
    return df
