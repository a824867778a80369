''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2
'''

import numpy as np
from pandas import Series


def fit_stats(df, observed='DOOBS', modeled='DOX'):
    '''
    Goodness of fit of modeled against observed dissolved oxygen.

    Parameters
    ----------
    df : pandas DataFrame
        METAB output table.
    observed, modeled : str
        Column names to compare.

    Returns
    -------
    pandas Series
        N, BIAS, RMSE, MAE, NSE (Nash-Sutcliffe efficiency) and R over
        the rows where both columns are defined.
    '''

    both = df[[observed, modeled]].dropna()
    obs = both[observed].to_numpy()
    mod = both[modeled].to_numpy()
    n = len(both)
    if n == 0:
        return Series({'N': 0, 'BIAS': np.nan, 'RMSE': np.nan, 'MAE': np.nan,
          'NSE': np.nan, 'R': np.nan})

    diff = mod - obs
    ss = ((obs - obs.mean())**2).sum()
    nse = 1.0 - (diff**2).sum() / ss if ss > 0.0 else np.nan
    r = np.corrcoef(obs, mod)[0, 1] if n > 1 and obs.std() > 0.0 and mod.std() > 0.0 else np.nan
    return Series({'N': n, 'BIAS': diff.mean(), 'RMSE': np.sqrt((diff**2).mean()),
      'MAE': np.abs(diff).mean(), 'NSE': nse, 'R': r})
