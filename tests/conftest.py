import shutil
from pathlib import Path

import numpy as np
import pytest

from METAB.configuration import apply_defaults
from METAB.uci import UCI
from METAB.utilities import make_ts_dict

data_path = Path(__file__).parent / "data"

STEPS = 48


def diurnal(steps=STEPS):
    ''' one day of half hourly forcing and DO observations'''
    hours = np.arange(steps) / 2.0
    wtemp = 20.0 + 1.5 * np.sin(np.pi * (hours - 9.0) / 12.0)
    par = np.clip(1500.0 * np.sin(np.pi * (hours - 6.0) / 14.0), 0.0, None)
    par[hours >= 20.0] = 0.0
    doobs = 8.6 + 0.4 * np.sin(np.pi * (hours - 11.0) / 12.0)
    return {'DOOBS': doobs, 'WTEMP': wtemp, 'PAR': par}


@pytest.fixture
def siminfo():
    return {'delt': 30, 'steps': STEPS}


@pytest.fixture
def uci():
    return apply_defaults({'STATES': {'PHYTO': 2.0}})


@pytest.fixture
def ts():
    return make_ts_dict(diurnal())


@pytest.fixture
def uci_obj():
    uci_obj = UCI()
    uci_obj.siminfo = {'start': '2014-06-01 00:00', 'stop': '2014-06-01 23:30', 'delt': 30}
    uci_obj.uci['STATES'] = {'PHYTO': 2.0}
    return uci_obj


@pytest.fixture
def model_dir(tmp_path):
    for name in ("control.json", "forcing.csv"):
        shutil.copy(data_path / name, tmp_path / name)
    yield tmp_path
