import json

import numpy as np
import pandas as pd
import pytest

from METAB.main import main, run_model, messages
from METAB.utilities import OUTPUTS, make_ts_dict
from METABIO.delimited import CSV
from METABIO.io import IOManager
from conftest import diurnal, STEPS


def test_run_model_output_table(uci_obj, ts):
    df = run_model(uci_obj, ts)

    assert list(df.columns) == list(OUTPUTS)
    assert len(df) == STEPS
    assert df.index[0] == pd.Timestamp('2014-06-01 00:00')
    assert df.index[-1] == pd.Timestamp('2014-06-01 23:30')
    assert df.iloc[0][['DOSAT', 'FATM', 'NPP', 'RDOC', 'RPHYTO', 'RTOT', 'SETTLE']].isna().all()
    assert df['DOX'].iloc[0] == df['DOOBS'].iloc[0]
    assert df['PHYTO'].iloc[0] == 2.0
    assert not df.iloc[1:].isna().any().any()


def test_run_model_fills_forcing_gaps(uci_obj):
    data = diurnal()
    data['WTEMP'][5:9] = np.nan
    data['PAR'][30] = np.nan
    ts = make_ts_dict(data)
    msg = messages(echo=False)

    df = run_model(uci_obj, ts, msg)

    assert np.all(ts['WTEMP'][5:9] == ts['WTEMP'][4])
    assert ts['PAR'][30] == ts['PAR'][29]
    assert not df['DOX'].isna().any()
    log = msg(1, 'Done')
    assert any('Error count 4' in m for m in log)
    assert any('Error count 1' in m for m in log)


def test_run_model_without_force_fails_on_gaps(uci_obj):
    data = diurnal()
    data['PAR'][30] = np.nan
    uci_obj.uci['FLAGS'] = {'FORCE': 0}
    with pytest.raises(ValueError, match='PAR'):
        run_model(uci_obj, make_ts_dict(data))


def test_run_model_does_not_modify_control(uci_obj, ts):
    run_model(uci_obj, ts)
    assert uci_obj.uci['STATES'] == {'PHYTO': 2.0}
    assert 'PARAMETERS' in uci_obj.uci and uci_obj.uci['PARAMETERS'] == {}
    assert 'tindex' not in uci_obj.siminfo


def test_main_csv(model_dir):
    main(IOManager(CSV(model_dir / 'control.json')))

    results = model_dir / 'results'
    df = pd.read_csv(results / 'LAKE_MENDOTA_METAB.csv', index_col=0, parse_dates=True)
    assert len(df) == 49
    assert list(df.columns) == list(OUTPUTS)
    assert not df['DOX'].isna().any()
    assert not df['PHYTO'].isna().any()
    assert df['PHYTO'].iloc[0] == 1.5
    assert np.isnan(df.loc[pd.Timestamp('2014-06-01 15:00'), 'DOOBS'])
    assert np.isnan(df.loc[pd.Timestamp('2014-06-01 16:00'), 'DOOBS'])

    log = pd.read_csv(results / 'LOGFILE.csv')
    assert 'Done' in log['logfile'].iloc[-1]
    assert (results / 'VERSIONS.csv').exists()


def test_main_csv_steps_from_control(model_dir):
    control = model_dir / 'control.json'
    data = json.loads(control.read_text())
    data['SIMINFO']['steps'] = 10
    data['SAVE'] = ['DOX', 'PHYTO']
    control.write_text(json.dumps(data))

    main(IOManager(CSV(control)), saveall=False)

    df = pd.read_csv(model_dir / 'results' / 'LAKE_MENDOTA_METAB.csv', index_col=0)
    assert len(df) == 10
    assert list(df.columns) == ['DOX', 'PHYTO']


def test_main_csv_steps_beyond_forcing(model_dir):
    control = model_dir / 'control.json'
    data = json.loads(control.read_text())
    data['SIMINFO']['steps'] = 50
    control.write_text(json.dumps(data))

    with pytest.raises(IndexError):
        main(IOManager(CSV(control)))


class HeldUCI:
    def __init__(self, uci_obj):
        self.uci_obj = uci_obj

    def read_uci(self):
        return self.uci_obj


def test_main_does_not_modify_control(model_dir):
    csv_instance = CSV(model_dir / 'control.json')
    uci_obj = csv_instance.read_uci()

    main(IOManager(csv_instance, uci=HeldUCI(uci_obj)))

    assert 'tindex' not in uci_obj.siminfo
    assert 'steps' not in uci_obj.siminfo
    assert (model_dir / 'results' / 'LAKE_MENDOTA_METAB.csv').exists()
