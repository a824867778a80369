from pathlib import Path

import pandas as pd

from METAB.main import main
from METABIO.delimited import CSV
from METABIO.hdf import HDF5
from METABIO.io import IOManager
from METABIO.protocols import Category
from METABtools.compare import fit_stats


def run(control, output=None, saveall=True):
    """Run a METAB model.

    Parameters
    ----------
    control: str
        JSON control file (forcing read from its delimited table, results
        written as CSV) or HDF5 file used for both input and output.
    output: str
        [optional] Default is None.
        Results directory for a JSON control file; ignored for HDF5.
    saveall: bool
        [optional] Default is True.
        Saves all calculated data ignoring the SAVE list.
    """
    if not Path(control).exists():
        raise FileNotFoundError(f'{control} control file not found')

    if str(control).lower().endswith(('.h5', '.hdf')):
        with HDF5(str(control)) as hdf5_instance:
            main(IOManager(hdf5_instance), saveall=saveall)
    else:
        main(IOManager(CSV(control, output)), saveall=saveall)


def import_csv(control, h5file):
    """Import a JSON control file and its forcing table into an HDF5 file.

    Parameters
    ----------
    control: str
        The JSON control file to import.
    h5file: str
        The destination HDF5 file.
    """
    csv_instance = CSV(control)
    uci = csv_instance.read_uci()
    forcing = csv_instance.read_ts(Category.INPUTS)

    with HDF5(h5file) as hdf5_instance:
        hdf5_instance.write_uci(uci)
        hdf5_instance.write_ts(forcing, Category.INPUTS)


def compare(results, segment='LAKE'):
    """Print fit statistics of modeled against observed dissolved oxygen.

    Parameters
    ----------
    results: str
        METAB results CSV file, or HDF5 file holding the run results.
    segment: str
        [optional] Default is LAKE.
        Segment name of the results in an HDF5 file.
    """
    if str(results).lower().endswith(('.h5', '.hdf')):
        with HDF5(str(results)) as hdf5_instance:
            df = hdf5_instance.read_ts(Category.RESULTS, 'LAKE', segment, 'METAB')
    else:
        df = pd.read_csv(results, index_col=0, parse_dates=True)

    stats = fit_stats(df)
    print(stats.to_string())
    return stats
