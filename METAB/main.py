''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2
'''

from pandas import DataFrame
from datetime import datetime as dt
from METAB.utilities import versions, init_siminfo, get_timeseries, make_results, save_timeseries
from METAB.configuration import activities, apply_defaults

from METABIO.io import IOManager

def main(io_manager:IOManager, saveall:bool=True, jupyterlab:bool=False) -> None:
    """Runs main METAB program.

    Parameters
    ----------

    saveall: Boolean - [optional] Default is True.
        Saves all calculated data ignoring the SAVE list.
    jupyterlab: Boolean - [optional] Default is False.
        Flag for specific output behavior for  jupyter lab.
    Return
    ------------
    None

    """

    msg = messages()

    # read control data, parameters, states, and flags and map to local variables
    uci_obj = io_manager.read_uci()
    segment = uci_obj.segment
    siminfo = init_siminfo(dict(uci_obj.siminfo))
    msg(1, f'Processing started for segment {segment}; saveall={saveall}')
    msg(1, f'Simulation Start: {siminfo["start"]}, Stop: {siminfo["stop"]}, '
        f'DELT(minutes): {siminfo["delt"]}, steps: {siminfo["steps"]}')

    ts = get_timeseries(io_manager, siminfo)
    df = run_model(uci_obj, ts, msg)

    uci = apply_defaults(uci_obj.uci)
    save_timeseries(io_manager, df, saveall, uci['SAVE'], 'LAKE', segment, 'METAB')

    msglist = msg(1, 'Done', final=True)

    df = DataFrame(msglist, columns=['logfile'])
    io_manager.write_log(df)

    df = versions(['jupyterlab', 'notebook'] if jupyterlab else [])
    io_manager.write_versioning(df)
    if jupyterlab:
        print('\n\n', df)
    return


def run_model(uci_obj, ts, msg=None) -> DataFrame:
    """Runs every activity on ts in memory and returns the output table.

    The control data in uci_obj is not modified; parameters are merged
    with the defaults into a private copy for this run.
    """

    if msg is None:
        msg = messages(echo=False)

    siminfo = init_siminfo(dict(uci_obj.siminfo))
    uci = apply_defaults(uci_obj.uci)
    flags = uci['FLAGS']

    for activity, function in activities.items():
        if (activity in flags) and (not flags[activity]):
            continue

        msg(2, f'{activity}')

        ############ calls activity function like metab() ##############
        errors, errmessages = function(None, siminfo, uci, ts)
        ###############################################################

        for errorcnt, errormsg in zip(errors, errmessages):
            if errorcnt > 0:
                msg(3, f'Error count {errorcnt}: {errormsg}')

    return make_results(ts, siminfo)


def messages(echo=True):
    '''Closure routine; msg() prints messages to screen and run log'''
    start = dt.now()
    mlist = []
    def msg(indent, message, final=False):
        now = dt.now()
        m = str(now)[:22] + '   ' * indent + message
        if final:
            mn,sc = divmod((now-start).seconds, 60)
            ms = (now-start).microseconds // 100_000
            m = '; '.join((m, f'Run time is about {mn:02}:{sc:02}.{ms} (mm:ss)'))
        if echo:
            print(m)
        mlist.append(m)
        return mlist
    return msg
