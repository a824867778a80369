''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2
'''

from copy import deepcopy

# new activity modules must be added here and in *activities* below
from METAB.FORCE import force
from METAB.METAB import metab


# Note: This is the ONLY place in METAB that defines activity execution order
activities = {'FORCE':force, 'METAB':metab}

# values used when the control file does not set them
defaults = {
  'FLAGS': {'FORCE':1, 'METAB':1},
  'PARAMETERS': {
     'TP':       20.0,       # phosphorus, ug/L
     'DOC':      5.0,        # dissolved organic carbon, mg/L
     'ZMIX':     3.0,        # mixed layer depth, m
     'KDO':      0.5,        # piston velocity, m/day
     'PNPP':     0.00002,    # NPP per unit light and phosphorus
     'THETANPP': 1.08,
     'PHYTOR':   0.1,        # 1/day
     'THETAR':   1.04,
     'SETTLING': 0.1,        # m/day
     'DOCR':     0.005,      # 1/day
     'CTOO2':    32.0/12.0,  # g O2 per g C
     },
  'STATES': {'PHYTO': 1.0},
  'SAVE': ['DOOBS', 'DOX', 'PHYTO', 'DOSAT', 'FATM', 'NPP', 'RDOC', 'RPHYTO',
     'RTOT', 'SETTLE'],
  }


def apply_defaults(uci):
    ''' new uci dictionary, control file values over defaults; uci is not modified'''
    merged = deepcopy(defaults)
    for name, values in uci.items():
        if isinstance(values, dict) and name in merged:
            merged[name].update(deepcopy(values))
        else:
            merged[name] = deepcopy(values)
    return merged
