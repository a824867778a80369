''' Copyright (c) 2020 by RESPEC, INC.
Authors: Robert Heaphy, Ph.D. and Paul Duda
License: LGPL2
'''

from importlib.metadata import version

__version__ = version('lakemetab')

from METAB.main import main, run_model
from METAB.utilities import versions
