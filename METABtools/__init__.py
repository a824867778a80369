from importlib.metadata import version

from METABtools.compare import fit_stats
from METABtools.sweep   import sweep


__version__ = version('lakemetab')
