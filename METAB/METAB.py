''' Copyright (c) 2020 by RESPEC, INC.
Author: Robert Heaphy, Ph.D.
License: LGPL2

Dissolved oxygen and phytoplankton mass balance of a lake surface mixed
layer, explicit (forward) Euler integration.'''


from math import isfinite
from numpy import zeros, full, nan, int64, isnan
from numba import njit
from METAB.utilities import make_numba_dict


ERRMSGS = ('DT is zero, state held at initial conditions',)   # MSG0

FORCING = ('WTEMP', 'PAR')

# environmental constants, model parameters and unit conversion
PARMS = ('TP', 'DOC', 'ZMIX', 'KDO', 'PNPP', 'THETANPP', 'PHYTOR', 'THETAR',
	'SETTLING', 'DOCR', 'CTOO2', 'DT')


def metab(io_manager, siminfo, uci, ts):
	''' simulate mixed layer DO and phytoplankton biomass'''

	ui = make_numba_dict(uci)
	if 'DT' not in ui:
		ui['DT'] = siminfo['delt'] / 1440.0   # minutes to fraction of a day
	if 'DOX' not in ui:
		ui['DOX'] = ts['DOOBS'][0] if 'DOOBS' in ts else nan

	steps = int(siminfo['steps'])
	check(ui, ts, steps)

	ui['steps']  = steps
	ui['errlen'] = len(ERRMSGS)

	############################################################################
	errors = _metab_(ui, ts)  # run METAB simulation code
	############################################################################

	return errors, ERRMSGS


def check(ui, ts, steps):
	''' raises on any precondition violation, before state is written'''

	missing = [name for name in PARMS + ('PHYTO',) if name not in ui]
	if missing:
		raise KeyError(f'METAB missing required values: {", ".join(missing)}')

	for name in PARMS + ('PHYTO',):
		if not isfinite(ui[name]):
			raise ValueError(f'METAB {name} is not finite: {ui[name]}')
	if not isfinite(ui['DOX']):
		raise ValueError('METAB has no initial DO: set STATES DOX or provide a first DO observation')

	if ui['ZMIX'] <= 0.0:
		raise ValueError(f'METAB mixed layer depth ZMIX must be positive: {ui["ZMIX"]}')
	if ui['DT'] < 0.0:
		raise ValueError(f'METAB time step DT must not be negative: {ui["DT"]}')
	if steps <= 0:
		raise ValueError(f'METAB number of steps must be positive: {steps}')

	wtemp, par = ts['WTEMP'], ts['PAR']
	if len(wtemp) != len(par):
		raise ValueError(f'METAB forcing lengths differ: WTEMP {len(wtemp)}, PAR {len(par)}')
	if steps > len(wtemp):
		raise IndexError(f'METAB steps {steps} exceeds forcing length {len(wtemp)}')
	for name in FORCING:
		gaps = isnan(ts[name][:steps])
		if gaps.any():
			raise ValueError(f'METAB {name} has {gaps.sum()} missing values; run FORCE first')


@njit(cache=True)
def _metab_(ui, ts):
	''' explicit Euler update of DO and phytoplankton, one pass over steps'''

	errorsV = zeros(int(ui['errlen'])).astype(int64)

	steps = int(ui['steps'])
	dt = ui['DT']

	tp       = ui['TP']        # phosphorus
	doc      = ui['DOC']       # dissolved organic carbon
	zmix     = ui['ZMIX']      # mixed layer depth
	kdo      = ui['KDO']       # piston velocity
	pnpp     = ui['PNPP']
	thetanpp = ui['THETANPP']
	phytor   = ui['PHYTOR']
	thetar   = ui['THETAR']
	settling = ui['SETTLING']
	docr     = ui['DOCR']
	ctoo2    = ui['CTOO2']

	if dt == 0.0:
		errorsV[0] += 1

	WTEMP = ts['WTEMP']
	PAR   = ts['PAR']

	# preallocate storage; step 0 holds the initial state only
	DOX    = ts['DOX']    = zeros(steps)
	PHYTO  = ts['PHYTO']  = zeros(steps)
	DOSAT  = ts['DOSAT']  = full(steps, nan)
	FATM   = ts['FATM']   = full(steps, nan)
	NPP    = ts['NPP']    = full(steps, nan)
	RDOC   = ts['RDOC']   = full(steps, nan)
	RPHYTO = ts['RPHYTO'] = full(steps, nan)
	RTOT   = ts['RTOT']   = full(steps, nan)
	SETTLE = ts['SETTLE'] = full(steps, nan)

	DOX[0]   = ui['DOX']
	PHYTO[0] = ui['PHYTO']

	for step in range(1, steps):
		tw  = WTEMP[step]
		dox = DOX[step-1]
		phyto = PHYTO[step-1]

		# saturation DO, empirical cubic in water temperature
		dosat = -0.00006 * tw**3 + 0.0069 * tw**2 - 0.3906 * tw + 14.578

		# atmospheric exchange, oxygen units
		fatm = dt * kdo * (dosat - dox) / zmix

		# carbon fluxes
		npp    = dt * PAR[step] * tp * pnpp * thetanpp**(tw - 20.0)
		rdoc   = dt * doc * docr
		rphyto = dt * phyto * phytor * thetar**(tw - 20.0)
		rtot   = rdoc + rphyto
		settle = dt * phyto * settling / zmix

		DOX[step]   = dox + fatm + npp * ctoo2 - rtot * ctoo2
		PHYTO[step] = phyto + npp - rphyto - settle

		DOSAT[step]  = dosat
		FATM[step]   = fatm
		NPP[step]    = npp
		RDOC[step]   = rdoc
		RPHYTO[step] = rphyto
		RTOT[step]   = rtot
		SETTLE[step] = settle

	return errorsV
