class UCI():

	def __init__(self) -> None:
		self.uci = {'FLAGS': {}, 'PARAMETERS': {}, 'STATES': {}}
		self.siminfo = {}
		self.segment = 'LAKE'
