# Public generators for 64-bit range proofs
#
# Every generator is derived by hashing a fixed domain label and index to the
# curve, so prover and verifier recompute identical points independently and no
# trusted setup is involved.
#
# The full parameter set is built once per process on first use and is never
# mutated afterwards.

import threading

from group import G, Point, Scalar, hash_to_point
from vector import PointVector

# Bit length of proven values
N = 64

G_LABEL = b'bulletproof_g'
H_LABEL = b'bulletproof_h'

class RangeParameters:
	def __init__(self,G,H,N,Gi,Hi):
		if not isinstance(G,Point):
			raise TypeError('Bad type for parameter G!')
		if not isinstance(H,Point):
			raise TypeError('Bad type for parameter H!')
		if not isinstance(N,int):
			raise TypeError('Bad type for parameter N!')
		if not isinstance(Gi,PointVector):
			raise TypeError('Bad type for parameter Gi!')
		if not isinstance(Hi,PointVector):
			raise TypeError('Bad type for parameter Hi!')
		if not len(Gi) == len(Hi):
			raise ValueError('Size mismatch for parameters Gi and Hi!')

		# Also need N to be a power of 2 with a generator per bit
		if N < 1 or not (N & (N - 1)) == 0:
			raise ValueError('Bad value for parameter N!')
		if not len(Gi) == N:
			raise ValueError('Bad size for parameters Gi and Hi!')

		self.G = G
		self.H = H
		self.N = N
		self._Gi = tuple(Gi)
		self._Hi = tuple(Hi)

	# Callers get fresh vectors so the shared tuples cannot be altered
	@property
	def Gi(self):
		return PointVector(self._Gi)

	@property
	def Hi(self):
		return PointVector(self._Hi)

# Derive a vector generator
#
# INPUTS
#   label: domain label (bytes)
#   index: generator index (int)
# OUTPUTS
#   Point
def generator(label,index):
	return hash_to_point(label,index)

# Second Pedersen base: hash the basepoint encoding until a valid point appears
def derive_H():
	return hash_to_point(G)

def build_parameters(n=N):
	Gi = PointVector([generator(G_LABEL,i) for i in range(n)])
	Hi = PointVector([generator(H_LABEL,i) for i in range(n)])
	return RangeParameters(G,derive_H(),n,Gi,Hi)

_parameters = None
_parameters_lock = threading.Lock()

# Process-wide range proof parameters, built lazily on first use
def range_parameters():
	global _parameters
	if _parameters is None:
		with _parameters_lock:
			if _parameters is None:
				_parameters = build_parameters()
	return _parameters

# Pedersen commitment value*G + blinding*H
#
# INPUTS
#   value: committed amount (int or Scalar)
#   blinding: commitment mask (Scalar)
#   params: optional parameters (RangeParameters)
# OUTPUTS
#   Point
def commit(value,blinding,params=None):
	if params is None:
		params = range_parameters()
	if isinstance(value,int) and not isinstance(value,bool):
		value = Scalar(value)
	if not isinstance(value,Scalar):
		raise TypeError('Bad type for commitment value!')
	if not isinstance(blinding,Scalar):
		raise TypeError('Bad type for commitment blinding!')
	return params.G*value + params.H*blinding
