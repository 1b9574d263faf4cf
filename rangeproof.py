# Bulletproof range proof
#
# It is a zero-knowledge proving system for the following relation:
# {(G,H,Gi,Hi),V ; v,r | 0 <= v < 2^64 and V = v*G + r*H}
#
# Proofs are not aggregated; each proof covers exactly one commitment.
#
# Verification is total: malformed or hostile input yields False and is never
# raised to the caller. Construction-time misuse raises.

import logging

from generators import RangeParameters, range_parameters
from group import Point, Scalar, hash_to_point, multiexp, random_scalar
import innerproduct
import transcript
from vector import PointVector, ScalarVector, inner_product, powers

logger = logging.getLogger(__name__)

TRANSCRIPT_LABEL = b'bulletproof range proof'
U_LABEL = b'bulletproof_u'

class ValueOutOfRange(ValueError):
	pass

RangeError = ValueOutOfRange

class RangeProof:
	def __init__(self,A,S,T1,T2,taux,mu,tx,ip):
		if not isinstance(A,Point):
			raise TypeError('Bad type for range proof element A!')
		if not isinstance(S,Point):
			raise TypeError('Bad type for range proof element S!')
		if not isinstance(T1,Point):
			raise TypeError('Bad type for range proof element T1!')
		if not isinstance(T2,Point):
			raise TypeError('Bad type for range proof element T2!')
		if not isinstance(taux,Scalar):
			raise TypeError('Bad type for range proof element taux!')
		if not isinstance(mu,Scalar):
			raise TypeError('Bad type for range proof element mu!')
		if not isinstance(tx,Scalar):
			raise TypeError('Bad type for range proof element tx!')
		if not isinstance(ip,innerproduct.InnerProductProof):
			raise TypeError('Bad type for range proof inner product!')

		self.A = A
		self.S = S
		self.T1 = T1
		self.T2 = T2
		self.taux = taux
		self.mu = mu
		self.tx = tx
		self.ip = ip

	def __eq__(self,other):
		if not isinstance(other,RangeProof):
			return NotImplemented
		return (self.A == other.A and self.S == other.S and self.T1 == other.T1 and self.T2 == other.T2
			and self.taux == other.taux and self.mu == other.mu and self.tx == other.tx and self.ip == other.ip)

# Turn a value into a vector of bit scalars, least significant bit first
#
# INPUTS
#   v: (int)
#   N: number of bits (int)
# OUTPUTS
#   ScalarVector
def scalar_to_bits(v,N):
	return ScalarVector([Scalar((v >> i) & 1) for i in range(N)])

# Common statement prefix of the transcript
def _start_transcript(N,V):
	tr = transcript.Transcript(TRANSCRIPT_LABEL)
	tr.append_u64(b'N',N)
	tr.append_point(b'V',V)
	return tr

# Generate a proof
#
# INPUTS
#   value: amount, 0 <= value < 2^64 (int)
#   commitment: value*G + blinding*H (Point)
#   blinding: commitment mask (Scalar)
#   params: optional parameters (RangeParameters)
# OUTPUTS
#   RangeProof
def prove(value,commitment,blinding,params=None):
	if params is None:
		params = range_parameters()
	if not isinstance(params,RangeParameters):
		raise TypeError('Bad type for range parameters!')
	if not isinstance(value,int) or isinstance(value,bool):
		raise TypeError('Bad type for range proof value!')
	if not isinstance(commitment,Point):
		raise TypeError('Bad type for range proof commitment!')
	if not isinstance(blinding,Scalar):
		raise TypeError('Bad type for range proof blinding!')

	N = params.N
	if value < 0 or value >= 1 << N:
		raise ValueOutOfRange('Range proof value out of range!')

	G = params.G
	H = params.H
	Gi = params.Gi
	Hi = params.Hi

	# Check the statement validity
	if not commitment == G*Scalar(value) + H*blinding:
		raise ArithmeticError('Invalid range statement!')

	tr = _start_transcript(N,commitment)

	# Set bit arrays
	ones = ScalarVector([Scalar(1)]*N)
	aL = scalar_to_bits(value,N)
	aR = aL - ones

	# Random masks
	alpha = random_scalar()
	rho = random_scalar()
	sL = ScalarVector([random_scalar() for _ in range(N)])
	sR = ScalarVector([random_scalar() for _ in range(N)])

	# Compute A and S by multiscalar multiplication
	A_scalars = ScalarVector([alpha])
	A_points = PointVector([H])
	S_scalars = ScalarVector([rho])
	S_points = PointVector([H])
	for i in range(N):
		A_scalars.append(aL[i])
		A_points.append(Gi[i])
		A_scalars.append(aR[i])
		A_points.append(Hi[i])
		S_scalars.append(sL[i])
		S_points.append(Gi[i])
		S_scalars.append(sR[i])
		S_points.append(Hi[i])
	A = multiexp(A_scalars,A_points)
	S = multiexp(S_scalars,S_points)

	# Get challenges
	tr.append_point(b'A',A)
	tr.append_point(b'S',S)
	y = tr.challenge(b'y')
	z = tr.challenge(b'z')
	z_square = z**2

	y_powers = powers(y,N)
	two_powers = powers(Scalar(2),N)

	# Coefficients of l(X) = l0 + l1*X and r(X) = r0 + r1*X
	l0 = aL - ones*z
	l1 = sL
	r0 = y_powers*(aR + ones*z) + two_powers*z_square
	r1 = y_powers*sR

	# t(X) = <l(X),r(X)> = t0 + t1*X + t2*X^2
	t0 = inner_product(l0,r0)
	t1 = inner_product(l0,r1) + inner_product(l1,r0)
	t2 = inner_product(l1,r1)

	tau1 = random_scalar()
	tau2 = random_scalar()
	T1 = G*t1 + H*tau1
	T2 = G*t2 + H*tau2

	tr.append_point(b'T1',T1)
	tr.append_point(b'T2',T2)
	x = tr.challenge(b'x')

	l = l0 + l1*x
	r = r0 + r1*x
	tx = t0 + t1*x + t2*x**2
	taux = tau1*x + tau2*x**2 + z_square*blinding
	mu = alpha + rho*x

	tr.append_scalar(b'taux',taux)
	tr.append_scalar(b'mu',mu)
	tr.append_scalar(b'tx',tx)
	U = hash_to_point(U_LABEL,tr.challenge(b'u'))

	# Inner product over (Gi, Hi') with Hi' = Hi o y^-n
	Hi_prime = Hi*powers(y.invert(),N)
	ip = innerproduct.prove(tr,Gi,Hi_prime,U,l,r)

	return RangeProof(A,S,T1,T2,taux,mu,tx,ip)

# Check a proof against a commitment
#
# RAISES
#   ArithmeticError if either verification equation fails; any other exception
#   means the input is malformed
def _check(proof,commitment,params):
	if not isinstance(params,RangeParameters):
		raise TypeError('Bad type for range parameters!')
	if not isinstance(proof,RangeProof):
		raise TypeError('Bad type for range proof!')
	if not isinstance(commitment,Point):
		raise TypeError('Bad type for range proof commitment!')

	N = params.N
	G = params.G
	H = params.H
	Gi = params.Gi
	Hi = params.Hi

	# Reconstruct challenges
	tr = _start_transcript(N,commitment)
	tr.append_point(b'A',proof.A)
	tr.append_point(b'S',proof.S)
	y = tr.challenge(b'y')
	z = tr.challenge(b'z')
	tr.append_point(b'T1',proof.T1)
	tr.append_point(b'T2',proof.T2)
	x = tr.challenge(b'x')
	tr.append_scalar(b'taux',proof.taux)
	tr.append_scalar(b'mu',proof.mu)
	tr.append_scalar(b'tx',proof.tx)
	U = hash_to_point(U_LABEL,tr.challenge(b'u'))

	z_square = z**2
	y_powers = powers(y,N)
	two_powers = powers(Scalar(2),N)

	# delta(y,z) = (z - z^2)*<1,y^n> - z^3*<1,2^n>
	delta = (z - z_square)*y_powers.sum() - z_square*z*Scalar((1 << N) - 1)

	if not G*proof.tx + H*proof.taux == commitment*z_square + G*delta + proof.T1*x + proof.T2*x**2:
		raise ArithmeticError('Failed polynomial identity check!')

	# P = A + x*S - z*<1,Gi> + <z*y^n + z^2*2^n,Hi'> - mu*H + tx*U
	Hi_prime = Hi*powers(y.invert(),N)
	P = proof.A + proof.S*x - H*proof.mu + U*proof.tx
	P += multiexp(ScalarVector([-z]*N),Gi)
	P += multiexp(y_powers*z + two_powers*z_square,Hi_prime)

	innerproduct.verify(tr,Gi,Hi_prime,U,P,proof.ip)

# Verify a proof
#
# INPUTS
#   proof: (RangeProof or serialized bytes)
#   commitment: (Point)
#   params: optional parameters (RangeParameters)
# OUTPUTS
#   bool
def verify(proof,commitment,params=None):
	try:
		if params is None:
			params = range_parameters()
		if isinstance(proof,(bytes,bytearray)):
			from serialize import deserialize # serialize depends on this module
			proof = deserialize(proof)
		_check(proof,commitment,params)
	except ArithmeticError as error:
		logger.debug('Range proof rejected: %s',error)
		return False
	except Exception as error:
		logger.debug('Malformed range proof input: %s: %s',type(error).__name__,error)
		return False
	return True
