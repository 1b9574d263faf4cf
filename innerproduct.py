# Inner-product argument
#
# Proves knowledge of vectors a, b with P = <a,Gi> + <b,Hi> + <a,b>*U using
# log2(n) rounds. Each round halves the vectors; the round challenges come from
# the shared transcript, so the verifier folds generators exactly as the prover
# did.
#
# Note that the vector length must be a power of two.

from group import LengthMismatch, Point, Scalar, multiexp
import transcript
from vector import PointVector, ScalarVector, inner_product

class InnerProductProof:
	def __init__(self,L,R,a,b):
		if not isinstance(L,PointVector):
			raise TypeError('Bad type for inner product proof element L!')
		if not isinstance(R,PointVector):
			raise TypeError('Bad type for inner product proof element R!')
		if not isinstance(a,Scalar):
			raise TypeError('Bad type for inner product proof element a!')
		if not isinstance(b,Scalar):
			raise TypeError('Bad type for inner product proof element b!')
		if not len(L) == len(R):
			raise IndexError('Inner product proof data length mismatch!')

		self.L = L
		self.R = R
		self.a = a
		self.b = b

	def __eq__(self,other):
		if not isinstance(other,InnerProductProof):
			return NotImplemented
		return self.L == other.L and self.R == other.R and self.a == other.a and self.b == other.b

# Data for a round of the inner product argument
class InnerProductRound:
	def __init__(self,Gi,Hi,U,a,b,tr):
		# Common data
		self.Gi = Gi
		self.Hi = Hi
		self.U = U
		self.done = False

		# Prover data
		self.a = a
		self.b = b

		# Proof data
		self.L = PointVector([])
		self.R = PointVector([])

		# Transcript
		self.tr = tr

def _check_sizes(Gi,Hi,n):
	if not len(Gi) == n or not len(Hi) == n:
		raise LengthMismatch('Inner product generator length mismatch!')
	if n < 1 or not (n & (n - 1)) == 0:
		raise ValueError('Inner product length must be a power of 2!')

# Perform an inner-product proof round
#
# INPUTS
#   data: round data (InnerProductRound)
def inner_product_round(data):
	n = len(data.Gi)

	if n == 1:
		data.done = True
		return

	n //= 2
	a1 = data.a[:n]
	a2 = data.a[n:]
	b1 = data.b[:n]
	b2 = data.b[n:]
	G1 = data.Gi[:n]
	G2 = data.Gi[n:]
	H1 = data.Hi[:n]
	H2 = data.Hi[n:]

	cL = inner_product(a1,b2)
	cR = inner_product(a2,b1)

	# Compute L and R by multiscalar multiplication
	L_scalars = ScalarVector([cL])
	L_points = PointVector([data.U])
	R_scalars = ScalarVector([cR])
	R_points = PointVector([data.U])
	for i in range(n):
		L_scalars.append(a1[i])
		L_points.append(G2[i])
		L_scalars.append(b2[i])
		L_points.append(H1[i])
		R_scalars.append(a2[i])
		R_points.append(G1[i])
		R_scalars.append(b1[i])
		R_points.append(H2[i])
	data.L.append(multiexp(L_scalars,L_points))
	data.R.append(multiexp(R_scalars,R_points))

	data.tr.append_point(b'L',data.L[-1])
	data.tr.append_point(b'R',data.R[-1])
	x = data.tr.challenge(b'x')
	x_inverse = x.invert()

	data.Gi = G1*x_inverse + G2*x
	data.Hi = H1*x + H2*x_inverse

	data.a = a1*x + a2*x_inverse
	data.b = b1*x_inverse + b2*x

# Generate an inner product proof
#
# INPUTS
#   tr: transcript shared with the enclosing protocol (Transcript)
#   Gi, Hi: generators (PointVector)
#   U: inner product generator (Point)
#   a, b: witness vectors (ScalarVector)
# OUTPUTS
#   InnerProductProof
def prove(tr,Gi,Hi,U,a,b):
	if not isinstance(tr,transcript.Transcript):
		raise TypeError('Bad type for transcript!')
	if not isinstance(U,Point):
		raise TypeError('Bad type for inner product generator U!')
	if not isinstance(a,ScalarVector) or not isinstance(b,ScalarVector):
		raise TypeError('Bad type for inner product witness!')
	if not len(a) == len(b):
		raise LengthMismatch('Inner product witness length mismatch!')
	_check_sizes(Gi,Hi,len(a))

	data = InnerProductRound(Gi,Hi,U,a,b,tr)
	while True:
		inner_product_round(data)

		# We have reached the end of the recursion
		if data.done:
			return InnerProductProof(data.L,data.R,data.a[0],data.b[0])

# Verify an inner product proof
#
# Replays the round challenges, folds the generators and the statement point,
# and checks the final single-element relation.
#
# INPUTS
#   tr: transcript in the same state the prover's was (Transcript)
#   Gi, Hi: generators (PointVector)
#   U: inner product generator (Point)
#   P: statement point (Point)
#   proof: (InnerProductProof)
# RAISES
#   ArithmeticError if the proof does not verify
def verify(tr,Gi,Hi,U,P,proof):
	if not isinstance(tr,transcript.Transcript):
		raise TypeError('Bad type for transcript!')
	if not isinstance(U,Point) or not isinstance(P,Point):
		raise TypeError('Bad type for inner product statement!')
	if not isinstance(proof,InnerProductProof):
		raise TypeError('Bad type for inner product proof!')
	n = len(Gi)
	_check_sizes(Gi,Hi,n)
	if not 1 << len(proof.L) == n:
		raise IndexError('Inner product round count mismatch!')

	for L,R in zip(proof.L,proof.R):
		tr.append_point(b'L',L)
		tr.append_point(b'R',R)
		x = tr.challenge(b'x')
		x_inverse = x.invert()

		n //= 2
		Gi = Gi[:n]*x_inverse + Gi[n:]*x
		Hi = Hi[:n]*x + Hi[n:]*x_inverse
		P = L*x**2 + P + R*x_inverse**2

	if not Gi[0]*proof.a + Hi[0]*proof.b + U*(proof.a*proof.b) == P:
		raise ArithmeticError('Failed inner product verification!')
