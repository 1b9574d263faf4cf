# Range proof wire format
#
# A || S || T1 || T2 || taux || mu || tx || (L_i || R_i) for each round || a || b
#
# Every element is 32 bytes: points in compressed encoding, scalars as
# little-endian integers below the group order. A 64-bit proof has 6 rounds and
# is 672 bytes long.

from group import Point, Scalar, POINT_BYTES, SCALAR_BYTES
from innerproduct import InnerProductProof
from rangeproof import RangeProof
from vector import PointVector

# A, S, T1, T2, taux, mu, tx, a, b
FIXED_SIZE = 4*POINT_BYTES + 5*SCALAR_BYTES

# L_i, R_i
ROUND_SIZE = 2*POINT_BYTES

class InvalidProofLength(ValueError):
	pass

class InvalidProofEncoding(ValueError):
	pass

def proof_size(rounds=6):
	return FIXED_SIZE + rounds*ROUND_SIZE

def serialize(proof):
	if not isinstance(proof,RangeProof):
		raise TypeError('Bad type for range proof!')

	data = bytearray()
	for P in (proof.A,proof.S,proof.T1,proof.T2):
		data += P.to_bytes()
	for s in (proof.taux,proof.mu,proof.tx):
		data += s.to_bytes()
	for L,R in zip(proof.ip.L,proof.ip.R):
		data += L.to_bytes()
		data += R.to_bytes()
	data += proof.ip.a.to_bytes()
	data += proof.ip.b.to_bytes()
	return bytes(data)

def _point(data,offset,name):
	try:
		return Point.from_bytes(data[offset:offset + POINT_BYTES])
	except ValueError as error:
		raise InvalidProofEncoding('Bad encoding for range proof element {}!'.format(name)) from error

def _scalar(data,offset,name):
	try:
		return Scalar.from_bytes(data[offset:offset + SCALAR_BYTES])
	except ValueError as error:
		raise InvalidProofEncoding('Bad encoding for range proof element {}!'.format(name)) from error

def deserialize(data):
	if not isinstance(data,(bytes,bytearray)):
		raise TypeError('Bad type for serialized range proof!')
	data = bytes(data)
	if len(data) < FIXED_SIZE or not (len(data) - FIXED_SIZE) % ROUND_SIZE == 0:
		raise InvalidProofLength('Bad serialized range proof length {}!'.format(len(data)))
	rounds = (len(data) - FIXED_SIZE) // ROUND_SIZE

	offset = 0
	points = []
	for name in ('A','S','T1','T2'):
		points.append(_point(data,offset,name))
		offset += POINT_BYTES
	scalars = []
	for name in ('taux','mu','tx'):
		scalars.append(_scalar(data,offset,name))
		offset += SCALAR_BYTES

	L = PointVector([])
	R = PointVector([])
	for j in range(rounds):
		L.append(_point(data,offset,'L[{}]'.format(j)))
		offset += POINT_BYTES
		R.append(_point(data,offset,'R[{}]'.format(j)))
		offset += POINT_BYTES

	a = _scalar(data,offset,'a')
	offset += SCALAR_BYTES
	b = _scalar(data,offset,'b')

	ip = InnerProductProof(L,R,a,b)
	return RangeProof(points[0],points[1],points[2],points[3],scalars[0],scalars[1],scalars[2],ip)
