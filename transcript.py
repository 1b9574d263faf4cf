# Fiat-Shamir transcript
#
# A running BLAKE2b state absorbs labelled, length-prefixed protocol values.
# Challenges are drawn from the current state, so prover and verifier obtain the
# same challenges exactly when they append the same values in the same order.
#
# Anything a challenge depends on must be appended before that challenge is
# drawn.

from hashlib import blake2b

from group import Point, Scalar

STATE_BYTES = 32
WIDE_BYTES = 64

def _to_bytes(data):
	if isinstance(data,str):
		return data.encode('utf-8')
	if isinstance(data,(bytes,bytearray)):
		return bytes(data)
	raise TypeError('Bad type for transcript data!')

class Transcript:
	def __init__(self,label):
		self.state = bytes(STATE_BYTES)
		self.append(b'dom-sep',label)

	def copy(self):
		tr = object.__new__(Transcript)
		tr.state = self.state
		return tr

	# Absorb len(label) || label || len(data) || data, lengths as u32 little-endian
	def append(self,label,data):
		label = _to_bytes(label)
		data = _to_bytes(data)
		hasher = blake2b(digest_size=STATE_BYTES)
		hasher.update(self.state)
		hasher.update(len(label).to_bytes(4,'little'))
		hasher.update(label)
		hasher.update(len(data).to_bytes(4,'little'))
		hasher.update(data)
		self.state = hasher.digest()

	def append_point(self,label,P):
		if not isinstance(P,Point):
			raise TypeError('Bad type for transcript point!')
		self.append(label,P.to_bytes())

	def append_scalar(self,label,s):
		if not isinstance(s,Scalar):
			raise TypeError('Bad type for transcript scalar!')
		self.append(label,s.to_bytes())

	def append_u64(self,label,x):
		if not isinstance(x,int) or x < 0 or x >= 1 << 64:
			raise ValueError('Bad value for transcript integer!')
		self.append(label,x.to_bytes(8,'little'))

	# Draw a challenge scalar
	#
	# The label is absorbed first so successive challenges differ; a wide digest
	# is reduced modulo the group order.
	def challenge(self,label):
		self.append(b'challenge',label)
		wide = blake2b(self.state,digest_size=WIDE_BYTES).digest()
		result = Scalar(int.from_bytes(wide,'little'))
		if result == Scalar(0):
			raise ArithmeticError('Bad transcript challenge!')
		return result
