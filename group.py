# Scalar and point algebra over the ed25519 prime-order subgroup
#
# Group operations are delegated to libsodium through PyNaCl. Points are carried
# as canonical 32-byte compressed encodings; scalars are integers modulo the
# group order `l` and encode as 32 little-endian bytes.
#
# libsodium refuses to produce or consume the identity in scalar multiplication,
# so the identity is handled here explicitly.

from hashlib import blake2b
import hmac
import secrets

from nacl.bindings import (
	crypto_core_ed25519_add,
	crypto_core_ed25519_is_valid_point,
	crypto_core_ed25519_sub,
	crypto_scalarmult_ed25519_noclamp,
)

# Group order
l = 2**252 + 27742317777372353535851937790883648493

SCALAR_BYTES = 32
POINT_BYTES = 32

class LengthMismatch(IndexError):
	pass

class Scalar:
	def __init__(self,x):
		if isinstance(x,Scalar):
			x = x.x
		if not isinstance(x,int) or isinstance(x,bool):
			raise TypeError('Bad type for scalar value!')
		self.x = x % l

	@classmethod
	def from_bytes(cls,data):
		if not isinstance(data,(bytes,bytearray)) or not len(data) == SCALAR_BYTES:
			raise ValueError('Bad scalar encoding length!')
		x = int.from_bytes(data,'little')
		if x >= l:
			raise ValueError('Non-canonical scalar encoding!')
		return cls(x)

	def to_bytes(self):
		return self.x.to_bytes(SCALAR_BYTES,'little')

	# Modular inverse by the extended Euclidean algorithm
	#
	# Invariant: t0*x == r0 and t1*x == r1 (mod l); the loop ends at r0 = gcd = 1
	def invert(self):
		if self.x == 0:
			raise ZeroDivisionError('Cannot invert zero scalar!')
		r0, r1 = l, self.x
		t0, t1 = 0, 1
		while r1 != 0:
			q = r0 // r1
			r0, r1 = r1, r0 - q*r1
			t0, t1 = t1, t0 - q*t1
		return Scalar(t0)

	def _coerce(self,other):
		if isinstance(other,Scalar):
			return other
		if isinstance(other,int) and not isinstance(other,bool):
			return Scalar(other)
		return None

	def __add__(self,other):
		other = self._coerce(other)
		if other is None:
			return NotImplemented
		return Scalar(self.x + other.x)

	__radd__ = __add__

	def __sub__(self,other):
		other = self._coerce(other)
		if other is None:
			return NotImplemented
		return Scalar(self.x - other.x)

	def __rsub__(self,other):
		other = self._coerce(other)
		if other is None:
			return NotImplemented
		return Scalar(other.x - self.x)

	def __mul__(self,other):
		other = self._coerce(other)
		if other is None:
			return NotImplemented
		return Scalar(self.x*other.x)

	__rmul__ = __mul__

	def __truediv__(self,other):
		other = self._coerce(other)
		if other is None:
			return NotImplemented
		return self*other.invert()

	def __pow__(self,e):
		if not isinstance(e,int):
			raise TypeError('Bad type for scalar exponent!')
		if e < 0:
			return self.invert()**(-e)
		return Scalar(pow(self.x,e,l))

	def __neg__(self):
		return Scalar(-self.x)

	def __eq__(self,other):
		if isinstance(other,Scalar):
			return self.x == other.x
		return NotImplemented

	def __hash__(self):
		return hash(('Scalar',self.x))

	def __int__(self):
		return self.x

	def __repr__(self):
		return 'Scalar({})'.format(self.x)

class Point:
	def __init__(self,data):
		if not isinstance(data,bytes) or not len(data) == POINT_BYTES:
			raise TypeError('Bad type for point encoding!')
		self.data = data

	# Decode untrusted bytes, accepting only canonical prime-order subgroup points
	@classmethod
	def from_bytes(cls,data):
		if not isinstance(data,(bytes,bytearray)) or not len(data) == POINT_BYTES:
			raise ValueError('Bad point encoding length!')
		data = bytes(data)
		if data == IDENTITY_BYTES:
			return Z
		if not crypto_core_ed25519_is_valid_point(data):
			raise ValueError('Invalid point encoding!')
		return cls(data)

	def to_bytes(self):
		return self.data

	def is_identity(self):
		return self.data == IDENTITY_BYTES

	def __add__(self,other):
		if not isinstance(other,Point):
			return NotImplemented
		if self.is_identity():
			return other
		if other.is_identity():
			return self
		return Point(crypto_core_ed25519_add(self.data,other.data))

	def __sub__(self,other):
		if not isinstance(other,Point):
			return NotImplemented
		if other.is_identity():
			return self
		return Point(crypto_core_ed25519_sub(self.data,other.data))

	def __neg__(self):
		return Z - self

	def __mul__(self,other):
		if isinstance(other,int) and not isinstance(other,bool):
			other = Scalar(other)
		if not isinstance(other,Scalar):
			return NotImplemented
		if other.x == 0 or self.is_identity():
			return Z
		return Point(crypto_scalarmult_ed25519_noclamp(other.to_bytes(),self.data))

	__rmul__ = __mul__

	def __eq__(self,other):
		if isinstance(other,Point):
			return hmac.compare_digest(self.data,other.data)
		return NotImplemented

	def __hash__(self):
		return hash(('Point',self.data))

	def __repr__(self):
		return 'Point({})'.format(self.data.hex())

IDENTITY_BYTES = bytes([1]) + bytes(POINT_BYTES - 1)

# Identity
Z = Point(IDENTITY_BYTES)

# Standard ed25519 basepoint
G = Point(bytes.fromhex('5866666666666666666666666666666666666666666666666666666666666666'))

def random_scalar():
	return Scalar(secrets.randbelow(l))

# Multiscalar multiplication as an accumulated weighted sum
#
# INPUTS
#   scalars: (ScalarVector or list of Scalar)
#   points: (PointVector or list of Point)
# OUTPUTS
#   Point
def multiexp(scalars,points):
	if not len(scalars) == len(points):
		raise LengthMismatch('Multiexp scalar/point length mismatch!')
	result = Z
	for s,P in zip(scalars,points):
		result += P*s
	return result

def _encode(item):
	if isinstance(item,Point):
		return item.to_bytes()
	if isinstance(item,Scalar):
		return item.to_bytes()
	if isinstance(item,(bytes,bytearray)):
		return bytes(item)
	if isinstance(item,str):
		return item.encode('utf-8')
	if isinstance(item,int):
		if item < 0 or item >= 1 << 32:
			raise ValueError('Hash index out of range!')
		return item.to_bytes(4,'little')
	raise TypeError('Bad type for hash input!')

# Deterministic hash to a subgroup point by rejection sampling
#
# The encoded inputs are hashed once; the digest is re-hashed until it decodes
# to a canonical point of prime order.
#
# INPUTS
#   data: any number of Point, Scalar, bytes, str or u32 int items
# OUTPUTS
#   Point
def hash_to_point(*data):
	digest = blake2b(b''.join(_encode(item) for item in data),digest_size=POINT_BYTES).digest()
	while not crypto_core_ed25519_is_valid_point(digest):
		digest = blake2b(digest,digest_size=POINT_BYTES).digest()
	return Point(digest)
