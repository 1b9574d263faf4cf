# Scalar and point vectors
#
# All arithmetic is elementwise modulo the group order. Binary operations
# require equal lengths and raise `LengthMismatch` otherwise.

from group import LengthMismatch, Point, Scalar

class ScalarVector:
	def __init__(self,scalars):
		scalars = list(scalars)
		for s in scalars:
			if not isinstance(s,Scalar):
				raise TypeError('Bad type for scalar vector element!')
		self.scalars = scalars

	def _check(self,other):
		if not isinstance(other,ScalarVector):
			raise TypeError('Bad type for scalar vector operand!')
		if not len(self) == len(other):
			raise LengthMismatch('Scalar vector length mismatch!')

	def __len__(self):
		return len(self.scalars)

	def __iter__(self):
		return iter(self.scalars)

	def __getitem__(self,i):
		if isinstance(i,slice):
			return ScalarVector(self.scalars[i])
		return self.scalars[i]

	def __setitem__(self,i,s):
		if not isinstance(s,Scalar):
			raise TypeError('Bad type for scalar vector element!')
		self.scalars[i] = s

	def append(self,s):
		if not isinstance(s,Scalar):
			raise TypeError('Bad type for scalar vector element!')
		self.scalars.append(s)

	def extend(self,other):
		for s in other:
			self.append(s)

	def __add__(self,other):
		self._check(other)
		return ScalarVector([a + b for a,b in zip(self,other)])

	def __sub__(self,other):
		self._check(other)
		return ScalarVector([a - b for a,b in zip(self,other)])

	# Scale by a scalar, or Hadamard product with a vector
	def __mul__(self,other):
		if isinstance(other,Scalar):
			return ScalarVector([a*other for a in self])
		if isinstance(other,ScalarVector):
			self._check(other)
			return ScalarVector([a*b for a,b in zip(self,other)])
		return NotImplemented

	def __rmul__(self,other):
		if isinstance(other,Scalar):
			return self*other
		return NotImplemented

	def __neg__(self):
		return ScalarVector([-a for a in self])

	def __eq__(self,other):
		if isinstance(other,ScalarVector):
			return self.scalars == other.scalars
		return NotImplemented

	def __repr__(self):
		return 'ScalarVector({})'.format(self.scalars)

	def sum(self):
		result = Scalar(0)
		for s in self:
			result += s
		return result

	# Batch inversion: one field inversion plus 3(n-1) multiplications
	def invert(self):
		n = len(self)
		if n == 0:
			return ScalarVector([])
		prefix = [self.scalars[0]]
		for i in range(1,n):
			prefix.append(prefix[-1]*self.scalars[i])
		inverse = prefix[-1].invert()
		result = [None]*n
		for i in range(n - 1,0,-1):
			result[i] = inverse*prefix[i - 1]
			inverse *= self.scalars[i]
		result[0] = inverse
		return ScalarVector(result)

class PointVector:
	def __init__(self,points):
		points = list(points)
		for P in points:
			if not isinstance(P,Point):
				raise TypeError('Bad type for point vector element!')
		self.points = points

	def __len__(self):
		return len(self.points)

	def __iter__(self):
		return iter(self.points)

	def __getitem__(self,i):
		if isinstance(i,slice):
			return PointVector(self.points[i])
		return self.points[i]

	def __setitem__(self,i,P):
		if not isinstance(P,Point):
			raise TypeError('Bad type for point vector element!')
		self.points[i] = P

	def append(self,P):
		if not isinstance(P,Point):
			raise TypeError('Bad type for point vector element!')
		self.points.append(P)

	def extend(self,other):
		for P in other:
			self.append(P)

	def __add__(self,other):
		if not isinstance(other,PointVector):
			return NotImplemented
		if not len(self) == len(other):
			raise LengthMismatch('Point vector length mismatch!')
		return PointVector([P + Q for P,Q in zip(self,other)])

	# Scale every point, or multiply elementwise by a scalar vector
	def __mul__(self,other):
		if isinstance(other,Scalar):
			return PointVector([P*other for P in self])
		if isinstance(other,ScalarVector):
			if not len(self) == len(other):
				raise LengthMismatch('Point/scalar vector length mismatch!')
			return PointVector([P*s for P,s in zip(self,other)])
		return NotImplemented

	def __eq__(self,other):
		if isinstance(other,PointVector):
			return self.points == other.points
		return NotImplemented

	def __repr__(self):
		return 'PointVector({})'.format(self.points)

# Inner product of two scalar vectors
def inner_product(a,b):
	if not isinstance(a,ScalarVector) or not isinstance(b,ScalarVector):
		raise TypeError('Bad type for inner product operand!')
	if not len(a) == len(b):
		raise LengthMismatch('Inner product length mismatch!')
	result = Scalar(0)
	for x,y in zip(a,b):
		result += x*y
	return result

# [1, x, x^2, ..., x^(n-1)]
def powers(x,n):
	if not isinstance(x,Scalar):
		raise TypeError('Bad type for power base!')
	if n < 0:
		raise ValueError('Bad power vector length!')
	result = ScalarVector([])
	current = Scalar(1)
	for _ in range(n):
		result.append(current)
		current *= x
	return result
