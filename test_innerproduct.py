from group import Scalar, hash_to_point, multiexp, random_scalar
import innerproduct
from transcript import Transcript
import unittest
from vector import PointVector, ScalarVector, inner_product

class TestInnerProduct(unittest.TestCase):
	def make_statement(self,n):
		Gi = PointVector([hash_to_point('test Gi',i) for i in range(n)])
		Hi = PointVector([hash_to_point('test Hi',i) for i in range(n)])
		U = hash_to_point('test U')
		a = ScalarVector([random_scalar() for _ in range(n)])
		b = ScalarVector([random_scalar() for _ in range(n)])
		P = multiexp(a,Gi) + multiexp(b,Hi) + U*inner_product(a,b)
		return Gi,Hi,U,a,b,P

	def test_complete(self):
		for n in [1, 2, 8]:
			Gi,Hi,U,a,b,P = self.make_statement(n)
			proof = innerproduct.prove(Transcript('test'),Gi,Hi,U,a,b)
			self.assertEqual(1 << len(proof.L),n)
			innerproduct.verify(Transcript('test'),Gi,Hi,U,P,proof)

	def test_transcript_continues(self):
		Gi,Hi,U,a,b,P = self.make_statement(4)
		tr_prover = Transcript('test')
		proof = innerproduct.prove(tr_prover,Gi,Hi,U,a,b)
		tr_verifier = Transcript('test')
		innerproduct.verify(tr_verifier,Gi,Hi,U,P,proof)
		self.assertEqual(tr_prover.state,tr_verifier.state)

	def test_bad_statement(self):
		Gi,Hi,U,a,b,P = self.make_statement(8)
		proof = innerproduct.prove(Transcript('test'),Gi,Hi,U,a,b)
		with self.assertRaises(ArithmeticError):
			innerproduct.verify(Transcript('test'),Gi,Hi,U,P + U,proof)
		with self.assertRaises(ArithmeticError):
			innerproduct.verify(Transcript('other'),Gi,Hi,U,P,proof)

		proof.b += Scalar(1)
		with self.assertRaises(ArithmeticError):
			innerproduct.verify(Transcript('test'),Gi,Hi,U,P,proof)

	def test_bad_sizes(self):
		Gi,Hi,U,a,b,P = self.make_statement(8)
		with self.assertRaises(ValueError):
			innerproduct.prove(Transcript('test'),Gi[:6],Hi[:6],U,a[:6],b[:6])
		with self.assertRaises(IndexError):
			innerproduct.prove(Transcript('test'),Gi,Hi,U,a,b[:4])

		proof = innerproduct.prove(Transcript('test'),Gi[:4],Hi[:4],U,a[:4],b[:4])
		with self.assertRaises(IndexError):
			innerproduct.verify(Transcript('test'),Gi,Hi,U,P,proof)

	def test_bad_proof_data(self):
		Gi,Hi,U,a,b,P = self.make_statement(2)
		proof = innerproduct.prove(Transcript('test'),Gi,Hi,U,a,b)
		with self.assertRaises(IndexError):
			innerproduct.InnerProductProof(proof.L,PointVector([]),proof.a,proof.b)
		with self.assertRaises(TypeError):
			innerproduct.InnerProductProof(proof.L,proof.R,proof.a,1)

if __name__ == '__main__':
	unittest.main()
