from generators import commit
from group import l, random_scalar
import rangeproof
import serialize
import unittest

class TestSerialize(unittest.TestCase):
	@classmethod
	def setUpClass(cls):
		cls.r = random_scalar()
		cls.V = commit(31337,cls.r)
		cls.proof = rangeproof.prove(31337,cls.V,cls.r)
		cls.data = serialize.serialize(cls.proof)

	def test_round_trip(self):
		self.assertEqual(serialize.deserialize(self.data),self.proof)
		self.assertEqual(serialize.serialize(serialize.deserialize(self.data)),self.data)

	def test_size(self):
		self.assertEqual(len(self.data),672)
		self.assertEqual(serialize.proof_size(),672)
		self.assertEqual(serialize.proof_size(0),288)

	def test_layout(self):
		self.assertEqual(self.data[:32],self.proof.A.to_bytes())
		self.assertEqual(self.data[96:128],self.proof.T2.to_bytes())
		self.assertEqual(self.data[128:160],self.proof.taux.to_bytes())
		self.assertEqual(int.from_bytes(self.data[192:224],'little'),int(self.proof.tx))
		self.assertEqual(self.data[224:256],self.proof.ip.L[0].to_bytes())
		self.assertEqual(self.data[256:288],self.proof.ip.R[0].to_bytes())
		self.assertEqual(self.data[-64:-32],self.proof.ip.a.to_bytes())
		self.assertEqual(self.data[-32:],self.proof.ip.b.to_bytes())

	def test_bad_length(self):
		for size in [0, 32, 287, 288 + 32, 671, 673]:
			with self.assertRaises(serialize.InvalidProofLength):
				serialize.deserialize(bytes(size))
		with self.assertRaises(TypeError):
			serialize.deserialize('proof')

	def test_bad_encoding(self):
		# Non-canonical point
		data = b'\xff'*32 + self.data[32:]
		with self.assertRaises(serialize.InvalidProofEncoding):
			serialize.deserialize(data)

		# Scalar not below the group order
		data = self.data[:128] + l.to_bytes(32,'little') + self.data[160:]
		with self.assertRaises(serialize.InvalidProofEncoding):
			serialize.deserialize(data)

	def test_missing_rounds(self):
		# Structurally valid but with no inner product rounds
		data = self.data[:224] + self.data[-64:]
		proof = serialize.deserialize(data)
		self.assertEqual(len(proof.ip.L),0)
		self.assertFalse(rangeproof.verify(proof,self.V))
		self.assertFalse(rangeproof.verify(data,self.V))

	def test_byte_flips(self):
		self.assertTrue(rangeproof.verify(self.data,self.V))

		# A few positions inside every 32-byte element
		for field in range(len(self.data) // 32):
			for k in [0, 17, 31]:
				i = 32*field + k
				data = bytearray(self.data)
				data[i] ^= 0x01
				self.assertFalse(rangeproof.verify(bytes(data),self.V),'byte {}'.format(i))

if __name__ == '__main__':
	unittest.main()
