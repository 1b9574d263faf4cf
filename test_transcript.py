from group import G, Scalar
from transcript import Transcript
import unittest

def sample(label='test'):
	tr = Transcript(label)
	tr.append(b'data',b'\x01\x02\x03')
	tr.append_point(b'G',G)
	tr.append_scalar(b's',Scalar(5))
	tr.append_u64(b'n',64)
	return tr

class TestTranscript(unittest.TestCase):
	def test_deterministic(self):
		tr1 = sample()
		tr2 = sample()
		self.assertEqual(tr1.state,tr2.state)
		self.assertEqual(tr1.challenge(b'x'),tr2.challenge(b'x'))
		self.assertEqual(tr1.challenge(b'y'),tr2.challenge(b'y'))

	def test_domain_separation(self):
		self.assertNotEqual(sample('one').challenge(b'x'),sample('two').challenge(b'x'))
		self.assertNotEqual(sample().challenge(b'x'),sample().challenge(b'y'))

		tr1 = Transcript('test')
		tr1.append(b'a',b'b')
		tr2 = Transcript('test')
		tr2.append(b'b',b'a')
		self.assertNotEqual(tr1.challenge(b'x'),tr2.challenge(b'x'))

		# Length prefixes keep label and data boundaries unambiguous
		tr1 = Transcript('test')
		tr1.append(b'ab',b'c')
		tr2 = Transcript('test')
		tr2.append(b'a',b'bc')
		self.assertNotEqual(tr1.state,tr2.state)

	def test_order_matters(self):
		tr1 = Transcript('test')
		tr1.append(b'A',b'1')
		tr1.append(b'B',b'2')
		tr2 = Transcript('test')
		tr2.append(b'B',b'2')
		tr2.append(b'A',b'1')
		self.assertNotEqual(tr1.challenge(b'x'),tr2.challenge(b'x'))

	def test_successive_challenges(self):
		tr = sample()
		x = tr.challenge(b'x')
		self.assertNotEqual(tr.challenge(b'x'),x)

	def test_copy(self):
		tr = sample()
		clone = tr.copy()
		self.assertEqual(tr.challenge(b'x'),clone.challenge(b'x'))
		clone.append(b'extra',b'')
		self.assertNotEqual(tr.state,clone.state)

	def test_bad_input(self):
		tr = Transcript('test')
		with self.assertRaises(TypeError):
			tr.append(b'label',5)
		with self.assertRaises(TypeError):
			tr.append_point(b'label',b'\x00'*32)
		with self.assertRaises(TypeError):
			tr.append_scalar(b'label',5)
		with self.assertRaises(ValueError):
			tr.append_u64(b'label',1 << 64)

if __name__ == '__main__':
	unittest.main()
