from unittest import TestCase
from votingorg.election.models import Voter, Candidate, MODELS


class TestVoter(TestCase):
    def test_new_voter_is_pending(self):
        v = Voter(address='GA', name='A', ipfs='ipfsA', register_id=1)

        self.assertEqual(v.status, 'Pending')
        self.assertEqual(v.message, 'Currently your registration is pending')
        self.assertFalse(v.has_voted)
        self.assertTrue(v.found)
        self.assertFalse(v.approved)

    def test_not_found(self):
        v = Voter.not_found('GA')

        self.assertEqual(v.address, 'GA')
        self.assertEqual(v.ipfs, 'NotFound')
        self.assertEqual(v.name, '')
        self.assertEqual(v.message, '')
        self.assertEqual(v.register_id, 0)
        self.assertEqual(v.status, 'Rejected')
        self.assertFalse(v.has_voted)
        self.assertFalse(v.found)

    def test_dict_round_trip(self):
        v = Voter(address='GA', name='A', ipfs='ipfsA', register_id=7, status='Approved', message='ok',
                  has_voted=True)

        self.assertEqual(v.to_dict(), {
            'address': 'GA',
            'name': 'A',
            'ipfs': 'ipfsA',
            'register_id': 7,
            'status': 'Approved',
            'message': 'ok',
            'has_voted': True,
        })
        self.assertEqual(Voter.from_dict(v.to_dict()), v)

    def test_voter_never_equals_candidate(self):
        v = Voter.not_found('GA')
        c = Candidate.not_found('GA')

        self.assertNotEqual(v, c)


class TestCandidate(TestCase):
    def test_new_candidate_has_no_votes(self):
        c = Candidate(address='GC', name='C', ipfs='ipfsC', register_id=1)

        self.assertEqual(c.vote_count, 0)
        self.assertEqual(c.status, 'Pending')
        self.assertNotIn('has_voted', c.to_dict())

    def test_not_found_defaults_to_empty_address(self):
        c = Candidate.not_found()

        self.assertEqual(c.address, '')
        self.assertEqual(c.vote_count, 0)
        self.assertFalse(c.found)

    def test_models_by_kind(self):
        self.assertIs(MODELS['Voter'], Voter)
        self.assertIs(MODELS['Candidate'], Candidate)
