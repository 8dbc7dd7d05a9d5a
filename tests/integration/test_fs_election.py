from unittest import TestCase
from votingorg.client import ElectionClient
from votingorg.db.driver import FSDriver
from votingorg.exceptions import AlreadyVoted, Unauthorized
import tempfile
import shutil
import h5py

OWNER = 'GOWNER'


class TestElectionOnDisk(TestCase):
    def setUp(self):
        self.root = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.root, ignore_errors=True)

    def client(self, **kwargs):
        return ElectionClient(signer=OWNER, driver=FSDriver(root=self.root), environment={'now': 1}, **kwargs)

    def test_state_survives_restart(self):
        c = self.client()
        c.init(owner=OWNER)
        c.register_voter(name='A', ipfs='ipfsA', address='GA')
        c.register_candidate(name='X', ipfs='ipfsX', address='GX')
        c.approve_voter(address='GA', message='ok')
        c.approve_candidate(address='GX', message='ok')
        c.set_voting_period(start_time=5, end_time=10)
        c.vote(candidate_address='GX', voter_address='GA', environment={'now': 6})

        restarted = self.client()

        self.assertTrue(restarted.get_voter(address='GA').has_voted)
        self.assertEqual(restarted.get_winning_candidate(environment={'now': 11}).address, 'GX')

        with self.assertRaises(AlreadyVoted):
            restarted.vote(candidate_address='GX', voter_address='GA', environment={'now': 7})

        self.assertEqual(restarted.get_candidate(address='GX').vote_count, 1)

    def snapshot(self):
        d = FSDriver(root=self.root)
        return {k: d.get(k) for k in d.keys()}

    def test_failed_call_leaves_disk_untouched(self):
        c = self.client()
        c.init(owner=OWNER)
        c.register_voter(name='A', ipfs='ipfsA', address='GA')

        before = self.snapshot()

        with self.assertRaises(Unauthorized):
            c.approve_voter(address='GA', message='ok', signer='GA')

        self.assertEqual(self.snapshot(), before)
        self.assertEqual(before['election.Voter:GA']['status'], 'Pending')

    def test_election_is_stored_as_one_hdf5_file(self):
        c = self.client()
        c.init(owner=OWNER)
        c.register_voter(name='A', ipfs='ipfsA', address='GA')

        path = self.root + '/contract_state/election'

        self.assertTrue(h5py.is_hdf5(path))
        with h5py.File(path, 'r') as f:
            self.assertIn('value', f['Voter/GA'].attrs)
            self.assertIn('value', f['Owner'].attrs)

    def test_reset_on_disk(self):
        c = self.client()
        c.init(owner=OWNER)
        c.register_voter(name='A', ipfs='ipfsA', address='GA')
        c.reset_contract()

        restarted = self.client()

        self.assertFalse(restarted.get_voter(address='GA').found)
        self.assertEqual(restarted.get_var('VoterIdCounter'), 1)
