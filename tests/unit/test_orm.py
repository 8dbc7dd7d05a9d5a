from unittest import TestCase
from votingorg.db.driver import ContractDriver
from votingorg.db.orm import Datum, Variable, Hash

driver = ContractDriver()


class TestDatum(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_init(self):
        d = Datum('election', 'test', driver)
        self.assertEqual(d._key, driver.make_key('election', 'test'))


class TestVariable(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set(self):
        v = Variable('election', 'Owner', driver=driver)
        v.set('GOWNER')

        self.assertEqual(driver.get('election.Owner'), 'GOWNER')

    def test_get(self):
        driver.set('election.Owner', 'GOWNER')

        v = Variable('election', 'Owner', driver=driver)

        self.assertEqual(v.get(), 'GOWNER')

    def test_get_default(self):
        v = Variable('election', 'StartTime', driver=driver, default_value=0)

        self.assertEqual(v.get(), 0)

    def test_wrong_type_fails(self):
        v = Variable('election', 'StartTime', driver=driver, t=int)

        with self.assertRaises(AssertionError):
            v.set('soon')

    def test_right_type_passes(self):
        v = Variable('election', 'StartTime', driver=driver, t=int)
        v.set(5)

        self.assertEqual(v.get(), 5)

    def test_clear_returns_default(self):
        v = Variable('election', 'RegisteredVoters', driver=driver, t=list, default_value=[])
        v.set(['GA'])
        v.clear()

        self.assertEqual(v.get(), [])


class TestHash(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set(self):
        h = Hash('election', 'Voter', driver=driver)
        h['GA'] = {'name': 'A'}

        self.assertEqual(driver.get('election.Voter:GA'), {'name': 'A'})

    def test_get(self):
        driver.set('election.Voter:GA', {'name': 'A'})

        h = Hash('election', 'Voter', driver=driver)

        self.assertEqual(h['GA'], {'name': 'A'})

    def test_get_default(self):
        h = Hash('election', 'Voter', driver=driver, default_value=0)

        self.assertEqual(h['GA'], 0)

    def test_delete(self):
        h = Hash('election', 'Voter', driver=driver)
        h['GA'] = 1
        del h['GA']

        self.assertIsNone(h['GA'])

    def test_illegal_delimiter_fails(self):
        h = Hash('election', 'Voter', driver=driver)

        with self.assertRaises(AssertionError):
            h['G:A'] = 1

    def test_key_too_long_fails(self):
        h = Hash('election', 'Voter', driver=driver)

        with self.assertRaises(AssertionError):
            h['G' * 1025] = 1
