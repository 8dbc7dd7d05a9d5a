from unittest import TestCase
from votingorg.db.driver import CacheDriver, ContractDriver, InMemDriver


class TestCacheDriver(TestCase):
    def setUp(self):
        self.d = InMemDriver()
        self.d.flush()

        self.c = CacheDriver(self.d)

    def test_get_adds_to_read(self):
        self.c.get('thing')
        self.assertTrue('thing' in self.c.pending_reads)

    def test_set_adds_to_pending_writes(self):
        self.c.set('thing', 1234)
        self.assertEqual(self.c.pending_writes['thing'], 1234)

    def test_pending_write_is_visible_before_commit(self):
        self.c.set('thing', 1234)

        self.assertEqual(self.c.get('thing'), 1234)
        self.assertIsNone(self.d.get('thing'))

    def test_commit_puts_all_objects_in_pending_writes_to_db(self):
        self.c.set('thing1', 1234)
        self.c.set('thing2', 1235)
        self.c.set('thing3', 1236)

        self.assertIsNone(self.d.get('thing1'))
        self.assertIsNone(self.d.get('thing2'))
        self.assertIsNone(self.d.get('thing3'))

        self.c.commit()

        self.assertEqual(self.d.get('thing1'), 1234)
        self.assertEqual(self.d.get('thing2'), 1235)
        self.assertEqual(self.d.get('thing3'), 1236)

    def test_pending_delete_hides_stored_value(self):
        self.d.set('thing', 1)

        self.c.delete('thing')

        self.assertIsNone(self.c.get('thing'))
        self.assertEqual(self.d.get('thing'), 1)

    def test_commit_applies_deletes(self):
        self.d.set('thing', 1)

        self.c.delete('thing')
        self.c.commit()

        self.assertIsNone(self.d.get('thing'))

    def test_rollback_discards_pending_writes(self):
        self.d.set('thing', 1)

        self.c.set('thing', 2)
        self.c.set('other', 3)
        self.c.rollback()

        self.assertEqual(self.c.get('thing'), 1)
        self.assertIsNone(self.c.get('other'))
        self.assertEqual(self.d.get('thing'), 1)

    def test_clear_pending_state_resets_all_variables(self):
        self.c.set('thing1', 1234)
        self.c.get('something')

        self.c.clear_pending_state()

        self.assertEqual(self.c.pending_writes, {})
        self.assertEqual(self.c.pending_reads, {})

    def test_flush_clears_backing_store(self):
        self.d.set('thing', 1)
        self.c.set('other', 2)

        self.c.flush()

        self.assertEqual(self.d.keys(), [])
        self.assertEqual(self.c.pending_writes, {})


class TestContractDriver(TestCase):
    def setUp(self):
        self.d = InMemDriver()
        self.c = ContractDriver(driver=self.d)

    def test_default_backing_store_is_in_memory(self):
        self.assertIsInstance(ContractDriver().driver, InMemDriver)

    def test_make_key(self):
        self.assertEqual(self.c.make_key('election', 'Owner'), 'election.Owner')
        self.assertEqual(self.c.make_key('election', 'Voter', ['GA']), 'election.Voter:GA')

    def test_get_var_set_var(self):
        self.c.set_var('election', 'Voter', ['GA'], value={'name': 'A'})

        self.assertEqual(self.c.get_var('election', 'Voter', ['GA']), {'name': 'A'})
        self.assertEqual(self.c.get('election.Voter:GA'), {'name': 'A'})

    def test_items_merges_pending_and_stored(self):
        self.d.set('election.Voter:GA', 1)
        self.d.set('election.Voter:GB', 2)
        self.c.set('election.Voter:GC', 3)
        self.c.set('election.Voter:GB', 20)

        self.assertEqual(self.c.items('election.Voter:'), {
            'election.Voter:GA': 1,
            'election.Voter:GB': 20,
            'election.Voter:GC': 3,
        })

    def test_items_skips_pending_deletes(self):
        self.d.set('election.Voter:GA', 1)
        self.d.set('election.Voter:GB', 2)
        self.c.delete('election.Voter:GA')

        self.assertEqual(self.c.keys('election.Voter:'), ['election.Voter:GB'])
        self.assertEqual(self.c.values('election.Voter:'), [2])
