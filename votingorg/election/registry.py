from votingorg.db.orm import Variable
from votingorg import config
from votingorg.exceptions import UnknownKind

COUNTERS = {
    config.VOTER: config.VOTER_ID_COUNTER,
    config.CANDIDATE: config.CANDIDATE_ID_COUNTER,
}


class Registry:
    """
    Ordered address lists and registration id counters of one election.

    Lists are append only and keep duplicates. Each append rewrites the
    whole sequence, so appends are only safe while calls are serialized.
    """
    def __init__(self, contract, driver):
        self.lists = {
            name: Variable(contract, name, driver=driver, t=list, default_value=[])
            for name in config.REGISTRY_LISTS
        }
        self.counters = {
            kind: Variable(contract, name, driver=driver, t=int, default_value=config.FIRST_ID)
            for kind, name in COUNTERS.items()
        }

    def _counter(self, kind):
        counter = self.counters.get(kind)
        if counter is None:
            raise UnknownKind(kind=kind, known_kinds=list(self.counters.keys()))
        return counter

    def _list(self, name):
        assert name in self.lists, 'Unknown registry list {}.'.format(name)
        return self.lists[name]

    def next_id(self, kind):
        counter = self._counter(kind)
        current = counter.get()

        assert current < config.U256_MAX, 'Id counter for {} exhausted.'.format(kind)

        counter.set(current + 1)
        return current

    def replace(self, name, addresses):
        self._list(name).set(list(addresses))

    def append(self, name, address):
        addresses = self.all(name)
        addresses.append(address)
        self.replace(name, addresses)

    def all(self, name):
        # Always a copy, callers may mutate it freely
        return list(self._list(name).get())

    def clear(self, name):
        self._list(name).clear()

    def clear_all(self):
        for name in self.lists.keys():
            self.clear(name)

    def reset_counters(self):
        for counter in self.counters.values():
            counter.set(config.FIRST_ID)
