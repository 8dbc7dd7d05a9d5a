from votingorg.db.orm import Hash
from votingorg.election.models import MODELS
from votingorg.exceptions import UnknownKind


class EntityStore:
    def __init__(self, contract, driver):
        self.hashes = {kind: Hash(contract, kind, driver=driver) for kind in MODELS.keys()}

    def _hash(self, kind):
        h = self.hashes.get(kind)
        if h is None:
            raise UnknownKind(kind=kind, known_kinds=list(self.hashes.keys()))
        return h

    def get(self, kind, address):
        """Returns the stored record, or None when there is none."""
        d = self._hash(kind)[address]
        if d is None:
            return None
        return MODELS[kind].from_dict(d)

    def resolve(self, kind, address):
        record = self.get(kind, address)
        if record is None:
            return MODELS[kind].not_found(address)
        return record

    def put(self, kind, address, record):
        self._hash(kind)[address] = record.to_dict()

    def remove(self, kind, address):
        del self._hash(kind)[address]
