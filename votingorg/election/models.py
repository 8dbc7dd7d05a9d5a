from votingorg import config


class Registrant:
    """
    Common record shape for voters and candidates. Records travel through
    storage as plain dicts (see to_dict / from_dict).
    """
    kind = None
    fields = ('address', 'name', 'ipfs', 'register_id', 'status', 'message')

    def __init__(self, address, name, ipfs, register_id, status=config.PENDING, message=config.PENDING_MESSAGE):
        self.address = address
        self.name = name
        self.ipfs = ipfs
        self.register_id = register_id
        self.status = status
        self.message = message

    @classmethod
    def not_found(cls, address=''):
        """The placeholder returned by queries for an address with no record."""
        return cls(address=address, name='', ipfs=config.NOT_FOUND, register_id=0,
                   status=config.REJECTED, message='')

    @property
    def found(self):
        return self.ipfs != config.NOT_FOUND

    @property
    def approved(self):
        return self.status == config.APPROVED

    def to_dict(self):
        return {f: getattr(self, f) for f in self.fields}

    @classmethod
    def from_dict(cls, d):
        return cls(**{f: d[f] for f in cls.fields})

    def __eq__(self, other):
        if type(other) != type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__,
            ', '.join('{}={!r}'.format(f, getattr(self, f)) for f in self.fields)
        )


class Voter(Registrant):
    kind = config.VOTER
    fields = Registrant.fields + ('has_voted',)

    def __init__(self, address, name, ipfs, register_id, status=config.PENDING, message=config.PENDING_MESSAGE,
                 has_voted=False):
        super().__init__(address, name, ipfs, register_id, status=status, message=message)
        self.has_voted = has_voted


class Candidate(Registrant):
    kind = config.CANDIDATE
    fields = Registrant.fields + ('vote_count',)

    def __init__(self, address, name, ipfs, register_id, status=config.PENDING, message=config.PENDING_MESSAGE,
                 vote_count=0):
        super().__init__(address, name, ipfs, register_id, status=status, message=message)
        self.vote_count = vote_count


MODELS = {
    config.VOTER: Voter,
    config.CANDIDATE: Candidate,
}
