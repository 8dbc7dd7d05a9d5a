from votingorg.election.admin import AdminGate
from votingorg.election.entities import EntityStore
from votingorg.election.models import Candidate, MODELS
from votingorg.election.period import VotingPeriodGate
from votingorg.election.registry import Registry
from votingorg.db.orm import Variable
from votingorg.execution.runtime import rt
from votingorg.exceptions import (
    AlreadyInitialized, AlreadyVoted, NotApproved, NotFound, UnknownKind, VotingNotActive, VotingStillActive
)
from votingorg.logger import get_logger
from votingorg import config

log = get_logger('Election')

REGISTERED = {
    config.VOTER: config.REGISTERED_VOTERS,
    config.CANDIDATE: config.REGISTERED_CANDIDATES,
}

APPROVED = {
    config.VOTER: config.APPROVED_VOTERS,
    config.CANDIDATE: config.APPROVED_CANDIDATES,
}


def export(func):
    setattr(func, config.EXPORT_ATTRIBUTE, True)
    return func


def is_exported(func):
    return getattr(func, config.EXPORT_ATTRIBUTE, False)


class Election:
    """
    Registration, approval and voting state of one election.

    Every piece of state lives in the driver under keys prefixed with the
    election name. Mutating operations assume they run inside an executor
    call so that a failure discards all of their writes; caller and
    timestamp come from the runtime context of that call.
    """
    def __init__(self, name, driver, context=rt.context,
                 reject_sets_rejected=None, record_voted_voters=None):
        assert name and config.INDEX_SEPARATOR not in name and config.DELIMITER not in name, \
            'Illegal election name {!r}.'.format(name)

        self.name = name
        self.driver = driver
        self.ctx = context

        if reject_sets_rejected is None:
            reject_sets_rejected = config.REJECT_SETS_REJECTED
        if record_voted_voters is None:
            record_voted_voters = config.RECORD_VOTED_VOTERS

        self.reject_sets_rejected = reject_sets_rejected
        self.record_voted_voters = record_voted_voters

        self.initialized = Variable(name, config.INITIALIZED, driver=driver, t=bool, default_value=False)
        self.registry = Registry(name, driver)
        self.entities = EntityStore(name, driver)
        self.admin = AdminGate(name, driver)
        self.period = VotingPeriodGate(name, driver, self.admin)

    @classmethod
    def exports(cls):
        return sorted(name for name, attr in vars(cls).items() if callable(attr) and is_exported(attr))

    def _require(self, kind, address):
        if kind not in MODELS:
            raise UnknownKind(kind=kind, known_kinds=list(MODELS.keys()))

        record = self.entities.get(kind, address)
        if record is None:
            raise NotFound(kind=kind, address=address)
        return record

    # Setup and administration

    @export
    def init(self, owner):
        if self.initialized.get():
            raise AlreadyInitialized(name=self.name)

        self.admin.configure(owner)
        self.registry.reset_counters()
        self.initialized.set(True)

        log.info(f'{self.name} initialized with owner {owner}')

    @export
    def change_owner(self, new_owner):
        self.admin.set_owner(self.ctx.caller, new_owner)
        log.audit(f'{self.name} owner changed to {new_owner} by {self.ctx.caller}')

    @export
    def set_voting_period(self, start_time, end_time):
        self.period.set_period(self.ctx.caller, start_time, end_time)
        log.info(f'{self.name} voting window set to [{start_time}, {end_time}]')

    @export
    def reset_contract(self):
        self.admin.require_owner(self.ctx.caller)

        for address in self.registry.all(config.REGISTERED_VOTERS):
            self.entities.remove(config.VOTER, address)

        for address in self.registry.all(config.REGISTERED_CANDIDATES):
            self.entities.remove(config.CANDIDATE, address)

        self.registry.clear_all()
        self.registry.reset_counters()
        self.period.clear()

        log.audit(f'{self.name} reset by {self.ctx.caller}')

    # Registration

    def register(self, kind, name, ipfs, address):
        model = MODELS.get(kind)
        if model is None:
            raise UnknownKind(kind=kind, known_kinds=list(MODELS.keys()))

        record = model(address=address, name=name, ipfs=ipfs, register_id=self.registry.next_id(kind))

        # Re-registering replaces the record and appends the address again
        self.entities.put(kind, address, record)
        self.registry.append(REGISTERED[kind], address)

        log.info(f'{kind} {address} registered with id {record.register_id}')
        return record.register_id

    @export
    def register_voter(self, name, ipfs, address):
        return self.register(config.VOTER, name, ipfs, address)

    @export
    def register_candidate(self, name, ipfs, address):
        return self.register(config.CANDIDATE, name, ipfs, address)

    def approve(self, kind, caller, address, message):
        self.admin.require_owner(caller)

        record = self._require(kind, address)
        record.status = config.APPROVED
        record.message = message

        self.entities.put(kind, address, record)
        self.registry.append(APPROVED[kind], address)

        log.info(f'{kind} {address} approved')

    @export
    def approve_voter(self, address, message):
        self.approve(config.VOTER, self.ctx.caller, address, message)

    @export
    def approve_candidate(self, address, message):
        self.approve(config.CANDIDATE, self.ctx.caller, address, message)

    def reject(self, kind, caller, address, message):
        self.admin.require_owner(caller)

        record = self._require(kind, address)

        # Rejection keeps the Approved status unless configured otherwise
        record.status = config.REJECTED if self.reject_sets_rejected else config.APPROVED
        record.message = message

        self.entities.put(kind, address, record)

        log.info(f'{kind} {address} rejected (status {record.status})')

    @export
    def reject_voter(self, address, message):
        self.reject(config.VOTER, self.ctx.caller, address, message)

    @export
    def reject_candidate(self, address, message):
        self.reject(config.CANDIDATE, self.ctx.caller, address, message)

    def update_profile(self, kind, name, ipfs, address):
        record = self._require(kind, address)
        record.name = name
        record.ipfs = ipfs

        self.entities.put(kind, address, record)

    @export
    def update_voter(self, name, ipfs, address):
        self.update_profile(config.VOTER, name, ipfs, address)

    @export
    def update_candidate(self, name, ipfs, address):
        self.update_profile(config.CANDIDATE, name, ipfs, address)

    # Voting

    @export
    def vote(self, candidate_address, voter_address):
        now = self.ctx.now

        if not self.period.is_active(now):
            start, end = self.period.window()
            raise VotingNotActive(now=now, start=start, end=end)

        voter = self._require(config.VOTER, voter_address)
        if not voter.approved:
            raise NotApproved(kind=config.VOTER, address=voter_address, status=voter.status)
        if voter.has_voted:
            raise AlreadyVoted(address=voter_address)

        candidate = self._require(config.CANDIDATE, candidate_address)
        if not candidate.approved:
            raise NotApproved(kind=config.CANDIDATE, address=candidate_address, status=candidate.status)

        voter.has_voted = True
        candidate.vote_count += 1

        self.entities.put(config.CANDIDATE, candidate_address, candidate)
        self.entities.put(config.VOTER, voter_address, voter)

        voted = self.registry.all(config.VOTED_VOTERS)
        voted.append(voter_address)

        # The appended copy is only written back when explicitly enabled
        if self.record_voted_voters:
            self.registry.replace(config.VOTED_VOTERS, voted)

        log.debug(f'{voter_address} voted for {candidate_address}')

    # Queries

    def _resolve_all(self, kind, list_name):
        records = []
        for address in self.registry.all(list_name):
            record = self.entities.resolve(kind, address)
            if record.found:
                records.append(record)
        return records

    @export
    def get_all_registered_voters(self):
        return self._resolve_all(config.VOTER, config.REGISTERED_VOTERS)

    @export
    def get_all_registered_candidates(self):
        return self._resolve_all(config.CANDIDATE, config.REGISTERED_CANDIDATES)

    @export
    def get_all_approved_voters(self):
        return self._resolve_all(config.VOTER, config.APPROVED_VOTERS)

    @export
    def get_all_approved_candidates(self):
        return self._resolve_all(config.CANDIDATE, config.APPROVED_CANDIDATES)

    @export
    def get_voter(self, address):
        return self.entities.resolve(config.VOTER, address)

    @export
    def get_candidate(self, address):
        return self.entities.resolve(config.CANDIDATE, address)

    @export
    def get_all_voters_who_voted(self):
        return self.registry.all(config.VOTED_VOTERS)

    @export
    def get_current_voting_status(self):
        leader = Candidate.not_found()

        for address in self.registry.all(config.REGISTERED_CANDIDATES):
            candidate = self.entities.resolve(config.CANDIDATE, address)

            # Strict comparison, the first candidate seen keeps a tie
            if leader.vote_count < candidate.vote_count:
                leader = candidate

        return leader

    @export
    def get_winning_candidate(self):
        now = self.ctx.now

        if not self.period.has_ended(now):
            raise VotingStillActive(now=now, end=self.period.end_time.get())

        return self.get_current_voting_status()

    @export
    def get_voting_time(self):
        return self.period.window()
