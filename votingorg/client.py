from votingorg.execution.executor import Executor
from votingorg.election.contract import Election
from votingorg.db.driver import ContractDriver
from votingorg.stdlib.time import now as wall_clock
from functools import partial

from . import config


class ElectionClient:
    """
    Public surface of one election. Each exported election operation is
    bound as a method that accepts its own keyword arguments plus optional
    ``signer`` and ``environment`` overrides, e.g.

        client = ElectionClient(signer='admin')
        client.init(owner='admin')
        client.register_voter(name='A', ipfs='ipfsA', address='GA...')
        client.approve_voter(address='GA...', message='welcome')
        client.vote(candidate_address='GC...', voter_address='GA...', environment={'now': 7})

    Timestamps (``start_time``, ``end_time``, ``environment['now']``) may be
    ints, datetimes or ISO 8601 strings. A failed call raises the election
    error after its writes were discarded.
    """
    def __init__(self, signer=config.DEFAULT_SIGNER,
                 driver=None,
                 name=config.DEFAULT_ELECTION,
                 environment=None,
                 reject_sets_rejected=None,
                 record_voted_voters=None):

        if driver is None:
            driver = ContractDriver()
        elif not isinstance(driver, ContractDriver):
            driver = ContractDriver(driver=driver)

        self.raw_driver = driver
        self.executor = Executor(driver=self.raw_driver,
                                 reject_sets_rejected=reject_sets_rejected,
                                 record_voted_voters=record_voted_voters)
        self.signer = signer
        self.name = name
        self.environment = environment or {}

        # set up virtual functions
        for func in Election.exports():
            setattr(self, func, partial(self._abstract_function_call, func=func))

    def now(self):
        return wall_clock()

    def flush(self):
        self.raw_driver.flush()

    def get_var(self, variable, arguments=[]):
        return self.raw_driver.get_var(self.name, variable, arguments)

    def _abstract_function_call(self, func, signer=None, environment=None, **kwargs):
        signer = self.signer if signer is None else signer

        env = dict(self.environment)
        env.update(environment or {})

        if env.get('now') is None:
            env['now'] = self.now()

        output = self.executor.execute(sender=signer,
                                       contract_name=self.name,
                                       function_name=func,
                                       kwargs=kwargs,
                                       environment=env)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']
