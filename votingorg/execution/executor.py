from votingorg.execution import runtime
from votingorg.db.driver import ContractDriver
from votingorg.election.contract import Election, is_exported
from votingorg.exceptions import VotingError
from votingorg.stdlib.time import to_timestamp, now as wall_clock
from votingorg.logger import get_logger
from votingorg import config
from copy import deepcopy
import traceback

log = get_logger('EXECUTOR')


class Executor:
    def __init__(self, driver=None, reject_sets_rejected=None, record_voted_voters=None):
        self.driver = driver

        if not self.driver:
            self.driver = ContractDriver()

        self.reject_sets_rejected = reject_sets_rejected
        self.record_voted_voters = record_voted_voters

    def election(self, name):
        return Election(name, self.driver,
                        context=runtime.rt.context,
                        reject_sets_rejected=self.reject_sets_rejected,
                        record_voted_voters=self.record_voted_voters)

    def execute(self, sender, contract_name, function_name, kwargs,
                environment={},
                auto_commit=True) -> dict:

        status_code = 0
        writes = {}

        try:
            assert not function_name.startswith(config.PRIVATE_METHOD_PREFIX), 'Private method not callable.'

            now = environment.get('now')
            now = wall_clock() if now is None else to_timestamp(now)

            runtime.rt.set_up(sender=sender, this=contract_name, now=now)

            election = self.election(contract_name)

            func = getattr(election, function_name, None)
            assert func is not None and is_exported(func), \
                'Function {} is not exported by the election.'.format(function_name)

            log.debug(f'{sender} -> {contract_name}.{function_name}({kwargs}) at {now}')

            result = func(**kwargs)
            writes = deepcopy(self.driver.pending_writes)

            if auto_commit:
                self.driver.commit()
        except VotingError as e:
            result = e
            status_code = 1
            log.warning(f'{contract_name}.{function_name} aborted: {e}')
            if auto_commit:
                self.driver.clear_pending_state()
        except Exception as e:
            result = e
            status_code = 1
            log.error(str(e))
            log.error(traceback.format_exc())
            if auto_commit:
                self.driver.clear_pending_state()

        output = {
            'status_code': status_code,
            'result': result,
            'writes': writes,
        }

        runtime.rt.clean_up()

        return output
