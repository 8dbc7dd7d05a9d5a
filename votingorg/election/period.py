from votingorg.db.orm import Variable
from votingorg.stdlib.time import to_timestamp
from votingorg import config
from votingorg.exceptions import InvalidPeriod


class VotingPeriodGate:
    def __init__(self, contract, driver, admin):
        self.admin = admin
        self.start_time = Variable(contract, config.START_TIME, driver=driver, t=int, default_value=0)
        self.end_time = Variable(contract, config.END_TIME, driver=driver, t=int, default_value=0)

    def set_period(self, caller, start, end):
        self.admin.require_owner(caller)

        # Accepts ints, datetimes and ISO 8601 strings
        start = to_timestamp(start)
        end = to_timestamp(end)

        if not start < end:
            raise InvalidPeriod(start=start, end=end)

        self.start_time.set(start)
        self.end_time.set(end)

    def window(self):
        return self.start_time.get(), self.end_time.get()

    def is_active(self, now):
        start, end = self.window()
        return start <= now <= end

    def has_ended(self, now):
        return now > self.end_time.get()

    def clear(self):
        self.start_time.set(0)
        self.end_time.set(0)
