from votingorg.db.orm import Variable
from votingorg import config
from votingorg.exceptions import Unauthorized


class AdminGate:
    def __init__(self, contract, driver):
        self.owner = Variable(contract, config.OWNER, driver=driver, t=str)

    def configure(self, owner):
        self.owner.set(owner)

    def require_owner(self, caller):
        owner = self.owner.get()

        # An unset owner matches nobody, not even the empty address
        if owner is None or caller != owner:
            raise Unauthorized(caller=caller)

    def set_owner(self, caller, new_owner):
        self.require_owner(caller)
        self.owner.set(new_owner)
