class Context:
    """
    Identity and clock facts of the call being executed. The executor
    replaces the base state before every call, so an election operation
    only ever sees the caller and timestamp of its own call.
    """
    def __init__(self, base_state):
        self._base_state = base_state

    def _get_state(self):
        return self._base_state

    def _reset(self):
        self._base_state = dict(_EMPTY_STATE)

    @property
    def this(self):
        return self._get_state()['this']

    @property
    def caller(self):
        return self._get_state()['caller']

    @property
    def signer(self):
        return self._get_state()['signer']

    @property
    def now(self):
        return self._get_state()['now']


_EMPTY_STATE = {
    'this': None,
    'caller': None,
    'signer': None,
    'now': None,
}

_context = Context(dict(_EMPTY_STATE))


class Runtime:
    context = _context

    @classmethod
    def set_up(cls, sender, this, now):
        cls.context._base_state = {
            'signer': sender,
            'caller': sender,
            'this': this,
            'now': now,
        }

    @classmethod
    def clean_up(cls):
        cls.context._reset()


rt = Runtime()
