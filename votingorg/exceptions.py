class VotingError(Exception):
    """
    The base exception for election operations. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class Unauthorized(VotingError):
    """
    An owner-only operation was called by someone other than
    the configured owner, or before any owner was configured

    :ivar caller: The address that attempted the call
    """
    fmt = "Caller '{caller}' is not the owner"


class NotFound(VotingError):
    """
    No record is stored for the address

    :ivar kind: Voter or Candidate
    :ivar address: The address that was looked up
    """
    fmt = "{kind} '{address}' not found"


class AlreadyVoted(VotingError):
    fmt = "Voter '{address}' has already voted"


class NotApproved(VotingError):
    """
    The voter or candidate exists but its status is not Approved

    :ivar kind: Voter or Candidate
    :ivar address: The address of the record
    :ivar status: The status found on the record
    """
    fmt = "{kind} '{address}' is not approved (status {status})"


class VotingNotActive(VotingError):
    fmt = 'Voting is not active at {now} (window {start} to {end})'


class VotingStillActive(VotingError):
    fmt = 'Voting has not ended at {now} (ends {end})'


class InvalidPeriod(VotingError):
    fmt = 'Start time {start} must be before end time {end}'


class InvalidTimestamp(VotingError):
    fmt = "'{value}' is not a valid unsigned 64-bit timestamp"


class AlreadyInitialized(VotingError):
    """
    init was called on an election that has already been set up

    :ivar name: The election name
    """
    fmt = "Election '{name}' is already initialized"


class UnknownKind(VotingError):
    fmt = "Unknown registrant kind '{kind}', known kinds '{known_kinds}'"
