import os
from pathlib import Path


def _flag(name, default='false'):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_KEY_SIZE = 1024

HDF5_GROUP_SEPARATOR = '/'
MISC_FILENAME = '__misc'
FILENAME_LEN_MAX = 255

STORAGE_HOME = Path(os.getenv('VOTINGORG_STORAGE_HOME', str(Path.home().joinpath('.votingorg'))))

MONGO_URL = os.getenv('VOTINGORG_MONGO_URL', 'mongodb://localhost:27017')
MONGO_DB = 'votingorg'
MONGO_COLLECTION = 'state'

DEFAULT_ELECTION = 'election'
DEFAULT_SIGNER = 'sys'

# Behaviour switches for rejection and vote bookkeeping
REJECT_SETS_REJECTED = _flag('VOTINGORG_REJECT_SETS_REJECTED')
RECORD_VOTED_VOTERS = _flag('VOTINGORG_RECORD_VOTED_VOTERS')

# Storage names
OWNER = 'Owner'
INITIALIZED = 'Initialized'
REGISTERED_VOTERS = 'RegisteredVoters'
REGISTERED_CANDIDATES = 'RegisteredCandidates'
APPROVED_VOTERS = 'ApprovedVoters'
APPROVED_CANDIDATES = 'ApprovedCandidates'
VOTED_VOTERS = 'VotedVoters'
VOTER_ID_COUNTER = 'VoterIdCounter'
CANDIDATE_ID_COUNTER = 'CandidateIdCounter'
START_TIME = 'StartTime'
END_TIME = 'EndTime'

REGISTRY_LISTS = (
    REGISTERED_VOTERS,
    REGISTERED_CANDIDATES,
    APPROVED_VOTERS,
    APPROVED_CANDIDATES,
    VOTED_VOTERS,
)

# Entity kinds double as the record hash names
VOTER = 'Voter'
CANDIDATE = 'Candidate'

PENDING = 'Pending'
APPROVED = 'Approved'
REJECTED = 'Rejected'

PENDING_MESSAGE = 'Currently your registration is pending'
NOT_FOUND = 'NotFound'

FIRST_ID = 1

U64_MAX = 2 ** 64 - 1
U256_MAX = 2 ** 256 - 1

PRIVATE_METHOD_PREFIX = '_'
EXPORT_ATTRIBUTE = '__exported__'
