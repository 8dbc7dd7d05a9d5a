from votingorg.client import ElectionClient
from votingorg.election.contract import Election
from votingorg.election.models import Voter, Candidate

__version__ = '1.0.0'

__all__ = ['ElectionClient', 'Election', 'Voter', 'Candidate']
