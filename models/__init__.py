from .identity_record import IdentityRecord
from .candidate_link import CandidateLink
from .profile_data import ProfileData
from .extraction_outcome import ExtractionOutcome

__all__ = [
    "IdentityRecord",
    "CandidateLink",
    "ProfileData",
    "ExtractionOutcome",
]
