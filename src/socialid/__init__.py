"""Socialid - Resolve social handles and profile fields bound to on-chain identities."""

from socialid.client import SocialIdClient, resolve_record
from socialid.core.models import ProfileRecords, RecordVerifier
from socialid.core.types import HandlerKind
from socialid.resolution.verifier import VerifierDataResolver

__version__ = "0.1.0"
__all__ = [
    # Client
    "SocialIdClient",
    "resolve_record",
    # Types
    "HandlerKind",
    # Models
    "ProfileRecords",
    "RecordVerifier",
    # Resolution
    "VerifierDataResolver",
    # Version
    "__version__",
]
