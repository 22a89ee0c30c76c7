from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """Long-term (or session) AWS credentials.

    Only ``secret_access_key`` feeds SigV4 derivation; the session token is
    carried for callers that build the rest of the request.
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)
