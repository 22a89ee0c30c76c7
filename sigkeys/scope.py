from datetime import datetime, timezone
from typing import Optional

KEY_TYPE_IDENTIFIER = 'aws4_request'


def create_scope(date: str, region: str, service: str) -> str:
    """Credential scope for SigV4: ``<date>/<region>/<service>/aws4_request``."""
    return f"{date}/{region}/{service}/{KEY_TYPE_IDENTIFIER}"


def create_sigv4a_scope(date: str, service: str) -> str:
    """Credential scope for SigV4a, which is not bound to a single region."""
    return f"{date}/{service}/{KEY_TYPE_IDENTIFIER}"


def short_date(when: Optional[datetime] = None) -> str:
    """Format ``when`` (default: now) as the ``YYYYMMDD`` date used in scopes.

    Naive datetimes are taken to be UTC; aware ones are converted to UTC.
    """
    if when is None:
        when = datetime.now(timezone.utc)
    elif when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    else:
        when = when.astimezone(timezone.utc)
    return when.strftime('%Y%m%d')
