"""
Messages delivered by the statuses streaming endpoints.

Every line of a stream is a JSON object. Tweets arrive bare, while the
control messages are wrapped in a single well known key (``delete``,
``limit``, ``warning``, ...). ``parse_message`` maps a decoded object to
one of the types below.
"""
from typing import Any, Dict, List, NamedTuple, Optional


class Tweet(NamedTuple):
    id: int
    text: str
    user_id: Optional[int] = None
    screen_name: Optional[str] = None
    lang: Optional[str] = None
    created_at: Optional[str] = None
    raw: Optional[dict] = None


class StatusDeletionNotice(NamedTuple):
    id: int
    user_id: int
    timestamp_ms: Optional[str] = None


class LocationDeletionNotice(NamedTuple):
    user_id: int
    up_to_status_id: int


class LimitNotice(NamedTuple):
    """Number of undelivered tweets since the connection was opened."""
    track: int
    timestamp_ms: Optional[str] = None


class StatusWithheldNotice(NamedTuple):
    id: int
    user_id: int
    withheld_in_countries: List[str] = []


class UserWithheldNotice(NamedTuple):
    id: int
    withheld_in_countries: List[str] = []


class DisconnectMessage(NamedTuple):
    code: int
    stream_name: Optional[str] = None
    reason: Optional[str] = None


class WarningMessage(NamedTuple):
    """Stall warning, only sent when ``stall_warnings`` was requested."""
    code: str
    message: str
    percent_full: Optional[int] = None


def _tweet_text(payload: Dict[str, Any]) -> str:
    extended = payload.get('extended_tweet')
    if payload.get('truncated') and isinstance(extended, dict):
        return extended.get('full_text', payload.get('text', ''))
    return payload.get('full_text') or payload.get('text', '')


def _parse_tweet(payload: Dict[str, Any]) -> Tweet:
    user = payload.get('user') or {}
    return Tweet(
        id=payload['id'],
        text=_tweet_text(payload),
        user_id=user.get('id'),
        screen_name=user.get('screen_name'),
        lang=payload.get('lang'),
        created_at=payload.get('created_at'),
        raw=payload,
    )


def _parse_delete(body):
    status = body['status']
    return StatusDeletionNotice(
        id=status['id'],
        user_id=status['user_id'],
        timestamp_ms=body.get('timestamp_ms'),
    )


def _parse_scrub_geo(body):
    return LocationDeletionNotice(user_id=body['user_id'], up_to_status_id=body['up_to_status_id'])


def _parse_limit(body):
    return LimitNotice(track=body['track'], timestamp_ms=body.get('timestamp_ms'))


def _parse_status_withheld(body):
    return StatusWithheldNotice(
        id=body['id'],
        user_id=body['user_id'],
        withheld_in_countries=list(body.get('withheld_in_countries', [])),
    )


def _parse_user_withheld(body):
    return UserWithheldNotice(id=body['id'], withheld_in_countries=list(body.get('withheld_in_countries', [])))


def _parse_disconnect(body):
    return DisconnectMessage(code=body['code'], stream_name=body.get('stream_name'), reason=body.get('reason'))


def _parse_warning(body):
    return WarningMessage(code=body['code'], message=body.get('message', ''), percent_full=body.get('percent_full'))


_ENVELOPES = {
    'delete': _parse_delete,
    'scrub_geo': _parse_scrub_geo,
    'limit': _parse_limit,
    'status_withheld': _parse_status_withheld,
    'user_withheld': _parse_user_withheld,
    'disconnect': _parse_disconnect,
    'warning': _parse_warning,
}


def parse_message(payload: Any):
    """
    Decode one streaming message.

    Args:
        payload: The JSON object read from the stream

    Returns:
        A message instance, or None when the payload is not a known message
    """
    if not isinstance(payload, dict):
        return None
    try:
        if 'id' in payload and ('text' in payload or 'full_text' in payload):
            return _parse_tweet(payload)
        for key, parser in _ENVELOPES.items():
            body = payload.get(key)
            if isinstance(body, dict):
                return parser(body)
    except (KeyError, TypeError, AttributeError):
        # known key with a malformed body
        return None
    return None
