"""
GitHub webhook verification and event dispatch.

Only `push` events to the configured branch trigger a sync; `ping` is
answered so the webhook can be registered, anything else is rejected.
"""
import hashlib
import hmac
import logging
from typing import Any, Callable, List, Optional, Tuple

from ..config import Settings

logger = logging.getLogger(__name__)

_DIGESTS = {
    'sha256': hashlib.sha256,
    'sha1': hashlib.sha1,
}

# (owner, repo, commit_sha) -> per-table load results
SyncFunc = Callable[[str, str, str], List[Tuple[str, Any]]]


def verify_signature(secret: str, raw_body: bytes, signature_header: Optional[str]) -> bool:
    """
    Check an `X-Hub-Signature-256` (sha256=...) or `X-Hub-Signature`
    (sha1=...) header against the HMAC of the raw request body.
    """
    if not signature_header:
        logger.error("Bad request, no signature header supplied")
        return False
    if not secret:
        logger.error("Webhook secret is not configured")
        return False

    algorithm, _, received = signature_header.partition('=')
    digest = _DIGESTS.get(algorithm)
    if digest is None or not received:
        logger.error(f"Unsupported signature format: {algorithm}")
        return False

    expected = hmac.new(secret.encode('utf-8'), raw_body, digest).hexdigest()
    # Header values may carry arbitrary non-ASCII text; compare as bytes
    return hmac.compare_digest(expected.encode('ascii'), received.encode('utf-8', 'surrogateescape'))


def _push_target(payload: dict) -> Tuple[str, str, str]:
    repository = payload['repository']
    owner = repository['owner']
    owner_name = owner.get('name') or owner['login']
    return owner_name, repository['name'], payload['head_commit']['id']


def handle_github_event(
    settings: Settings,
    event_type: Optional[str],
    payload: dict,
    sync: SyncFunc,
) -> Tuple[int, Any]:
    """
    Dispatch a verified webhook delivery.

    Returns (http_status, response_body).
    """
    logger.info(f"request_event_type: {event_type}")

    if event_type == 'ping':
        return 200, 'pong'

    if event_type != 'push':
        logger.warning(f"Unknown request event type: {event_type}")
        return 400, {'status': 400, 'msg': f'unsupported event type {event_type}'}

    ref = payload.get('ref')
    if ref != settings.target_branch:
        return 200, {'status': 200, 'msg': f'branch {ref} is not target branch'}

    # Branch deletions arrive as pushes without a head commit
    if not payload.get('head_commit'):
        return 200, {'status': 200, 'msg': f'no head commit on {ref}'}

    owner, repo, commit_sha = _push_target(payload)
    logger.info(f"Syncing enums from {owner}/{repo}@{commit_sha}")
    results = sync(owner, repo, commit_sha)
    return 200, [list(r) for r in results]
