import logging
import random
from enum import Enum

import httpx

from dwn_did.client.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DWN_SERVICE_ID,
    DWN_SERVICE_TYPE,
    HEALTH_CHECK_PATH,
    TECH_PREVIEW_DID_DOCUMENT_URL,
    TECH_PREVIEW_NODE_ALLOCATION,
)
from dwn_did.resolver.endpoints import NodeListEndpoint, parse_service_endpoint
from dwn_did.resolver.exceptions import MalformedDIDDocument
from dwn_did.resolver.parser import get_services, parse_did_document

__all__ = [
    "DiscoveryResult",
    "DiscoveryStatus",
    "discover_dwn_endpoints",
    "get_tech_preview_dwn_endpoints",
    "probe_health",
    "select_healthy_endpoints",
]

logger = logging.getLogger(__name__)


class DiscoveryStatus(Enum):
    Ok = "ok"
    TransportFailure = "transport-failure"
    BadStatus = "bad-status"
    MalformedDocument = "malformed-document"
    NoService = "no-service"
    UnsupportedEndpoint = "unsupported-endpoint"


class DiscoveryResult:
    """
    Outcome of reading the DWN candidates from the Tech Preview DID document.

    Every status other than DiscoveryStatus.Ok comes with an empty candidate list: discovery is best-effort and a
    failure only means that there is nothing to choose from.

    Attributes
    ----------
    status: DiscoveryStatus
    candidates: str[]
        The candidate DWN URLs, in document order.
    reason: str, optional
        A description of the failure, for non-Ok statuses.
    """

    def __init__(self, status, candidates=None, reason=None):
        self.status = status
        self.candidates = (
            list(candidates)
            if candidates is not None and status == DiscoveryStatus.Ok
            else []
        )
        self.reason = reason

    def __repr__(self):
        return "<{}.{}(status={}, candidates={}, reason={})>".format(
            self.__module__,
            type(self).__name__,
            self.status.value,
            self.candidates,
            self.reason,
        )

    @property
    def is_ok(self):
        return self.status == DiscoveryStatus.Ok


def _degraded(status, reason):
    logger.warning("failed to get tech preview dwn endpoints: %s", reason)
    return DiscoveryResult(status, reason=reason)


async def discover_dwn_endpoints(client):
    """
    Fetches the Tech Preview DID document and extracts the candidate DWN URLs from its DWN service.

    Never raises on network or document errors; these are reported through the status of the result.

    Parameters
    ----------
    client: httpx.AsyncClient

    Returns
    -------
    DiscoveryResult
    """
    try:
        response = await client.get(TECH_PREVIEW_DID_DOCUMENT_URL)
    except httpx.HTTPError as e:
        return _degraded(DiscoveryStatus.TransportFailure, str(e) or type(e).__name__)

    if not response.is_success:
        return _degraded(
            DiscoveryStatus.BadStatus,
            "HTTP Error: {} {}".format(response.status_code, response.reason_phrase),
        )

    try:
        did_document = parse_did_document(response.content)
    except MalformedDIDDocument as e:
        return _degraded(DiscoveryStatus.MalformedDocument, str(e))

    services = get_services(did_document, id=DWN_SERVICE_ID, type=DWN_SERVICE_TYPE)
    if not services:
        return _degraded(
            DiscoveryStatus.NoService,
            "no {} service with id {}".format(DWN_SERVICE_TYPE, DWN_SERVICE_ID),
        )

    endpoint = parse_service_endpoint(services[0])
    if not isinstance(endpoint, NodeListEndpoint):
        return _degraded(
            DiscoveryStatus.UnsupportedEndpoint,
            "unusable service endpoint {!r}".format(endpoint),
        )

    return DiscoveryResult(DiscoveryStatus.Ok, candidates=endpoint.nodes)


async def probe_health(client, url):
    """
    Checks whether a DWN is reachable, by calling its health endpoint.

    Parameters
    ----------
    client: httpx.AsyncClient
    url: str
        The base URL of the DWN.

    Returns
    -------
    bool
        True if the health endpoint answered with a 2xx status, False otherwise.
    """
    health_url = "{}{}".format(url.rstrip("/"), HEALTH_CHECK_PATH)
    try:
        response = await client.get(health_url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("health check of %s failed: %s", url, type(e).__name__)
        return False

    if not response.is_success:
        logger.debug("health check of %s returned HTTP %s", url, response.status_code)
    return response.is_success


async def select_healthy_endpoints(
    candidates, client, rng=None, max_nodes=TECH_PREVIEW_NODE_ALLOCATION
):
    """
    Picks up to `max_nodes` healthy endpoints out of the candidates, probing randomly drawn candidates.

    Every attempt draws an index independently, so the same candidate can be drawn more than once. The number of
    attempts is bounded by the number of candidates, so fewer than `max_nodes` endpoints may be returned even
    when enough healthy candidates exist.

    Parameters
    ----------
    candidates: str[]
    client: httpx.AsyncClient
    rng: random.Random, optional
        The source of random indices. Defaults to the `random` module.
    max_nodes: int, optional

    Returns
    -------
    str[]
        The selected endpoints, without duplicates.
    """
    if rng is None:
        rng = random

    num_candidates = len(candidates)
    num_nodes_to_allocate = min(num_candidates, max_nodes)
    selected = set()

    attempts = 0
    while attempts < num_candidates and len(selected) < num_nodes_to_allocate:
        url = candidates[rng.randrange(num_candidates)]
        if await probe_health(client, url):
            selected.add(url)
        attempts += 1

    return list(selected)


async def _get_tech_preview_dwn_endpoints(client, rng):
    result = await discover_dwn_endpoints(client)
    endpoints = await select_healthy_endpoints(result.candidates, client, rng=rng)
    if result.is_ok:
        logger.info(
            "selected %d of %d tech preview dwn endpoints",
            len(endpoints),
            len(result.candidates),
        )
    return endpoints


async def get_tech_preview_dwn_endpoints(client=None, rng=None):
    """
    Dynamically selects up to 2 DWN endpoints that are provided by default during the Tech Preview period.

    Discovery is best-effort: any failure to fetch or understand the Tech Preview DID document results in an empty
    list and a logged warning.

    Parameters
    ----------
    client: httpx.AsyncClient, optional
        The HTTP client to use. If not given, a client with a bounded request timeout is created and closed on return.
    rng: random.Random, optional
        The source of random indices used to pick candidates.

    Returns
    -------
    str[]
        0, 1 or 2 unique DWN URLs.
    """
    if client is not None:
        return await _get_tech_preview_dwn_endpoints(client, rng)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(DEFAULT_REQUEST_TIMEOUT_SECONDS)
    ) as client:
        return await _get_tech_preview_dwn_endpoints(client, rng)
