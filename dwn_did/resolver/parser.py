import json

from jsonschema.exceptions import ValidationError

from dwn_did.resolver.exceptions import MalformedDIDDocument
from dwn_did.resolver.schema import get_schema_validator

__all__ = ["get_services", "parse_did_document"]

DID_DOCUMENT_SCHEMA = "did_document.json"

DID_DOCUMENT_VALIDATOR = get_schema_validator(DID_DOCUMENT_SCHEMA)


def parse_did_document(content):
    """
    Parses and validates the content of a DID document.

    Parameters
    ----------
    content: bytes or str
        The raw document, as returned by the server.

    Returns
    -------
    dict
        The DID document

    Raises
    ------
    MalformedDIDDocument
        If the content is not JSON or does not have the structure of a DID document
    """
    try:
        did_document = json.loads(content)
    except (ValueError, RecursionError, TypeError) as e:
        raise MalformedDIDDocument("DID document is not valid JSON") from e

    try:
        DID_DOCUMENT_VALIDATOR.validate(did_document)
    except ValidationError as e:
        raise MalformedDIDDocument("Invalid DID document: {}".format(e.message))

    return did_document


def _matches_id(service_id, fragment_or_id):
    if not isinstance(service_id, str):
        return False
    # Services may carry either a relative ("#dwn") or an absolute ("did:example:123#dwn") id
    if service_id == fragment_or_id:
        return True
    if fragment_or_id.startswith("#"):
        return service_id.endswith(fragment_or_id) and "#" not in service_id[
            : -len(fragment_or_id)
        ]
    return False


def get_services(did_document, id=None, type=None):
    """
    Returns the services of a DID document, optionally filtered by id and type.

    Parameters
    ----------
    did_document: dict
    id: str, optional
        The id of the service, either a fragment (e.g. #dwn) or a full DID URL.
    type: str, optional
        The type of the service.

    Returns
    -------
    list of dict
        The matching services, in document order. Entries which are not objects are skipped.
    """
    services = did_document.get("service") or []
    return [
        service
        for service in services
        if isinstance(service, dict)
        and (id is None or _matches_id(service.get("id", ""), id))
        and (type is None or service.get("type") == type)
    ]
