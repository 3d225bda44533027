from dwn_did.client.constants import DWN_SERVICE_TYPE
from dwn_did.client.validators import validate_service_id

__all__ = ["DwnServiceEndpoint", "ServiceDescriptor"]


class DwnServiceEndpoint:
    """
    The structured service endpoint of a DecentralizedWebNode service.

    Attributes
    ----------
    nodes: str[]
        The base URLs of the DWN nodes, kept in the given order and with any duplicates.
    signing_keys: str[]
        Ids of the keys used to sign messages sent to the nodes.
    encryption_keys: str[]
        Ids of the keys used to encrypt data stored on the nodes.
    """

    def __init__(self, nodes, signing_keys, encryption_keys):
        self.nodes = list(nodes)
        self.signing_keys = list(signing_keys)
        self.encryption_keys = list(encryption_keys)

    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (self.nodes, self.signing_keys, self.encryption_keys) == (
                other.nodes,
                other.signing_keys,
                other.encryption_keys,
            )
        return NotImplemented

    def __repr__(self):
        return "<{}.{}(nodes={}, signing_keys={}, encryption_keys={})>".format(
            self.__module__,
            type(self).__name__,
            self.nodes,
            self.signing_keys,
            self.encryption_keys,
        )

    def to_entry_dict(self):
        return {
            "nodes": list(self.nodes),
            "signingKeys": list(self.signing_keys),
            "encryptionKeys": list(self.encryption_keys),
        }

    @staticmethod
    def from_entry_dict(entry_dict):
        return DwnServiceEndpoint(
            nodes=entry_dict.get("nodes", []),
            signing_keys=entry_dict.get("signingKeys", []),
            encryption_keys=entry_dict.get("encryptionKeys", []),
        )


class ServiceDescriptor:
    """
    Represent a service associated with a DID.

    Attributes
    ----------
    service_id: str
        A fragment identifier for the service (e.g. #dwn).
    service_type: str
        Type of the service (e.g. DecentralizedWebNode).
    endpoint: str or dict or DwnServiceEndpoint
        The service endpoint. DecentralizedWebNode services use a DwnServiceEndpoint.
    """

    def __init__(self, service_id, service_type, endpoint):
        validate_service_id(service_id)
        if not service_type:
            raise ValueError("Type is required.")

        self.service_id = service_id
        self.service_type = service_type
        self.endpoint = endpoint

    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (self.service_id, self.service_type, self.endpoint) == (
                other.service_id,
                other.service_type,
                other.endpoint,
            )
        return NotImplemented

    def __repr__(self):
        return "<{}.{}(service_id={}, service_type={}, endpoint={})>".format(
            self.__module__,
            type(self).__name__,
            self.service_id,
            self.service_type,
            self.endpoint,
        )

    def to_entry_dict(self):
        """
        Converts the object to a dictionary suitable for a DID create request.

        Returns
        -------
        dict
            Dictionary with `id`, `type` and `serviceEndpoint` fields.
        """
        d = dict()

        d["id"] = self.service_id
        d["type"] = self.service_type
        if isinstance(self.endpoint, DwnServiceEndpoint):
            d["serviceEndpoint"] = self.endpoint.to_entry_dict()
        else:
            d["serviceEndpoint"] = self.endpoint

        return d

    @staticmethod
    def from_entry_dict(entry_dict):
        endpoint = entry_dict.get("serviceEndpoint", "")
        if entry_dict.get("type") == DWN_SERVICE_TYPE and isinstance(endpoint, dict):
            endpoint = DwnServiceEndpoint.from_entry_dict(endpoint)

        return ServiceDescriptor(
            service_id=entry_dict.get("id", ""),
            service_type=entry_dict.get("type", ""),
            endpoint=endpoint,
        )
