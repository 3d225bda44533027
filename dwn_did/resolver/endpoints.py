"""
Variants of the `serviceEndpoint` of a service in an untrusted DID document.

A DID document may carry a service endpoint as a single URI, as a list of endpoints or as a structured object.
`parse_service_endpoint` maps every possible value to exactly one of the classes below, so callers can handle
each shape explicitly.
"""

__all__ = [
    "EndpointList",
    "NodeListEndpoint",
    "UnsupportedEndpoint",
    "UriEndpoint",
    "parse_service_endpoint",
]


class UriEndpoint:
    def __init__(self, uri):
        self.uri = uri

    def __repr__(self):
        return "<{}.{}(uri={})>".format(self.__module__, type(self).__name__, self.uri)


class EndpointList:
    def __init__(self, endpoints):
        self.endpoints = endpoints

    def __repr__(self):
        return "<{}.{}(endpoints={})>".format(
            self.__module__, type(self).__name__, self.endpoints
        )


class NodeListEndpoint:
    """
    A structured endpoint with a `nodes` array, as used by DecentralizedWebNode services.

    Attributes
    ----------
    nodes: str[]
        The node URLs. Entries which are not strings are dropped.
    properties: dict
        The full endpoint object.
    """

    def __init__(self, nodes, properties):
        self.nodes = nodes
        self.properties = properties

    def __repr__(self):
        return "<{}.{}(nodes={})>".format(
            self.__module__, type(self).__name__, self.nodes
        )


class UnsupportedEndpoint:
    """A missing endpoint, or one with a shape that cannot be used."""

    def __init__(self, reason):
        self.reason = reason

    def __repr__(self):
        return "<{}.{}(reason={})>".format(
            self.__module__, type(self).__name__, self.reason
        )


def parse_service_endpoint(service):
    """
    Classifies the `serviceEndpoint` field of a service.

    Parameters
    ----------
    service: dict
        A service entry of a DID document.

    Returns
    -------
    UriEndpoint or EndpointList or NodeListEndpoint or UnsupportedEndpoint
    """
    if not isinstance(service, dict) or "serviceEndpoint" not in service:
        return UnsupportedEndpoint("missing serviceEndpoint")

    endpoint = service["serviceEndpoint"]
    if isinstance(endpoint, str):
        return UriEndpoint(endpoint)
    if isinstance(endpoint, list):
        return EndpointList(endpoint)
    if isinstance(endpoint, dict):
        nodes = endpoint.get("nodes")
        if not isinstance(nodes, list):
            return UnsupportedEndpoint("serviceEndpoint has no nodes array")
        return NodeListEndpoint(
            [node for node in nodes if isinstance(node, str)], endpoint
        )

    return UnsupportedEndpoint(
        "serviceEndpoint of type {}".format(type(endpoint).__name__)
    )
