import asyncio

from dwn_did.client.constants import (
    DWN_ENCRYPTION_KEY_ID,
    DWN_SERVICE_ID,
    DWN_SERVICE_TYPE,
    DWN_SIGNING_KEY_ID,
)
from dwn_did.client.enums import KeyAlgorithm, KeyRelationship
from dwn_did.client.keys.reference import KeyReference, generate_key_pair
from dwn_did.client.service import DwnServiceEndpoint, ServiceDescriptor

__all__ = ["Configuration", "generate_dwn_configuration"]


class Configuration:
    """
    The key set and services needed to create a DID which is able to interact with Decentralized Web Nodes.

    Attributes
    ----------
    keys: KeyReference[]
        The verification method keys of the DID.
    services: ServiceDescriptor[]
        The services of the DID.
    """

    def __init__(self, keys, services):
        self.keys = list(keys)
        self.services = list(services)

    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (self.keys, self.services) == (other.keys, other.services)
        return NotImplemented

    def __repr__(self):
        return "<{}.{}(keys={}, services={})>".format(
            self.__module__, type(self).__name__, self.keys, self.services
        )

    def get_key(self, key_id):
        for key in self.keys:
            if key.key_id == key_id:
                return key
        return None

    def to_create_options(self, include_private_keys=True):
        """
        Exports the configuration as the options of a DID create request.

        Parameters
        ----------
        include_private_keys: bool, optional
            Whether the private JWKs of the keys are exported too.

        Returns
        -------
        dict
            Dictionary with a `keySet` holding the `verificationMethodKeys` and a `services` list.
        """
        return {
            "keySet": {
                "verificationMethodKeys": [
                    key.to_entry_dict(include_private_key=include_private_keys)
                    for key in self.keys
                ]
            },
            "services": [service.to_entry_dict() for service in self.services],
        }

    @staticmethod
    def from_create_options(options):
        key_set = options.get("keySet", {})
        return Configuration(
            keys=[
                KeyReference.from_entry_dict(key)
                for key in key_set.get("verificationMethodKeys", [])
            ],
            services=[
                ServiceDescriptor.from_entry_dict(service)
                for service in options.get("services", [])
            ],
        )


async def generate_dwn_configuration(dwn_urls, key_generator=generate_key_pair):
    """
    Generates two key pairs used for authorization and encryption purposes when interfacing with DWNs. The ids of
    these keys are referenced in the DWN service, together with the provided DWN URLs.

    Parameters
    ----------
    dwn_urls: str[]
        The DWN base URLs. Used as-is: no validation, de-duplication or reordering takes place.
    key_generator: coroutine function, optional
        Called as `key_generator(key_algorithm, key_id, relationships)` and returning a KeyReference.

    Returns
    -------
    Configuration

    Raises
    ------
    KeyGenerationError
        If any of the key pairs cannot be generated. No configuration is returned in this case.
    """
    signing_key, encryption_key = await asyncio.gather(
        key_generator(
            KeyAlgorithm.Ed25519,
            DWN_SIGNING_KEY_ID,
            [KeyRelationship.Authentication],
        ),
        key_generator(
            KeyAlgorithm.Ed25519,
            DWN_ENCRYPTION_KEY_ID,
            [KeyRelationship.KeyAgreement],
        ),
    )

    service = ServiceDescriptor(
        service_id=DWN_SERVICE_ID,
        service_type=DWN_SERVICE_TYPE,
        endpoint=DwnServiceEndpoint(
            nodes=dwn_urls,
            signing_keys=[signing_key.key_id],
            encryption_keys=[encryption_key.key_id],
        ),
    )

    return Configuration(keys=[signing_key, encryption_key], services=[service])
