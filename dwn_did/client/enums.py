from enum import Enum

__all__ = ["KeyAlgorithm", "KeyRelationship"]


class KeyAlgorithm(Enum):
    Ed25519 = "Ed25519"
    Secp256k1 = "secp256k1"


class KeyRelationship(Enum):
    Authentication = "authentication"
    AssertionMethod = "assertionMethod"
    CapabilityDelegation = "capabilityDelegation"
    CapabilityInvocation = "capabilityInvocation"
    KeyAgreement = "keyAgreement"

    @staticmethod
    def from_str(string):
        for relationship in KeyRelationship:
            if relationship.value == string:
                return relationship
        raise NotImplementedError("Unknown KeyRelationship value: {}".format(string))
