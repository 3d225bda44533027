import asyncio

from dwn_did.client.enums import KeyAlgorithm, KeyRelationship
from dwn_did.client.exceptions import KeyGenerationError
from dwn_did.client.keys.ecdsa import ECDSASecp256k1Key
from dwn_did.client.keys.eddsa import Ed25519Key
from dwn_did.client.validators import (
    validate_key_algorithm,
    validate_key_id,
    validate_relationships,
)

__all__ = ["KeyReference", "generate_key_pair"]

KEY_PAIR_CLASSES = {
    KeyAlgorithm.Ed25519: Ed25519Key,
    KeyAlgorithm.Secp256k1: ECDSASecp256k1Key,
}


class KeyReference:
    """
    A verification method key of a DID: a key id fragment, the key pair behind it and the verification
    relationships in which the key takes part.

    Instances are immutable once created.

    Attributes
    ----------
    key_id: str
        A fragment identifier for the key (e.g. #dwn-sig).
    key_algorithm: KeyAlgorithm
        The algorithm of the key pair.
    key_pair: Ed25519Key or ECDSASecp256k1Key
        The underlying key pair.
    relationships: tuple of KeyRelationship
        The verification relationships of the key (e.g. authentication, keyAgreement).
    """

    def __init__(self, key_id, key_algorithm, key_pair, relationships=None):
        relationships = tuple(relationships) if relationships is not None else ()
        validate_key_id(key_id)
        validate_key_algorithm(key_algorithm)
        validate_relationships(relationships)

        if not isinstance(key_pair, KEY_PAIR_CLASSES[key_algorithm]):
            raise ValueError(
                "Key pair does not match the {} algorithm.".format(key_algorithm.value)
            )

        self._key_id = key_id
        self._key_algorithm = key_algorithm
        self._key_pair = key_pair
        self._relationships = relationships

    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (
                self.key_id,
                self.key_algorithm,
                self.relationships,
                self.key_pair.public_key,
                self.key_pair.private_key,
            ) == (
                other.key_id,
                other.key_algorithm,
                other.relationships,
                other.key_pair.public_key,
                other.key_pair.private_key,
            )
        return NotImplemented

    def __hash__(self):
        return hash(
            (
                self.key_id,
                self.key_algorithm,
                self.relationships,
                self.key_pair.public_key,
            )
        )

    def __repr__(self):
        return "<{}.{}(key_id={}, key_algorithm={}, relationships={}, key_pair={})>".format(
            self.__module__,
            type(self).__name__,
            self.key_id,
            self.key_algorithm.value,
            [r.value for r in self.relationships],
            self.key_pair,
        )

    @property
    def key_id(self):
        return self._key_id

    @property
    def key_algorithm(self):
        return self._key_algorithm

    @property
    def key_pair(self):
        return self._key_pair

    @property
    def relationships(self):
        return self._relationships

    def to_entry_dict(self, include_private_key=True):
        """
        Converts the key to a verification method key dictionary, suitable for a DID create request.

        Parameters
        ----------
        include_private_key: bool, optional
            Whether to add the `privateKeyJwk` field.

        Returns
        -------
        dict
            Dictionary with `keyId`, `publicKeyJwk`, `relationships` and an optional `privateKeyJwk` field.
        """
        d = dict()

        d["keyId"] = self.key_id
        d["publicKeyJwk"] = self.key_pair.to_jwk()
        if include_private_key and self.key_pair.private_key is not None:
            d["privateKeyJwk"] = self.key_pair.to_jwk(include_private=True)
        d["relationships"] = [r.value for r in self.relationships]

        return d

    @staticmethod
    def from_entry_dict(entry_dict):
        """
        Creates a KeyReference object from a verification method key dictionary

        Parameters
        ----------
        entry_dict: dict

        Returns
        -------
        KeyReference

        Raises
        ------
        ValueError
            If the key material is missing or does not describe a supported key, or a relationship is unknown
        """
        jwk = entry_dict.get("privateKeyJwk") or entry_dict.get("publicKeyJwk")
        if not isinstance(jwk, dict):
            raise ValueError("Verification method key must contain a JWK")

        try:
            relationships = [
                KeyRelationship.from_str(r) for r in entry_dict.get("relationships", [])
            ]
        except NotImplementedError as e:
            raise ValueError(str(e)) from e

        for key_algorithm, key_pair_class in KEY_PAIR_CLASSES.items():
            if jwk.get("crv") == key_pair_class.JWK_CURVE:
                return KeyReference(
                    key_id=entry_dict.get("keyId", ""),
                    key_algorithm=key_algorithm,
                    key_pair=key_pair_class.from_jwk(jwk),
                    relationships=relationships,
                )

        raise ValueError("Unsupported JWK curve: {}".format(jwk.get("crv")))


def _create_key_pair(key_algorithm, key_id, relationships):
    try:
        validate_key_algorithm(key_algorithm)
    except ValueError:
        raise KeyGenerationError(
            "Unsupported key algorithm: {}".format(
                getattr(key_algorithm, "value", key_algorithm)
            )
        )

    try:
        key_pair = KEY_PAIR_CLASSES[key_algorithm]()
        return KeyReference(key_id, key_algorithm, key_pair, relationships)
    except (AssertionError, ValueError) as e:
        raise KeyGenerationError(
            "Unable to generate key {}: {}".format(key_id, e)
        ) from e


async def generate_key_pair(key_algorithm, key_id, relationships=None):
    """
    Generates a new key pair and wraps it in a KeyReference.

    Key generation runs in a worker thread, so that it does not block the event loop.

    Parameters
    ----------
    key_algorithm: KeyAlgorithm
        The algorithm of the key pair to generate.
    key_id: str
        The fragment identifier of the key (e.g. #dwn-sig).
    relationships: list of KeyRelationship, optional
        The verification relationships of the key.

    Returns
    -------
    KeyReference

    Raises
    ------
    KeyGenerationError
        If the algorithm is not supported, the key id is invalid or the key pair cannot be generated.
    """
    return await asyncio.to_thread(
        _create_key_pair, key_algorithm, key_id, relationships
    )
