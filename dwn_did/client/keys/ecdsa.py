import base58
import ecdsa
from ecdsa.curves import SECP256k1

from dwn_did.client.keys.jwk import b64url_encode, get_jwk_member


class ECDSASecp256k1Key:
    """
    A secp256k1 key pair, exportable as a JWK.

    If neither key is given, a new key pair is generated. A given private key determines the public key; a given
    public key alone yields a verification-only key.
    """

    JWK_KEY_TYPE = "EC"
    JWK_CURVE = "secp256k1"

    def __init__(self, public_key=None, private_key=None):
        if public_key is not None and type(public_key) is not bytes:
            raise ValueError("public_key must be bytes")
        if private_key is not None and type(private_key) is not bytes:
            raise ValueError("private_key must be bytes")

        if private_key is not None:
            self.signing_key = self._load_signing_key(private_key)
        elif public_key is None:
            self.signing_key = ecdsa.SigningKey.generate(curve=SECP256k1)
        else:
            self.signing_key = None

        if self.signing_key is not None:
            self.verifying_key = self.signing_key.get_verifying_key()
            if public_key is not None:
                assert self.public_key == public_key, (
                    "The provided public key does not match the one derived "
                    "from the provided private key"
                )
        else:
            self.verifying_key = self._load_verifying_key(public_key)

    def __repr__(self):
        return "<{}.{}(public_key={}, private_key=({}))>".format(
            self.__module__,
            type(self).__name__,
            base58.b58encode(self.public_key).decode("utf-8"),
            "hidden" if self.signing_key is not None else "not set",
        )

    @property
    def public_key(self):
        # Uncompressed point without the 0x04 prefix: x || y
        return self.verifying_key.to_string()

    @property
    def private_key(self):
        return self.signing_key.to_string() if self.signing_key is not None else None

    def to_jwk(self, include_private=False):
        point = self.public_key
        jwk = {
            "kty": self.JWK_KEY_TYPE,
            "crv": self.JWK_CURVE,
            "x": b64url_encode(point[:32]),
            "y": b64url_encode(point[32:]),
        }
        if include_private and self.private_key is not None:
            jwk["d"] = b64url_encode(self.private_key)
        return jwk

    @classmethod
    def from_jwk(cls, jwk):
        if jwk.get("kty") != cls.JWK_KEY_TYPE or jwk.get("crv") != cls.JWK_CURVE:
            raise ValueError("JWK does not describe a secp256k1 key")
        return cls(
            public_key=get_jwk_member(jwk, "x") + get_jwk_member(jwk, "y"),
            private_key=get_jwk_member(jwk, "d") if "d" in jwk else None,
        )

    @staticmethod
    def _load_signing_key(private_key):
        try:
            return ecdsa.SigningKey.from_string(private_key, curve=SECP256k1)
        except (AssertionError, ValueError):
            raise ValueError(
                "Invalid ECDSA private key. Must be a 32-byte secret exponent."
            )

    @staticmethod
    def _load_verifying_key(public_key):
        try:
            return ecdsa.VerifyingKey.from_string(public_key, curve=SECP256k1)
        except (AssertionError, ValueError):
            raise ValueError(
                "Invalid ECDSA public key. Must be a 64-byte encoded SECP256k1 curve point."
            )
