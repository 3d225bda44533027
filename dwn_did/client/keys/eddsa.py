import base58
from Crypto.Random import get_random_bytes
from Crypto.Signature import eddsa

from dwn_did.client.keys.jwk import b64url_encode, get_jwk_member


class Ed25519Key:
    """
    Representation of an Ed25519 key. Instances of this class allow signing of messages and signature verification, as
    well as key creation and derivation of a public key from a private key.
    """

    JWK_KEY_TYPE = "OKP"
    JWK_CURVE = "Ed25519"

    def __init__(self, public_key=None, private_key=None):
        """
        Creates an Ed25519Key object.

        If both the public and private keys are not provided, it will generate a new key pair.
        If both are provided, it will check that the public key corresponds to the private key.
        If only a private key is provided, it will derive the public key.
        If only a public key is provided, signing will not work, but signature verification is possible.

        Parameters
        ----------
        public_key: bytes (optional)
            The 32-byte public key.
        private_key: bytes (optional)
            The 32-byte private key seed.

        Raises
        ------
        ValueError
            If a private or public key is provided in an invalid format
        AssertionError
            If the public and private keys provided do not correspond to each other
        """
        if public_key is not None and type(public_key) is not bytes:
            raise ValueError("public_key must be bytes")
        if private_key is not None and type(private_key) is not bytes:
            raise ValueError("private_key must be bytes")

        if public_key is None and private_key is None:
            private_key = get_random_bytes(32)

        if private_key is not None:
            try:
                self.signing_key = eddsa.import_private_key(private_key)
            except ValueError:
                raise ValueError("Invalid Ed25519 private key. Must be a 32-byte seed.")
            self._seed = private_key
            self.verifying_key = self.signing_key.public_key()
            if public_key is not None:
                assert self.public_key == public_key, (
                    "The provided public key does not match the one derived "
                    "from the provided private key"
                )
        else:
            try:
                self.verifying_key = eddsa.import_public_key(public_key)
            except ValueError:
                raise ValueError("Invalid Ed25519 public key. Must be a 32-byte value.")
            self.signing_key = None
            self._seed = None

    def __repr__(self):
        return "<{}.{}(public_key={}, private_key=({}))>".format(
            self.__module__,
            type(self).__name__,
            base58.b58encode(self.public_key).decode("utf-8"),
            "hidden" if self.signing_key is not None else "not set",
        )

    @property
    def public_key(self):
        # SubjectPublicKeyInfo for Ed25519 ends with the 32-byte encoded point
        return self.verifying_key.export_key(format="DER")[-32:]

    @property
    def private_key(self):
        return self._seed

    def sign(self, message):
        """
        Signs a message with the existing private key, using pure Ed25519 (RFC 8032).

        Parameters
        ----------
        message: bytes
            The message to sign.

        Returns
        -------
        bytes
            The 64 bytes of the signature.

        Raises
        ------
        AssertionError
            If the supplied message is not bytes, or if a private key has not been specified.
        """
        assert type(message) is bytes, "Message must be bytes."
        assert self.signing_key is not None, "Signing is not set."

        return eddsa.new(self.signing_key, "rfc8032").sign(message)

    def verify(self, message, signature):
        assert type(message) is bytes, "Message must be bytes"
        assert type(signature) is bytes, "Signature must be bytes"

        try:
            eddsa.new(self.verifying_key, "rfc8032").verify(message, signature)
        except ValueError:
            return False
        else:
            return True

    def to_jwk(self, include_private=False):
        jwk = {
            "kty": self.JWK_KEY_TYPE,
            "crv": self.JWK_CURVE,
            "x": b64url_encode(self.public_key),
        }
        if include_private and self.private_key is not None:
            jwk["d"] = b64url_encode(self.private_key)
        return jwk

    @classmethod
    def from_jwk(cls, jwk):
        if jwk.get("kty") != cls.JWK_KEY_TYPE or jwk.get("crv") != cls.JWK_CURVE:
            raise ValueError("JWK does not describe an Ed25519 key")
        return cls(
            public_key=get_jwk_member(jwk, "x"),
            private_key=get_jwk_member(jwk, "d") if "d" in jwk else None,
        )

