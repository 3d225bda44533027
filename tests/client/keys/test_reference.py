import pytest

from dwn_did.client.enums import KeyAlgorithm, KeyRelationship
from dwn_did.client.exceptions import FatalConfigurationError, KeyGenerationError
from dwn_did.client.keys.ecdsa import ECDSASecp256k1Key
from dwn_did.client.keys.eddsa import Ed25519Key
from dwn_did.client.keys.reference import KeyReference, generate_key_pair


class TestKeyReference:
    def test_initialization(self):
        key_pair = Ed25519Key()
        key = KeyReference(
            "#dwn-sig", KeyAlgorithm.Ed25519, key_pair, [KeyRelationship.Authentication]
        )

        assert key.key_id == "#dwn-sig"
        assert key.key_algorithm == KeyAlgorithm.Ed25519
        assert key.key_pair is key_pair
        assert key.relationships == (KeyRelationship.Authentication,)

    def test_attributes_are_read_only(self):
        key = KeyReference("#dwn-sig", KeyAlgorithm.Ed25519, Ed25519Key())
        with pytest.raises(AttributeError):
            key.key_id = "#other"
        with pytest.raises(AttributeError):
            key.relationships = ()

    def test_invalid_key_id_throws_exception(self):
        test_cases = ["dwn-sig", "#", "#dwn_sig", "#{}".format("a" * 33), None]
        for key_id in test_cases:
            with pytest.raises(ValueError):
                KeyReference(key_id, KeyAlgorithm.Ed25519, Ed25519Key())

    def test_repeated_relationships_throw_exception(self):
        with pytest.raises(ValueError):
            KeyReference(
                "#dwn-sig",
                KeyAlgorithm.Ed25519,
                Ed25519Key(),
                [KeyRelationship.Authentication, KeyRelationship.Authentication],
            )

    def test_invalid_relationship_throws_exception(self):
        with pytest.raises(ValueError):
            KeyReference(
                "#dwn-sig", KeyAlgorithm.Ed25519, Ed25519Key(), ["authentication"]
            )

    def test_key_pair_must_match_algorithm(self):
        with pytest.raises(ValueError):
            KeyReference("#dwn-sig", KeyAlgorithm.Ed25519, ECDSASecp256k1Key())

    def test_to_entry_dict(self):
        key = KeyReference(
            "#dwn-enc", KeyAlgorithm.Ed25519, Ed25519Key(), [KeyRelationship.KeyAgreement]
        )

        entry = key.to_entry_dict()
        assert entry["keyId"] == "#dwn-enc"
        assert entry["publicKeyJwk"] == key.key_pair.to_jwk()
        assert "d" in entry["privateKeyJwk"]
        assert entry["relationships"] == ["keyAgreement"]

        assert "privateKeyJwk" not in key.to_entry_dict(include_private_key=False)

    def test_from_entry_dict(self):
        for key_algorithm, key_pair in (
            (KeyAlgorithm.Ed25519, Ed25519Key()),
            (KeyAlgorithm.Secp256k1, ECDSASecp256k1Key()),
        ):
            key = KeyReference(
                "#key-1", key_algorithm, key_pair, [KeyRelationship.AssertionMethod]
            )
            assert KeyReference.from_entry_dict(key.to_entry_dict()) == key

    def test_from_entry_dict_without_jwk(self):
        with pytest.raises(ValueError):
            KeyReference.from_entry_dict({"keyId": "#key-1", "relationships": []})

    def test_from_entry_dict_with_unknown_relationship(self):
        key = KeyReference("#key-1", KeyAlgorithm.Ed25519, Ed25519Key())
        entry = key.to_entry_dict()
        entry["relationships"] = ["signing"]

        with pytest.raises(ValueError) as excinfo:
            KeyReference.from_entry_dict(entry)
        assert str(excinfo.value) == "Unknown KeyRelationship value: signing"

    def test_from_entry_dict_with_unknown_curve(self):
        with pytest.raises(ValueError):
            KeyReference.from_entry_dict(
                {"keyId": "#key-1", "publicKeyJwk": {"kty": "EC", "crv": "P-256"}}
            )


class TestGenerateKeyPair:
    @pytest.mark.asyncio
    async def test_generate_ed25519_key(self):
        key = await generate_key_pair(
            KeyAlgorithm.Ed25519, "#dwn-sig", [KeyRelationship.Authentication]
        )

        assert isinstance(key, KeyReference)
        assert isinstance(key.key_pair, Ed25519Key)
        assert key.key_pair.private_key is not None
        assert key.relationships == (KeyRelationship.Authentication,)

    @pytest.mark.asyncio
    async def test_generate_secp256k1_key(self):
        key = await generate_key_pair(KeyAlgorithm.Secp256k1, "#key-1")

        assert isinstance(key.key_pair, ECDSASecp256k1Key)
        assert key.relationships == ()

    @pytest.mark.asyncio
    async def test_generated_keys_are_unique(self):
        key_1 = await generate_key_pair(KeyAlgorithm.Ed25519, "#key-1")
        key_2 = await generate_key_pair(KeyAlgorithm.Ed25519, "#key-1")

        assert key_1.key_pair.public_key != key_2.key_pair.public_key

    @pytest.mark.asyncio
    async def test_unsupported_algorithm_throws_exception(self):
        for key_algorithm in ("Ed25519", "RSA", None):
            with pytest.raises(KeyGenerationError):
                await generate_key_pair(key_algorithm, "#dwn-sig")

    @pytest.mark.asyncio
    async def test_invalid_key_id_throws_exception(self):
        with pytest.raises(KeyGenerationError) as excinfo:
            await generate_key_pair(KeyAlgorithm.Ed25519, "dwn-sig")
        assert isinstance(excinfo.value, FatalConfigurationError)
