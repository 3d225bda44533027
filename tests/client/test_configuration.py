import asyncio

import pytest

from dwn_did.client.configuration import Configuration, generate_dwn_configuration
from dwn_did.client.enums import KeyAlgorithm, KeyRelationship
from dwn_did.client.exceptions import KeyGenerationError
from dwn_did.client.keys.eddsa import Ed25519Key
from dwn_did.client.keys.reference import KeyReference
from dwn_did.client.service import DwnServiceEndpoint


class TestGenerateDwnConfiguration:
    @pytest.mark.asyncio
    async def test_configuration_contains_keys_and_dwn_service(self):
        dwn_urls = ["https://dwn-1.example.com", "https://dwn-2.example.com"]
        configuration = await generate_dwn_configuration(dwn_urls)

        assert 2 == len(configuration.keys)
        assert 1 == len(configuration.services)

        signing_key = configuration.get_key("#dwn-sig")
        encryption_key = configuration.get_key("#dwn-enc")
        assert signing_key.key_algorithm == KeyAlgorithm.Ed25519
        assert signing_key.relationships == (KeyRelationship.Authentication,)
        assert encryption_key.key_algorithm == KeyAlgorithm.Ed25519
        assert encryption_key.relationships == (KeyRelationship.KeyAgreement,)

        service = configuration.services[0]
        assert service.service_id == "#dwn"
        assert service.service_type == "DecentralizedWebNode"
        assert isinstance(service.endpoint, DwnServiceEndpoint)
        assert service.endpoint.nodes == dwn_urls
        assert service.endpoint.signing_keys == [signing_key.key_id]
        assert service.endpoint.encryption_keys == [encryption_key.key_id]

    @pytest.mark.asyncio
    async def test_node_list_is_kept_verbatim(self):
        test_cases = [
            [],
            ["https://dwn.example.com"],
            ["https://b.example.com", "https://a.example.com", "https://b.example.com"],
            ["not a url"],
        ]
        for dwn_urls in test_cases:
            configuration = await generate_dwn_configuration(dwn_urls)
            assert configuration.services[0].endpoint.nodes == dwn_urls

    @pytest.mark.asyncio
    async def test_key_ids_are_referenced_exactly_once(self):
        configuration = await generate_dwn_configuration(["https://dwn.example.com"])
        endpoint = configuration.services[0].endpoint

        key_ids = [key.key_id for key in configuration.keys]
        assert sorted(key_ids) == sorted(endpoint.signing_keys + endpoint.encryption_keys)
        assert 1 == endpoint.signing_keys.count("#dwn-sig")
        assert 1 == endpoint.encryption_keys.count("#dwn-enc")

    @pytest.mark.asyncio
    async def test_key_generation_failure_propagates(self):
        calls = []

        async def key_generator(key_algorithm, key_id, relationships):
            calls.append(key_id)
            if key_id == "#dwn-enc":
                await asyncio.sleep(0)
                raise KeyGenerationError("no entropy")
            return KeyReference(key_id, key_algorithm, Ed25519Key(), relationships)

        configuration = None
        with pytest.raises(KeyGenerationError) as excinfo:
            configuration = await generate_dwn_configuration(
                ["https://dwn.example.com"], key_generator=key_generator
            )

        assert str(excinfo.value) == "no entropy"
        assert configuration is None
        assert sorted(calls) == ["#dwn-enc", "#dwn-sig"]

    @pytest.mark.asyncio
    async def test_to_create_options(self):
        configuration = await generate_dwn_configuration(["https://dwn.example.com"])
        options = configuration.to_create_options()

        verification_method_keys = options["keySet"]["verificationMethodKeys"]
        assert ["#dwn-sig", "#dwn-enc"] == [k["keyId"] for k in verification_method_keys]
        assert ["authentication"] == verification_method_keys[0]["relationships"]
        assert ["keyAgreement"] == verification_method_keys[1]["relationships"]
        assert all("privateKeyJwk" in k for k in verification_method_keys)

        assert options["services"] == [
            {
                "id": "#dwn",
                "type": "DecentralizedWebNode",
                "serviceEndpoint": {
                    "nodes": ["https://dwn.example.com"],
                    "signingKeys": ["#dwn-sig"],
                    "encryptionKeys": ["#dwn-enc"],
                },
            }
        ]

    @pytest.mark.asyncio
    async def test_to_create_options_without_private_keys(self):
        configuration = await generate_dwn_configuration([])
        options = configuration.to_create_options(include_private_keys=False)

        for key in options["keySet"]["verificationMethodKeys"]:
            assert "privateKeyJwk" not in key
            assert "d" not in key["publicKeyJwk"]

    @pytest.mark.asyncio
    async def test_from_create_options(self):
        configuration = await generate_dwn_configuration(["https://dwn.example.com"])

        restored = Configuration.from_create_options(configuration.to_create_options())
        assert restored == configuration
