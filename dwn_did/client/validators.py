import re

from dwn_did.client.enums import KeyAlgorithm, KeyRelationship


def validate_key_id(key_id):
    if not isinstance(key_id, str) or not re.match("^#[a-zA-Z0-9-]{1,32}$", key_id):
        raise ValueError(
            "Key id must be a fragment starting with '#', followed by not more than 32 "
            "letters, digits and hyphens."
        )


def validate_service_id(service_id):
    if not isinstance(service_id, str) or not re.match(
        "^#[a-zA-Z0-9-]{1,50}$", service_id
    ):
        raise ValueError(
            "Service id must be a fragment starting with '#', followed by not more than 50 "
            "letters, digits and hyphens."
        )


def validate_key_algorithm(key_algorithm):
    if key_algorithm not in (KeyAlgorithm.Ed25519, KeyAlgorithm.Secp256k1):
        raise ValueError("Algorithm must be a valid key algorithm.")


def validate_relationships(relationships):
    if len(set(relationships)) != len(relationships):
        raise ValueError("Relationships must not contain repeated values.")
    for relationship in relationships:
        if not isinstance(relationship, KeyRelationship):
            raise ValueError(
                "Relationships must contain only valid KeyRelationship values."
            )
