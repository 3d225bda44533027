from base64 import urlsafe_b64decode, urlsafe_b64encode


def b64url_encode(data):
    """Encodes bytes as unpadded base64url, as required for JWK members."""
    return urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def b64url_decode(string):
    padding = "=" * (-len(string) % 4)
    return urlsafe_b64decode(string + padding)


def get_jwk_member(jwk, name):
    try:
        return b64url_decode(jwk[name])
    except KeyError:
        raise ValueError("JWK is missing the '{}' member".format(name))
    except (TypeError, ValueError):
        raise ValueError("JWK member '{}' is not valid base64url".format(name))
