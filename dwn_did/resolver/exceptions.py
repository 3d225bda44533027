class MalformedDIDDocument(Exception):
    pass
