DWN_SERVICE_ID = "#dwn"
DWN_SERVICE_TYPE = "DecentralizedWebNode"

DWN_SIGNING_KEY_ID = "#dwn-sig"
DWN_ENCRYPTION_KEY_ID = "#dwn-enc"

TECH_PREVIEW_DID_DOCUMENT_URL = "https://dwn.tbddev.org/.well-known/did.json"
HEALTH_CHECK_PATH = "/health"

# Number of DWN nodes allocated to a single user during the Tech Preview
TECH_PREVIEW_NODE_ALLOCATION = 2

DEFAULT_REQUEST_TIMEOUT_SECONDS = 5.0
