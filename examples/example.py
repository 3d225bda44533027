import asyncio
import logging
from pprint import pprint

from dwn_did.client.configuration import generate_dwn_configuration
from dwn_did.resolver.discovery import get_tech_preview_dwn_endpoints

# NOTE: Uses the public Tech Preview DID document, so network access is required.
# If no DWN can be reached, the configuration is built with the fallback URL below.
FALLBACK_DWN_URLS = ["http://localhost:3000"]


async def create_dwn_configuration():
    dwn_urls = await get_tech_preview_dwn_endpoints()
    if not dwn_urls:
        dwn_urls = FALLBACK_DWN_URLS

    configuration = await generate_dwn_configuration(dwn_urls)
    pprint(configuration.to_create_options(include_private_keys=False))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_dwn_configuration())
