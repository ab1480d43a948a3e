import logging
import os
import sys
from typing import Optional

from pulumi import log, provider

from thunder_helm.provider import ThunderHelmProvider


def serve(args: Optional[list[str]] = None) -> None:
    """Serve the provider to the Pulumi engine until it hangs up

    :param args: Arguments handed over by the engine, defaults to the process arguments
    :return: None
    """
    log.debug("serving thunder-helm provider")

    provider.main(ThunderHelmProvider(), sys.argv[1:] if args is None else args)


# Configure stdlib logging at import time so config and chart discovery are logged from the first request.
if os.getenv("THUNDER_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "thunder logging enabled"
    log.debug(msg)
    logging.debug(msg)
