import logging
from typing import Callable

logger = logging.getLogger("zip_extract")

ExtractLogger = Callable[[str, bool], None]


def post_extract_message(message: str, is_header: bool = False) -> None:
    if is_header:
        logger.info(message)
    else:
        logger.info("  - %s", message)
