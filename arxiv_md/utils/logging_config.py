import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger("arxiv_md")
    logger.setLevel(level)

    # Requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    logger.debug(f"Logging configured at level {logging.getLevelName(level)}")

    return logger
