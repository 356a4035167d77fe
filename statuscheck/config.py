import logging


class Settings:
    TARGET_URL: str = "https://charm.sh/"
    CHECK_TIMEOUT_SECONDS: float = 10.0
    LOG_LEVEL: int = logging.WARNING


settings = Settings()


def setup_logging() -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    # stdout belongs to the rendered view
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
