import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# 요청마다 INFO 로그를 남기는 외부 라이브러리
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO"):
    level_value = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level_value, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level_value, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
