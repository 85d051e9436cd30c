import logging


def set_logger(name="quiz_app", log_file=None):
    logger = logging.getLogger(name)
    for handler in logger.handlers:
        if type(handler) is logging.StreamHandler:
            return logger, handler

    logger.setLevel(logging.DEBUG)
    log_formatter = logging.Formatter(fmt="[{asctime}] [{levelname:<8}] {name}: {message}", datefmt="%Y-%m-%d %H:%M:%S",
                                      style="{")

    if log_file:
        file_handler = logging.FileHandler(filename=log_file, encoding="utf-8", mode='a')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(log_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(log_formatter)
    logger.addHandler(console_handler)

    return logger, console_handler
