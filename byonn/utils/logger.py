import logging
from pathlib import Path


def setup_logger(name, log_file=None, level=logging.INFO):
    """Setup a logger that writes to the console and, optionally, *log_file*.

    Handlers are only attached once per logger name, so repeated imports in
    interactive sessions do not duplicate output.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding multiple handlers in interactive / multi-import environments
    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

        # Console handler
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

        # File handler
        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file)
            fh.setLevel(level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    return logger

# Default loggers that other modules can import
train_logger = setup_logger('byonn.train')
bench_logger = setup_logger('byonn.bench')
