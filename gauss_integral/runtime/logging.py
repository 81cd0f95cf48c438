import sys
import logging


console_format = "%(message)s"
file_format = "%(asctime)s %(name)s %(levelname)s %(message)s"


def reset_logging(level: int = logging.INFO):
    """
    Route the records of all loggers to stdout, plain like print(...).

    Existing handlers of the root logger are dropped. With `level=logging.DEBUG`
    the Newton-Raphson iteration counts and grid sizes show up as well.
    """
    root_logger = logging.getLogger()
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(console_format))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def switch_log_file(log_file):
    """Copy the records into `log_file`, closing the file used so far, if any."""
    root_logger = logging.getLogger()
    for h in [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]:
        root_logger.removeHandler(h)
        h.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(file_format))
    root_logger.addHandler(file_handler)
    return file_handler
