import logging
import sys
from pathlib import Path

from ansi.color import fg, fx

PACKAGE = "numenv"


class CustomFormatter(logging.Formatter):
    FORMATS = {
        logging.DEBUG: fg.green,
        logging.INFO: fg.blue,
        logging.WARNING: fg.yellow,
        logging.ERROR: fg.red,
        logging.CRITICAL: fg.boldred,
    }

    def format(self, record):
        msg: str = record.getMessage()

        if "\n" in msg:
            title, _, body = msg.partition("\n")
            bar = f"\n{fg.darkgray}│{fx.reset} "
            msg = (
                title
                + bar
                + body.replace("\n", bar)
                + f"\n{fg.darkgray}└─────{fx.reset}"
            )
            beg = f"{fg.darkgray}┌{fx.reset}"
        else:
            beg = f"{fg.darkgray}•{fx.reset}"

        return (
            f"{beg}{self.FORMATS[record.levelno]}{record.levelname}{fx.reset}"
            + " "
            + f"{fg.darkgray}{fx.italic}{fx.faint}{short_path(record.pathname)}"
            + ":"
            + f"{record.lineno}{fx.reset}"
            + " "
            + msg
        )


def short_path(pathname: str) -> str:
    """The part of `pathname` below the innermost `numenv` directory."""
    parts = Path(pathname).parts
    found = [loc for loc, val in enumerate(parts) if val == PACKAGE]
    if len(found) == 0:
        return parts[-1]
    return "/".join(parts[max(found) + 1 :])


def install(debug=False):
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, CustomFormatter):
            root_logger.removeHandler(handler)
    if debug:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.WARNING)
    console_handler = logging.StreamHandler(stream=sys.stderr)
    colored_formatter = CustomFormatter()
    console_handler.setFormatter(colored_formatter)
    root_logger.addHandler(console_handler)
