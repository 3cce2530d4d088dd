import logging
from typing import Iterator, TextIO
from pydantic import ValidationError
from arena.errors import CommandFormatError
from .schemas import CommandIn, RecordCount

logger = logging.getLogger(__name__)

FIELDS = ("time", "cmd", "p1", "p2", "p3")


def _tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace separated tokens; records may span or share lines."""
    for line in stream:
        yield from line.split()


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err["loc"])
    return f"{loc}: {err['msg']}"


def read_commands(stream: TextIO) -> Iterator[CommandIn]:
    """Parse a record count followed by that many `time cmd p1 p2 p3` records.

    An empty stream yields nothing. A stream that ends early stops the
    iteration; tokens past the counted records are never read.
    Raises CommandFormatError for a record that does not validate.
    """
    tokens = _tokens(stream)
    header = next(tokens, None)
    if header is None:
        return
    try:
        count = RecordCount(count=header).count
    except ValidationError as exc:
        raise CommandFormatError(0, _first_error(exc)) from exc

    for index in range(1, count + 1):
        raw = []
        for token in tokens:
            raw.append(token)
            if len(raw) == len(FIELDS):
                break
        if len(raw) < len(FIELDS):
            if raw:
                logger.warning("Dropping truncated record #%d: %s", index, " ".join(raw))
            logger.warning("Input ended after %d of %d records", index - 1, count)
            return
        try:
            yield CommandIn(**dict(zip(FIELDS, raw)))
        except ValidationError as exc:
            raise CommandFormatError(index, _first_error(exc)) from exc
