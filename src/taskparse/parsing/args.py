"""
Argument-level parsers.

Each function here inspects at most one token and either recognizes it as a
particular kind of argument (id list, tag, status attribute, description
word) or fails without consuming anything.
"""

import re

from taskparse.core.tokens import TokenStream
from taskparse.core.types import ParseResult
from taskparse.model import PartialUuid, Status, TaskId, WorkingSetId

# Tag names start with a letter, so "--help" is never read as a tag
TAG_NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9_-]*")

WORKING_SET_ID_PATTERN = re.compile(r"[0-9]+")

PARTIAL_UUID_PATTERN = re.compile(r"[0-9a-fA-F]{8}[0-9a-fA-F-]{0,28}")

STATUS_PREFIX = "status:"


def parse_task_id(text: str) -> TaskId | None:
    """
    Interpret a single id, either a working-set number or a UUID prefix.

    Params:
        text: One comma-separated item of an id list token

    Returns:
        The TaskId, or None if the text is neither form
    """
    if WORKING_SET_ID_PATTERN.fullmatch(text):
        number = int(text)
        if number == 0:
            return None
        return WorkingSetId(id=number)
    if PARTIAL_UUID_PATTERN.fullmatch(text):
        return PartialUuid(prefix=text.lower())
    return None


def id_list(stream: TokenStream) -> ParseResult[list[TaskId]]:
    """Match a token like `12`, `12,13` or `12,abcd1234`."""
    token = stream.first
    if token is None:
        return None

    ids = []
    for item in token.split(","):
        task_id = parse_task_id(item)
        if task_id is None:
            return None
        ids.append(task_id)
    return ids, stream.advance()


def _tag_with_sign(stream: TokenStream, sign: str) -> ParseResult[str]:
    token = stream.first
    if token is None or not token.startswith(sign):
        return None
    name = token[1:]
    if not TAG_NAME_PATTERN.fullmatch(name):
        return None
    return name, stream.advance()


def plus_tag(stream: TokenStream) -> ParseResult[str]:
    """Match `+tag`, yielding the tag name."""
    return _tag_with_sign(stream, "+")


def minus_tag(stream: TokenStream) -> ParseResult[str]:
    """Match `-tag`, yielding the tag name."""
    return _tag_with_sign(stream, "-")


def status_attribute(stream: TokenStream) -> ParseResult[Status]:
    """Match `status:pending`, `status:completed` or `status:deleted`."""
    token = stream.first
    if token is None or not token.startswith(STATUS_PREFIX):
        return None
    try:
        status = Status(token[len(STATUS_PREFIX) :])
    except ValueError:
        return None
    return status, stream.advance()


def any_word(stream: TokenStream) -> ParseResult[str]:
    """Match any single token; used for free-form description text."""
    token = stream.first
    if token is None:
        return None
    return token, stream.advance()
