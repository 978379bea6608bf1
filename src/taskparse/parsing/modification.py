"""
Modification parsing.

Everything after a modifying keyword is a modification: `+tag` and `-tag`
arguments change tags, and every other argument is a word of the new
description.
"""

from taskparse.core.tokens import TokenStream, alt, many0, map_result
from taskparse.core.types import ParseResult
from taskparse.model import DescriptionMod, Modification
from taskparse.parsing.args import any_word, minus_tag, plus_tag

_modification_argument = alt(
    map_result(plus_tag, lambda tag: ("add_tag", tag)),
    map_result(minus_tag, lambda tag: ("remove_tag", tag)),
    map_result(any_word, lambda word: ("word", word)),
)


def parse_modification(stream: TokenStream) -> ParseResult[Modification]:
    """
    Parse the remaining arguments as a modification.

    Description words are joined with single spaces into a plain "set"
    description. Append and prepend are never produced here; the modify
    keywords reclassify the description afterwards.

    Params:
        stream: Input stream

    Returns:
        (Modification, remainder). Never fails.
    """
    arguments, rest = many0(_modification_argument)(stream)

    words = []
    add_tags = set()
    remove_tags = set()
    for kind, value in arguments:
        if kind == "add_tag":
            add_tags.add(value)
        elif kind == "remove_tag":
            remove_tags.add(value)
        else:
            words.append(value)

    if words:
        description = DescriptionMod.set(" ".join(words))
    else:
        description = DescriptionMod.unset()
    modification = Modification(
        description=description,
        add_tags=frozenset(add_tags),
        remove_tags=frozenset(remove_tags),
    )
    return modification, rest
