from __future__ import annotations

from domain.locales import Locale, split_path
from domain.slug_dictionary import SLUG_DICTIONARY, SlugDictionary


def translate_path(
    path: str,
    from_locale: Locale,
    to_locale: Locale,
    dictionary: SlugDictionary = SLUG_DICTIONARY,
) -> str:
    """Rewrite a ``from_locale`` path into its ``to_locale`` equivalent.

    Segments after the locale are translated one by one through the slug
    dictionary; segments it does not know (content slugs) are kept as-is.
    The segment count and order never change.
    """
    segments = split_path(path)
    if not segments:
        return f"/{to_locale}"

    translated: list[str] = []
    for index, segment in enumerate(segments):
        if index == 0:
            translated.append(to_locale if segment == from_locale else segment)
            continue
        mapping = dictionary.lookup(segment)
        translated.append(mapping.spelling(to_locale) if mapping is not None else segment)
    return "/" + "/".join(translated)
