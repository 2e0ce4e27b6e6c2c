"""Script and locale tags used for font fallback."""

from __future__ import annotations

from typing import Optional

UNKNOWN_SCRIPT = "Zzzz"

SCRIPT_TAGS: tuple[str, ...] = (
    "Adlm", "Aghb", "Ahom", "Arab", "Armi", "Armn", "Avst", "Bali", "Bamu",
    "Bass", "Batk", "Beng", "Bhks", "Bopo", "Brah", "Brai", "Bugi", "Buhd",
    "Cakm", "Cans", "Cari", "Cham", "Cher", "Chrs", "Copt", "Cprt", "Cyrl",
    "Deva", "Diak", "Dogr", "Dsrt", "Dupl", "Egyp", "Elba", "Elym", "Ethi",
    "Geor", "Glag", "Gong", "Gonm", "Goth", "Gran", "Grek", "Gujr", "Guru",
    "Hang", "Hani", "Hano", "Hatr", "Hebr", "Hira", "Hluw", "Hmng", "Hmnp",
    "Hung", "Ital", "Java", "Kali", "Kana", "Khar", "Khmr", "Khoj", "Kits",
    "Knda", "Kthi", "Lana", "Laoo", "Latn", "Lepc", "Limb", "Lina", "Linb",
    "Lisu", "Lyci", "Lydi", "Mahj", "Maka", "Mand", "Mani", "Marc", "Medf",
    "Mend", "Merc", "Mero", "Mlym", "Modi", "Mong", "Mroo", "Mtei", "Mult",
    "Mymr", "Nand", "Narb", "Nbat", "Newa", "Nkoo", "Nshu", "Ogam", "Olck",
    "Orkh", "Orya", "Osge", "Osma", "Palm", "Pauc", "Perm", "Phag", "Phli",
    "Phlp", "Phnx", "Plrd", "Prti", "Rjng", "Rohg", "Runr", "Samr", "Sarb",
    "Saur", "Sgnw", "Shaw", "Shrd", "Sidd", "Sind", "Sinh", "Sogd", "Sogo",
    "Sora", "Soyo", "Sund", "Sylo", "Syrc", "Tagb", "Takr", "Tale", "Talu",
    "Taml", "Tang", "Tavt", "Telu", "Tfng", "Tglg", "Thaa", "Thai", "Tibt",
    "Tirh", "Ugar", "Vaii", "Wara", "Wcho", "Xpeo", "Xsux", "Yezi", "Yiii",
    "Zanb", "Zinh", "Zyyy", "Zzzz",
)

_MAX_LOCALE_LEN = 16


def script_tag(index: int) -> str:
    """Return the ISO 15924 tag of the script with the given index, or ``Zzzz``."""
    if 0 <= index < len(SCRIPT_TAGS):
        return SCRIPT_TAGS[index]
    return UNKNOWN_SCRIPT


def _valid_language(subtag: str) -> bool:
    return subtag.isascii() and subtag.isalpha() and (2 <= len(subtag) <= 3 or 5 <= len(subtag) <= 8)


def _valid_script(subtag: str) -> bool:
    return subtag.isascii() and subtag.isalpha() and len(subtag) == 4


def _valid_region(subtag: str) -> bool:
    if not subtag.isascii():
        return False
    return (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit())


def locale_tag(language: str, script: Optional[str], region: Optional[str]) -> Optional[str]:
    """Join language, script and region subtags into a BCP 47 tag.

    Returns None when a subtag is malformed. Raises ValueError when the joined
    tag is longer than 16 bytes.
    """
    parts = [language]
    if script is not None:
        parts.append(script)
    if region is not None:
        parts.append(region)
    joined = "-".join(parts)
    if len(joined.encode("utf-8")) > _MAX_LOCALE_LEN:
        raise ValueError(f"locale {joined!r} is longer than {_MAX_LOCALE_LEN} bytes")
    if not _valid_language(language):
        return None
    if script is not None and not _valid_script(script):
        return None
    if region is not None and not _valid_region(region):
        return None
    tag = [language.lower()]
    if script is not None:
        tag.append(script.title())
    if region is not None:
        tag.append(region.upper())
    return "-".join(tag)