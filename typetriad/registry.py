# ABOUTME: Registry of the 18 combat types and their display names per language.
# ABOUTME: Provides canonical ordering and exact name <-> type resolution.

from collections.abc import Iterable
from enum import Enum, IntEnum

from typetriad.exceptions import TableIntegrityError, UnknownTypeError


class Type(IntEnum):
    """A combat type. The value is the type's ordinal in the canonical order."""

    NORMAL = 0
    FIGHT = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17


class Language(str, Enum):
    """Supported display languages for type names."""

    ENGLISH = "english"
    JAPANESE = "japanese"


TYPE_COUNT = 18

_ALL_TYPES: tuple[Type, ...] = tuple(sorted(Type))

ENGLISH_NAMES: dict[Type, str] = {
    Type.NORMAL: "Normal",
    Type.FIGHT: "Fight",
    Type.FLYING: "Flying",
    Type.POISON: "Poison",
    Type.GROUND: "Ground",
    Type.ROCK: "Rock",
    Type.BUG: "Bug",
    Type.GHOST: "Ghost",
    Type.STEEL: "Steel",
    Type.FIRE: "Fire",
    Type.WATER: "Water",
    Type.GRASS: "Grass",
    Type.ELECTRIC: "Electric",
    Type.PSYCHIC: "Psychic",
    Type.ICE: "Ice",
    Type.DRAGON: "Dragon",
    Type.DARK: "Dark",
    Type.FAIRY: "Fairy",
}

JAPANESE_NAMES: dict[Type, str] = {
    Type.NORMAL: "ノーマル",
    Type.FIGHT: "格闘",
    Type.FLYING: "飛行",
    Type.POISON: "毒",
    Type.GROUND: "地面",
    Type.ROCK: "岩",
    Type.BUG: "虫",
    Type.GHOST: "ゴースト",
    Type.STEEL: "鋼",
    Type.FIRE: "炎",
    Type.WATER: "水",
    Type.GRASS: "草",
    Type.ELECTRIC: "雷",
    Type.PSYCHIC: "エスパー",
    Type.ICE: "氷",
    Type.DRAGON: "ドラゴン",
    Type.DARK: "悪",
    Type.FAIRY: "フェアリー",
}

DISPLAY_NAMES: dict[Language, dict[Type, str]] = {
    Language.ENGLISH: ENGLISH_NAMES,
    Language.JAPANESE: JAPANESE_NAMES,
}


def _build_reverse_lookup(
    display_names: dict[Language, dict[Type, str]],
) -> dict[Language, dict[str, Type]]:
    """Invert the per-language name tables, checking they are complete and unambiguous.

    Args:
        display_names: Mapping of language to a type -> name table.

    Returns:
        Mapping of language to a name -> type table.

    Raises:
        TableIntegrityError: If a language is missing, a type has no name,
            or two types share a name within one language.
    """
    reverse: dict[Language, dict[str, Type]] = {}
    for language in Language:
        names = display_names.get(language)
        if names is None:
            raise TableIntegrityError(f"No display names for language {language.value}")

        missing = [t.name for t in _ALL_TYPES if t not in names]
        if missing:
            raise TableIntegrityError(f"Missing {language.value} names for: {', '.join(missing)}")

        by_name: dict[str, Type] = {}
        for type_ in _ALL_TYPES:
            name = names[type_]
            if name in by_name:
                raise TableIntegrityError(
                    f"Duplicate {language.value} name '{name}' for {by_name[name].name} and {type_.name}"
                )
            by_name[name] = type_
        reverse[language] = by_name
    return reverse


_TYPES_BY_NAME = _build_reverse_lookup(DISPLAY_NAMES)


def all_types() -> tuple[Type, ...]:
    """Return all 18 types in canonical order."""
    return _ALL_TYPES


def display_name(type_: Type, language: Language = Language.ENGLISH) -> str:
    """Return the display name of a type in the given language."""
    return DISPLAY_NAMES[language][type_]


def resolve(name: str, language: Language = Language.ENGLISH) -> Type:
    """Resolve a display name to its type.

    Matching is exact and case-sensitive ("Steel" resolves, "steel" and
    "Metal" do not).

    Args:
        name: Display name as written in `language`.
        language: Language the name is written in.

    Returns:
        The matching type.

    Raises:
        UnknownTypeError: If no type has that display name.
    """
    try:
        return _TYPES_BY_NAME[language][name]
    except KeyError:
        raise UnknownTypeError(name, language) from None


def resolve_all(names: Iterable[str], language: Language = Language.ENGLISH) -> list[Type]:
    """Resolve several display names, failing on the first unknown one."""
    return [resolve(name, language) for name in names]
