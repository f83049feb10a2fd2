from enum import Enum, auto, unique


@unique
class CharacterCategory(Enum):
    CHAR = auto()
    DELIMITER = auto()
    START_QUOTE = auto()
    END_QUOTE = auto()
    ESCAPED_QUOTE = auto()
    NEWLINE = auto()
    # Position inside a multi-character token other than its first character.
    NOOP = auto()
