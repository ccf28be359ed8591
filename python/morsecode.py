#!/usr/bin/env python3
"""
Name: morsecode
Description: translate text to and from International Morse Code
License: artistic2
"""

from enum import Enum
from types import MappingProxyType

# --- Errors ---

class MorseError(ValueError):
    """Base class for all translation failures."""

class UnknownCharacter(MorseError):
    """Raised when text contains a character that has no Morse code."""
    def __init__(self, char):
        self.char = char
        super().__init__(f"'{char}' cannot be translated to morse code")

class InvalidSymbol(MorseError):
    """Raised when a token of morse text is not a dit, dah or gap."""
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"'{symbol}' is not a valid morse code symbol")

class UnknownSequence(MorseError):
    """Raised when a group of dits and dahs does not spell any character."""
    def __init__(self, sequence):
        self.sequence = tuple(sequence)
        rendered = ' '.join(
            p.render() if isinstance(p, Pulse) else str(p) for p in self.sequence)
        super().__init__(f"'{rendered}' is not a valid morse code sequence")

# --- Symbol Model ---

class Pulse(Enum):
    """
    The five symbols of International Morse Code.

    Each member's value is a (rendering, weight) pair. The weight is the
    duration in dit units; it is informational only.
    """
    SHORT_MARK = ('·', 1)  # dit
    LONG_MARK = ('―', 3)   # dah
    UNIT_GAP = (' ', 1)
    LETTER_GAP = (' ' * 3, 3)
    WORD_GAP = (' ' * 7, 7)

    def render(self) -> str:
        return self.value[0]

    @property
    def weight(self) -> int:
        return self.value[1]

DIT = Pulse.SHORT_MARK
DAH = Pulse.LONG_MARK

# Reverse lookup for parse(); the renderings must stay pairwise distinct.
_PULSE_BY_RENDERING = MappingProxyType({p.render(): p for p in Pulse})
assert len(_PULSE_BY_RENDERING) == len(Pulse), "pulse renderings are not unique"

def render(pulse: Pulse) -> str:
    """Returns the canonical text form of a pulse."""
    return pulse.render()

def parse(symbol: str) -> Pulse:
    """Returns the pulse whose rendering is exactly `symbol`."""
    try:
        return _PULSE_BY_RENDERING[symbol]
    except KeyError:
        raise InvalidSymbol(symbol) from None

def weight(pulse: Pulse) -> int:
    return pulse.weight

# --- Code Table ---

CODE_TABLE = (
    (' ', (Pulse.WORD_GAP,)),
    ('a', (DIT, DAH)),
    ('b', (DAH, DIT, DIT, DIT)),
    ('c', (DAH, DIT, DAH, DIT)),
    ('d', (DAH, DIT, DIT)),
    ('e', (DIT,)),
    ('f', (DIT, DIT, DAH, DIT)),
    ('g', (DAH, DAH, DIT)),
    ('h', (DIT, DIT, DIT, DIT)),
    ('i', (DIT, DIT)),
    ('j', (DIT, DAH, DAH, DAH)),
    ('k', (DAH, DIT, DAH)),
    ('l', (DIT, DAH, DIT, DIT)),
    ('m', (DAH, DAH)),
    ('n', (DAH, DIT)),
    ('o', (DAH, DAH, DAH)),
    ('p', (DIT, DAH, DAH, DIT)),
    ('q', (DAH, DAH, DIT, DAH)),
    ('r', (DIT, DAH, DIT)),
    ('s', (DIT, DIT, DIT)),
    ('t', (DAH,)),
    ('u', (DIT, DIT, DAH)),
    ('v', (DIT, DIT, DIT, DAH)),
    ('w', (DIT, DAH, DAH)),
    ('x', (DAH, DIT, DIT, DAH)),
    ('y', (DAH, DIT, DAH, DAH)),
    ('z', (DAH, DAH, DIT, DIT)),
    ('1', (DIT, DAH, DAH, DAH, DAH)),
    ('2', (DIT, DIT, DAH, DAH, DAH)),
    ('3', (DIT, DIT, DIT, DAH, DAH)),
    ('4', (DIT, DIT, DIT, DIT, DAH)),
    ('5', (DIT, DIT, DIT, DIT, DIT)),
    ('6', (DAH, DIT, DIT, DIT, DIT)),
    ('7', (DAH, DAH, DIT, DIT, DIT)),
    ('8', (DAH, DAH, DAH, DIT, DIT)),
    ('9', (DAH, DAH, DAH, DAH, DIT)),
    ('0', (DAH, DAH, DAH, DAH, DAH)),
)

def _build_reverse(table):
    """Maps each sequence to the first character that uses it."""
    reverse = {}
    for char, sequence in table:
        if sequence in reverse:
            raise MorseError(
                f"'{char}' and '{reverse[sequence]}' share a morse code sequence")
        reverse[sequence] = char
    return reverse

CHAR_TO_SEQUENCE = MappingProxyType(dict(CODE_TABLE))
SEQUENCE_TO_CHAR = MappingProxyType(_build_reverse(CODE_TABLE))

def lookup_by_char(char: str) -> tuple:
    """Returns the pulse sequence for a lowercase letter, digit or space."""
    try:
        return CHAR_TO_SEQUENCE[char]
    except (KeyError, TypeError):
        raise UnknownCharacter(char) from None

def lookup_by_sequence(sequence) -> str:
    """Returns the character spelled by an iterable of pulses."""
    sequence = tuple(sequence)
    try:
        return SEQUENCE_TO_CHAR[sequence]
    except (KeyError, TypeError):
        raise UnknownSequence(sequence) from None

# --- Translation Engine ---

def render_letter(sequence) -> str:
    """Renders one character's pulses, separated by unit gaps."""
    return Pulse.UNIT_GAP.render().join(p.render() for p in sequence)

def _encode_word(word):
    return Pulse.LETTER_GAP.render().join(
        render_letter(lookup_by_char(char)) for char in word)

def _decode_letter(letter):
    # An empty letter means the gaps around it were malformed.
    pulses = [parse(symbol) for symbol in letter.split(Pulse.UNIT_GAP.render())]
    return lookup_by_sequence(pulses)

def _decode_word(word):
    if not word:
        return ''
    return ''.join(
        _decode_letter(letter) for letter in word.split(Pulse.LETTER_GAP.render()))

def translate_to_morse(text: str) -> str:
    """
    Encodes lowercase text into morse.

    Words are split on single spaces, so consecutive spaces produce empty
    morse words between word gaps. Raises UnknownCharacter for anything
    outside a-z, 0-9 and space.
    """
    words = [_encode_word(word) for word in text.split(' ')]
    return Pulse.WORD_GAP.render().join(words)

def translate_from_morse(morse: str) -> str:
    """
    Decodes morse produced by translate_to_morse back into text.

    Raises InvalidSymbol for a token that is not a dit or dah and
    UnknownSequence for a letter that is not in the code table.
    """
    words = [_decode_word(word) for word in morse.split(Pulse.WORD_GAP.render())]
    return ' '.join(words)

def format_table():
    """Returns one 'char: morse' line per code table entry, in table order."""
    return [f"{char}: {render_letter(sequence)}" for char, sequence in CODE_TABLE]
