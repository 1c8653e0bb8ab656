from dataclasses import dataclass
from enum import Enum, IntEnum


class Rank(IntEnum):
    """Card ranks by numeric value. The Ace has a low (1) and a high (14) member."""
    ACE_LOW = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE_HIGH = 14

    @property
    def is_ace(self):
        return self in (Rank.ACE_LOW, Rank.ACE_HIGH)

    @property
    def face(self):
        """Rank used for multiplicity counts; both Aces count as one face."""
        return Rank.ACE_LOW if self is Rank.ACE_HIGH else self

    @property
    def code(self):
        return RANK_CODES[self]


class Suit(Enum):
    DIAMOND = "D"
    SPADE = "S"
    CLUB = "C"
    HEART = "H"


RANK_CODES = {
    Rank.ACE_LOW: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "T", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE_HIGH: "A",
}


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __str__(self):
        return self.rank.code + self.suit.value


def format_hand(cards):
    """Render cards as readable codes like 'AH TD 3S'."""
    return " ".join(str(c) for c in cards)
