from cards import Card, Rank, Suit

HAND_SIZE = 5

# 'A' and '1' both parse to the low Ace; the evaluator promotes it when needed.
CODE_TO_RANK = {
    "A": Rank.ACE_LOW, "1": Rank.ACE_LOW,
    "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR, "5": Rank.FIVE,
    "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT, "9": Rank.NINE,
    "T": Rank.TEN, "J": Rank.JACK, "Q": Rank.QUEEN, "K": Rank.KING,
}


class ParseError(ValueError):
    """Raised when a line of text does not describe a valid hand."""


def parse_card(token):
    """
    Convert a card code like 'AH', 'th' or '10C' to a Card.
    Raises ParseError on a bad length, rank or suit.

    Only the first two characters are read, except that a leading '10' is
    the Ten.
    """
    code = token.strip()
    if len(code) not in (2, 3):
        raise ParseError(f"Invalid card format: {code}")

    if code.startswith("10") and len(code) == 3:
        rank_char, suit_char = "T", code[2].upper()
    else:
        rank_char, suit_char = code[0].upper(), code[1].upper()

    try:
        rank = CODE_TO_RANK[rank_char]
    except KeyError as e:
        raise ParseError(f"Invalid rank character: {rank_char}") from e
    try:
        suit = Suit(suit_char)
    except ValueError as e:
        raise ParseError(f"Invalid suit character: {suit_char}") from e

    return Card(rank, suit)


def parse(text):
    """Parse a comma separated line such as 'AH, 2H, 3H, 4H, 5H' into five cards."""
    cards = [parse_card(token) for token in text.split(",")]
    if len(cards) != HAND_SIZE:
        raise ParseError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    return cards
