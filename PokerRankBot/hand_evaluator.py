import logging

from cards import Rank, format_hand

log = logging.getLogger(__name__)

LOW_ACE_RUN = (Rank.ACE_LOW, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)
HIGH_ACE_RUN = (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE_HIGH)


def ace_readings(cards):
    """
    Rank lists to test for sequences: the ranks as given and, when the hand
    holds an Ace, the same ranks with every Ace switched to its other value.
    """
    ranks = sorted(c.rank for c in cards)
    readings = [ranks]
    if any(r.is_ace for r in ranks):
        swapped = [(Rank.ACE_HIGH if r is Rank.ACE_LOW else Rank.ACE_LOW) if r.is_ace else r
                   for r in ranks]
        readings.append(sorted(swapped))
    return readings


def face_counts(cards):
    faces = [c.rank.face for c in cards]
    return {f: faces.count(f) for f in set(faces)}


def is_run(ranks):
    """True if the sorted ranks are five distinct, adjacent values."""
    unique = sorted(set(ranks))
    if len(unique) != 5:
        return False
    if tuple(unique) in (LOW_ACE_RUN, HIGH_ACE_RUN):
        return True
    return all(b - a == 1 for a, b in zip(unique, unique[1:]))


# ---- Predicates ----
def is_flush(cards):
    return len(set(c.suit for c in cards)) == 1


def is_straight(cards):
    return any(is_run(ranks) for ranks in ace_readings(cards))


def is_straight_flush(cards):
    return is_flush(cards) and is_straight(cards)


def is_royal_flush(cards):
    if not is_flush(cards):
        return False
    return any(tuple(ranks) == HIGH_ACE_RUN for ranks in ace_readings(cards))


def is_four_of_a_kind(cards):
    return 4 in face_counts(cards).values()


def is_full_house(cards):
    return sorted(face_counts(cards).values()) == [2, 3]


def is_three_of_a_kind(cards):
    # Full House is checked first, so a pair alongside the trips is not excluded here.
    return 3 in face_counts(cards).values()


def is_two_pair(cards):
    return list(face_counts(cards).values()).count(2) == 2


def is_pair(cards):
    return 2 in face_counts(cards).values()


HIGH_CARD = "High Card"

# Highest priority first; the first predicate that holds names the hand.
PRIORITY = (
    (is_royal_flush, "Royal Flush"),
    (is_straight_flush, "Straight Flush"),
    (is_flush, "Flush"),
    (is_four_of_a_kind, "Four of a Kind"),
    (is_full_house, "Full House"),
    (is_three_of_a_kind, "Three of a Kind"),
    (is_straight, "Straight"),
    (is_two_pair, "Two Pair"),
    (is_pair, "Pair"),
)

HAND_LABELS = tuple(label for _, label in PRIORITY) + (HIGH_CARD,)


def classify(hand):
    """
    Name the category of exactly 5 cards. Sorts the hand ascending by rank
    in place, then returns the label of the first matching category.
    """
    hand.sort(key=lambda c: c.rank)
    label = next((label for predicate, label in PRIORITY if predicate(hand)), HIGH_CARD)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("classified %s as %s", format_hand(hand), label)
    return label
