"""Bartok table core - participants, hands and turn flow, UI-agnostic."""

from bartok.cards import Card, Deck, Rank, Suit
from bartok.card_entity import CardEntity, CardState
from bartok.layout import FanSlot, HandLayout, fan_slots
from bartok.participant import Participant, ParticipantKind

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "CardEntity",
    "CardState",
    "FanSlot",
    "HandLayout",
    "fan_slots",
    "Participant",
    "ParticipantKind",
]
