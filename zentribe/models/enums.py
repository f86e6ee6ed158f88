# File: zentribe/models/enums.py

from enum import Enum

class ItemKind(Enum):
    """Discriminator for the dated things a calendar holds."""
    EVENT = "event"
    REMINDER = "reminder"
    TODO = "todo"


class Visibility(Enum):
    """Who can see a calendar item."""
    PRIVATE = "private"
    FRIENDS = "friends"
    PUBLIC = "public"
