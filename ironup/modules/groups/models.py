# Supabase table: challenge_groups
# This file documents the expected database schema and the stored record type
# Actual operations are handled via Supabase SDK in ironup/database/store.py

"""
Expected Supabase table structure:

challenge_groups:
- group_id: text (primary key) - 12 character token
- created_at: text (not null) - challenge start date, DD/MM/YYYY
- exercise: text (not null, check in ('Push Ups', 'Pull Ups', 'Dips'))
- days: integer (not null, check days between 15 and 90)
- starting_point: integer (not null) - first day target
- increment: integer (not null) - daily target increase
- members: json (not null) - {username: counter}; plain json keeps join order
"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List


class Exercise(str, Enum):
    PUSH_UPS = "Push Ups"
    PULL_UPS = "Pull Ups"
    DIPS = "Dips"


class GroupRecord(BaseModel):
    group_id: str
    created_at: str
    exercise: Exercise
    days: int
    starting_point: int
    increment: int
    members: Dict[str, int] = Field(default_factory=dict)

    def roster(self) -> List[str]:
        return list(self.members.keys())
