# Supabase tables: users, auth.users
# This file documents the expected database schema and the stored record type
# Actual operations are handled via Supabase SDK in ironup/database/store.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

users:
- username: text (primary key)
- email: text (unique, not null)
- avatar: text (not null, default: placeholder image URL)
- coin: integer (not null, default: 0, check coin >= 0)
- current_group: text (nullable) - challenge_groups.group_id or null
- history: jsonb (not null, default: '[]') - redeemed check-in dates, DD/MM/YYYY

Note: passwords live in auth.users; the username is mirrored into the auth
user's user_metadata at registration.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class UserRecord(BaseModel):
    username: str
    email: str
    avatar: str
    coin: int = Field(0, ge=0)
    current_group: Optional[str] = None
    history: List[str] = Field(default_factory=list)
