import time
from typing import Optional
from pydantic import BaseModel, ConfigDict


class TestIdentity(BaseModel):
    """Credentials of the throwaway customer account used for one run"""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email: str
    password: str
    new_password: str


def generate_identity(timestamp_ms: Optional[int] = None) -> TestIdentity:
    """Build a fresh identity whose email is unique to the current millisecond"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    return TestIdentity(
        first_name='Test',
        last_name='User',
        email=f'testuser_{timestamp_ms}@example.com',
        password='TestPassword123!',
        new_password='NewTestPassword123!'
    )
