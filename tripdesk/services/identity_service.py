from typing import Optional

from pydantic import BaseModel


class Identity(BaseModel):
    """The signed-in user as reported by the external identity provider."""

    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None


def identity_from_headers(uid: Optional[str], email: Optional[str] = None, display_name: Optional[str] = None) -> Optional[Identity]:
    """Build the current identity from forwarded provider headers. No uid means nobody is signed in."""
    if not uid or not uid.strip():
        return None
    return Identity(
        uid=uid.strip(),
        email=email.strip() if email else None,
        display_name=display_name.strip() if display_name else None,
    )
