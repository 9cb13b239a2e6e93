# posoffice/services/admin_account.py
from __future__ import annotations

from sqlalchemy import select, update

from posoffice.models import Admin
from posoffice.models.admin import SINGLETON_ADMIN_ID, hash_secret


def first_admin(session) -> Admin | None:
    return session.execute(select(Admin).order_by(Admin.id.asc()).limit(1)).scalars().first()


def find_by_username(session, username: str) -> Admin | None:
    return session.execute(
        select(Admin).where(Admin.username == username)
    ).scalars().first()


def get_admin(session, admin_id) -> Admin | None:
    try:
        return session.get(Admin, int(admin_id))
    except (TypeError, ValueError):
        return None


def masked_admin_data(admin: Admin, mask_length: int = 8) -> dict:
    """Account data for the settings screen; secrets are hashes, so only a fixed mask is shown."""
    return {
        "full_name": admin.full_name,
        "username": admin.username,
        "password": "*" * mask_length,
        "pin": "*" * mask_length,
        "role": admin.role,
    }


def update_admin(
    session,
    full_name: str,
    username: str,
    role: str,
    password: str | None = None,
    pin: str | None = None,
) -> int:
    """
    Update the singleton admin row. Password and PIN are only written when
    given (non-empty); both are stored hashed. Returns the affected row count.
    """
    values = {"full_name": full_name, "username": username, "role": role}
    if password:
        values["password"] = hash_secret(password)
    if pin:
        values["pin"] = hash_secret(pin)

    result = session.execute(
        update(Admin).where(Admin.id == SINGLETON_ADMIN_ID).values(**values)
    )
    session.commit()
    return result.rowcount
