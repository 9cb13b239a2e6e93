# posoffice/models/admin.py
from posoffice.extensions import db, bcrypt

# Update logic always targets this row
SINGLETON_ADMIN_ID = 1


def hash_secret(raw: str) -> str:
    return bcrypt.generate_password_hash(str(raw)).decode("utf-8")


def check_secret(hashed: str | None, raw) -> bool:
    if not hashed or raw is None:
        return False
    try:
        return bcrypt.check_password_hash(hashed, str(raw))
    except ValueError:
        # not a bcrypt hash
        return False


class Admin(db.Model):
    __tablename__ = "admin"

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(150), nullable=False)
    username = db.Column(db.String(150), unique=True, nullable=False)
    # bcrypt hashes, never plaintext
    password = db.Column(db.String(200), nullable=False)
    pin = db.Column(db.String(200), nullable=False)
    role = db.Column(db.String(50), nullable=False, default="admin")

    # --- Secret handling -----------------------------------------------------
    def set_password(self, password: str) -> None:
        self.password = hash_secret(password)

    def check_password(self, password: str) -> bool:
        return check_secret(self.password, password)

    def set_pin(self, pin) -> None:
        self.pin = hash_secret(pin)

    def check_pin(self, pin) -> bool:
        return check_secret(self.pin, pin)

    def __repr__(self):
        return f"<Admin {self.username} role={self.role}>"
