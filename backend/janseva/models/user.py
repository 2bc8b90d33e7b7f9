from werkzeug.security import generate_password_hash, check_password_hash
from janseva.extensions import db
from .base import BaseModel

ROLES = ("SUPER_ADMIN", "ADMIN")

class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    name = db.Column(db.String(120), nullable=True)

    role = db.Column(db.String(50), nullable=False, default='ADMIN')
    is_active = db.Column(db.Boolean, default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
