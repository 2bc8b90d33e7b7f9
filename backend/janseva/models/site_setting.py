from janseva.extensions import db
from .base import BaseModel

SETTING_TYPES = {"TEXT", "BOOLEAN"}
SETTING_GROUPS = {"GENERAL", "HERO", "CONTACT", "SOCIAL", "TYPOGRAPHY", "FEATURES"}


class SiteSetting(BaseModel):
    __tablename__ = "site_settings"

    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=False, default="")
    type = db.Column(db.String(20), nullable=False, default="TEXT")
    group = db.Column(db.String(20), nullable=False, default="GENERAL")

    def as_bool(self) -> bool:
        return self.value.strip().lower() in ("1", "true", "yes", "on")
