from janseva.extensions import db
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "page_sections"

    page_id = db.Column(db.Integer, db.ForeignKey("pages.id"), nullable=False, index=True)
    type = db.Column(db.String(50), nullable=False)  # HERO, RICHTEXT, BIOGRAPHY, ...
    order = db.Column(db.Integer, nullable=False, default=0)  # not unique per page
    content = db.Column(db.JSON, default=dict)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)

    page = db.relationship("Page", back_populates="sections")

    __table_args__ = (
        db.Index("idx_section_page_order", "page_id", "order"),
    )
