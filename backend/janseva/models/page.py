from janseva.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = "pages"

    title_hi = db.Column(db.String(255), nullable=False)
    title_en = db.Column(db.String(255), nullable=True)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)

    seo_title = db.Column(db.String(255), nullable=True)
    seo_desc = db.Column(db.Text, nullable=True)

    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    typography = db.Column(db.JSON(none_as_null=True), default=dict)  # override key -> value
    template = db.Column(db.String(50), nullable=False, default="blank")

    # No ORM cascade: sections are removed explicitly by delete_page
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.order",
        passive_deletes=True,
    )
