import click
from flask import Flask

from janseva.application.cms.move_section import renumber_sections
from janseva.application.cms.settings import get_settings, upsert_settings
from janseva.domain.typography import TYPOGRAPHY_KEYS
from janseva.extensions import db
from janseva.models.page import Page
from janseva.models.user import ROLES, User
from janseva.utils.transaction import transactional

DEFAULT_SETTINGS = {
    "site_copyright": "© Janseva. All Rights Reserved.",
    "feature_cms": True,
    "feature_media_uploads": True,
    **{key.setting_key: key.default for key in TYPOGRAPHY_KEYS},
}


def register_commands(app: Flask) -> None:
    @app.cli.command("create-admin")
    @click.option("--email", prompt=True)
    @click.option("--name", default=None)
    @click.option("--role", type=click.Choice(ROLES), default="SUPER_ADMIN", show_default=True)
    @click.password_option()
    def create_admin(email, name, role, password):
        """Create an admin user, or reset the password of an existing one."""
        user = User.query.filter_by(email=email).first()
        created = user is None

        with transactional():
            if created:
                user = User()
                user.email = email
                db.session.add(user)
            user.name = name or user.name
            user.role = role
            user.is_active = True
            user.set_password(password)

        click.echo(f"{'Created' if created else 'Updated'} {role} {email}")

    @app.cli.command("seed-settings")
    def seed_settings():
        """Insert default typography and feature settings that are missing."""
        existing = get_settings()
        missing = {k: v for k, v in DEFAULT_SETTINGS.items() if k not in existing}
        if not missing:
            click.echo("All default settings already present")
            return

        upsert_settings(actor_id=None, values=missing)
        click.echo(f"Seeded {len(missing)} settings")

    @app.cli.command("renumber-sections")
    @click.option("--page-id", type=int, default=None, help="Only this page (default: all pages)")
    def renumber(page_id):
        """Rewrite section orders to 0..N-1 without changing their sequence."""
        page_ids = [page_id] if page_id else [p.id for p in Page.query.order_by(Page.id).all()]

        total = 0
        for pid in page_ids:
            total += renumber_sections(page_id=pid)

        click.echo(f"Renumbered {total} sections across {len(page_ids)} pages")
