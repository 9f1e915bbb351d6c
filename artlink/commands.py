# artlink/commands.py
import click
from flask import Flask

from .extensions import db
from .models.user import User


def register_commands(app: Flask):

    @app.cli.command("create-admin")
    @click.option("--email", prompt="Admin email")
    @click.option("--name", prompt="Full name")
    @click.password_option()
    def create_admin(email, name, password):
        """Create an admin account (used for the administrative listings)."""
        email = email.strip().lower()
        if User.query.filter_by(email=email).first():
            raise click.ClickException("User with that email already exists.")

        user = User(name=name.strip(), email=email, role="admin")
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"Admin user {email} created successfully.")

    @app.cli.command("init-db")
    def init_db():
        """Create tables without migrations (local development)."""
        db.create_all()
        click.echo("Database tables created.")
