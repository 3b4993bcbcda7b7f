# muaythai/commands.py
import logging
import os
import random

import click
from flask import current_app
from flask.cli import AppGroup, with_appcontext

from muaythai.errors import ApiError
from muaythai.extensions import db
from muaythai.models import Gym, GymImage, Province, Tag, Trainer, TrainingClass
from muaythai.seed_data import (
    BASE_CLASSES,
    MOCK_FIRST_NAMES,
    MOCK_GYM_NAMES,
    MOCK_IMAGES,
    MOCK_LAST_NAMES,
    PRODUCTION_TAGS,
    THAILAND_PROVINCES,
)
from muaythai.services.admin_users import create_admin_user, get_admin_user_by_email
from muaythai.utils.slug import slugify

logger = logging.getLogger(__name__)

seed_cli = AppGroup("seed", help="Load reference and sample data.")


def _is_production():
    return os.getenv("FLASK_CONFIG") == "production" or not (current_app.debug or current_app.testing)


# ================================
# Seed helpers (idempotent)
# ================================

def purge_duplicate_provinces():
    """Keep the lowest id for each English province name."""
    seen = set()
    removed = 0
    for province in Province.query.order_by(Province.id).all():
        if province.name_en in seen:
            db.session.delete(province)
            removed += 1
        else:
            seen.add(province.name_en)
    db.session.commit()
    return removed


def seed_provinces():
    purge_duplicate_provinces()
    existing = {name_en for (name_en,) in db.session.query(Province.name_en)}
    added = 0
    for name_th, name_en in THAILAND_PROVINCES:
        if name_en not in existing:
            db.session.add(Province(name_th=name_th, name_en=name_en))
            added += 1
    db.session.commit()
    return added


def seed_tags():
    added = 0
    for name_th, name_en in PRODUCTION_TAGS:
        slug = slugify(name_en)
        if Tag.query.filter_by(slug=slug).first() is None:
            db.session.add(Tag(name_th=name_th, name_en=name_en, slug=slug))
            added += 1
    db.session.commit()
    return added


def seed_classes():
    added = 0
    for data in BASE_CLASSES:
        if TrainingClass.query.filter_by(name_en=data["name_en"]).first() is None:
            db.session.add(TrainingClass(**data))
            added += 1
    db.session.commit()
    return added


def ensure_admin(email, password, role):
    if not email or not password:
        return None
    existing = get_admin_user_by_email(email)
    if existing is not None:
        return existing
    return create_admin_user(email, password, role)


def seed_production_data():
    summary = {"provinces": seed_provinces()}
    admin = ensure_admin(os.getenv("ADMIN_EMAIL"), os.getenv("ADMIN_PASSWORD"), "admin")
    developer = ensure_admin(os.getenv("DEV_EMAIL"), os.getenv("DEV_PASSWORD"), "staff")
    summary["admins"] = [user.email for user in (admin, developer) if user is not None]
    summary["tags"] = seed_tags()
    summary["classes"] = seed_classes()
    logger.info("Production seed finished: %s", summary)
    return summary


def seed_development_data(massive=False, rng=None):
    rng = rng or random.Random()
    provinces = Province.query.all()
    tags = Tag.query.all()
    classes = TrainingClass.query.all()
    if not provinces:
        raise click.ClickException("Provinces must be seeded first.")

    gym_count, trainer_count = (50, 50) if massive else (5, 10)
    gyms = []
    for number in range(1, gym_count + 1):
        name_th, name_en = rng.choice(MOCK_GYM_NAMES)
        gym = Gym(
            name_th=f"{name_th} #{number}",
            name_en=f"{name_en} #{number}",
            province=rng.choice(provinces),
            tags=rng.sample(tags, min(2, len(tags))),
        )
        gym.images = [GymImage(image_url=url) for url in rng.sample(MOCK_IMAGES, 2)]
        gyms.append(gym)
        db.session.add(gym)

    for _ in range(trainer_count):
        first_th, first_en = rng.choice(MOCK_FIRST_NAMES)
        last_th, last_en = rng.choice(MOCK_LAST_NAMES)
        is_freelance = rng.random() > 0.5
        db.session.add(Trainer(
            first_name_th=first_th,
            last_name_th=last_th,
            first_name_en=first_en,
            last_name_en=last_en,
            is_freelance=is_freelance,
            gym=None if is_freelance else rng.choice(gyms + [None]),
            province=rng.choice(provinces),
            exp_year=rng.randint(0, 30),
            tags=rng.sample(tags, min(2, len(tags))),
            classes=rng.sample(classes, min(2, len(classes))),
        ))
    db.session.commit()
    logger.info("Seeded %d mock gyms and %d mock trainers", gym_count, trainer_count)
    return {"gyms": gym_count, "trainers": trainer_count}


# ================================
# CLI
# ================================

@seed_cli.command("provinces")
def seed_provinces_command():
    """Seed all Thai provinces."""
    added = seed_provinces()
    click.echo(f"Provinces seeded ({added} added, {Province.query.count()} total).")


@seed_cli.command("admin")
@click.option("--email", required=True)
@click.option("--password", required=True, prompt=True, hide_input=True)
@click.option("--role", type=click.Choice(["admin", "staff"]), default="admin", show_default=True)
def seed_admin_command(email, password, role):
    """Create an admin user."""
    if get_admin_user_by_email(email):
        click.echo(f"User with email '{email}' already exists.")
        return
    try:
        user = create_admin_user(email, password, role)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"{user.role.capitalize()} created: {user.email}")


@seed_cli.command("prod")
def seed_prod_command():
    """Seed provinces, admin users, tags and classes."""
    try:
        summary = seed_production_data()
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(
        f"Seeded {summary['provinces']} provinces, {summary['tags']} tags, "
        f"{summary['classes']} classes; admins: {', '.join(summary['admins']) or 'none'}"
    )


@seed_cli.command("dev")
@click.option("--massive", is_flag=True, help="Seed 50 gyms and 50 trainers.")
def seed_dev_command(massive):
    """Seed production data plus mock gyms and trainers."""
    if _is_production():
        raise click.ClickException("Refusing to seed mock data in production.")
    seed_production_data()
    summary = seed_development_data(massive=massive)
    click.echo(f"Seeded {summary['gyms']} gyms and {summary['trainers']} trainers.")


@click.command("reset-db")
@with_appcontext
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
def reset_db_command(yes):
    """Drop and recreate every table."""
    if _is_production():
        raise click.ClickException("Refusing to reset the production database.")
    if not yes:
        click.confirm("This deletes all data. Continue?", abort=True)
    db.drop_all()
    db.create_all()
    click.echo("Database reset.")


def register_commands(app):
    app.cli.add_command(seed_cli)
    app.cli.add_command(reset_db_command)
