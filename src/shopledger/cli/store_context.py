"""CLI helpers for loading and saving the record store."""

import click

from shopledger.domain.store import RecordStore


def load_store(ctx: click.Context) -> RecordStore:
    """Build a record store from the database attached to the CLI context."""
    db = ctx.obj["db"]
    return RecordStore.from_snapshot(db.load_snapshot())


def save_store(ctx: click.Context, store: RecordStore) -> None:
    """Persist the record store back to the database."""
    db = ctx.obj["db"]
    db.save_snapshot(store.snapshot())
