"""Operator command line for issuing and inspecting magic link tokens."""

import asyncio
import json
import logging.config as log_config
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import click
from dotenv import load_dotenv

from magiclinks.config.provider import ConfigProvider, EnvConfigProvider, StoreConfig
from magiclinks.logging_config import get_logging_config
from magiclinks.modules.magic_link import MagicLinkFactory, MagicLinkModule
from magiclinks.modules.magic_link.models import canonicalize_email
from magiclinks.modules.storage import StorageModule


@dataclass
class CliState:
    """Configuration resolved once per invocation."""
    config_provider: ConfigProvider
    store_config: StoreConfig


async def _with_module(
    state: CliState, action: Callable[[MagicLinkModule], Awaitable[Any]]
) -> Any:
    """Connect, run one action against the module, always disconnect."""
    async with StorageModule(state.store_config) as redis_client:
        module = MagicLinkFactory.build(state.config_provider, redis_client)
        return await action(module)


@click.group()
@click.option("--redis-url", "redis_url", default=None, help="Overrides REDIS_URL")
@click.pass_context
def main(ctx: click.Context, redis_url: Optional[str]):
    load_dotenv()
    config_provider = EnvConfigProvider()
    try:
        level = config_provider.get_logging_config().level
        # Fail on a bad MAGIC_LINK_TTL before any command runs
        config_provider.get_magic_link_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    log_config.dictConfig(get_logging_config(level))
    store_config = config_provider.get_store_config()
    if redis_url:
        store_config = StoreConfig(redis_url=redis_url)
    ctx.obj = CliState(config_provider=config_provider, store_config=store_config)


@main.command()
@click.argument("email")
@click.option("--tier", "tier", default=None, help="Classification stored with the token")
@click.pass_obj
def issue(state: CliState, email: str, tier: Optional[str]):
    """Issue a magic link token for EMAIL."""
    if not canonicalize_email(email):
        raise click.BadParameter("email is required", param_hint="EMAIL")
    token = asyncio.run(_with_module(state, lambda m: m.generate_magic_token(email, tier)))
    click.echo(token)


@main.command()
@click.argument("token")
@click.pass_context
def validate(ctx: click.Context, token: str):
    """Print the record bound to TOKEN."""
    record = asyncio.run(_with_module(ctx.obj, lambda m: m.validate_magic_token(token)))
    if record is None:
        click.echo("Token not found", err=True)
        ctx.exit(1)
    click.echo(json.dumps(record.model_dump()))


@main.command()
@click.argument("email")
@click.pass_context
def lookup(ctx: click.Context, email: str):
    """Print the current token for EMAIL."""
    token = asyncio.run(_with_module(ctx.obj, lambda m: m.get_token_by_email(email)))
    if token is None:
        click.echo("No token for email", err=True)
        ctx.exit(1)
    click.echo(token)


@main.command()
@click.argument("token")
@click.pass_obj
def revoke(state: CliState, token: str):
    """Revoke TOKEN and its email index entry."""
    asyncio.run(_with_module(state, lambda m: m.revoke_magic_token(token)))
    click.echo("Revoked")


if __name__ == "__main__":
    main()
