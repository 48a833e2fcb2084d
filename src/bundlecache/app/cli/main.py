"""CLI main entry point."""

import sys

import click

from ... import __version__
from ...adapters import (
    S3StorageAdapter,
    Sha1Adapter,
    StdLoggerAdapter,
    TarCommandAdapter,
    TarfileArchiverAdapter,
)
from ...core import BundleCacheConfig, BundleCacheError, BundleCacheService
from ...ports import ArchiverPort


def create_archiver(kind: str) -> ArchiverPort:
    """Pick the archiver backend named by configuration."""
    if kind == "native":
        return TarfileArchiverAdapter()
    if kind == "tar":
        return TarCommandAdapter()
    raise BundleCacheError(f"Unknown archiver: {kind} (expected 'native' or 'tar')")


def create_service(config: BundleCacheConfig) -> BundleCacheService:
    """Create service with wired adapters."""
    storage = S3StorageAdapter(
        bucket=config.bucket,
        region=config.region,
        access_key=config.access_key,
        secret_key=config.secret_key,
    )
    return BundleCacheService(
        config=config,
        storage=storage,
        archiver=create_archiver(config.archiver),
        hasher=Sha1Adapter(),
        logger=StdLoggerAdapter(level=config.log_level),
        progress=click.echo,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--prefix", default="", help="Custom archive filename prefix (default: current dir name)")
@click.option("--path", default="", help="Path to directory with .bundle (default: current)")
@click.option("--access-key", default="", help="S3 access key [env: AWS_ACCESS_KEY]")
@click.option("--secret-key", default="", help="S3 secret key [env: AWS_SECRET_KEY]")
@click.option("--bucket", default="", help="S3 bucket name [env: S3_BUCKET]")
@click.option("--region", default="", help="AWS region [env: AWS_DEFAULT_REGION]")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="bundle-cache")
@click.argument("action", type=click.Choice(["upload", "download"]))
def cli(
    prefix: str,
    path: str,
    access_key: str,
    secret_key: str,
    bucket: str,
    region: str,
    debug: bool,
    action: str,
) -> None:
    """Cache the .bundle directory in S3, keyed by the Gemfile.lock checksum.

    ACTION is either "upload" or "download".
    """
    try:
        config = BundleCacheConfig.resolve(
            path=path,
            prefix=prefix,
            access_key=access_key,
            secret_key=secret_key,
            bucket=bucket,
            region=region,
            log_level="DEBUG" if debug else None,
        )
        service = create_service(config)
        archive = service.prepare()

        if action == "upload":
            result = service.upload(archive)
        else:
            result = service.download(archive)

    except BundleCacheError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    click.echo(result.message)


def main() -> None:
    """Main entry point."""
    cli()
