"""CLI commands for inspecting asset packages."""
import click
from flask import current_app
from flask.cli import with_appcontext

from assetpack.core.errors import PackageNotFound
from assetpack.core.helpers import get_resolver
from assetpack.core.options import CallOptions

KINDS = ('css', 'js', 'jst')


@click.group(name='assets')
def assets_cli():
    """Asset package commands."""
    pass


@assets_cli.command()
@with_appcontext
def mode():
    """Show how the helpers currently resolve packages."""
    resolver = get_resolver()
    click.echo(f"package_assets: {resolver.mode.package_assets}")
    click.echo(f"embed_assets: {resolver.mode.embed_assets}")
    click.echo(f"mhtml_enabled: {resolver.mode.mhtml_enabled}")
    packages = current_app.config.get('ASSET_PACKAGES', {})
    click.echo(f"packages: {', '.join(sorted(packages)) or '-'}")


@assets_cli.command()
@click.argument('packages', nargs=-1, required=True)
@click.option('--kind', type=click.Choice(KINDS), default='css', help='Asset kind')
@click.option('--no-embed', is_flag=True, help='Skip the Data-URI/MHTML variants')
@with_appcontext
def paths(packages, kind, no_embed):
    """Print the URLs the helpers emit for PACKAGES."""
    resolver = get_resolver()
    try:
        if kind == 'css':
            options = CallOptions(embed_assets=False) if no_embed else CallOptions()
            urls = resolver.stylesheet_paths(packages, options)
        elif kind == 'js':
            urls = resolver.javascript_paths(packages)
        else:
            urls = resolver.template_paths(packages)
    except PackageNotFound as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    for url in urls:
        click.echo(url)


@assets_cli.command()
@click.argument('packages', nargs=-1, required=True)
@click.option('--kind', type=click.Choice(KINDS[:2]), default='css', help='Asset kind')
@click.option('--no-embed', is_flag=True, help='Skip the Data-URI/MHTML variants')
@with_appcontext
def tags(packages, kind, no_embed):
    """Print the markup the helpers emit for PACKAGES."""
    resolver = get_resolver()
    try:
        if kind == 'css':
            options = CallOptions(embed_assets=False) if no_embed else CallOptions()
            click.echo(resolver.resolve_stylesheets(packages, options).render())
        else:
            click.echo(resolver.resolve_javascripts(packages))
    except PackageNotFound as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def register_cli_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(assets_cli)
