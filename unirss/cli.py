"""
cli.py
=======
Command-line entry point: scrape one page and print or save its feed.
"""

import argparse
import sys
from pathlib import Path

import logfire
from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

from unirss.config import Settings, load_settings
from unirss.core import FeedPipeline, parse_max_items
from unirss.core.extraction import STRATEGIES
from unirss.core.feed import FEED_FORMATS
from unirss.models import FeedResponse
from unirss.utils.logging import setup_local_logging

custom_theme = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description='Generate an RSS feed from any HTML listing page')
    parser.add_argument('--url', type=str, help='Page to scrape (absolute URL)')
    parser.add_argument('--max-items', type=str, default=None, help='Maximum number of items (default: 20)')
    parser.add_argument('--strategy', choices=STRATEGIES, default=None, help='Extraction strategy (default: generic)')
    parser.add_argument('--container-selector', type=str, default=None, help='Item containers ("" for none)')
    parser.add_argument('--row-selector', type=str, default=None, help='Listing rows for the listing strategy')
    parser.add_argument('--format', dest='feed_format', choices=FEED_FORMATS, default='rss', help='Feed format')
    parser.add_argument('--output', type=str, help='Write the feed to this file instead of stdout')
    parser.add_argument('--log-level', type=str, default='INFO', help='Log file level (default: INFO)')
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Layer command-line selector overrides on top of environment settings."""
    overrides = {}
    if args.container_selector is not None:
        overrides['container_selector'] = args.container_selector
    if args.row_selector is not None:
        overrides['row_selector'] = args.row_selector
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


def write_feed(result: FeedResponse, output: str | None) -> None:
    """Write the feed body to a file or stdout."""
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.body, encoding='utf-8')
    else:
        sys.stdout.write(result.body)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    console = Console(theme=custom_theme, stderr=True)

    settings = apply_overrides(load_settings(), args)
    if settings.logfire_token:
        logfire.configure(token=settings.logfire_token)

    log_file = setup_local_logging(args.log_level)
    console.print(f'[info]Logging to {log_file}[/info]')

    max_items = parse_max_items(args.max_items, default=settings.max_items)
    strategy = args.strategy or settings.strategy

    console.print(Panel(f'Processing: {args.url}', style='bold blue'))
    console.print(f'[step]Strategy: {strategy}, max items: {max_items}[/step]')

    pipeline = FeedPipeline(settings=settings, strategy=strategy, feed_format=args.feed_format)
    result = pipeline.generate(args.url, max_items)
    write_feed(result, args.output)

    if result.success:
        console.print(f'[success]Generated feed with {result.item_count} items[/success]')
        if args.output:
            console.print(f'[info]Saved to {args.output}[/info]')
        return 0

    console.print(f'[danger]Feed generation failed (status {result.status_code})[/danger]')
    return 1


if __name__ == '__main__':
    sys.exit(main())
