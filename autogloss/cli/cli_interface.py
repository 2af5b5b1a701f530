"""
autogloss - Command Line Interface
"""
import sys
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..annotator import Annotator
from ..core.exceptions import AutoGlossError
from ..core.models import Glossary
from ..glossary import load_glossaries
from ..i18n import MessageCatalog
from ..utils.config_manager import ConfigManager
from ..utils.logger import get_logger, setup_logging


console = Console(stderr=True)
logger = get_logger(__name__)


def _setup(config_path: Optional[Path]) -> ConfigManager:
    manager = ConfigManager(config_path)
    log_config = manager.config.logging
    setup_logging(
        name="autogloss",
        log_dir=Path(log_config.log_dir) if log_config.file_logging else None,
        log_level=log_config.log_level,
        console_level=log_config.console_level,
        use_colors=log_config.use_colors,
        max_bytes=log_config.max_bytes,
        backup_count=log_config.backup_count,
    )
    return manager


def _load(manager: ConfigManager, glossary_dir: Optional[Path], lang: Optional[str] = None) -> Dict[str, Glossary]:
    glossary_config = manager.config.glossary
    root = glossary_dir or Path(glossary_config.source_dir)
    return load_glossaries(
        root,
        pattern=glossary_config.pattern,
        max_workers=glossary_config.max_workers,
        languages=[lang] if lang else None,
    )


def _fail(error: Exception):
    if not isinstance(error, (AutoGlossError, str)):
        logger.debug("Unexpected error", exc_info=error)
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
@click.option('--config', '-c', 'config_path', type=click.Path(path_type=Path), default=None,
              help='Config file (YAML or JSON)')
@click.pass_context
def cli(ctx, config_path):
    """autogloss - annotate glossary terms in generated documents."""
    ctx.obj = {'config_path': config_path}


@cli.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'))
@click.option('--output', '-o', 'output_file', type=click.File('w', encoding='utf-8'), default='-',
              help='Output file (default: stdout)')
@click.option('--lang', '-l', default=None, help='Glossary language (default from config)')
@click.option('--glossary-dir', '-g', type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help='Directory holding glossary sources')
@click.option('--messages', '-m', 'messages_path', type=click.Path(exists=True, path_type=Path),
              default=None, help='Message file or directory for link labels')
@click.option('--stats', is_flag=True, help='Print annotation statistics')
@click.pass_context
def annotate(ctx, input_file, output_file, lang, glossary_dir, messages_path, stats):
    """
    Annotate glossary terms in a document.

    Examples:

        autogloss annotate page.html -o page.glossed.html -l en

        cat page.html | autogloss annotate - -l fr -g public
    """
    try:
        manager = _setup(ctx.obj['config_path'])
        lang = lang or manager.config.glossary.default_lang
        glossary = _load(manager, glossary_dir, lang)[lang]

        messages_path = messages_path or manager.config.messages.path
        fallback_lang = manager.config.messages.fallback_lang
        if messages_path:
            catalog = MessageCatalog.load(messages_path, fallback_lang=fallback_lang)
        else:
            catalog = MessageCatalog(fallback_lang=fallback_lang)

        result = Annotator(catalog).annotate_with_stats(input_file.read(), glossary)
        output_file.write(result.text)

        if stats:
            table = Table(title="Annotation Statistics")
            table.add_column("Metric", style="cyan")
            table.add_column("Value", style="green")
            table.add_row("Language", glossary.lang)
            table.add_row("Replacements", str(result.replacements))
            table.add_row("Unique terms", str(len(result.terms_applied)))
            console.print(table)

    except Exception as e:
        _fail(e)


@cli.command()
@click.option('--lang', '-l', default=None, help='Only list this language')
@click.option('--glossary-dir', '-g', type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help='Directory holding glossary sources')
@click.pass_context
def terms(ctx, lang, glossary_dir):
    """List glossary entries and their variants."""
    try:
        manager = _setup(ctx.obj['config_path'])
        glossaries = _load(manager, glossary_dir, lang)
    except Exception as e:
        _fail(e)

    out = Console()
    for code, glossary in sorted(glossaries.items()):
        table = Table(title=f"Glossary: {code}")
        table.add_column("Entry", style="cyan")
        table.add_column("Variants")
        table.add_column("Short", style="green")
        for name in glossary.entries:
            entry = glossary.term_map[name]
            table.add_row(name, ', '.join(entry.variants), entry.short or '')
        out.print(table)


@cli.command()
@click.option('--glossary-dir', '-g', type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help='Directory holding glossary sources')
@click.pass_context
def check(ctx, glossary_dir):
    """Compile every glossary and report problems."""
    try:
        manager = _setup(ctx.obj['config_path'])
        glossaries = _load(manager, glossary_dir)
    except Exception as e:
        _fail(e)

    for code, glossary in sorted(glossaries.items()):
        stats = glossary.get_stats()
        console.print(
            f"[green]✓[/green] {code}: {stats['entries']} entries, {stats['variants']} variants"
        )


@cli.command('init-config')
@click.argument('output_path', type=click.Path(dir_okay=False, path_type=Path))
def init_config(output_path):
    """Write a commented configuration template."""
    if output_path.exists():
        _fail(f"{output_path} already exists")
    ConfigManager(output_path, use_env=False).export_template(output_path)
    console.print(f"[green]✓ Template written to {output_path}[/green]")
