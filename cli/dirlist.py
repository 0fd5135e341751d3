'''디렉터리 열거 CLI 진입점(KR). Directory enumeration CLI entrypoint (EN).'''

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

import click

from core import ConfigError, EnumeratorSettings, JsonArrayWriter, configure_logging, utc_now
from direnum import DirectoryCursor, DirectorySpec, pattern_predicate, print_names

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    '''디렉터리 항목 열거 CLI · Directory entry listing CLI.'''

    try:
        settings = (
            EnumeratorSettings.from_file(config_file) if config_file else EnumeratorSettings()
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    level = settings.log_level
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file or settings.log_file, level=level, console=verbose)
    ctx.obj = {'settings': settings}


def _build_spec(
    settings: EnumeratorSettings,
    path: Path | None,
    files_only: bool,
    patterns: Sequence[str],
) -> DirectorySpec:
    '''CLI 옵션과 설정을 병합 · Merge CLI options over settings.'''

    if path is None and not files_only and not patterns:
        return settings.to_spec()
    return DirectorySpec(
        path=str(path if path is not None else settings.path),
        files_only=files_only or settings.files_only,
        name_predicate=pattern_predicate(patterns or settings.patterns),
    )


@cli.command('list')
@click.argument('path', required=False, type=click.Path(path_type=Path))
@click.option('--files-only', is_flag=True, help='일반 파일만 · Regular files only')
@click.option(
    '--pattern',
    'patterns',
    multiple=True,
    help='이름 글롭 패턴 · Name glob pattern',
)
@click.option(
    '--output',
    type=click.Path(path_type=Path),
    default=None,
    help='JSON 배열 출력 경로 · JSON array output path',
)
@click.pass_context
def list_command(
    ctx: click.Context,
    path: Path | None,
    files_only: bool,
    patterns: Sequence[str],
    output: Path | None,
) -> None:
    '''디렉터리 항목 이름을 나열한다 · List directory entry names.'''

    settings: EnumeratorSettings = ctx.obj['settings']
    spec = _build_spec(settings, path, files_only, patterns)
    logger.debug('listing %s (files_only=%s)', spec.path, spec.files_only)
    if output is None:
        print_names(spec, echo=click.echo)
        return
    with JsonArrayWriter(output) as writer, DirectoryCursor(spec) as cursor:
        for name in cursor:
            writer.write(name)
    click.echo(
        json.dumps(
            {'names': writer.count, 'output': str(output), 'timestamp': utc_now()},
            ensure_ascii=False,
        )
    )


def main() -> None:
    '''콘솔 스크립트 진입점 · Console script entrypoint.'''

    cli(obj={})


if __name__ == '__main__':
    main()
