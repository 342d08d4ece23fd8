"""globimport CLI entry point."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from globimport.config import CONFIG_FILENAMES, GlobImportConfig, load_config
from globimport.errors import GlobImportError
from globimport.pattern import is_wildcard_import
from globimport.reporter import Reporter
from globimport.rewriter import IdentifierAllocator, binding_of, expand_wildcard
from globimport.source import parse_module, print_module
from globimport.transform import TransformResult, anchor_directory, transform_module

logger = logging.getLogger("globimport")

_SKIP_DIRS = {"node_modules", ".git"}


def _configure_logging() -> None:
    level = os.environ.get("GLOBIMPORT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


def _collect_files(paths: tuple[str, ...], root: str, config: GlobImportConfig) -> list[str]:
    """Expand directories into source files, relative to ``root`` where given relative."""
    files: list[str] = []
    for path in paths:
        full = Path(root) / path
        if full.is_dir():
            for candidate in sorted(full.rglob("*")):
                if _SKIP_DIRS & set(candidate.relative_to(full).parts):
                    continue
                if candidate.is_file() and config.handles(candidate.name):
                    files.append(os.path.relpath(candidate, root))
        else:
            files.append(path)
    return files


def _transform_file(file_name: str, root: str) -> tuple[TransformResult, str | None]:
    text = (Path(root) / file_name).read_text(encoding="utf-8")
    result = transform_module(parse_module(text), file_name, root=root)
    output = print_module(result.program) if result.ok else None
    return result, output


def _resolve_root(project_dir: str | None, root: str | None) -> tuple[GlobImportConfig, str]:
    project_dir = project_dir or os.getcwd()
    config = load_config(project_dir)
    return config, os.path.abspath(root or config.root or project_dir)


@click.group()
def main():
    """globimport - expand wildcard imports into per-file imports."""
    _configure_logging()


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--project-dir", default=None, help="Project directory (config lookup)")
@click.option("--root", default=None, help="Directory relative paths are resolved against")
@click.option("--write", is_flag=True, help="Rewrite files in place")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def transform(paths: tuple[str, ...], project_dir: str | None, root: str | None, write: bool, as_json: bool):
    """Expand wildcard imports in source files."""
    config, root = _resolve_root(project_dir, root)
    files = _collect_files(paths, root, config)

    results: list[TransformResult] = []
    outputs: dict[str, str] = {}
    for file_name in files:
        try:
            result, output = _transform_file(file_name, root)
        except OSError as exc:
            click.echo(f"Cannot read {file_name}: {exc}", err=True)
            sys.exit(1)
        results.append(result)
        if result.ok:
            outputs[file_name] = output
        elif config.aborts_on_error:
            logger.warning("Aborting run: %s failed", file_name)
            break

    reporter = Reporter(results)

    single_file = len(files) == 1 and paths == (files[0],)
    if single_file and not write and not as_json:
        if results and results[0].ok:
            click.echo(outputs[files[0]], nl=False)
        else:
            click.echo(str(results[0].error), err=True)
        sys.exit(reporter.exit_code())

    if write and not (reporter.failed and config.aborts_on_error):
        for result in results:
            if result.ok and result.expanded:
                (Path(root) / result.file_name).write_text(outputs[result.file_name], encoding="utf-8")
                logger.info("Rewrote %s", result.file_name)

    click.echo(reporter.format_json() if as_json else reporter.format_text())
    sys.exit(reporter.exit_code())


@main.command("list")
@click.argument("paths", nargs=-1, required=True)
@click.option("--project-dir", default=None, help="Project directory (config lookup)")
@click.option("--root", default=None, help="Directory relative paths are resolved against")
def list_imports(paths: tuple[str, ...], project_dir: str | None, root: str | None):
    """Show wildcard imports and what they would expand to."""
    config, root = _resolve_root(project_dir, root)
    failures = 0

    for file_name in _collect_files(paths, root, config):
        try:
            text = (Path(root) / file_name).read_text(encoding="utf-8")
        except OSError as exc:
            click.echo(f"Cannot read {file_name}: {exc}", err=True)
            sys.exit(1)
        module = parse_module(text)
        wildcards = [decl for decl in module.imports if is_wildcard_import(decl)]
        if not wildcards:
            continue

        click.echo(file_name)
        anchor = anchor_directory(file_name, root)
        allocator = IdentifierAllocator()
        for decl in wildcards:
            try:
                binding = binding_of(decl)
                expanded = expand_wildcard(decl, anchor, allocator)
            except GlobImportError as exc:
                failures += 1
                click.echo(f"  !!  {decl.source}: {exc}")
                continue
            click.echo(f"  {binding.name} <- {decl.source} ({len(expanded)} match(es))")
            for entry in expanded:
                click.echo(f"    {entry.key or '(empty)':<24} {entry.source}")

    sys.exit(1 if failures else 0)


@main.command()
@click.option("--project-dir", default=None, help="Project directory")
def init(project_dir: str | None):
    """Create a globimport.yml with the default settings."""
    project_dir = project_dir or os.getcwd()

    existing = [name for name in CONFIG_FILENAMES if os.path.exists(os.path.join(project_dir, name))]
    if existing:
        click.echo(f"Config already exists: {existing[0]}")
        return

    config_content = """# globimport configuration

# Directory relative file names are resolved against (default: this directory).
# root: .

# File extensions picked up when a directory is given on the command line.
extensions:
  - .js
  - .jsx
  - .mjs
  - .cjs
  - .ts
  - .tsx

# abort: stop and write nothing when a file fails | skip: leave failing files alone
on_error: abort
"""
    config_path = os.path.join(project_dir, "globimport.yml")
    with open(config_path, "w") as f:
        f.write(config_content)

    click.echo(f"Created {config_path}")


if __name__ == "__main__":
    main()
