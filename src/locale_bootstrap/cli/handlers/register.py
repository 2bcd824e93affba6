"""
Register Command Handler.

This module implements the logic for the `locale-bootstrap register` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Locale engine setup.
3. Running the pass on a file or every `*.py` file of a directory.
4. Output writing (in place or to `--out`), or a dry report with `--check`.
"""

from pathlib import Path
from typing import Dict, Optional

from rich.markup import escape
from rich.table import Table

from locale_bootstrap.config import RuntimeConfig
from locale_bootstrap.core.conversion_result import ConversionResult
from locale_bootstrap.core.engine import LocaleEngine
from locale_bootstrap.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)


def handle_register(
  input_path: Path,
  output_path: Optional[Path],
  locale: Optional[str],
  entry_module: Optional[str],
  locales_dir: Optional[Path],
  check: bool = False,
) -> int:
  """
  Handles the 'register' command execution.

  Args:
      input_path: Source file or directory.
      output_path: Destination file or directory. Defaults to rewriting in place.
      locale: Override for the locale id.
      entry_module: Override for the entry module ('path#ClassName').
      locales_dir: Override for the locale-data directory.
      check: If True, report files that would change without writing.

  Returns:
      int: Exit code (0 for success, 1 for failure or, with `check`, pending changes).
  """
  if not input_path.exists():
    log_error(f"Input not found: [path]{escape(str(input_path))}[/path]")
    return 1

  try:
    config = RuntimeConfig.load(
      locale=locale,
      entry_module=entry_module,
      locales_dir=locales_dir,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
    engine = LocaleEngine(config)
  except ValueError as e:
    log_error(escape(str(e)))
    return 1

  batch_results: Dict[str, ConversionResult] = {}

  if input_path.is_file():
    batch_results[input_path.name] = _register_single_file(input_path, output_path or input_path, engine, check)
  else:
    py_files = sorted(input_path.rglob("*.py"))
    if not py_files:
      log_warning(f"No .py files found in [path]{escape(str(input_path))}[/path]")
      return 0

    log_info(f"Processing {len(py_files)} files from [path]{escape(str(input_path))}[/path]...")
    for src_file in py_files:
      rel_path = src_file.relative_to(input_path)
      dest_file = output_path / rel_path if output_path else src_file
      batch_results[str(rel_path)] = _register_single_file(src_file, dest_file, engine, check)

  _print_batch_summary(batch_results, check)

  if any(not r.success for r in batch_results.values()):
    return 1
  if check and any(r.changed for r in batch_results.values()):
    return 1
  return 0


def _register_single_file(
  input_path: Path,
  output_path: Path,
  engine: LocaleEngine,
  check: bool = False,
) -> ConversionResult:
  """
  Helper to run the pass on a single file.

  Unchanged files are only written when the destination differs from the
  source, so a `--out` directory receives a complete copy of the input tree.

  Args:
      input_path: Source file path.
      output_path: Destination file path (may equal `input_path`).
      engine: The configured engine.
      check: If True, never write.

  Returns:
      ConversionResult: Result object containing status and code.
  """
  try:
    code = input_path.read_text(encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to read {escape(str(input_path))}: {escape(str(e))}")
    return ConversionResult(success=False, errors=[str(e)])

  result = engine.run(code)
  if not result.success:
    return result

  if check:
    if result.changed:
      log_warning(f"Would register locale in [path]{escape(str(input_path))}[/path]")
      for line in result.inserted:
        console.print(f"   + {escape(line)}")
    return result

  if not result.changed and output_path == input_path:
    return result

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.code, encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to write {escape(str(output_path))}: {escape(str(e))}")
    return ConversionResult(code=result.code, success=False, errors=[str(e)])

  if result.changed:
    log_success(
      f"Registered locale [locale]{escape(engine.config.locale)}[/locale]: "
      f"[path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]"
    )
  return result


def _print_batch_summary(results: Dict[str, ConversionResult], check: bool = False) -> None:
  """
  Renders a summary table of results to the console.

  Args:
      results: Dictionary mapping filenames to results.
      check: Whether the run was a dry check.
  """
  total = len(results)
  changed = sum(1 for r in results.values() if r.success and r.changed)
  failures = sum(1 for r in results.values() if not r.success)

  verb = "need registration" if check else "updated"
  if failures == 0:
    log_success(f"Batch Complete: {changed}/{total} files {verb}.")
    return

  table = Table(title="Locale Registration Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success:
      continue
    issues = "; ".join(res.errors) if res.errors else "Unknown Error"
    table.add_row(escape(filename), "❌ Failed", escape(issues))

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {changed} {verb}, {failures} failed.")
