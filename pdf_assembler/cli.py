"""
Command-line interface for PDF assembler.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from pdf_assembler import __version__
from pdf_assembler.assembler import images_to_pdf, merge_pdfs, rotate_pdfs
from pdf_assembler.config import NAMED_PAGE_SIZES, LayoutConfig, page_size_by_name
from pdf_assembler.discovery import find_images, find_pdfs, resolve_output_path
from pdf_assembler.exceptions import ValidationError
from pdf_assembler.rotation import ROTATED_SUFFIX, VALID_ROTATIONS
from pdf_assembler.utils import format_file_size, get_logger

console = Console()

ROTATION_CHOICES = [str(angle) for angle in VALID_ROTATIONS]
PAGE_SIZE_CHOICES = sorted(NAMED_PAGE_SIZES)


def _configure_logging(verbose):
    logger = get_logger("pdf_assembler")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _log_task_output(message):
    console.print(f"  [grey50]{message}[/grey50]")


def _confirm_output(out_file, assume_yes):
    """Ask before replacing an existing output file."""
    if not os.path.isfile(out_file):
        _log_task_output(f"Will create a new {out_file}")
        return

    if not assume_yes and not click.confirm(
        "Output file is already existing, do you want to replace it?",
        default=False,
    ):
        raise ValidationError("Output file is already existing")
    _log_task_output(f"Will overwrite the existing {out_file}")


def _fail(error):
    if isinstance(error, ValidationError):
        console.print(f"\n[bold yellow]⚠ {error}[/bold yellow]")
    else:
        console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


def _run_with_spinner(description, func, *args, **kwargs):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(description, total=None)
        result = func(*args, **kwargs)
        progress.update(task, completed=True)
    return result


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    PDF Assembler CLI - Build PDFs from images, merge PDFs and rotate pages.
    """
    pass


@cli.command(name="images")
@click.option(
    '--in', '-i', 'in_folder',
    default='.',
    help='Input folder with PNG/JPG images (default: current folder)',
    type=click.Path(exists=True, file_okay=False)
)
@click.option(
    '--out', '-o', 'out_filename',
    default=None,
    help='Output PDF file; ".pdf" is added when missing (default: "{images-folder-name}.pdf")',
    type=str
)
@click.option(
    '--title', '-t',
    default=None,
    help='Title for the first page',
    type=str
)
@click.option(
    '--rotate', '-r', 'degrees',
    default='0',
    help='Rotate every image clockwise before inserting it in the PDF',
    type=click.Choice(ROTATION_CHOICES)
)
@click.option(
    '--page-size', '-s',
    default='A4',
    help='Base page size, turned to landscape for wide images',
    type=click.Choice(PAGE_SIZE_CHOICES, case_sensitive=False)
)
@click.option('--yes', '-y', 'assume_yes', is_flag=True, help='Replace an existing output file without asking')
@click.option('--verbose', '-v', is_flag=True, help='Show per-page diagnostics')
def images(in_folder, out_filename, title, degrees, page_size, assume_yes, verbose):
    """
    Create a PDF from a folder with images.

    Examples:

        pdf-assembler images -i scans -o scans.pdf

        pdf-assembler images -i photos --title "Holiday" --rotate 90
    """
    _configure_logging(verbose)
    try:
        console.print("\n[bold cyan]Validating PNG/JPG images...[/bold cyan]")
        image_paths = find_images(in_folder)
        _log_task_output(f"Found {len(image_paths)} images")

        out_file = resolve_output_path(out_filename, in_folder)
        _confirm_output(out_file, assume_yes)

        config = LayoutConfig(page_size=page_size_by_name(page_size))
        result = _run_with_spinner(
            "Generating PDF",
            images_to_pdf,
            image_paths,
            out_file,
            title,
            int(degrees),
            config=config,
            log=verbose,
        )

        console.print(f"\n[bold green]✓ Created PDF with {result.content_pages} images[/bold green]")
        for skipped in result.skipped:
            console.print(f"  [yellow]• skipped {os.path.basename(skipped)}[/yellow]")
        console.print(f"[dim]Output: {result.output_path} ({format_file_size(os.path.getsize(result.output_path))})[/dim]")
        console.print()

    except Exception as e:
        _fail(e)


@cli.command(name="merge")
@click.option(
    '--in', '-i', 'in_folder',
    default='.',
    help='Input folder with PDFs (default: current folder)',
    type=click.Path(exists=True, file_okay=False)
)
@click.option(
    '--out', '-o', 'out_filename',
    default=None,
    help='Output PDF file; ".pdf" is added when missing (default: "{pdfs-folder-name}.pdf")',
    type=str
)
@click.option(
    '--title', '-t',
    default=None,
    help='Title for the first page',
    type=str
)
@click.option('--yes', '-y', 'assume_yes', is_flag=True, help='Replace an existing output file without asking')
@click.option('--verbose', '-v', is_flag=True, help='Show per-file diagnostics')
def merge(in_folder, out_filename, title, assume_yes, verbose):
    """
    Create a single merged PDF from a folder with PDFs.

    Examples:

        pdf-assembler merge -i chapters -o book.pdf

        pdf-assembler merge --title "Annual report"
    """
    _configure_logging(verbose)
    try:
        console.print("\n[bold cyan]Validating PDFs...[/bold cyan]")
        pdf_paths = find_pdfs(in_folder)
        _log_task_output(f"Found {len(pdf_paths)} PDFs")

        out_file = resolve_output_path(out_filename, in_folder)
        # The output may live in the input folder from a previous run.
        pdf_paths = [path for path in pdf_paths if path != out_file]
        if not pdf_paths:
            raise ValidationError("Found no PDFs")
        _confirm_output(out_file, assume_yes)

        result = _run_with_spinner(
            "Generating PDF",
            merge_pdfs,
            pdf_paths,
            out_file,
            title,
            log=verbose,
        )

        console.print(f"\n[bold green]✓ Created single PDF from {len(pdf_paths)} PDFs[/bold green]")
        console.print(f"[dim]Output: {result.output_path} ({result.total_pages} pages)[/dim]")
        console.print()

    except Exception as e:
        _fail(e)


@cli.command(name="rotate")
@click.option(
    '--in', '-i', 'in_path',
    default='.',
    help='Input PDF or folder with PDFs (default: current folder)',
    type=click.Path(exists=True)
)
@click.option(
    '--overwrite', '-w',
    is_flag=True,
    help='Overwrite the input PDF(s) instead of writing "<name>-rotated.pdf"'
)
@click.option(
    '--degrees', '-d',
    prompt='Degrees angle with which to rotate each page (rotation is a page property, only the last one applies)',
    default='180',
    help='Absolute clockwise rotation for every page',
    type=click.Choice(ROTATION_CHOICES)
)
@click.option('--verbose', '-v', is_flag=True, help='Show per-file diagnostics')
def rotate(in_path, overwrite, degrees, verbose):
    """
    Rotate a single PDF or all PDFs inside a folder.

    Examples:

        pdf-assembler rotate -i scan.pdf -d 90

        pdf-assembler rotate -i scans --overwrite -d 270
    """
    _configure_logging(verbose)
    try:
        console.print("\n[bold cyan]Validating PDFs...[/bold cyan]")
        pdf_paths = find_pdfs(in_path)
        if not overwrite and os.path.isdir(in_path):
            # Skip the "<name>-rotated.pdf" outputs of a previous run.
            pdf_paths = [path for path in pdf_paths if not path.stem.endswith(ROTATED_SUFFIX)]
            if not pdf_paths:
                raise ValidationError("Found no PDFs")
        _log_task_output(f"Found {len(pdf_paths)} PDFs")

        label = f"Rotate PDF{'s' if len(pdf_paths) > 1 else ''}"
        result = _run_with_spinner(label, rotate_pdfs, pdf_paths, int(degrees), overwrite, log=verbose)

        console.print(f"\n[bold green]✓ Rotated PDF{'s' if len(result.files_written) > 1 else ''}[/bold green]")
        for path in result.files_written:
            console.print(f"  • {os.path.basename(path)}")
        console.print()

    except Exception as e:
        _fail(e)


if __name__ == '__main__':
    cli()
