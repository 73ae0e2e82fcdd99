"""Sitemapkit CLI — sitemapkit add / sitemapkit remove / sitemapkit show.

Entry point for the ``sitemapkit`` command-line interface.  Every command
reads the existing sitemap first, so repeated ``add`` runs merge into the
same map.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitemapkit.sitemap import SitemapDocument


def _add_document_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--sitemap", "-s", dest="path", default=None,
        help="Sitemap file (default: 'path' from the config file)",
    )
    parser.add_argument(
        "--config-dir", default=".", help="Directory containing sitemapkit.yaml",
    )
    parser.add_argument(
        "--gzip", action="store_true", default=None, help="Write gzip-compressed files",
    )
    parser.add_argument(
        "--document-root", default=None, help="Directory served at the site root",
    )
    parser.add_argument(
        "--max-urls", type=int, default=None, help="Maximum URLs per sitemap file",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sitemapkit CLI."""
    parser = argparse.ArgumentParser(
        prog="sitemapkit",
        description="Read, extend and write XML sitemaps.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sitemapkit add
    add_parser = subparsers.add_parser("add", help="Add page URLs and write the sitemap")
    add_parser.add_argument("urls", nargs="+", help="Page URLs to add")
    add_parser.add_argument("--changefreq", default=None, help="Change frequency hint")
    add_parser.add_argument("--priority", default=None, help="Priority (0.0-1.0)")
    add_parser.add_argument(
        "--lastmod", default=None, help="Last modification time (ISO-8601)",
    )
    _add_document_options(add_parser)

    # sitemapkit remove
    remove_parser = subparsers.add_parser(
        "remove", help="Remove page URLs and write the sitemap",
    )
    remove_parser.add_argument("urls", nargs="+", help="Page URLs to remove")
    _add_document_options(remove_parser)

    # sitemapkit show
    show_parser = subparsers.add_parser("show", help="List the entries of a sitemap")
    _add_document_options(show_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from sitemapkit import __version__

    return __version__


def _open_document(args: argparse.Namespace) -> SitemapDocument:
    from sitemapkit.config_loader import load_config
    from sitemapkit.sitemap import SitemapDocument

    overrides = {
        "path": args.path,
        "gzip": args.gzip,
        "document_root": args.document_root,
        "max_urls": args.max_urls,
    }
    config = load_config(
        args.config_dir, **{k: v for k, v in overrides.items() if v is not None},
    )
    return SitemapDocument.from_config(config)


def _report_rejected(document: SitemapDocument) -> None:
    for event in document.events.rejected():
        print(
            f"  Skipped invalid record {event.location!r} in {event.source}",
            file=sys.stderr,
        )


def _write(document: SitemapDocument) -> None:
    written = document.write()
    summary = document.events.summary()
    print(
        f"  Wrote {document.count_items()} URL(s) to {len(written)} file(s)"
        f" ({summary.bytes_written} bytes)",
        file=sys.stderr,
    )
    for path in written:
        print(f"    {path}", file=sys.stderr)


def _run(args: argparse.Namespace) -> None:
    document = _open_document(args)
    _report_rejected(document)

    if args.command == "add":
        added = sum(
            document.add_item(url, args.lastmod, args.changefreq, args.priority)
            for url in args.urls
        )
        print(f"  Added {added} of {len(args.urls)} URL(s)", file=sys.stderr)
        _write(document)
    elif args.command == "remove":
        removed = sum(document.remove_item(url) for url in args.urls)
        print(f"  Removed {removed} of {len(args.urls)} URL(s)", file=sys.stderr)
        _write(document)
    elif args.command == "show":
        for entry in document.collection:
            print(
                "\t".join((
                    entry.location,
                    entry.last_modified,
                    entry.change_frequency,
                    entry.priority,
                ))
            )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    from sitemapkit._errors import SitemapError

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        _run(args)
    except SitemapError as exc:
        print(f"sitemapkit: error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
