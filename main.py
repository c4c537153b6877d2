"""Main entry point for the NSEC3 hash cache generator."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence
from shared.config.config import config
from shared.domain.consts import ReporterName, SizeUnits
from shared.domain.models import ConfigRunResult, HashConfig
from shared.factories.reporter_factory import create_reporter
from engine.services.hash_engine import Nsec3HashEngine
from generator.infrastructure.cache_store import CacheStore
from generator.infrastructure.wordlist import load_wordlist
from generator.services.batch_orchestrator import BatchOrchestrator
from generator.services.config_runner import generate_for_config

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

SEPARATOR = "━" * 40


def _non_negative_int(value: str) -> int:
    """argparse type: integer >= 0."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def _positive_int(value: str) -> int:
    """argparse type: integer >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return number


def _add_shared_options(parser: argparse.ArgumentParser, suppress_defaults: bool) -> None:
    """
    Options accepted both before and after the `generate-common` subcommand.

    The subcommand copies use SUPPRESS defaults so they only overwrite what
    was given before the subcommand when they are actually passed.
    """
    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    parser.add_argument("-d", "--domain", default=default(None), help="Domain to generate hashes for")
    parser.add_argument(
        "-w", "--wordlist",
        default=default(None),
        help="Path to wordlist file (one subdomain per line)",
    )
    parser.add_argument(
        "-o", "--output",
        default=default(config.OUTPUT_DIR),
        help="Output directory for JSON cache files",
    )
    parser.add_argument(
        "-t", "--threads",
        type=_positive_int,
        default=default(None),
        help="Number of worker threads (default: CPU cores)",
    )
    parser.add_argument(
        "--progress",
        choices=[name.value for name in ReporterName],
        default=default(ReporterName.LOG.value),
        help="Progress reporting style",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Precompute NSEC3 hashes for a subdomain wordlist.",
    )
    _add_shared_options(parser, suppress_defaults=False)
    parser.add_argument(
        "-s", "--salt",
        default="",
        help='NSEC3 salt as hex (e.g. "ABC123"), empty for no salt',
    )
    parser.add_argument(
        "-i", "--iterations",
        type=_non_negative_int,
        default=0,
        help="Number of extra NSEC3 hash iterations",
    )

    subparsers = parser.add_subparsers(dest="command")
    common_parser = subparsers.add_parser(
        "generate-common",
        help="Generate hashes for common NSEC3 configurations",
    )
    _add_shared_options(common_parser, suppress_defaults=True)
    common_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero if any configuration fails",
    )
    return parser


def _format_mb(size: int) -> str:
    return f"{size / SizeUnits.MEGABYTE:.2f} MB"


def run_single(args: argparse.Namespace) -> int:
    """Generate the cache file for one (salt, iterations) configuration."""
    try:
        hash_config = HashConfig(domain=args.domain, salt=args.salt, iterations=args.iterations)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    engine = Nsec3HashEngine(
        worker_threads=args.threads,
        reporter=create_reporter(args.progress),
    )

    print("NSEC3 Hash Generator")
    print(SEPARATOR)
    print(f"   Domain: {hash_config.domain}")
    print(f"   Wordlist: {args.wordlist}")
    print(f"   Salt: {hash_config.salt_display}")
    print(f"   Iterations: {hash_config.iterations}")
    print(f"   Threads: {engine.worker_threads}")
    print()

    try:
        candidates = load_wordlist(args.wordlist)
    except OSError as e:
        logger.error(f"Cannot read wordlist {args.wordlist}: {e}")
        return 1
    print(f"Loaded {len(candidates)} subdomains")

    store = CacheStore(args.output)
    try:
        result = generate_for_config(hash_config, candidates, store, engine)
    except OSError as e:
        logger.error(f"Failed to write cache file to {args.output}: {e}")
        return 1

    stats = engine.last_stats
    print()
    print("Hash computation complete!")
    print(f"   Hashes computed: {result.hash_count}")
    if stats is not None:
        print(f"   Time elapsed: {stats.elapsed_seconds:.2f}s")
        print(f"   Speed: {stats.hashes_per_second:.0f} hashes/sec")
        if stats.collisions:
            print(f"   Collisions: {stats.collisions}")
    print(f"   Output: {result.output_path}")
    print(f"   Size: {_format_mb(result.file_size)}")
    print()
    print("Next steps:")
    print(f"   1. Copy to the zone walker cache directory: cp {result.output_path} <cache dir>")
    print(f"   2. Run zone walking against {hash_config.domain}")
    return 0


def _print_batch_results(results: Sequence[ConfigRunResult], output_dir: str) -> None:
    print(SEPARATOR)
    for index, result in enumerate(results, 1):
        print(f"[{index}/{len(results)}] {result.name}")
        print(f"   Salt: {result.salt or 'none'}")
        print(f"   Iterations: {result.iterations}")
        if result.succeeded():
            print(f"   Generated: {result.output_path} ({_format_mb(result.file_size)})")
            print(f"   Time: {result.elapsed_seconds:.2f}s")
        else:
            print(f"   Failed: {result.error_message}")
    print(SEPARATOR)

    succeeded = sum(1 for r in results if r.succeeded())
    print(f"Generated {succeeded}/{len(results)} cache files in: {output_dir}")
    print("The zone walker picks the cache matching the domain's NSEC3 parameters.")


def run_generate_common(args: argparse.Namespace) -> int:
    """Generate cache files for every common configuration."""
    engine = Nsec3HashEngine(worker_threads=args.threads, reporter=create_reporter(args.progress))
    orchestrator = BatchOrchestrator(CacheStore(args.output), engine)

    print(f"Generating common NSEC3 configurations for {args.domain}")
    try:
        results = orchestrator.run_all(args.domain, args.wordlist)
    except OSError as e:
        logger.error(f"Cannot read wordlist {args.wordlist}: {e}")
        return 1

    _print_batch_results(results, args.output)

    failed = [r for r in results if not r.succeeded()]
    if failed and args.strict:
        logger.error(f"{len(failed)} configuration(s) failed")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.domain or not args.wordlist:
        parser.error("--domain and --wordlist are required")

    if args.command == "generate-common":
        return run_generate_common(args)

    return run_single(args)


if __name__ == "__main__":
    sys.exit(main())
