#!/usr/bin/env python3
"""
synthlang CLI
=============
Command-line interface for sampling synthetic languages.

Usage:
    synthlang words -n 10 --seed 3
    synthlang inventory --seed 3 --json
    synthlang demo --seed 3
"""

import argparse
import json
import logging
import secrets
import sys

from synthlang import __version__
from synthlang.generator import SynthLang
from synthlang.render import title_case
from synthlang.settings import get_setting, load_cli_settings, load_demo_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def data(self, text: str):
        """Primary command output, printed even in quiet mode."""
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def configure_logging(verbose: bool = False):
    level_name = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def resolve_seed(args, out: Output) -> int:
    """Seed from the command line, the config, or fresh entropy."""
    seed = args.seed
    if seed is None:
        seed = load_cli_settings().default_seed
    if seed is None:
        seed = secrets.randbits(64)
        out.print(f"Seed: {seed}")
    if seed < 0 or seed >= 2 ** 64:
        raise ValueError(f"Seed must be a 64-bit unsigned integer, got {seed}")
    return seed


# =============================================================================
# Commands
# =============================================================================

def cmd_words(args, out: Output):
    """Generate words."""
    if args.count < 1:
        out.error("Count must be at least 1")
        return 1

    lang = SynthLang(resolve_seed(args, out))
    words = [lang.word() for _ in range(args.count)]

    if args.json:
        payload = [
            {
                'word': str(w),
                'syllables': [s.text for s in w.syllables],
                'shapes': [s.shape.value for s in w.syllables],
                'compound_rule': w.compound_rule.value,
            }
            for w in words
        ]
        out.data(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    for w in words:
        out.data(str(w))
    return 0


def cmd_inventory(args, out: Output):
    """Show the phonetic inventory of a language."""
    lang = SynthLang(resolve_seed(args, out))
    info = lang.describe()

    if args.json:
        out.data(json.dumps(info, ensure_ascii=False, indent=2))
        return 0

    out.data(f"Vowels:     {' '.join(info['vowels'])}")
    out.data(f"Consonants: {' '.join(info['consonants'])}")
    out.data(f"Spice:      {' '.join(info['spice'])}")
    out.data(f"Shapes:     CV={info['cv_weight']} VC={info['vc_weight']} CVC={info['cvc_weight']}")
    return 0


def cmd_demo(args, out: Output):
    """Print a sample page of vocabulary and compound place names."""
    demo = load_demo_settings()
    lang = SynthLang(resolve_seed(args, out))

    out.data(f"The distinguished language of {title_case(str(lang.word()))}")
    out.data("")

    for gloss in demo.glosses:
        out.data(f"{str(lang.word()):<10}{gloss:<10}")
    out.data("")

    adjectives = {a: lang.word() for a in demo.adjectives}
    nouns = {label: lang.word() for label in demo.nouns}

    for adjective, label in demo.pairs():
        adj_word, noun_word = adjectives[adjective], nouns[label]
        place = lang.compound(adj_word, noun_word)
        out.data(
            f"{title_case(str(place)):<20}{str(adj_word):<10}{str(noun_word):<10}"
            f"{adjective.title()} {label}"
        )
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='synthlang',
        description='synthlang - Synthetic Language Word Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s words -n 10 --seed 3
  %(prog)s words -n 5 --seed 3 --json
  %(prog)s inventory --seed 42
  %(prog)s demo --seed 7
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- words ---
    p = subparsers.add_parser('words', aliases=['w'], help='Generate words')
    p.add_argument('-n', '--count', type=int, default=load_cli_settings().word_count,
                   help='Number of words (default: 10)')
    p.add_argument('--seed', '-s', type=int, help='Language seed (default: random)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- inventory ---
    p = subparsers.add_parser('inventory', aliases=['inv', 'i'], help='Show phonetic inventory')
    p.add_argument('--seed', '-s', type=int, help='Language seed (default: random)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- demo ---
    p = subparsers.add_parser('demo', aliases=['d'], help='Sample vocabulary page')
    p.add_argument('--seed', '-s', type=int, help='Language seed (default: random)')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    cmd_map = {
        'w': 'words',
        'inv': 'inventory', 'i': 'inventory',
        'd': 'demo',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'words': cmd_words,
        'inventory': cmd_inventory,
        'demo': cmd_demo,
    }

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (ValueError, KeyError, IndexError) as e:
        out.error(str(e))
        if args.verbose:
            logger.exception("Command failed")
        return 1


if __name__ == '__main__':
    sys.exit(main())
