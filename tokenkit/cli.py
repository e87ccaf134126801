"""
Command-line interface: tokenize lines of a file (or stdin) and print one
JSON object per document.
"""

from typing import List, Optional, TextIO
import argparse
import json
import logging
import sys

from tokenkit.errors import ConfigurationError
from tokenkit.tokenizer import Tokenizer, TokenizationStrategy, ExtractionMode

# Configure logging
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenkit", description="Tokenize text documents into tokens or n-grams."
    )
    parser.add_argument(
        "input", nargs="?", default="-", help="Input file, one document per line ('-' for stdin)"
    )
    parser.add_argument(
        "--whole", action="store_true", help="Treat the entire input as a single document"
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in TokenizationStrategy],
        default=TokenizationStrategy.WORDS.value,
    )
    parser.add_argument(
        "--mode", choices=[m.value for m in ExtractionMode], default=ExtractionMode.SPLIT.value
    )
    parser.add_argument("--pattern", default=None, help="Separator or inclusion pattern")
    parser.add_argument("-n", type=int, default=3, help="Largest n-gram width")
    parser.add_argument("--n-min", type=int, default=None, help="Smallest n-gram width")
    parser.add_argument("--delimiter", default=" ", help="Separator between n-gram words")
    parser.add_argument("--lowercase", action="store_true")
    parser.add_argument("--strip-punctuation", action="store_true")
    parser.add_argument("--strip-non-alphanumeric", action="store_true")
    parser.add_argument("--strip-numeric", action="store_true")
    parser.add_argument("--keep-contractions", action="store_true")
    parser.add_argument("--join-alphanumeric", action="store_true")
    parser.add_argument("--ignore-word-boundaries", action="store_true")
    parser.add_argument("--stopword-source", default=None, help="Stopword source: none, nltk:<language> or a language name")
    parser.add_argument(
        "--stopword", action="append", default=[], help="Extra stopword (repeatable)"
    )
    parser.add_argument("--offsets", action="store_true", help="Include token offsets")
    parser.add_argument("--workers", type=int, default=1, help="Worker threads for the batch")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_documents(stream: TextIO, whole: bool) -> List[str]:
    content = stream.read()
    if whole:
        return [content]
    return content.splitlines()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Returns:
        Process exit code: 0 on success, 1 if any document failed, 2 on a
        configuration error
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = dict(
        strategy=args.strategy,
        mode=args.mode,
        pattern=args.pattern,
        n=args.n,
        n_min=args.n_min,
        delimiter=args.delimiter,
        lowercase=args.lowercase,
        strip_punctuation=args.strip_punctuation,
        strip_non_alphanumeric=args.strip_non_alphanumeric,
        strip_numeric=args.strip_numeric,
        keep_contractions=args.keep_contractions,
        join_alphanumeric=args.join_alphanumeric,
        ignore_word_boundaries=args.ignore_word_boundaries,
        stopword_source=args.stopword_source,
        stopwords=frozenset(args.stopword),
    )
    try:
        tokenizer = Tokenizer(options, max_workers=args.workers)
    except ConfigurationError as e:
        print(f"tokenkit: {e}", file=sys.stderr)
        return 2

    if args.input == "-":
        documents = _read_documents(sys.stdin, args.whole)
    else:
        try:
            with open(args.input, encoding="utf-8") as f:
                documents = _read_documents(f, args.whole)
        except (OSError, UnicodeDecodeError) as e:
            print(f"tokenkit: cannot read {args.input}: {e}", file=sys.stderr)
            return 2

    result = tokenizer.tokenize(documents)
    for sequence in result.sequences:
        if args.offsets:
            tokens = [[t.text, t.start, t.end] for t in sequence.tokens]
        else:
            tokens = sequence.texts
        record = {
            "index": sequence.index,
            "tokens": tokens,
            "error": sequence.error.message if sequence.error else None,
        }
        print(json.dumps(record, ensure_ascii=False))

    return 1 if result.failed_indices else 0


if __name__ == "__main__":
    sys.exit(main())
