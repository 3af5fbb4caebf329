#!/usr/bin/env python3
"""
granny - find the password a one-finger typist can type with the least effort.

Granny needs a password. She heard that four dictionary words make a good
one, but she types with one finger, so the words should keep her finger
moving as little as possible while the whole password stays 20 to 24
characters long.

Steps:
- Load and filter the dictionary, one password per word type
- Search a random sample to get a cost ceiling
- Search the whole dictionary under that ceiling
- Print the result
"""

from __future__ import annotations
from multiprocessing import cpu_count
from pathlib import Path
import argparse
import random
import sys

from .config import (
    DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, DEFAULT_WORDS_NUMBER,
    GREEN, N_WORDS, RED, RESET, SAMPLE_CEILING, SAMPLE_SIZE,
)
from .dictionary import build_level, frequent_words, read_words
from .errors import GrannyError
from .passwords import Goal
from .search import find_best, find_best_sampled


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Find the cheapest password to type with one finger')
    parser.add_argument('--wordlist', type=Path, default=None,
                        help='Word list, one word per line (default: wordfreq top words)')
    parser.add_argument('--top-n', type=int, default=N_WORDS,
                        help=f'How many wordfreq words to use without --wordlist (default: {N_WORDS})')
    parser.add_argument('--words-number', '-n', type=int, default=DEFAULT_WORDS_NUMBER,
                        help=f'Words in the password (default: {DEFAULT_WORDS_NUMBER})')
    parser.add_argument('--min-length', type=int, default=DEFAULT_MIN_LENGTH,
                        help=f'Minimum password length (default: {DEFAULT_MIN_LENGTH})')
    parser.add_argument('--max-length', type=int, default=DEFAULT_MAX_LENGTH,
                        help=f'Maximum password length (default: {DEFAULT_MAX_LENGTH})')
    parser.add_argument('--sample-size', type=int, default=SAMPLE_SIZE,
                        help=f'Word types in the random sample (default: {SAMPLE_SIZE})')
    parser.add_argument('--sample-ceiling', type=int, default=SAMPLE_CEILING,
                        help=f'Cost ceiling for the sample search (default: {SAMPLE_CEILING})')
    parser.add_argument('--ceiling', type=int, default=None,
                        help='Cost ceiling for the full search (default: the sample estimate)')
    parser.add_argument('--no-sample', action='store_true',
                        help='Skip the sample search and go straight to the full one')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducibility')
    parser.add_argument('--workers', type=int, default=1,
                        help=f'Processes for the cross products (max: {cpu_count()})')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    goal = Goal(args.words_number, args.min_length, args.max_length)
    rng = random.Random(args.seed)
    workers = max(1, min(args.workers, cpu_count()))

    try:
        goal.validate()

        if args.wordlist is not None:
            print(f"Loading dictionary from {args.wordlist}...")
            words = read_words(args.wordlist)
        else:
            print(f"Loading {args.top_n} most frequent words...")
            words = frequent_words(args.top_n)

        level = build_level(words)

        if args.no_sample:
            best = find_best(level, goal, args.ceiling, workers)
        else:
            best = find_best_sampled(
                level, goal,
                sample_size=args.sample_size,
                sample_ceiling=args.sample_ceiling,
                ceiling=args.ceiling,
                rng=rng,
                workers=workers,
            )
    except (GrannyError, FileNotFoundError) as e:
        print(f"{RED}{e}{RESET}")
        return 1

    print(f"\n{'='*60}")
    print("BEST PASSWORD")
    print(f"{'='*60}")
    print(f"  {GREEN}{best}{RESET}")
    print(f"  cost={best.cost} length={best.length} words={len(best.words)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
