#!/usr/bin/env python3
"""
Reset the stored best score.

Deletes the best score record for one profile (or shows it with --show).
Works against whichever backend the environment selects.

Usage:
    python cli/reset_best_score.py [--profile NAME] [--confirm] [--show]
"""

import os
import sys
import argparse

# Add parent directory to path to import database modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from data_access.repositories import BestScoreRepository  # noqa: E402


def reset_best_score(profile: str = "default", confirm: bool = False, repository=None) -> bool:
    """
    Delete the stored best score for *profile*.

    Args:
        profile: record key
        confirm: If True, skip confirmation prompt

    Returns:
        True if the record was cleared, False if cancelled
    """
    repository = repository or BestScoreRepository()
    repository.ensure_schema()
    current = repository.get_best_score(profile)

    if not confirm:
        print("=" * 50)
        print(f"Profile: {profile}")
        print(f"Stored best score: {current if current is not None else 'none'}")
        print("=" * 50)
        response = input("\nType 'RESET' to confirm: ")
        if response != 'RESET':
            print("Reset cancelled")
            return False

    repository.delete_best_score(profile)
    print(f"Best score for '{profile}' cleared")
    return True


def main():
    parser = argparse.ArgumentParser(description="Reset the stored best score")
    parser.add_argument("--profile", default=os.getenv("SNAKE_PROFILE", "default"),
                        help="Best score profile to reset")
    parser.add_argument("--confirm", action="store_true",
                        help="Skip confirmation prompt")
    parser.add_argument("--show", action="store_true",
                        help="Only print the stored best score")
    args = parser.parse_args()

    if args.show:
        repository = BestScoreRepository()
        repository.ensure_schema()
        score = repository.get_best_score(args.profile)
        print(f"{args.profile}: {score if score is not None else 0}")
        return

    success = reset_best_score(args.profile, confirm=args.confirm)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
