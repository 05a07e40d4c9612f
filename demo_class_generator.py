#!/usr/bin/env python3
"""
Demo: Generate class source text from blueprints.

Shows the three comment modes (MULTILINE, SINGLE_LINE, NONE) and a full
source file with namespace and imports.
"""

from codesynth.examples import build_example_greeter, build_example_repository
from codesynth.backends import generate_class, generate_file, save_class_file
from codesynth.language import CommentMode


def main():
    greeter = build_example_greeter()
    repository = build_example_repository()

    print("=" * 80)
    print("CLASS GENERATOR DEMO")
    print("=" * 80)

    for mode in [CommentMode.MULTILINE, CommentMode.SINGLE_LINE, CommentMode.NONE]:
        print(f"\n{mode.value.upper()} COMMENTS:")
        print("-" * 80)
        print(generate_class(greeter, comments=mode))

    print("\nFULL FILE:")
    print("-" * 80)
    print(generate_file(repository))

    filename = f"{repository.name}.php"
    save_class_file(repository, filename)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
