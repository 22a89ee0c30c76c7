#!/usr/bin/env python3
import os
import re
import sys

VERSION_FILES = {
    'pyproject.toml': r'^version = "([^"]+)"',
    os.path.join('sigkeys', '__init__.py'): r'^__version__ = "([^"]+)"',
}


def bump_version(current: str, bump_type: str) -> str:
    major, minor, patch = map(int, current.split('.'))
    if bump_type == 'major':
        return f"{major + 1}.0.0"
    elif bump_type == 'minor':
        return f"{major}.{minor + 1}.0"
    elif bump_type == 'patch':
        return f"{major}.{minor}.{patch + 1}"
    else:
        raise ValueError(f"Invalid bump type: {bump_type}")


def read_version(path: str = 'pyproject.toml') -> str:
    with open(path, 'r') as f:
        match = re.search(VERSION_FILES[path], f.read(), re.MULTILINE)
    if not match:
        raise ValueError(f"Could not find version in {path}")
    return match.group(1)


def write_version(new_version: str) -> None:
    for path, pattern in VERSION_FILES.items():
        with open(path, 'r') as f:
            content = f.read()
        prefix = pattern[1:pattern.index('"')]
        new_content = re.sub(
            pattern,
            f'{prefix}"{new_version}"',
            content,
            count=1,
            flags=re.MULTILINE
        )
        with open(path, 'w') as f:
            f.write(new_content)


def main():
    if len(sys.argv) != 2:
        print("Usage: bump_version.py <major|minor|patch>", file=sys.stderr)
        sys.exit(1)

    try:
        current_version = read_version()
        new_version = bump_version(current_version, sys.argv[1])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    write_version(new_version)

    # Output for GitHub Actions
    github_output = os.environ.get('GITHUB_OUTPUT')
    if github_output:
        with open(github_output, 'a') as f:
            f.write(f"current_version={current_version}\n")
            f.write(f"new_version={new_version}\n")
    else:
        print(f"Bumped version: {current_version} -> {new_version}")


if __name__ == '__main__':
    main()
