#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for validating manifests against a JSON Schema."""

import argparse
import glob
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ValidatorConfig
from .validator import ManifestValidator


def expand_manifest_paths(patterns: List[str]) -> List[str]:
    """Expand arguments containing ``*`` or ``?`` into matching files."""
    manifests = []
    for pattern in patterns:
        if '*' in pattern or '?' in pattern:
            matches = sorted(p for p in glob.glob(pattern, recursive=True) if Path(p).is_file())
            if not matches:
                print(f"Warning: No manifests match pattern: {pattern}", file=sys.stderr)
            manifests.extend(matches)
        else:
            manifests.append(pattern)
    return manifests


def print_result(validator: ManifestValidator, manifest: str, valid: bool, ci: bool) -> None:
    name = Path(manifest).name
    if valid:
        prefix = "      [+]" if ci else "-"
        print(f"{prefix} {name} validates against the schema!")
        return

    prefix = "      [-]" if ci else "-"
    count = len(validator.errors)
    print(f"{prefix} {name} has {count} Error{'s' if count > 1 else ''}")
    for error in validator.errors:
        print(error)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        prog='manifest-validator',
        description='Validate JSON or YAML manifests against a JSON Schema',
    )
    parser.add_argument('schema', help='JSON Schema file')
    parser.add_argument(
        'manifests',
        nargs='+',
        help='Manifest files (.json, .yml, .yaml); wildcards are expanded',
    )
    ci_group = parser.add_mutually_exclusive_group()
    ci_group.add_argument(
        '--ci',
        dest='ci',
        action='store_true',
        default=None,
        help='Annotated output for build logs (default: CI environment variable)',
    )
    ci_group.add_argument('--no-ci', dest='ci', action='store_false', help='Plain output')
    parser.add_argument('--log-level', default=None, help='Logging level (default: WARNING)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    config = ValidatorConfig.from_env().with_overrides(ci=args.ci, log_level=args.log_level)
    config.set_logging()

    manifests = expand_manifest_paths(args.manifests)
    if not manifests:
        print("No manifests to validate.", file=sys.stderr)
        return 1

    validator = ManifestValidator(args.schema, config)
    valid = True

    for manifest in manifests:
        result = validator.validate(manifest)
        print_result(validator, manifest, result, config.ci)
        if not result:
            valid = False
        if validator.schema_failed:
            # Without a schema no other manifest can be checked
            break

    return 0 if valid else 1


if __name__ == '__main__':
    sys.exit(main())
