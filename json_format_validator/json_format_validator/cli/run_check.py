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

"""CLI entry point for checking instance files against schema formats."""

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import List

from . import check_files, CheckResult
from ..config import validator_config
from ..exceptions import ProcessingError
from ..file_io.template_renderer import TemplateRenderer
from ..format.library import available_drafts


def render_human(results: List[CheckResult]) -> str:
    renderer = TemplateRenderer()
    return renderer.render_template(
        "report.txt.jinja2",
        results=results,
        errors=sum(len(r.report.errors) for r in results),
        warnings=sum(len(r.report.warnings) for r in results),
    )


def render_json(results: List[CheckResult]) -> str:
    output = {
        'files': len(results),
        'errors': sum(len(r.report.errors) for r in results),
        'warnings': sum(len(r.report.warnings) for r in results),
        'results': [r.as_dict() for r in results],
    }
    return json.dumps(output, indent=2, default=str)


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the format check CLI."""
    parser = argparse.ArgumentParser(
        description='Check JSON/YAML instances against the format keyword of a JSON Schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('schema', help='Schema file (.json, .yaml or .yml)')
    parser.add_argument('instances', nargs='+', help='Instance files to check')
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--draft',
        choices=list(available_drafts()),
        default=validator_config.draft,
        help=f'Format dictionary and default meta-schema (default: {validator_config.draft})',
    )

    args = parser.parse_args(argv)

    config = dataclasses.replace(validator_config, draft=args.draft)
    config.set_logging()

    try:
        results = check_files(Path(args.schema), [Path(p) for p in args.instances], config=config)
    except ProcessingError as e:
        print(f"Aborted: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == 'json':
        print(render_json(results))
    else:
        print(render_human(results), end='')

    # Exit with error code if any errors found
    if any(not r.report.is_success() for r in results):
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
