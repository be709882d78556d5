"""Print a composed system prompt: python -m wilson.persona --role student --region europe"""

import argparse
import json
import sys

from .composer import compose_system_prompt, list_options
from .profiles import DEFAULT_LANGUAGE, DEFAULT_REGION, DEFAULT_ROLE


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compose the Wilson system prompt for a persona")
    parser.add_argument("--role", default=DEFAULT_ROLE)
    parser.add_argument("--region", default=DEFAULT_REGION)
    parser.add_argument("--language", default=DEFAULT_LANGUAGE)
    parser.add_argument("--list", action="store_true", help="List selectable keys as JSON and exit")
    args = parser.parse_args(argv)

    if args.list:
        print(json.dumps(list_options(), indent=2, ensure_ascii=False))
        return 0

    print(compose_system_prompt(args.role, args.region, args.language))
    return 0


if __name__ == "__main__":
    sys.exit(main())
