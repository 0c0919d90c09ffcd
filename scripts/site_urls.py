#!/usr/bin/env python3
"""Print the hostnames and URLs exported by a deployed static site stack."""

import argparse
import json
import sys
from typing import Any

import boto3  # type: ignore[import-not-found]

OUTPUT_KEYS = ("originHostname", "originURL", "cdnHostname", "cdnURL")


def get_site_outputs(
  stack_name: str, region: str = "us-east-1", client: Any = None
) -> dict[str, str]:
  """Retrieve the site outputs of a CloudFormation stack.

  Args:
    stack_name: The CDK stack name (e.g., 'StaticSite-dev')
    region: AWS region
    client: Optional CloudFormation client to use instead of a new one

  Returns:
    Dictionary of the exported output values present on the stack
  """
  if client is None:
    client = boto3.client("cloudformation", region_name=region)

  response = client.describe_stacks(StackName=stack_name)
  outputs = response["Stacks"][0].get("Outputs", [])

  values = {o["OutputKey"]: o["OutputValue"] for o in outputs}
  return {key: values[key] for key in OUTPUT_KEYS if key in values}


def format_outputs(outputs: dict[str, str], fmt: str) -> str:
  """Render outputs as env lines, shell exports or JSON."""
  if fmt == "json":
    return json.dumps(outputs, indent=2)
  prefix = "export " if fmt == "export" else ""
  return "\n".join(f"{prefix}{key}={value}" for key, value in outputs.items())


def main() -> None:
  """Main entry point.

  Exits 1 when the stack cannot be read or when any of the site outputs is
  missing (for example while the stack is still being created).
  """
  parser = argparse.ArgumentParser(
    description="Print the hostnames and URLs of a deployed static site"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., StaticSite-dev)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--key",
    choices=OUTPUT_KEYS,
    help="Print only the bare value of one output (e.g., cdnURL)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json", "export"],
    default="env",
    help="Output format when --key is not given (default: env)",
  )

  args = parser.parse_args()

  try:
    outputs = get_site_outputs(args.stack_name, args.region)
  except Exception as e:
    print(f"Error retrieving stack outputs: {e}", file=sys.stderr)
    sys.exit(1)

  if args.key:
    if args.key not in outputs:
      print(f"{args.stack_name} has no output {args.key}", file=sys.stderr)
      sys.exit(1)
    print(outputs[args.key])
    return

  if outputs:
    print(format_outputs(outputs, args.format))

  missing = [key for key in OUTPUT_KEYS if key not in outputs]
  if missing:
    print(
      f"{args.stack_name} is missing outputs: {', '.join(missing)}",
      file=sys.stderr,
    )
    sys.exit(1)


if __name__ == "__main__":
  main()
