#!/usr/bin/env python3
"""Core constants for the EC2 inventory."""

# Output file: <prefix><region><suffix>
OUTPUT_FILE_PREFIX = "aws-inventory-"
OUTPUT_FILE_SUFFIX = ".json"
JSON_INDENT = 2

# Snapshot keys, in document order
SNAPSHOT_KEYS = ("instances", "vpcs", "subnets", "networkInterfaces", "volumes")

NAME_TAG_KEY = "Name"
