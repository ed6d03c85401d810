#!/usr/bin/env python
import sys
from fqsample.commands.subsample_single_end import subsample_single_end
from fqsample.commands.subsample_paired import subsample_paired


COMMANDS = {
    "SubsampleSingleEnd": subsample_single_end,
    "SubsamplePaired": subsample_paired,
}

usage = """Usage: fqsample <command> [options]

Randomly subsample FASTQ files.

Commands:
    SubsampleSingleEnd    Subsample a single-end FASTQ file.
    SubsamplePaired       Subsample paired FASTQ files, keeping mates together.
"""


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) == 0 or args[0] in ["-h", "--help"]:
        sys.stdout.write(usage)
        sys.exit(0 if len(args) > 0 else 1)
    command = args[0]
    if command not in COMMANDS:
        sys.stderr.write("Error: Unknown command %s\n" % command)
        sys.stderr.write(usage)
        sys.exit(1)
    COMMANDS[command](args[1:])


if __name__ == "__main__":
    main()
